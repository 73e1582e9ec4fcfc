"""
Tests for the assembled application: startup, health and OpenAPI docs.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.main import app
from src.api.openapi import apply_operation_docs
from src.api.routes import investment, products
from src.rules.loader import load_rules
from src.rules.models import ApiRules, OperationDoc


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, rules_path: Path):
    """Client with the lifespan handler run against the project rules."""
    monkeypatch.setenv("CATALOG_RULES_PATH", str(rules_path))
    with TestClient(app) as client:
        yield client


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "api"}


def test_seeded_catalog(client: TestClient) -> None:
    response = client.get("/api/products")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == ["1", "2", "3"]


def test_unknown_route_has_no_body(client: TestClient) -> None:
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.content == b""


def test_openapi_uses_configured_docs(client: TestClient) -> None:
    schema = client.get("/openapi.json").json()

    assert schema["info"]["title"] == "Product Catalog API"
    get_by_id = schema["paths"]["/api/products/{product_id}"]["get"]
    assert get_by_id["operationId"] == "GetProductById"
    assert get_by_id["summary"] == "Get product by ID"
    assert get_by_id["responses"]["404"]["description"] == "Product not found"
    assert get_by_id["responses"]["200"]["description"] == "The requested product"

    calculate = schema["paths"]["/api/investment/calculate"]["post"]
    assert calculate["tags"] == ["Investment"]
    assert "InvestmentRequest" in schema["components"]["schemas"]
    assert "monthlyInvestment" in schema["components"]["schemas"]["InvestmentRequest"]["properties"]


def test_apply_operation_docs_reports_undocumented(rules_path: Path) -> None:
    test_app = FastAPI()
    test_app.include_router(products.router, prefix="/api")
    test_app.include_router(investment.router, prefix="/api")

    api_rules = load_rules(rules_path).api
    assert apply_operation_docs(test_app, api_rules) == []

    partial = ApiRules(
        title="T",
        version="1",
        operations={"GetProducts": OperationDoc(summary="List")},
    )
    undocumented = apply_operation_docs(test_app, partial)
    assert "GetProducts" not in undocumented
    assert "DeleteProduct" in undocumented


def test_delete_documents_no_content_response(rules_path: Path) -> None:
    test_app = FastAPI()
    test_app.include_router(products.router, prefix="/api")
    apply_operation_docs(test_app, load_rules(rules_path).api)

    delete = test_app.openapi()["paths"]["/api/products/{product_id}"]["delete"]
    assert delete["responses"]["204"]["description"] == "Product deleted successfully"
    assert delete["responses"]["404"]["description"] == "Product not found"
