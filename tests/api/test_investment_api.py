"""
Tests for the investment calculator route.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.errors import register_error_handlers
from src.api.routes import investment


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    register_error_handlers(app)
    app.include_router(investment.router, prefix="/api")
    return TestClient(app)


def test_calculate(client: TestClient) -> None:
    response = client.post(
        "/api/investment/calculate",
        json={"monthlyInvestment": 100, "numberOfMonths": 12, "annualInterestRate": 0.1},
    )

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {
        "monthlyInvestment",
        "numberOfMonths",
        "annualInterestRate",
        "totalInvested",
        "totalInterest",
        "finalValue",
    }
    assert data["monthlyInvestment"] == 100
    assert data["numberOfMonths"] == 12
    assert data["annualInterestRate"] == 0.1
    assert data["totalInvested"] == 1200.0
    assert data["finalValue"] == pytest.approx(1267.03, abs=1e-2)
    assert data["totalInterest"] == pytest.approx(67.03, abs=1e-2)


def test_zero_rate(client: TestClient) -> None:
    response = client.post(
        "/api/investment/calculate",
        json={"monthlyInvestment": 50, "numberOfMonths": 10, "annualInterestRate": 0},
    )

    assert response.status_code == 200
    assert response.json()["finalValue"] == 500
    assert response.json()["totalInterest"] == 0


def test_missing_rate_defaults_to_zero(client: TestClient) -> None:
    response = client.post(
        "/api/investment/calculate",
        json={"monthlyInvestment": 50, "numberOfMonths": 10},
    )

    assert response.status_code == 200
    assert response.json()["annualInterestRate"] == 0


@pytest.mark.parametrize(
    "body",
    [
        {"monthlyInvestment": 0, "numberOfMonths": 12, "annualInterestRate": 0.1},
        {"monthlyInvestment": 100, "numberOfMonths": 0, "annualInterestRate": 0.1},
        {"monthlyInvestment": 100, "numberOfMonths": 12, "annualInterestRate": -0.1},
        {},
    ],
)
def test_invalid_parameters(client: TestClient, body: dict) -> None:
    response = client.post("/api/investment/calculate", json=body)

    assert response.status_code == 400
    assert response.content == b""


def test_non_integer_months(client: TestClient) -> None:
    response = client.post(
        "/api/investment/calculate",
        json={"monthlyInvestment": 100, "numberOfMonths": 1.5, "annualInterestRate": 0.1},
    )

    assert response.status_code == 400


def test_undecodable_body(client: TestClient) -> None:
    response = client.post(
        "/api/investment/calculate",
        content=b"monthly=100",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400


@pytest.mark.parametrize(
    "content",
    [
        b'{"monthlyInvestment": NaN, "numberOfMonths": 12, "annualInterestRate": 0.1}',
        b'{"monthlyInvestment": 100, "numberOfMonths": 12, "annualInterestRate": Infinity}',
    ],
)
def test_non_finite_parameters(client: TestClient, content: bytes) -> None:
    response = client.post(
        "/api/investment/calculate",
        content=content,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.content == b""


def test_overflowing_projection(client: TestClient) -> None:
    response = client.post(
        "/api/investment/calculate",
        json={"monthlyInvestment": 100, "numberOfMonths": 100000, "annualInterestRate": 0.12},
    )

    assert response.status_code == 400
    assert response.content == b""
