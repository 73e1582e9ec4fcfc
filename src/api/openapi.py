"""
Route documentation from configuration.

Summaries, descriptions, tags and response descriptions for each operation
live in the rules file (``api.operations``, keyed by operation id) and are
applied to the registered routes before the OpenAPI document is generated.
"""

from fastapi import FastAPI
from fastapi.routing import APIRoute

from src.rules.models import ApiRules


def apply_operation_docs(app: FastAPI, api_rules: ApiRules) -> list[str]:
    """
    Decorate routes with their configured documentation.

    Returns the operation ids that had no configured entry.
    """
    app.title = api_rules.title
    app.version = api_rules.version

    undocumented: list[str] = []
    for route in app.routes:
        if not isinstance(route, APIRoute) or not route.include_in_schema:
            continue

        operation_id = route.operation_id or route.name
        doc = api_rules.operations.get(operation_id)
        if doc is None:
            undocumented.append(operation_id)
            continue

        route.summary = doc.summary
        route.description = doc.description
        if doc.tags:
            route.tags = list(doc.tags)

        success_code = route.status_code or 200
        for status_code, description in doc.responses.items():
            if status_code == success_code:
                route.response_description = description
            else:
                route.responses.setdefault(status_code, {})["description"] = description

    # Force regeneration on next request.
    app.openapi_schema = None
    return undocumented
