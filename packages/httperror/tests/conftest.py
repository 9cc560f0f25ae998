# This project was developed with assistance from AI tools.
"""Shared fixtures for httperror tests."""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from httperror import ProblemError
from httperror.config import settings
from httperror.handlers import install_problem_handlers

NOT_FOUND_TYPE = "https://example.com/probs/not-found"


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    """Pin settings so HTTPERROR_* variables in the environment never leak in."""
    monkeypatch.setattr(settings, "SORT_EXTENSION_KEYS", True)
    monkeypatch.setattr(settings, "MEDIA_TYPE", "application/problem+json")
    monkeypatch.setattr(settings, "DEFAULT_TYPE_URI", "about:blank")
    monkeypatch.setattr(settings, "EXPOSE_INTERNAL_ERRORS", False)


@pytest.fixture
def not_found():
    return ProblemError("Not Found", 404, NOT_FOUND_TYPE)


@pytest.fixture
def app():
    """Minimal FastAPI app with the problem handlers installed."""
    app = FastAPI()
    install_problem_handlers(app)

    @app.get("/orders/{order_id}")
    async def get_order(order_id: int):
        raise (
            ProblemError("Not Found", 404, NOT_FOUND_TYPE)
            .with_detail(f"Order {order_id} does not exist")
            .with_extension("order_id", order_id)
        )

    @app.get("/located")
    async def located():
        raise ProblemError("Conflict", 409, "https://example.com/probs/conflict").with_instance(
            "/orders/42/lock"
        )

    @app.get("/conflict")
    async def conflict():
        raise HTTPException(status_code=409, detail="Order is locked", headers={"X-Lock": "42"})

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    return app


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)
