"""Unit tests for origin resolution in the OriginGateMiddleware."""

import pytest

from valentine_api.config import Settings
from valentine_api.presentation.middleware.origin_gate import OriginGateMiddleware


@pytest.fixture
def gate() -> OriginGateMiddleware:
    settings = Settings()
    return OriginGateMiddleware(
        app=None,
        allowed_origins=settings.allowed_origins,
        canonical_origin=settings.canonical_origin,
        max_age=settings.cors_max_age,
    )


@pytest.mark.parametrize(
    "origin",
    [
        "https://willyoubemyvalentine.fun",
        "https://www.willyoubemyvalentine.fun",
        "http://localhost:3000",
        "http://localhost:8080",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8080",
    ],
)
def test_allowed_origins_resolve_to_themselves(gate, origin):
    assert gate.resolve_origin(origin) == origin


@pytest.mark.parametrize("origin", [None, ""])
def test_missing_origin_resolves_to_production(gate, origin):
    assert gate.resolve_origin(origin) == "https://willyoubemyvalentine.fun"


@pytest.mark.parametrize(
    "origin",
    [
        "https://evil.example",
        "http://willyoubemyvalentine.fun",
        "http://localhost:5173",
        "https://willyoubemyvalentine.fun/",
    ],
)
def test_unknown_origins_do_not_resolve(gate, origin):
    assert gate.resolve_origin(origin) is None


def test_cors_headers_for_resolved_origin(gate):
    headers = gate.cors_headers("http://localhost:8080")
    assert headers == {
        "Access-Control-Allow-Origin": "http://localhost:8080",
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Max-Age": "86400",
    }


def test_no_cors_headers_without_origin(gate):
    assert gate.cors_headers(None) == {}
