import uvicorn
from fastapi.testclient import TestClient

import shelfcheck
import shelfcheck.core as core
from shelfcheck.server import main as server_main


def test_create_app_mounts_product_routes() -> None:
    fastapi_app = server_main.create_app()

    paths = {route.path for route in fastapi_app.routes}
    assert {"/health", "/api/v1/products", "/api/v1/products/validate"} <= paths
    assert TestClient(fastapi_app).get("/health").json()["app"] == fastapi_app.title


def test_run_serves_the_module_app(monkeypatch) -> None:
    captured: dict = {}
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: captured.update(target=target, **kwargs))

    server_main.run()

    assert captured["target"] == "shelfcheck.server.main:app"
    assert captured["port"] == 8000


def test_package_exports_resolve_lazily() -> None:
    for name in core.__all__:
        assert callable(getattr(core, name))
    assert shelfcheck.app is server_main.app
    assert shelfcheck.validate_product_form is core.validate_product_form
