from fastapi import FastAPI
from fastapi.testclient import TestClient

from mywebapi.applications.api.app import create_app
from mywebapi.dependencies import Container

SCHEMA_URL = "/swagger/v1/swagger.json"


def test_root_redirects_to_swagger(client: TestClient):
    response = client.get("/")
    assert response.status_code == 302
    assert response.headers["location"] == "/swagger"


def test_root_redirect_reaches_docs(app: FastAPI):
    with TestClient(app, base_url="https://testserver") as client:
        response = client.get("/")
    assert response.status_code == 200
    assert response.url.path == "/swagger"


def test_schema_document(client: TestClient):
    response = client.get(SCHEMA_URL)
    assert response.status_code == 200
    schema = response.json()
    assert schema["openapi"].startswith("3.")
    assert schema["info"]["title"] == "MyWebAPI"
    assert schema["info"]["version"] == "1.0.0"
    paths = schema["paths"]
    assert "/health" in paths
    assert "/api/users/me" in paths
    assert "/api/endpoints/" in paths
    assert "/" not in paths


def test_schema_declares_basic_auth_on_controllers(client: TestClient):
    schema = client.get(SCHEMA_URL).json()
    assert schema["components"]["securitySchemes"]["HTTPBasic"]["scheme"] == "basic"
    assert {"HTTPBasic": []} in schema["paths"]["/api/users/me"]["get"]["security"]
    assert "security" not in schema["paths"]["/health"]["get"]


def test_schema_is_generated_once(app: FastAPI):
    assert app.openapi() is app.openapi()


def test_swagger_ui(client: TestClient):
    response = client.get("/swagger")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert SCHEMA_URL in response.text


def test_default_docs_are_disabled(client: TestClient):
    assert client.get("/docs").status_code == 404
    assert client.get("/redoc").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_document_name_is_configurable(container: Container):
    container.config.api_document_name.from_value("v2")
    with TestClient(create_app(container), base_url="https://testserver") as client:
        assert client.get("/swagger/v2/swagger.json").status_code == 200
        assert client.get(SCHEMA_URL).status_code == 404
        assert "/swagger/v2/swagger.json" in client.get("/swagger").text
