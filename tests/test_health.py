from fastapi.testclient import TestClient

from src.config.settings import Settings
from src.main import create_app


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Proxy server is running"}


def test_health_without_api_key():
    settings = Settings(_env_file=None, hf_token="", vite_huggingface_api_key="")

    with TestClient(create_app(settings=settings)) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
