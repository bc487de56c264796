"""Tests for the summary HTTP API."""

from fastapi.testclient import TestClient

from give_me_diet.api.app import create_app
from give_me_diet.containers import AppContainer
from tests.conftest import FRYTKI_LOG


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_summary_returns_days_and_table(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/summary", json={"documents": [FRYTKI_LOG]})

    assert response.status_code == 200
    payload = response.json()
    day = payload["days"][0]
    assert day["day"] == "2024-01-27"
    assert day["consumed"]["Protein"] == ["3.43g"]
    assert day["defined_products"][-1] == "Frytki"
    assert payload["table"]["header"] == [
        "day",
        "Carbohydrates",
        "Water",
        "Fat",
        "Fiber",
        "Protein",
    ]
    assert payload["table"]["rows"] == [
        ["2024-01-27", "41.44g", "38.55g", "14.73g", "3.8g", "3.43g"]
    ]


def test_summary_merges_documents(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/summary",
        json={
            "documents": [
                "2024-02-01\neat 10g of Soup",
                "2024-01-01\ndefine 1g of Salt\ndefine 100g of Soup\n - 50g of Salt",
            ]
        },
    )

    assert response.status_code == 200
    assert response.json()["days"][1]["consumed"] == {"Salt": ["5g"]}


def test_summary_rejects_grammar_errors(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/summary", json={"documents": ["2024-01-01", "2024-01-02\nnom 1g of Salt"]}
    )

    assert response.status_code == 422
    assert response.json()["detail"].startswith("reading 'document 2'")


def test_summary_rejects_undefined_products(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/summary", json={"documents": ["eat 1g of Ghost"]})

    assert response.status_code == 422
    assert "[Ghost] is not defined" in response.json()["detail"]


def test_summary_strict_override(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    document = "2024-01-01 define 1g of Salt"

    lenient = client.post("/summary", json={"documents": [document]})
    strict = client.post("/summary", json={"documents": [document], "strict": True})

    assert lenient.status_code == 200
    assert strict.status_code == 422


def test_summary_requires_documents(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/summary", json={"documents": []})

    assert response.status_code == 422
