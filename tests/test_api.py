"""Tests for the HTTP API."""

import logging

from fastapi.testclient import TestClient

from studio_tracker.api.app import create_app
from studio_tracker.app_logging import configure_logging
from studio_tracker.config import Settings
from studio_tracker.containers import AppContainer, build_container
from tests.conftest import FixedClock, InMemoryRecordStore


def _client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def _sell(client: TestClient, session_id: str, **overrides: object) -> dict:
    payload: dict[str, object] = {
        "sale_status": "VD",
        "seller": "Ingrid",
        "payments": [{"method": "pix", "value": 150.5}],
        "delivery_type": "selected",
    }
    payload.update(overrides)
    response = client.put(f"/sessions/{session_id}/sale", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


def test_health(container: AppContainer) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_roster_endpoints(container: AppContainer) -> None:
    client = _client(container)

    created = client.post("/sellers", json={"name": "Bruna"})
    duplicate = client.post("/sellers", json={"name": "Bruna"})
    removed = client.delete("/photographers/Anne")
    missing = client.delete("/photographers/Nobody")

    assert created.status_code == 201
    assert created.json()["sellers"] == ["Ingrid", "Wiliam", "Bruna"]
    assert duplicate.status_code == 422
    assert duplicate.json() == {"detail": "This seller is already registered."}
    assert removed.json()["photographers"] == ["Ramon", "Gabriel", "Fabricio"]
    assert missing.status_code == 404


def test_session_and_sale_flow(container: AppContainer) -> None:
    client = _client(container)

    session = client.post("/sessions", json={"photographer": "Ramon", "model": "Ana"})
    assert session.status_code == 201
    session_id = session.json()["id"]

    sale = _sell(client, session_id)
    assert sale["saleValue"] == 150.5
    assert sale["deliveryStatus"] == "pending"

    delivered = client.post(f"/sessions/{session_id}/sale/delivery")
    assert delivered.json()["deliveryStatus"] == "sent"

    sessions = client.get("/sessions").json()["sessions"]
    assert sessions[0]["status"] == "completed"
    assert sessions[0]["sale"]["seller"] == "Ingrid"
    assert client.get(f"/sessions/{session_id}/sale").json()["saleStatus"] == "VD"


def test_invalid_sale_returns_422(container: AppContainer) -> None:
    client = _client(container)
    session_id = client.post(
        "/sessions", json={"photographer": "Ramon", "model": "Ana"}
    ).json()["id"]

    response = client.put(
        f"/sessions/{session_id}/sale",
        json={"sale_status": "VD", "seller": "Ingrid", "delivery_type": "selected"},
    )

    assert response.status_code == 422
    assert "payment" in response.json()["detail"]
    assert client.get("/sales").json() == {"sales": []}


def test_sale_for_unknown_session_returns_404(container: AppContainer) -> None:
    response = _client(container).put(
        "/sessions/missing/sale", json={"sale_status": "NV"}
    )

    assert response.status_code == 404


def test_stats_endpoints(container: AppContainer) -> None:
    client = _client(container)
    client.put("/goal", json={"goal": 1000})
    first = client.post("/sessions", json={"photographer": "Ramon", "model": "Ana"})
    client.post("/sessions", json={"photographer": "Anne", "model": "Bia"})
    _sell(client, first.json()["id"], payments=[{"method": "cartao", "value": 400}])

    goals = client.get("/stats/goals").json()["goals"]
    rankings = client.get("/stats/rankings").json()["rankings"]
    summary = client.get("/stats/summary").json()["summary"]

    assert goals["goal_per_seller"] == 500
    assert goals["remaining"] == 600
    assert goals["progress_percent"] == 40.0
    assert goals["pending_sessions"] == 1
    assert rankings["photographers_by_revenue"][0]["name"] == "Ramon"
    assert rankings["status_tally"]["vd_count"] == 1
    assert rankings["top_sales"][0]["model"] == "Ana"
    assert summary["revenue"] == 400
    assert summary["day"] == "2024-05-10"


def test_report_endpoints_return_plain_text(container: AppContainer) -> None:
    client = _client(container)
    session_id = client.post(
        "/sessions", json={"photographer": "Ramon", "model": "Ana"}
    ).json()["id"]
    _sell(client, session_id)

    partial = client.get("/reports/partial")
    final = client.get("/reports/final")

    assert partial.headers["content-type"].startswith("text/plain")
    assert partial.text.startswith("*Ranking ALCHYMIST 10/05/2024\natualizado: 14:30*")
    assert "Ramon: R$ 150,50 / 1 pastas" in partial.text
    assert final.text.startswith("*Faturamento ALCHYMIST 10/05/2024*\n\n*R$ 150,50*")


def test_reset_restores_default_rosters(
    container: AppContainer, store: InMemoryRecordStore
) -> None:
    client = _client(container)
    client.post("/sessions", json={"photographer": "Ramon", "model": "Ana"})
    client.put("/goal", json={"goal": 300})

    response = client.post("/reset")

    assert response.status_code == 200
    assert "sessions" not in store.values
    assert client.get("/goal").json() == {"goal": 0}
    assert client.get("/sellers").json() == {"sellers": ["Ingrid", "Wiliam"]}


def test_startup_seeds_empty_store(container: AppContainer) -> None:
    container.records.clear()

    with TestClient(create_app(container)) as client:
        photographers = client.get("/photographers").json()["photographers"]

    assert photographers == ["Ramon", "Anne", "Gabriel", "Fabricio"]


def test_app_uses_configured_log_level(
    store: InMemoryRecordStore, clock: FixedClock
) -> None:
    settings = Settings(
        record_store="file", record_store_path="unused.json", log_level="warning"
    )

    create_app(build_container(settings, store=store, clock=clock))

    assert logging.getLogger("studio_tracker").level == logging.WARNING
    configure_logging()
