"""End-to-end fan-out through the FastAPI background task dependency."""

from __future__ import annotations

from fastapi import Depends
from fastapi.testclient import TestClient

from app.application.use_cases.notifications import (
    NotificationOrchestrator,
    notify_report_status_changed,
)
from app.domain.entities import Report, User
from app.interfaces.api.dependencies import (
    get_current_user,
    get_notification_orchestrator,
    get_push_gateway,
)

from tests.factories import PEMERINTAH, FakePushGateway, add_device, add_user, auth_headers, expo_token

REPORT = Report(id="r-5", user_id="warga-1", title="Sampah menumpuk", category="Sampah")


def _app_with_status_route(gateway):
    from main import create_app

    app = create_app()

    @app.post("/reports/r-5/status")
    def change_status(
        current_user: User = Depends(get_current_user),
        orchestrator: NotificationOrchestrator = Depends(get_notification_orchestrator),
    ):
        scheduled = notify_report_status_changed(
            orchestrator, report=REPORT, new_status="selesai", actor_id=current_user.id
        )
        return {"scheduled": scheduled}

    app.dependency_overrides[get_push_gateway] = lambda: gateway
    return app


def test_status_change_is_delivered_after_response(db_session):
    add_user(db_session, "warga-1")
    add_user(db_session, "petugas", role=PEMERINTAH)
    add_device(db_session, "warga-1", expo_token("warga-1"))
    gateway = FakePushGateway()

    with TestClient(_app_with_status_route(gateway)) as client:
        response = client.post("/reports/r-5/status", headers=auth_headers("petugas"))
        inbox = client.get("/notifications/", headers=auth_headers("warga-1")).json()

    assert response.json() == {"scheduled": True}
    assert inbox["unread_count"] == 1
    assert inbox["notifications"][0]["title"] == "Status Laporan Diperbarui"
    assert inbox["notifications"][0]["ref_id"] == "r-5"
    assert gateway.sent_tokens == [expo_token("warga-1")]


def test_owner_changing_own_status_schedules_nothing(db_session):
    add_user(db_session, "warga-1")
    gateway = FakePushGateway()

    with TestClient(_app_with_status_route(gateway)) as client:
        response = client.post("/reports/r-5/status", headers=auth_headers("warga-1"))
        inbox = client.get("/notifications/", headers=auth_headers("warga-1")).json()

    assert response.json() == {"scheduled": False}
    assert inbox["unread_count"] == 0
    assert gateway.send_calls == 0
