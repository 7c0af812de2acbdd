"""Notifications emitted when reports and actions change."""

from __future__ import annotations

from app.domain.entities import (
    NOTIFICATION_TYPE_COMMENT,
    NOTIFICATION_TYPE_NEW_REPORT,
    NOTIFICATION_TYPE_STATUS_UPDATE,
    NOTIFICATION_TYPE_VERIFY,
    NOTIFICATION_TYPE_VOTE,
    REF_TYPE_ACTION,
    REF_TYPE_REPORT,
    Action,
    Report,
)

from .orchestrator import AreaAudience, NotificationOrchestrator


def _quoted_title(title: str | None) -> str:
    return f'"{title}"' if title else "Anda"


def notify_report_created(
    orchestrator: NotificationOrchestrator,
    *,
    report: Report,
    reporter_district: str | None = None,
) -> bool:
    """Alert residents around a new report and every government user.

    Residents are resolved from the report's coordinates and category, with
    the reporter's district as the fallback zone. The author is never
    notified about their own report.
    """

    audience = AreaAudience(
        origin_lat=report.latitude,
        origin_lng=report.longitude,
        category=report.category,
        district=reporter_district or report.district,
        author_id=report.user_id,
        include_government=True,
    )
    return orchestrator.notify_area(
        audience,
        type=NOTIFICATION_TYPE_NEW_REPORT,
        title="Laporan Baru di Sekitar Anda",
        message=f"Ada laporan {report.category} baru: {_quoted_title(report.title)}.",
        ref_type=REF_TYPE_REPORT,
        ref_id=report.id,
    )


def notify_report_voted(
    orchestrator: NotificationOrchestrator,
    *,
    report: Report,
    voter_id: str,
    upvoted: bool,
) -> bool:
    """Tell the report owner about a new upvote.

    Removing a vote is silent. Every upvote is reported on its own, so voting
    again after an unvote notifies again.
    """

    if not upvoted:
        return False
    return orchestrator.notify_one(
        report.user_id,
        type=NOTIFICATION_TYPE_VOTE,
        title="Dukungan Baru",
        message=f"Seseorang mendukung laporan {_quoted_title(report.title)}.",
        ref_type=REF_TYPE_REPORT,
        ref_id=report.id,
        actor_id=voter_id,
    )


def notify_report_verified(
    orchestrator: NotificationOrchestrator,
    *,
    report: Report,
    verifier_id: str,
) -> bool:
    return orchestrator.notify_one(
        report.user_id,
        type=NOTIFICATION_TYPE_VERIFY,
        title="Laporan Diverifikasi",
        message=f"Laporan {_quoted_title(report.title)} telah diverifikasi warga lain.",
        ref_type=REF_TYPE_REPORT,
        ref_id=report.id,
        actor_id=verifier_id,
    )


def notify_report_status_changed(
    orchestrator: NotificationOrchestrator,
    *,
    report: Report,
    new_status: str,
    actor_id: str,
) -> bool:
    """Inform the owner that their report moved to ``new_status``."""

    return orchestrator.notify_one(
        report.user_id,
        type=NOTIFICATION_TYPE_STATUS_UPDATE,
        title="Status Laporan Diperbarui",
        message=(
            f"Status laporan {_quoted_title(report.title)} sekarang: {new_status}."
        ),
        ref_type=REF_TYPE_REPORT,
        ref_id=report.id,
        actor_id=actor_id,
    )


def notify_comment_added(
    orchestrator: NotificationOrchestrator,
    *,
    target: Report | Action,
    commenter_id: str,
) -> bool:
    """Tell the owner of a report or action that someone commented on it."""

    if isinstance(target, Report):
        ref_type, noun = REF_TYPE_REPORT, "laporan"
    else:
        ref_type, noun = REF_TYPE_ACTION, "aksi"

    return orchestrator.notify_one(
        target.user_id,
        type=NOTIFICATION_TYPE_COMMENT,
        title="Komentar Baru",
        message=f"Seseorang mengomentari {noun} {_quoted_title(target.title)}.",
        ref_type=ref_type,
        ref_id=target.id,
        actor_id=commenter_id,
    )


__all__ = [
    "notify_comment_added",
    "notify_report_created",
    "notify_report_status_changed",
    "notify_report_verified",
    "notify_report_voted",
]
