"""Send a test push notification to every active device of one user."""

from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from app.config import get_settings
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.notifications import PushDispatcher
from app.infrastructure.push import ExpoPushGateway
from app.infrastructure.repositories import DeviceTokenRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the test push."""

    parser = argparse.ArgumentParser(
        description="Push a test notification to a user's registered devices.",
    )
    parser.add_argument("user_id", help="Identifier of the user to notify")
    parser.add_argument(
        "--title",
        default="Tes Notifikasi",
        help="Notification title (default: Tes Notifikasi)",
    )
    parser.add_argument(
        "--body",
        default="Notifikasi push berhasil dikonfigurasi.",
        help="Notification body",
    )
    return parser.parse_args()


def main() -> None:
    """Dispatch one push and print the delivery summary."""

    args = parse_args()
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    initialize_database()

    session = SessionLocal()
    try:
        tokens = DeviceTokenRepository(session)
        if not tokens.active_tokens_for([args.user_id]):
            raise SystemExit(f"User {args.user_id} has no active device tokens.")

        dispatcher = PushDispatcher(
            tokens,
            ExpoPushGateway.from_settings(settings),
            channel_id=settings.push_channel_id,
            enabled=True,
        )
        summary = dispatcher.dispatch(
            [args.user_id], args.title, args.body, {"refType": None, "refId": None}
        )
    except SQLAlchemyError as exc:
        raise SystemExit(f"Could not read device tokens: {exc}") from exc
    finally:
        session.close()

    print(
        "Push dispatched:\n"
        f"  Devices: {summary.attempted}\n"
        f"  Delivered: {summary.delivered}\n"
        f"  Deactivated: {summary.deactivated}"
    )


if __name__ == "__main__":
    main()
