"""Utility script to seed sample account activity for a user."""

from __future__ import annotations

import argparse
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError

from app.domain.entities import Order, Review, SecurityLog, SupportTicket
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.repositories import (
    OrderRepository,
    ReviewRepository,
    SecurityLogRepository,
    SupportTicketRepository,
)
from app.utils import now_in_app_timezone


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for seeding."""

    parser = argparse.ArgumentParser(
        description="Seed orders, tickets, reviews and security logs for one user.",
    )
    parser.add_argument(
        "--user-id",
        required=True,
        help="Identifier of the account that will own the sample records",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=3,
        help="Spread the sample history over this many past days (default: 3)",
    )
    return parser.parse_args()


def seed(session, user_id: str, *, days: int) -> int:
    """Insert a small, varied history for ``user_id`` and return the record count."""

    now = now_in_app_timezone()
    span = max(days, 1)
    created = 0

    orders = OrderRepository(session)
    orders.create(
        Order(
            id=None,
            user_id=user_id,
            status="Delivered",
            total_amount=1499,
            created_at=now - timedelta(days=span),
            updated_at=now - timedelta(days=span - 1, hours=2),
        )
    )
    orders.create(
        Order(
            id=None,
            user_id=user_id,
            status="Processing",
            total_amount="899.50",
            created_at=now - timedelta(minutes=30),
            updated_at=now - timedelta(minutes=10),
        )
    )
    created += 2

    SupportTicketRepository(session).create(
        SupportTicket(
            id=None,
            user_id=user_id,
            status="open",
            subject="Package arrived damaged",
            created_at=now - timedelta(days=1, hours=1),
        )
    )
    ReviewRepository(session).create(
        Review(
            id=None,
            user_id=user_id,
            product_id="aura-candle",
            rating=5,
            created_at=now - timedelta(hours=5),
        )
    )
    created += 2

    logs = SecurityLogRepository(session)
    for offset, action, description in (
        (timedelta(days=span + 1), "ACCOUNT_CREATED", "Account registered"),
        (timedelta(hours=3), "LOGIN", "Signed in from a new device"),
        (timedelta(hours=2), "PASSWORD_RESET", None),
    ):
        logs.create(
            SecurityLog(
                id=None,
                user_id=user_id,
                action=action,
                description=description,
                created_at=now - offset,
            )
        )
        created += 1
    return created


def main() -> None:
    """Seed sample records using the provided command line arguments."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        count = seed(session, args.user_id, days=args.days)
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not seed activity: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error saving records to the database: {exc}") from exc
    else:
        print(f"Seeded {count} records for user {args.user_id}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
