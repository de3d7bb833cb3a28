import argparse
import json
import sys
from datetime import datetime
from typing import Sequence

from loguru import logger
from pydantic import ValidationError

from event_signups import crud
from event_signups.core.config import get_settings
from event_signups.core.logging import configure_logging
from event_signups.db import init_db, session_scope
from event_signups.domain import EventDetails
from event_signups.errors import SignupError
from event_signups.schemas import SignupCreate
from event_signups.services.signup_service import SignupService


def _parse_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid ISO timestamp: {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage event signups")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init-db", help="Create tables and the events_with_signups view")

    add_event = commands.add_parser("add-event", help="Create an event row")
    add_event.add_argument("title")
    add_event.add_argument("--start", type=_parse_datetime, required=True, help="ISO start time")
    add_event.add_argument("--end", type=_parse_datetime, required=True, help="ISO end time")
    add_event.add_argument("--location", default="")
    add_event.add_argument("--background", default="")
    add_event.add_argument("--price", type=int, default=0)
    add_event.add_argument("--published", action="store_true")

    signup = commands.add_parser("signup", help="Register a person for an event")
    signup.add_argument("event_id", type=int)
    signup.add_argument("name")
    signup.add_argument("email")

    listing = commands.add_parser("list", help="Print events with their signup counts")
    listing.add_argument("--event-id", type=int, default=None, help="Only show this event")

    delete = commands.add_parser("delete-event", help="Delete an event and its signups")
    delete.add_argument("event_id", type=int)

    return parser


def _print_json(payload: object) -> None:
    print(json.dumps(payload, ensure_ascii=False))


def run(args: argparse.Namespace) -> int:
    if args.command == "init-db":
        init_db()
        logger.info("Database schema initialised")
        return 0

    with session_scope() as session:
        service = SignupService(session)

        if args.command == "add-event":
            event = crud.create_event(
                session,
                EventDetails(
                    title=args.title,
                    start_time=args.start,
                    end_time=args.end,
                    background=args.background,
                    location=args.location,
                    price=args.price,
                    published=args.published,
                )
            )
            logger.info("Created event {} ({})", event.id, event.title)
            _print_json({"id": event.id})
            return 0

        if args.command == "signup":
            payload = SignupCreate(name=args.name, email=args.email)
            signup = service.register(args.event_id, payload)
            _print_json(signup.model_dump(mode="json"))
            return 0

        if args.command == "list":
            if args.event_id is not None:
                row = service.event_overview(args.event_id)
                if row is None:
                    logger.warning("Event {} not found", args.event_id)
                    return 1
                _print_json(row.model_dump(mode="json"))
                return 0
            for item in service.events_overview().items:
                _print_json(item.model_dump(mode="json"))
            return 0

        if args.command == "delete-event":
            if not service.cancel_event(args.event_id):
                logger.warning("Event {} not found; nothing deleted", args.event_id)
            return 0

    raise ValueError(f"Unhandled command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)
    try:
        return run(args)
    except SignupError as exc:
        logger.error("Signup rejected: {}", exc)
        return 1
    except ValidationError as exc:
        logger.error("Invalid signup: {}", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
