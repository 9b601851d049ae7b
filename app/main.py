"""Command-line entry point for the notifier.

Usage:
    python app/main.py                 # same as "demo"
    python app/main.py demo
    python app/main.py send --message "Disk full" --urgency high
"""

import argparse
import sys
from typing import List, Optional

from dotenv import load_dotenv

from infrastructure.logging import (
    bind_request_context,
    configure_logging,
    get_module_logger,
)
from infrastructure.notifications import (
    NoHandlerFound,
    Notification,
    NotificationDispatcher,
    Urgency,
)
from infrastructure.services.providers import (
    get_notification_dispatcher,
    get_settings,
)

DEMO_MESSAGE = "Hello from the notifier command!"

URGENCY_STYLES = {
    Urgency.HIGH: "[ERROR]",
    Urgency.MEDIUM: "[WARNING]",
    Urgency.LOW: "[OK]",
}


def format_delivery_line(urgency: Urgency, deliverer: str) -> str:
    """Render the report line for one delivered notification."""
    return (
        f"{URGENCY_STYLES[urgency]} Notification with urgency "
        f'"{urgency.name}" is handled by "{deliverer}"'
    )


def report_no_handler(error: NoHandlerFound) -> None:
    """Print a NoHandlerFound error and its failed attempts to stderr."""
    print(
        f'ERROR: {error} (urgency "{error.notification.urgency.name}")',
        file=sys.stderr,
    )
    for attempt in error.attempts:
        print(
            f"  {attempt.handler}: {attempt.status.value} "
            f"[{attempt.error_code}] {attempt.message}",
            file=sys.stderr,
        )


def send_command(
    dispatcher: NotificationDispatcher, message: str, urgency: Urgency
) -> int:
    """Send one notification and report which handler delivered it.

    Returns:
        Process exit code: 0 when delivered, 1 when no handler was found.
    """
    notification = Notification(message=message, urgency=urgency)
    try:
        status = dispatcher.send(notification)
    except NoHandlerFound as e:
        report_no_handler(e)
        return 1

    print(format_delivery_line(urgency, status.deliverer))
    return 0


def demo_command(dispatcher: NotificationDispatcher) -> int:
    """Send the demo message at HIGH, MEDIUM then LOW urgency."""
    exit_code = 0
    for urgency in (Urgency.HIGH, Urgency.MEDIUM, Urgency.LOW):
        exit_code = max(exit_code, send_command(dispatcher, DEMO_MESSAGE, urgency))
    return exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notifier", description="Send a notification"
    )
    parser.add_argument(
        "--log-level",
        help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser(
        "demo", help="Send the demo notification at every urgency level"
    )

    send = subparsers.add_parser("send", help="Send a single notification")
    send.add_argument("--message", required=True, help="Notification body")
    send.add_argument(
        "--urgency",
        choices=[u.value for u in Urgency],
        default=Urgency.MEDIUM.value,
        help="Urgency level used for routing (default: medium)",
    )
    return parser


def main(
    argv: Optional[List[str]] = None,
    dispatcher: Optional[NotificationDispatcher] = None,
) -> int:
    """Run the notifier command.

    Args:
        argv: Arguments to parse; defaults to sys.argv[1:].
        dispatcher: Dispatcher to use; defaults to the configured singleton.

    Returns:
        Process exit code.
    """
    load_dotenv()
    args = build_parser().parse_args(argv)
    command = args.command or "demo"

    configure_logging(get_settings(), log_level=args.log_level)
    logger = get_module_logger()
    if dispatcher is None:
        dispatcher = get_notification_dispatcher()

    with bind_request_context(command=command):
        logger.info("notifier_command_started", command=command)
        if command == "send":
            return send_command(dispatcher, args.message, Urgency(args.urgency))
        return demo_command(dispatcher)


if __name__ == "__main__":
    raise SystemExit(main())
