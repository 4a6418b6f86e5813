"""Command-line interface for the lightconsole operator console.

Provides the operator-facing entry point: list the available actions,
or send one or more of them to the lighting bridge and report whether
each one succeeded.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from lightconsole.config.settings import Settings
from lightconsole.domain.models import Action, DispatchOutcome

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="lightconsole",
        description="Operator console for the lighting bridge",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/lightconsole.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--bridge", type=str, default=None,
        help="Lighting bridge base URL (overrides configuration)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("actions", help="List the available actions")

    send_parser = subparsers.add_parser("send", help="Send actions to the lighting bridge")
    send_parser.add_argument(
        "actions", nargs="+", choices=[a.value for a in Action],
        help="Actions to send",
    )
    send_parser.add_argument(
        "--timeout", type=float, default=None,
        help="Give up on each action after this many seconds",
    )

    return parser.parse_args(argv)


def format_outcome(outcome: DispatchOutcome) -> str:
    """Render one dispatch outcome as a single line for the operator."""
    if outcome.ok:
        return f"ok {outcome.action.value} results={json.dumps(outcome.results, default=str)}"
    return f"FAILED {outcome.action.value} [{outcome.kind.value}] {outcome.message}"


def _list_actions() -> None:
    for action in Action:
        print(f"{action.value:<4} {action.label:<4} {action.endpoint:<9} {action.description}")


async def _send(settings: Settings, args: argparse.Namespace) -> int:
    """Dispatch the requested actions and print one line per action."""
    from lightconsole.dispatch.http_backend import HttpCommandDispatcher

    dispatcher = HttpCommandDispatcher(
        base_url=settings.bridge.base_url,
        timeout=settings.bridge.timeout,
    )
    async with dispatcher:
        outcomes = await dispatcher.dispatch_many(args.actions, timeout=args.timeout)

    for outcome in outcomes:
        print(format_outcome(outcome))
    return 0 if all(o.ok for o in outcomes) else 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the lightconsole CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return 0

    from lightconsole.config.settings import load_settings
    from lightconsole.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"
    if args.bridge:
        settings.bridge.base_url = args.bridge

    setup_logging(settings.logging)

    if args.command == "actions":
        _list_actions()
        return 0

    logger.info("Sending %s to %s", ", ".join(args.actions), settings.bridge.base_url)
    return asyncio.run(_send(settings, args))


if __name__ == "__main__":
    sys.exit(main())
