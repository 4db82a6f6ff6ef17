#!/usr/bin/env python3
"""Bot process supervisor.

Runs the bot as a child process and restarts it whenever it exits with a
non-zero code, waiting with exponential backoff between attempts. A clean
exit (code 0, e.g. after SIGINT/SIGTERM) stops the supervisor too.
"""

from __future__ import annotations

import argparse
import logging
import shlex
import subprocess
import sys
import time
from collections.abc import Callable, Sequence

from discord_lavalink_bot.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESTARTS = 10
DEFAULT_INITIAL_DELAY = 2.0
DEFAULT_MAX_DELAY = 60.0
DEFAULT_STABLE_AFTER = 300.0


def default_command() -> list[str]:
    return [sys.executable, "-m", "discord_lavalink_bot.main"]


def backoff_delay(attempt: int, initial: float, maximum: float) -> float:
    """Delay before restart number *attempt* (1-based): initial, 2x, 4x, ... capped."""
    return min(maximum, initial * (2 ** max(attempt - 1, 0)))


def supervise(
    cmd: Sequence[str],
    *,
    max_restarts: int = DEFAULT_MAX_RESTARTS,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    max_delay: float = DEFAULT_MAX_DELAY,
    stable_after: float = DEFAULT_STABLE_AFTER,
    run: Callable[[Sequence[str]], int] = subprocess.call,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """Run *cmd* until it exits cleanly or the restart budget is spent.

    ``max_restarts=0`` restarts forever. A run lasting at least
    ``stable_after`` seconds resets the backoff and the restart count.
    Returns the exit code of the last run.
    """
    restarts = 0
    limit_label = str(max_restarts) if max_restarts else "unlimited"

    while True:
        logger.info(LogTemplates.SUPERVISOR_STARTING, shlex.join(cmd))
        started = clock()
        code = run(cmd)
        logger.info(LogTemplates.SUPERVISOR_EXITED, code)

        if code == 0:
            return 0

        if clock() - started >= stable_after:
            restarts = 0

        restarts += 1
        if max_restarts and restarts > max_restarts:
            logger.error(LogTemplates.SUPERVISOR_GIVING_UP, max_restarts)
            return code

        delay = backoff_delay(restarts, initial_delay, max_delay)
        logger.warning(LogTemplates.SUPERVISOR_RESTARTING, delay, restarts, limit_label)
        sleep(delay)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description="Run the Discord Lavalink bot and restart it after a crash.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Run with default restart policy
  %(prog)s --max-restarts 0             # Restart forever
  %(prog)s --cmd "python -m discord_lavalink_bot.main"
        """,
    )
    parser.add_argument(
        "--cmd",
        "-c",
        default=None,
        help="command to run (default: this interpreter with -m discord_lavalink_bot.main)",
    )
    parser.add_argument(
        "--max-restarts",
        type=int,
        default=DEFAULT_MAX_RESTARTS,
        help=f"give up after this many consecutive restarts, 0 = never (default: {DEFAULT_MAX_RESTARTS})",
    )
    parser.add_argument(
        "--initial-delay",
        type=float,
        default=DEFAULT_INITIAL_DELAY,
        help=f"seconds before the first restart (default: {DEFAULT_INITIAL_DELAY})",
    )
    parser.add_argument(
        "--max-delay",
        type=float,
        default=DEFAULT_MAX_DELAY,
        help=f"upper bound on the backoff delay (default: {DEFAULT_MAX_DELAY})",
    )
    parser.add_argument(
        "--stable-after",
        type=float,
        default=DEFAULT_STABLE_AFTER,
        help=f"a run this long resets the backoff (default: {DEFAULT_STABLE_AFTER})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="supervisor log level (default: INFO)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    from discord_lavalink_bot.main import setup_logging

    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.max_restarts < 0:
        logger.error(LogTemplates.SUPERVISOR_BAD_LIMIT)
        return 2

    cmd = shlex.split(args.cmd) if args.cmd else default_command()
    try:
        return supervise(
            cmd,
            max_restarts=args.max_restarts,
            initial_delay=args.initial_delay,
            max_delay=args.max_delay,
            stable_after=args.stable_after,
        )
    except KeyboardInterrupt:
        logger.info(LogTemplates.BOT_KEYBOARD_INTERRUPT)
        return 0


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
