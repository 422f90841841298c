"""Command-line interface for sshexec."""

import argparse
import logging
import signal
import sys
import threading

from sshexec import __version__
from sshexec.arguments import compression_argument, timeout_argument
from sshexec.command import build_command
from sshexec.errors import ProcessCancelledError, ResolutionError
from sshexec.models import Tool
from sshexec.process import start

log = logging.getLogger("sshexec")

TOOL_CHOICES = [tool.value for tool in Tool]


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError("timeout must be at least 1 second")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sshexec",
        description="Resolve and run the ssh and scp executables",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="action", required=True)

    which = subparsers.add_parser("which", help="Print the executable that would be used")
    which.add_argument("tool", choices=TOOL_CHOICES)

    run = subparsers.add_parser("run", help="Run ssh or scp with the given arguments")
    run.add_argument("tool", choices=TOOL_CHOICES)
    run.add_argument("-C", "--compress", action="store_true", help="Enable compression")
    run.add_argument(
        "-t",
        "--timeout",
        type=_positive_int,
        metavar="SECONDS",
        help="Connection timeout in seconds",
    )
    run.add_argument("args", nargs=argparse.REMAINDER, help="Arguments passed through")
    return parser


def _tool_args(args: argparse.Namespace) -> list[str]:
    tool_args: list[str] = []
    if args.compress:
        tool_args.append(compression_argument())
    if args.timeout is not None:
        tool_args.append(timeout_argument(args.timeout))
    passthrough = list(args.args)
    if passthrough and passthrough[0] == "--":
        passthrough = passthrough[1:]
    tool_args.extend(passthrough)
    return tool_args


def _run(tool: Tool, tool_args: list[str]) -> int:
    cancel_event = threading.Event()
    descriptor = build_command(tool, cancel_event, *tool_args)
    previous = signal.signal(signal.SIGTERM, lambda *_: cancel_event.set())
    try:
        process = start(descriptor)
        return process.wait()
    finally:
        signal.signal(signal.SIGTERM, previous if previous is not None else signal.SIG_DFL)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    tool = Tool(args.tool)
    try:
        if args.action == "which":
            descriptor = build_command(tool)
            print(descriptor.executable)
            return 0
        return _run(tool, _tool_args(args))
    except ResolutionError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Hint: {e.hint}", file=sys.stderr)
        return 1
    except (ProcessCancelledError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def entrypoint() -> None:
    raise SystemExit(main())
