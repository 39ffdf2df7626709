import argparse
import asyncio
import logging
import sys
from typing import Dict, Optional, Sequence

from tqdm import tqdm

from . import __version__
from .config import resolve_platform_config
from .exception_handler import error_handler
from .exceptions import ClipsnipError, MissingArgumentError
from .orchestration import SnippetCommands


logger = logging.getLogger("clipsnip")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting on usage errors."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise MissingArgumentError(message, usage=self.format_usage())


def build_parser() -> tuple[argparse.ArgumentParser, Dict[str, argparse.ArgumentParser]]:
    parser = _ArgumentParser(
        prog="clipsnip",
        description="Save clipboard text as editor snippets and manage snippet files",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    add_parser = subparsers.add_parser("add", help="Store clipboard text as a new snippet")
    add_parser.add_argument(
        "--language",
        "-l",
        required=True,
        help="Language tag of the snippet file (for example, 'python')",
    )
    add_parser.add_argument(
        "--prefix",
        "-p",
        required=True,
        help="Trigger text that expands the snippet",
    )
    add_parser.add_argument(
        "--title",
        "-t",
        default=None,
        help="Snippet name (default: current date and time)",
    )
    add_parser.add_argument(
        "--description",
        "-d",
        default=None,
        help="Snippet description (default: current date and time)",
    )
    add_parser.add_argument(
        "--create",
        "-c",
        action="store_true",
        help="Create the snippet file if it does not exist",
    )

    move_parser = subparsers.add_parser(
        "move", help="Merge all snippets of one file into another"
    )
    move_parser.add_argument(
        "--from",
        "-f",
        dest="source",
        required=True,
        help="Language tag of the file to copy snippets from (left unchanged)",
    )
    move_parser.add_argument(
        "--to",
        "-t",
        dest="destination",
        required=True,
        help="Language tag of the file to merge snippets into",
    )

    open_parser = subparsers.add_parser("open", help="Open a snippet file in the editor")
    open_parser.add_argument(
        "--language",
        "-l",
        required=True,
        help="Language tag of the snippet file to open",
    )

    list_parser = subparsers.add_parser("list", help="List the snippets in a file")
    list_parser.add_argument(
        "--language",
        "-l",
        required=True,
        help="Language tag of the snippet file to list",
    )

    commands = {
        "add": add_parser,
        "move": move_parser,
        "open": open_parser,
        "list": list_parser,
    }
    return parser, commands


def _check_args(args: argparse.Namespace, subparsers: Dict[str, argparse.ArgumentParser]) -> None:
    if args.command == "add" and not args.prefix.strip():
        subparsers["add"].error("argument --prefix/-p: must not be empty")


def run_command(args: argparse.Namespace, commands: SnippetCommands) -> None:
    if args.command == "add":
        result = asyncio.run(
            commands.add(
                args.language,
                args.prefix,
                title=args.title,
                description=args.description,
                create=args.create,
            )
        )
        verb = "Replaced" if result.replaced else "Added"
        tqdm.write(
            f"✅ {verb} snippet '{result.name}' in {result.path} ({result.total_count} total)"
        )
    elif args.command == "move":
        result = asyncio.run(commands.move(args.source, args.destination))
        tqdm.write(
            f"✅ Merged {result.moved_count} snippets from {result.source} into "
            f"{result.destination} ({result.total_count} total)"
        )
        if result.replaced_count:
            tqdm.write(f"⚠️  {result.replaced_count} existing snippets were replaced")
    elif args.command == "open":
        path = commands.open(args.language)
        tqdm.write(f"✅ Opened {path}")
    elif args.command == "list":
        store = asyncio.run(commands.list_entries(args.language))
        if not len(store):
            print(f"No snippets in {args.language}")
        for name, definition in store.items():
            prefix = definition.prefix
            if not isinstance(prefix, str):
                prefix = ", ".join(prefix)
            print(f"{name}\t{prefix}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser, subparsers = build_parser()

    try:
        args = parser.parse_args(argv)
        _check_args(args, subparsers)
    except MissingArgumentError as exc:
        error_handler.collect_command_error(exc, "parse")
        print(exc.usage or parser.format_usage(), end="", file=sys.stderr)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if args.verbose:
        error_handler.set_level("DEBUG")

    try:
        commands = SnippetCommands(resolve_platform_config())
        run_command(args, commands)
    except KeyboardInterrupt:
        print("\n⚠️ Operation interrupted", file=sys.stderr)
        return EXIT_INTERRUPTED
    except ClipsnipError as exc:
        error_handler.collect_command_error(exc, args.command)
        print(error_handler.format_error_message(exc), file=sys.stderr)
        print(subparsers[args.command].format_usage(), end="", file=sys.stderr)
        return EXIT_FAILED
    except Exception:
        logger.exception("Fatal error while running '%s'", args.command)
        print("\n❌ Fatal error occurred. See log for details.", file=sys.stderr)
        return EXIT_FAILED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
