"""Entry point for ctcopy."""

from __future__ import annotations

import argparse
import logging
import sys

from ctcopy.clipboard import copy_to_clipboard, paste_from_clipboard
from ctcopy.config import load_config
from ctcopy.notifier import notify
from ctcopy.reader import collect
from ctcopy.selection import LineNumberError, resolve_selection

__version__ = "1.0.0"

VALUE_OPTIONS = ("-l", "-line", "--line")

logger = logging.getLogger("ctcopy")

EXAMPLES = """\
examples:
  %(prog)s file.txt              # Copy entire file
  %(prog)s -l 5 file.txt         # Copy line 5
  %(prog)s -line 1,3,5 file.txt  # Copy lines 1, 3, and 5
  %(prog)s -w -line 2,4 file.txt # Copy lines 2 and 4 without line numbers
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ctcopy",
        description="Copy file contents to the clipboard, optionally only selected lines.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to copy.")
    parser.add_argument(
        "-l",
        dest="line",
        type=int,
        default=0,
        metavar="N",
        help="Single line number to copy (overrides -line).",
    )
    parser.add_argument(
        "-line", "--line",
        dest="lines",
        default="",
        metavar="LIST",
        help="Line numbers separated by comma (e.g., 1,3,5).",
    )
    parser.add_argument(
        "-w",
        dest="strip",
        action="store_true",
        help="Copy text without line numbers.",
    )
    parser.add_argument(
        "-s",
        dest="silent",
        action="store_true",
        help="Silent mode (no notifications).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug output.",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Read the clipboard back and warn if it does not match.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(message)s",
        stream=sys.stderr,
    )


def _send_notification(title: str, message: str, timeout: float) -> None:
    if not notify(title, message, timeout=timeout):
        logger.warning("Warning: notification failed: %s", title)


def _attach_option_values(argv: list[str]) -> list[str]:
    """Glue each -l/-line flag to the word after it as ``opt=value``.

    argparse refuses values such as ``-1,2`` that look like options.
    """
    result = []
    words = iter(argv)
    for word in words:
        if word == "--":
            result.append(word)
            result.extend(words)
            break
        if word in VALUE_OPTIONS:
            value = next(words, None)
            if value is not None:
                result.append(f"{word}={value}")
                continue
        result.append(word)
    return result


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(_attach_option_values(argv))
    setup_logging(args.verbose)

    if not args.files:
        parser.print_help(sys.stderr)
        sys.exit(1)

    try:
        selection = resolve_selection(args.line, args.lines)
    except LineNumberError as e:
        logger.error("Error parsing line numbers: %s", e)
        sys.exit(1)

    config = load_config()
    notifications = not args.silent and bool(config["notification_enabled"])
    timeout = float(config["notification_timeout"])

    def on_error(path, message: str) -> None:
        if notifications:
            _send_notification(config["error_title"], message, timeout)

    summary = collect(
        args.files,
        lines=selection,
        strip=args.strip,
        encoding=config["encoding"],
        on_error=on_error,
    )

    if summary.succeeded == 0:
        logger.error("No files were successfully read")
        sys.exit(1)

    payload = summary.payload
    if not copy_to_clipboard(payload):
        logger.error("Failed to copy to clipboard")
        sys.exit(1)

    if args.verify:
        current = paste_from_clipboard()
        if current != payload:
            logger.warning("Warning: clipboard contents do not match what was copied")
        else:
            logger.debug("Clipboard contents verified")

    print(summary.message)

    if notifications:
        _send_notification(config["notification_title"], summary.message, timeout)


if __name__ == "__main__":
    main()
