"""strsplit command line entry point.

Splits a text by a delimiter and prints the tokens.

Usage:
    python main.py "a b c d e" --delimiter " "
    python main.py "abcde" --delimiter c --until
    python main.py "a;b;c" --config config/settings.yaml
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence


PROJECT_ROOT = Path(__file__).resolve().parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from strsplit.core.settings import load_settings
from strsplit.core.str_split import until
from strsplit.libs.delimiter.delimiter_factory import DelimiterFactory
from strsplit.libs.splitter.delimiter_splitter import DelimiterSplitter
from strsplit.libs.splitter.splitter_factory import SplitterFactory
from strsplit.observability.logger import configure_logging, get_logger


DEFAULT_CONFIG = PROJECT_ROOT / "config" / "settings.yaml"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Split text lazily by a delimiter.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "text",
        nargs="?",
        default="a b c d e",
        help="Text to split (default: 'a b c d e')",
    )

    parser.add_argument(
        "--delimiter", "-d",
        default=None,
        help="Delimiter string. A single character is matched as a character, "
             "anything longer as a literal substring. "
             "When omitted, the delimiter is read from the settings file.",
    )

    parser.add_argument(
        "--config", "-c",
        default=str(DEFAULT_CONFIG),
        help="Path to the YAML settings file (default: config/settings.yaml)",
    )

    parser.add_argument(
        "--until", "-u",
        action="store_true",
        help="Print only the first token",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (e.g. DEBUG)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the splitter from the command line.

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)

    if args.delimiter is not None:
        logger = get_logger(log_level=args.log_level)
        if args.until:
            print(until(args.text, args.delimiter))
        else:
            print(DelimiterSplitter(args.delimiter).split_text(args.text))
        logger.debug("Split with command line delimiter %r", args.delimiter)
        return 0

    try:
        settings = load_settings(args.config)
        logger = configure_logging(settings, log_level=args.log_level)
        if args.until:
            print(until(args.text, DelimiterFactory.create(settings)))
        else:
            print(SplitterFactory.create(settings).split_text(args.text))
    except (FileNotFoundError, ValueError) as exc:
        get_logger(log_level=args.log_level).error("Failed to load settings: %s", exc)
        return 1

    logger.debug("Split with delimiter from %s", args.config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
