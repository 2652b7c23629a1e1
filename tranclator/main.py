"""Command-line entry point for Tranclator - ties all components together."""

import argparse
import logging
import sys
from typing import Optional

from tranclator.clipboard import Clipboard
from tranclator.config import CONFIG_PATH, TranclatorError, load_config, resolve_language
from tranclator.repl import run_repl
from tranclator.translate import translate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tranclator",
        description="Translate text by dictionary word substitution",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--text", help="Text to translate")
    mode.add_argument("--repl", action="store_true", help="Run in REPL mode")
    parser.add_argument(
        "--config-path",
        default=CONFIG_PATH,
        help=f"Path to config file (default: {CONFIG_PATH})",
    )
    parser.add_argument("-l", "--language", help="Language to use")
    parser.add_argument(
        "-n", "--no-clipboard", action="store_true", help="Do not copy to clipboard"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    return parser


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[list] = None) -> int:
    """Run Tranclator and return the process exit code.

    Expected failures (missing or broken config, unknown language) are
    printed and still return 0. Clipboard and terminal errors propagate.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config_path)
        clipboard = None if args.no_clipboard else Clipboard()
        language = resolve_language(config, args.language)
    except TranclatorError as e:
        print(e)
        return 0

    logger.debug("Using language %r (%s mode)", language.name, language.lower_mode.value)

    if args.text is not None:
        translated = translate(args.text, language)
        print(translated)
        if clipboard is not None:
            clipboard.set_text(translated)
            clipboard.hold()
    elif args.repl:
        try:
            run_repl(language, clipboard, config.global_.quit_keywords)
        except KeyboardInterrupt:
            print()
            return 130

    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
