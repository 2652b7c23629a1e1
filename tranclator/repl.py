"""Interactive translation loop."""

import logging
from typing import Callable, Iterable, Optional

from tranclator.clipboard import Clipboard
from tranclator.config import Language
from tranclator.translate import translate

logger = logging.getLogger(__name__)

PROMPT = ">>> "


def format_quit_keywords(quit_keywords: Iterable[str]) -> str:
    """Render quit keywords as a quoted, comma separated list."""
    return ", ".join(f'"{word}"' for word in sorted(quit_keywords))


def run_repl(
    language: Language,
    clipboard: Optional[Clipboard] = None,
    quit_keywords: Iterable[str] = (),
    input_fn: Optional[Callable[[str], str]] = None,
    output: Optional[Callable[[str], None]] = None,
) -> None:
    """Translate lines read from the terminal until a quit keyword or EOF.

    A line quits only when its stripped text equals one of the keywords
    exactly. Clipboard and terminal errors propagate to the caller.
    """
    input_fn = input_fn or input
    output = output or print
    quit_words = frozenset(quit_keywords)

    output(f"Welcome to {language.name} REPL")
    output(f"Type any of {format_quit_keywords(quit_words)} to exit")

    while True:
        try:
            line = input_fn(PROMPT)
        except EOFError:
            logger.debug("End of input, leaving REPL")
            output("")
            return

        if line.strip() in quit_words:
            return

        translated = translate(line, language)
        output(translated)

        if clipboard is not None:
            clipboard.set_text(translated)
