"""Word substitution engine for Tranclator."""

from tranclator.config import CapitalizationMode, Language


def find_all(haystack: str, needle: str) -> list[int]:
    """Return the start offsets of non-overlapping occurrences of needle.

    An empty needle matches at every position, including the end.
    """
    offsets = []
    pos = haystack.find(needle)
    while pos != -1:
        offsets.append(pos)
        pos = haystack.find(needle, pos + max(len(needle), 1))
    return offsets


def _capitalize_first(text: str) -> str:
    # str.capitalize() would lowercase the rest
    return text[:1].upper() + text[1:]


def _match_case(segment: str, text: str, translation: str) -> str:
    """Pick the casing of a replacement from the segment it replaces."""
    if segment.lower() == segment:
        return translation.lower()
    if segment.upper() == segment and text.upper() == text:
        return translation.upper()
    return _capitalize_first(translation)


def _translate_preserve(text: str, dictionary) -> str:
    for word, translation in dictionary:
        # Highest offset first so earlier offsets stay valid after splicing
        for pos in reversed(find_all(text.lower(), word.lower())):
            end = pos + len(word)
            replacement = _match_case(text[pos:end], text, translation)
            text = text[:pos] + replacement + text[end:]
    return text


def translate(text: str, language: Language) -> str:
    """Translate text with a language's dictionary.

    Entries are applied in dictionary order, each one against the text as
    left by the previous entries, so a translation can itself be rewritten
    by a later entry.

    Args:
        text: Input text; surrounding whitespace is stripped
        language: Language profile to apply

    Returns:
        Translated text
    """
    text = text.strip()
    mode = language.lower_mode

    if mode is CapitalizationMode.LOWER:
        text = text.lower()
        for word, translation in language.dictionary:
            text = text.replace(word.lower(), translation.lower())
    elif mode is CapitalizationMode.UPPER:
        text = text.upper()
        for word, translation in language.dictionary:
            text = text.replace(word.upper(), translation.upper())
    else:
        text = _translate_preserve(text, language.dictionary)

    return text
