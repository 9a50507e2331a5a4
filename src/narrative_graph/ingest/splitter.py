"""Split raw text into sentence-like units."""

import re

from ..exceptions import InvalidInputError

MARKUP_PATTERN = re.compile(r"<[^>]*>")
SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


def ensure_text(value: object, what: str = "text") -> str:
    """Return value unchanged if it is a string, otherwise reject it."""
    if not isinstance(value, str):
        raise InvalidInputError(f"{what} must be a string, got {type(value).__name__}")
    return value


def strip_markup(text: str) -> str:
    """Replace every angle-bracket tag with a single space."""
    return MARKUP_PATTERN.sub(" ", ensure_text(text))


def split_into_sentences(text: str) -> list[str]:
    """
    Split text into sentences.

    Markup is stripped first. Splits on runs of terminal punctuation only,
    so ellipses and abbreviations such as "Mr." also end a sentence.
    Pieces are returned untrimmed; whitespace-only pieces are dropped.
    """
    return [s for s in SENTENCE_BOUNDARY.split(strip_markup(text)) if s.strip()]


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return " ".join(text.split())
