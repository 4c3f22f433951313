"""Slug normalization shared by the migration and entry creation paths."""

import re
import unicodedata

SLUG_MAX_LENGTH = 100

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")
_VALID_SLUG = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def normalize(text: str) -> str:
    """Turn a display name into a lowercase, hyphen-separated URL token.

    Accents are dropped ("Proteína" becomes "proteina"), anything that is not
    an ASCII letter, digit, whitespace or hyphen is removed, and the result is
    capped at ``SLUG_MAX_LENGTH`` characters. The token is not guaranteed to be
    unique and may be empty when nothing survives the cleanup.
    """
    value = unicodedata.normalize("NFD", text.lower())
    value = _COMBINING_MARKS.sub("", value)
    value = value.replace("ñ", "n")
    value = _DISALLOWED.sub("", value)
    value = _WHITESPACE.sub("-", value)
    value = _HYPHENS.sub("-", value)
    value = value.strip("-")
    # The cut can land right after a hyphen.
    return value[:SLUG_MAX_LENGTH].rstrip("-")


def is_valid_slug(value: str) -> bool:
    """Return whether ``value`` can be stored as a slug as-is."""
    if not value or len(value) > SLUG_MAX_LENGTH:
        return False
    return bool(_VALID_SLUG.match(value))


def with_suffix(base: str, suffix: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Append ``-suffix`` to ``base`` without exceeding ``max_length``."""
    tail = f"-{suffix}"
    head = base[: max_length - len(tail)].rstrip("-")
    if not head:
        return str(suffix)[:max_length]
    return f"{head}{tail}"
