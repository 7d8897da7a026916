"""Shared text-processing utilities.

Pure functions with no domain dependencies, safe to import from any
layer.  Degenerate input (``None``, empty, whitespace-only) is answered
with a defined default instead of an exception; the two deliberate
failures are :func:`convert_comma_separated_to_int_array` on a bad token
and :func:`trim_all_string_properties` on ``None``.

:func:`trim_all_string_properties` is the only function that mutates its
argument.  Calls against the *same* record from several threads must be
serialized by the caller.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import StrEnum
from typing import TypeVar

from opten_text.errors import ActionableError
from opten_text.logging import logger
from opten_text.reflection import AttributeAccessor, get_read_and_writeable_properties_of_type

T = TypeVar("T")

DESCENDING_TOKENS: frozenset[str] = frozenset({"d", "des", "desc", "descending"})

# Stripped before splitting so serialized JS arrays (``["a","b"]``) parse
_LIST_NOISE = re.compile(r'["\[\]]')
_INT_LITERAL = re.compile(r"[+-]?[0-9]+")
_NON_ALPHANUMERIC = re.compile(r"[^0-9a-zA-Z]+")

_UMLAUT_DIGRAPHS: tuple[tuple[str, str], ...] = (
    ("ä", "ae"),
    ("ö", "oe"),
    ("ü", "ue"),
    ("Ä", "Ae"),
    ("Ö", "Oe"),
    ("Ü", "Ue"),
)


class SplitOptions(StrEnum):
    """Whether zero-length segments survive a comma split."""

    NONE = "none"
    REMOVE_EMPTY_ENTRIES = "remove_empty_entries"


# ---------------------------------------------------------------------------
# Case transformation
# ---------------------------------------------------------------------------


def upper_first(value: str | None) -> str:
    """Uppercase the first character; ``""`` for degenerate input.

    Uses the full Unicode mapping, so ``"ßig"`` becomes ``"SSig"``.
    """
    if _is_blank(value):
        return ""
    return value[0].upper() + value[1:]


def lower_first(value: str | None) -> str:
    """Lowercase the first character; ``""`` for degenerate input."""
    if _is_blank(value):
        return ""
    return value[0].lower() + value[1:]


def upper_first_invariant(value: str | None) -> str:
    """Like :func:`upper_first`, but never changes the string length.

    A first character whose uppercase form is several characters long
    (``"ß"``, ``"ŉ"``) is left as is.
    """
    if _is_blank(value):
        return ""
    return _one_to_one(value[0], value[0].upper()) + value[1:]


def lower_first_invariant(value: str | None) -> str:
    """Like :func:`lower_first`, but never changes the string length."""
    if _is_blank(value):
        return ""
    return _one_to_one(value[0], value[0].lower()) + value[1:]


# ---------------------------------------------------------------------------
# Trimming
# ---------------------------------------------------------------------------


def null_check_trim(value: str | None, return_null_if_empty: bool = False) -> str | None:
    """Strip surrounding whitespace, passing ``None`` through.

    Whitespace-only input becomes ``""``, or ``None`` when
    *return_null_if_empty* is set, so callers can tell "clear this
    optional field" apart from "explicitly empty".

    >>> null_check_trim("  hi  ")
    'hi'
    >>> null_check_trim("   ", return_null_if_empty=True) is None
    True
    """
    if value is None:
        return None
    if _is_blank(value):
        return None if return_null_if_empty else ""
    return value.strip()


def remove_leading_and_trailing_slash(text: str) -> str:
    return text.strip("/")


def remove_leading_and_trailing_slash_and_backslash(text: str) -> str:
    return text.strip("/\\")


def trim_all_string_properties(record: T, *, attributes: Iterable[str] | None = None) -> T:
    """Trim every readable and writable ``str`` attribute of *record* in place.

    Attributes are found with
    :func:`~opten_text.reflection.get_read_and_writeable_properties_of_type`
    unless *attributes* names them explicitly.  ``None`` values are
    skipped, non-text attributes are untouched, and whitespace-only text
    becomes ``""``.

    Only *declared* attributes are discovered.  A plain object whose
    attributes are assigned in ``__init__`` without class-level
    annotations has nothing to discover and is returned unchanged; pass
    their names as *attributes* instead.

    Returns *record* itself so calls can be chained.

    Raises :class:`~opten_text.errors.ActionableError` (ARGUMENT_NULL)
    when *record* is ``None``.
    """
    if record is None:
        raise ActionableError.argument_null("record", operation="trim_all_string_properties")

    if attributes is None:
        accessors = get_read_and_writeable_properties_of_type(type(record), str)
        if not accessors:
            logger.debug(
                "No declared text attributes on %s; pass attributes= to trim undeclared ones",
                type(record).__name__,
            )
    else:
        accessors = [AttributeAccessor(name, str) for name in attributes]

    trimmed = 0
    for accessor in accessors:
        current = accessor.get(record)
        # Explicit names are not type-checked up front
        if not isinstance(current, str):
            continue
        accessor.set(record, null_check_trim(current))
        trimmed += 1

    logger.debug(
        "Trimmed %d of %d text attributes on %s", trimmed, len(accessors), type(record).__name__
    )
    return record


# ---------------------------------------------------------------------------
# Delimited parsing
# ---------------------------------------------------------------------------


def convert_comma_separated_to_string_array(
    value: str | None,
    split_options: SplitOptions = SplitOptions.REMOVE_EMPTY_ENTRIES,
) -> list[str]:
    """Split a comma-separated string into trimmed tokens.

    Quotes and square brackets are removed first.  With
    ``REMOVE_EMPTY_ENTRIES`` only zero-length segments are dropped;
    ``"a, ,b"`` still yields ``["a", "", "b"]`` because the middle
    segment is a space until it is trimmed.

    >>> convert_comma_separated_to_string_array('["a", "b",,"c"]')
    ['a', 'b', 'c']
    """
    if _is_blank(value):
        return []

    segments = _LIST_NOISE.sub("", value).split(",")
    if split_options is SplitOptions.REMOVE_EMPTY_ENTRIES:
        segments = [segment for segment in segments if segment]

    # Non-None input always trims to a str
    return [null_check_trim(segment) or "" for segment in segments]


def convert_comma_separated_to_int_array(value: str | None) -> list[int]:
    """Parse a comma-separated string into integers.

    All-or-nothing: the first token that is not an optionally signed
    run of ASCII digits raises :class:`~opten_text.errors.ActionableError`
    (FORMAT) and no partial list is returned.
    """
    result: list[int] = []
    for token in convert_comma_separated_to_string_array(value):
        if not _INT_LITERAL.fullmatch(token):
            logger.warning("Rejected non-integer token %r", token)
            raise ActionableError.format(
                token,
                "integer",
                "expected an optional sign followed by digits 0-9",
            )
        result.append(int(token))
    return result


# ---------------------------------------------------------------------------
# Interpretation and predicates
# ---------------------------------------------------------------------------


def is_descending(value: str | None) -> bool:
    """Return True when *value* asks for descending order.

    Accepts ``"1"`` and, ignoring case, ``d``/``des``/``desc``/``descending``.
    """
    value = null_check_trim(value)
    if not value:
        return False
    if value == "1":
        return True
    return value.lower() in DESCENDING_TOKENS


def is_digits_only(value: str) -> bool:
    # str.isdigit() accepts non-ASCII digits and rejects ""
    return all("0" <= char <= "9" for char in value)


# ---------------------------------------------------------------------------
# Removal and normalization
# ---------------------------------------------------------------------------


def remove_between(text: str, start: str, end: str) -> str:
    """Remove everything from *start* through *end*, then strip.

    Matching is greedy: with several pairs on one line, everything from
    the first *start* to the last *end* goes in a single match.

    >>> remove_between("Shoe (red) size (42) EU", "(", ")")
    'Shoe  EU'
    """
    pattern = f"{re.escape(start)}.*{re.escape(end)}"
    return re.sub(pattern, "", text).strip()


def remove_special_characters(value: str, replacement: str = "-") -> str:
    """Reduce *value* to ASCII letters and digits joined by *replacement*.

    Spaces become *replacement*, German umlauts fold to their digraphs,
    then every run of other characters collapses to one *replacement*.
    Folding has to come first or the sweep would eat the umlauts.

    >>> remove_special_characters("Grüne Äpfel!")
    'Gruene-Aepfel-'
    """
    value = value.replace(" ", replacement)
    for umlaut, digraph in _UMLAUT_DIGRAPHS:
        value = value.replace(umlaut, digraph)
    return _NON_ALPHANUMERIC.sub(lambda _match: replacement, value)


# ---------------------------------------------------------------------------
# Truncation
# ---------------------------------------------------------------------------


def get_index_of_white_space_before_length(text: str | None, length: int) -> int:
    """Find a truncation point at or before *length* that does not split a word.

    *text* is trimmed first.  Returns ``len(text)`` when it already fits,
    the index of the nearest whitespace at or before *length* otherwise,
    and 0 when there is no such whitespace.

    >>> get_index_of_white_space_before_length("hello world", 8)
    5
    """
    text = null_check_trim(text)
    if not text:
        return 0
    if len(text) <= length:
        return len(text)

    index = max(length, 0)
    while index > 0 and not text[index].isspace():
        index -= 1
    return index


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _one_to_one(original: str, converted: str) -> str:
    return converted if len(converted) == 1 else original
