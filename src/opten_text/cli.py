"""CLI command handlers for opten-text.

Each public function corresponds to a CLI subcommand: it calls one text
helper and prints the result to stdout.  Defaults that are not given on
the command line come from :class:`~opten_text.config.Settings`.
"""

from __future__ import annotations

import argparse

from opten_text import text
from opten_text.config import Settings
from opten_text.logging import logger


def handle_case(args: argparse.Namespace, settings: Settings) -> None:
    """Change the case of the first character."""
    if args.direction == "upper":
        convert = text.upper_first_invariant if args.invariant else text.upper_first
    else:
        convert = text.lower_first_invariant if args.invariant else text.lower_first
    print(convert(args.text))


def handle_trim(args: argparse.Namespace, settings: Settings) -> None:
    """Trim surrounding whitespace; prints ``None`` for a null result."""
    result = text.null_check_trim(args.text, return_null_if_empty=args.null_if_empty)
    print("None" if result is None else result)


def handle_split(args: argparse.Namespace, settings: Settings) -> None:
    """Print one token per line.

    ``--keep-empty`` overrides ``[text].split_options``.  ``--ints``
    always uses the default split policy.
    """
    if args.ints:
        for number in text.convert_comma_separated_to_int_array(args.text):
            print(number)
        return

    split_options = (
        text.SplitOptions.NONE if args.keep_empty else settings.text.split_options
    )
    tokens = text.convert_comma_separated_to_string_array(args.text, split_options)
    logger.debug("Split into %d tokens using %s", len(tokens), split_options)
    for token in tokens:
        print(token)


def handle_descending(args: argparse.Namespace, settings: Settings) -> None:
    print("true" if text.is_descending(args.text) else "false")


def handle_remove_between(args: argparse.Namespace, settings: Settings) -> None:
    print(text.remove_between(args.text, args.start, args.end))


def handle_strip_slashes(args: argparse.Namespace, settings: Settings) -> None:
    if args.backslash:
        print(text.remove_leading_and_trailing_slash_and_backslash(args.text))
    else:
        print(text.remove_leading_and_trailing_slash(args.text))


def handle_truncate(args: argparse.Namespace, settings: Settings) -> None:
    """Cut the trimmed text at the last word boundary within ``--length``."""
    length = args.length if args.length is not None else settings.text.truncate_length
    trimmed = text.null_check_trim(args.text) or ""
    index = text.get_index_of_white_space_before_length(trimmed, length)
    if index < len(trimmed):
        logger.debug("Truncating %d characters at index %d", len(trimmed), index)
    print(trimmed[:index])


def handle_digits(args: argparse.Namespace, settings: Settings) -> None:
    print("true" if text.is_digits_only(args.text) else "false")


def handle_slug(args: argparse.Namespace, settings: Settings) -> None:
    """Normalize text for use in URLs and file names."""
    replacement = (
        args.replacement if args.replacement is not None else settings.text.replacement
    )
    print(text.remove_special_characters(args.text, replacement))
