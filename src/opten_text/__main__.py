"""CLI entry point for opten-text."""

from __future__ import annotations

import argparse
import sys

from opten_text import cli
from opten_text.config import load_settings
from opten_text.errors import ActionableError
from opten_text.logging import configure_file_logging, level_from_name, logger, set_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="opten-text",
        description="String normalization, trimming and parsing helpers",
    )
    parser.add_argument(
        "--settings",
        type=str,
        default=None,
        metavar="PATH",
        help="Settings TOML (default: config/settings.toml if present)",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        metavar="DIR",
        help="Also write a timestamped log file to DIR",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- case ----------------------------------------------------------------
    case_p = sub.add_parser("case", help="Upper- or lowercase the first character")
    case_p.add_argument("direction", choices=["upper", "lower"])
    case_p.add_argument("text", type=str)
    case_p.add_argument(
        "--invariant",
        action="store_true",
        help="Never change the string length",
    )
    case_p.set_defaults(handler=cli.handle_case)

    # -- trim ----------------------------------------------------------------
    trim_p = sub.add_parser("trim", help="Trim surrounding whitespace")
    trim_p.add_argument("text", type=str)
    trim_p.add_argument(
        "--null-if-empty",
        action="store_true",
        help="Return None instead of an empty string for blank input",
    )
    trim_p.set_defaults(handler=cli.handle_trim)

    # -- split ---------------------------------------------------------------
    split_p = sub.add_parser("split", help="Split a comma-separated list")
    split_p.add_argument("text", type=str)
    split_p.add_argument("--ints", action="store_true", help="Parse every token as an integer")
    split_p.add_argument("--keep-empty", action="store_true", help="Keep empty segments")
    split_p.set_defaults(handler=cli.handle_split)

    # -- descending ----------------------------------------------------------
    desc_p = sub.add_parser("descending", help="Does the flag request descending order?")
    desc_p.add_argument("text", type=str)
    desc_p.set_defaults(handler=cli.handle_descending)

    # -- remove-between ------------------------------------------------------
    between_p = sub.add_parser("remove-between", help="Remove text from START through END")
    between_p.add_argument("text", type=str)
    between_p.add_argument("start", type=str)
    between_p.add_argument("end", type=str)
    between_p.set_defaults(handler=cli.handle_remove_between)

    # -- strip-slashes -------------------------------------------------------
    slash_p = sub.add_parser("strip-slashes", help="Strip leading and trailing slashes")
    slash_p.add_argument("text", type=str)
    slash_p.add_argument("--backslash", action="store_true", help="Strip backslashes too")
    slash_p.set_defaults(handler=cli.handle_strip_slashes)

    # -- truncate ------------------------------------------------------------
    trunc_p = sub.add_parser("truncate", help="Cut text at a word boundary")
    trunc_p.add_argument("text", type=str)
    trunc_p.add_argument(
        "--length",
        type=int,
        default=None,
        metavar="N",
        help="Maximum length (default: [text].truncate_length)",
    )
    trunc_p.set_defaults(handler=cli.handle_truncate)

    # -- digits --------------------------------------------------------------
    digits_p = sub.add_parser("digits", help="Is the text ASCII digits only?")
    digits_p.add_argument("text", type=str)
    digits_p.set_defaults(handler=cli.handle_digits)

    # -- slug ----------------------------------------------------------------
    slug_p = sub.add_parser("slug", help="Replace special characters")
    slug_p.add_argument("text", type=str)
    slug_p.add_argument(
        "--replacement",
        type=str,
        default=None,
        help="Replacement token (default: [text].replacement)",
    )
    slug_p.set_defaults(handler=cli.handle_slug)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.settings)
        set_level(level_from_name(settings.logging.level))

        log_dir = args.log_dir or settings.logging.log_dir
        if log_dir:
            configure_file_logging(log_dir, level=level_from_name(settings.logging.level))

        args.handler(args, settings)
    except ActionableError as exc:
        _report(exc)
    except Exception as exc:
        logger.exception("Command '%s' failed", args.command)
        _report(ActionableError.unexpected("opten-text", args.command, str(exc)))


def _report(error: ActionableError) -> None:
    """Log *error*, print its suggestion to stderr, and exit with status 1."""
    logger.error("%s (%s)", error.error, error.error_type)
    if error.suggestion:
        print(f"Suggestion: {error.suggestion}", file=sys.stderr)
    sys.exit(1)


if __name__ == "__main__":
    main()
