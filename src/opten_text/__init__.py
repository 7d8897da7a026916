"""opten-text — null-safe string helpers for case, trimming, parsing and slugs."""

from opten_text.errors import ActionableError, ErrorType
from opten_text.reflection import AttributeAccessor, get_read_and_writeable_properties_of_type
from opten_text.text import (
    DESCENDING_TOKENS,
    SplitOptions,
    convert_comma_separated_to_int_array,
    convert_comma_separated_to_string_array,
    get_index_of_white_space_before_length,
    is_descending,
    is_digits_only,
    lower_first,
    lower_first_invariant,
    null_check_trim,
    remove_between,
    remove_leading_and_trailing_slash,
    remove_leading_and_trailing_slash_and_backslash,
    remove_special_characters,
    trim_all_string_properties,
    upper_first,
    upper_first_invariant,
)

__all__ = [
    "DESCENDING_TOKENS",
    "ActionableError",
    "AttributeAccessor",
    "ErrorType",
    "SplitOptions",
    "convert_comma_separated_to_int_array",
    "convert_comma_separated_to_string_array",
    "get_index_of_white_space_before_length",
    "get_read_and_writeable_properties_of_type",
    "is_descending",
    "is_digits_only",
    "lower_first",
    "lower_first_invariant",
    "null_check_trim",
    "remove_between",
    "remove_leading_and_trailing_slash",
    "remove_leading_and_trailing_slash_and_backslash",
    "remove_special_characters",
    "trim_all_string_properties",
    "upper_first",
    "upper_first_invariant",
]
