# Tempest UDP Relay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value normalization and decoding helpers for the Tempest command-line resolver.

Functions:
- trim: Normalize a raw option value (`--opt=value`, `--opt= value`, `-o=value`).
- coerce_int_range: Decode a trimmed value into an integer within inclusive bounds.
"""
import re

from tempest.exceptions import CommandLineError

_TRIM_PATTERN = re.compile(r"^[=\s]+|\s+$")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def trim(value: str | None) -> str:
    """
    Remove any leading run of `=` and whitespace, and any trailing whitespace.

    A missing value is treated as an empty string, so "must be non-empty" checks
    reduce to a comparison with "".

    Args:
        value (str | None): Raw value reported by the scanner.

    Returns:
        str: The normalized value.
    """
    if value is None:
        return ""
    return _TRIM_PATTERN.sub("", value)


def coerce_int_range(value: str, minimum: int, maximum: int, name: str) -> int:
    """
    Convert a trimmed option value to an integer in `[minimum, maximum]`.

    Args:
        value (str): The trimmed option value.
        minimum (int): Smallest accepted value.
        maximum (int): Largest accepted value.
        name (str): Option name, used in the error message.

    Returns:
        int: The decoded value.

    Raises:
        CommandLineError: If the value is not a decimal integer or is out of range.
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        raise CommandLineError(f"Invalid value for '--{name}': {value!r} is not a number")
    number = int(value)
    if not minimum <= number <= maximum:
        raise CommandLineError(
            f"Invalid value for '--{name}': {number} is not between {minimum} and {maximum}"
        )
    return number
