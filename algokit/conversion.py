"""Conversions between binary digits, decimal, octal and hexadecimal."""

from __future__ import annotations

import sys
from typing import Optional, Sequence


def binary_to_decimal(binary: int) -> int:
    """Read the decimal digits of ``binary`` as base-2 digits.

    Raises ``ValueError`` when a digit is neither 0 nor 1.
    """
    if binary < 0:
        raise ValueError("Invalid binary input.")
    decimal = 0
    weight = 1
    while binary:
        binary, digit = divmod(binary, 10)
        if digit > 1:
            raise ValueError("Invalid binary input.")
        decimal += digit * weight
        weight *= 2
    return decimal


def _check_non_negative(number: int) -> None:
    if number < 0:
        raise ValueError("number must not be negative")


def decimal_to_binary(number: int) -> str:
    """Base-2 digits of a non-negative integer."""
    _check_non_negative(number)
    return format(number, "b")


def decimal_to_octal(number: int) -> str:
    """Base-8 digits of a non-negative integer."""
    _check_non_negative(number)
    return format(number, "o")


def decimal_to_hex(number: int) -> str:
    """Upper-case base-16 digits of a non-negative integer."""
    _check_non_negative(number)
    return format(number, "X")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Convert a binary number given as argument, or read from standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = args[0] if args else input("Enter a binary number: ")
    try:
        binary = int(text.strip())
        decimal = binary_to_decimal(binary)
    except ValueError:
        print("Invalid binary input.", file=sys.stderr)
        return 1
    print(f"{binary} in binary = {decimal} in decimal")
    print(f"{decimal} in decimal = {decimal_to_binary(decimal)} in binary")
    print(f"{decimal} in decimal = {decimal_to_octal(decimal)} in octal")
    print(f"{decimal} in decimal = {decimal_to_hex(decimal)} in hexadecimal")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())