"""Normalisation of region and country codes."""

__all__ = ["normalize_code", "normalize_codes", "is_known_code"]

import logging
import re
from enum import Enum
from typing import Any, Iterable

from georegions.exceptions import InvalidCodeError
from georegions.tables import ALIASES, CONTAINMENT, NON_COUNTRIES

logger = logging.getLogger(__name__)

NUMERIC_CODE = re.compile(r"[0-9]+")

_KNOWN_CODES: frozenset[str] = frozenset(CONTAINMENT).union(
    *CONTAINMENT.values(), NON_COUNTRIES
)


def is_known_code(code: str) -> bool:
    """Return True if the normalised code appears anywhere in the static tables."""
    return code in _KNOWN_CODES


def normalize_code(code: Any) -> str:
    """Convert a code to the canonical form used as a key in the containment table.

    Integers and strings of decimal digits are zero-padded to three digits. Any other string is
    upper-cased and resolved through the alias table. Unrecognised codes are returned as they are
    and simply never match a table entry.

    Args:
        code (Any): An integer, a digit string, a letter code of any case or an enum member whose
            value is one of those.

    Returns:
        str: The canonical code.

    Raises:
        InvalidCodeError: If the value cannot be interpreted as a code.

    """
    if isinstance(code, Enum):
        code = code.value

    if isinstance(code, bool) or not isinstance(code, (int, str)):
        raise InvalidCodeError(
            f"Expected a region or country code, got {type(code).__name__}: {code!r}"
        )

    if isinstance(code, int):
        code = str(code)

    if NUMERIC_CODE.fullmatch(code):
        normalized = f"{int(code):03d}"
    else:
        upper = code.upper()
        normalized = ALIASES.get(upper, upper)

    if not is_known_code(normalized):
        logger.debug("Code %r is not in the containment table", normalized)

    return normalized


def normalize_codes(codes: Any) -> tuple[str, ...]:
    """Normalise one code or an iterable of codes.

    A string, an integer or an enum member is treated as a single code.

    Args:
        codes (Any): The code or codes to normalise.

    Returns:
        tuple[str, ...]: The normalised codes, in input order.

    Raises:
        InvalidCodeError: If any value cannot be interpreted as a code.

    """
    if codes is None:
        return ()

    if isinstance(codes, (str, int, Enum)):
        codes = [codes]

    if isinstance(codes, (bytes, bytearray, memoryview)) or not isinstance(
        codes, Iterable
    ):
        raise InvalidCodeError(
            f"Expected a code or a sequence of codes, got {type(codes).__name__}"
        )

    return tuple(normalize_code(code) for code in codes)
