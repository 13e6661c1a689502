import string
from datetime import date

from binbot.errors import (
    InvalidCalendarDateError,
    InvalidDateEncodingError,
    InvalidRadixDigitError,
)

BASE36_DIGITS = frozenset(string.digits + string.ascii_letters)


def decode_date(code: str) -> date:
    """
    Schedule dates are yymmdd numbers written in base 36.

    "559H" -> 240101 -> 2024-01-01
    """
    if len(code) != 4:
        raise InvalidDateEncodingError(f"Date code '{code}' is not 4 characters")

    # int(..., 36) also accepts signs, underscores and whitespace
    bad = [c for c in code if c not in BASE36_DIGITS]
    if bad:
        raise InvalidRadixDigitError(f"Invalid base 36 digit '{bad[0]}' in date code '{code}'")

    digits = str(int(code, 36))
    if len(digits) != 6:
        raise InvalidDateEncodingError(
            f"Date code '{code}' decodes to {digits}, expected 6 digits (yymmdd)"
        )

    yy, mm, dd = digits[0:2], digits[2:4], digits[4:6]

    try:
        return date(2000 + int(yy), int(mm), int(dd))
    except ValueError:
        raise InvalidCalendarDateError(
            f"Date conversion failure: '{code}' decodes to 20{yy}-{mm}-{dd}"
        ) from None
