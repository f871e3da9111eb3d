"""Validation and queuing of accounts entered by hand."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Any

from .common import build_json_obj
from .data import DatabaseData

_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)
_ALNUM = frozenset(string.ascii_letters + string.digits)
_DIGITS = frozenset(string.digits)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class InvalidInputError(ValueError):
    """Raised when the data entered for an account is not acceptable."""

    def __init__(self, message: str, label: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.label = label


@dataclass
class ManualEntry:
    """The values of the manual-add form, as the user typed them."""

    label: str = ""
    issuer: str = ""
    secret: str = ""
    digits: str = ""
    period: str = ""
    counter: str = ""
    otp_type: str = "TOTP"
    algo: str = "SHA1"
    period_active: bool = True
    counter_active: bool = False


def _strtoll(text: str) -> int:
    """Parse a leading base-10 integer, 0 if there is none, clamped to int64."""
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(match.group(1))))


def is_alnum_ascii(string: str) -> bool:
    """Return True if every character is an ASCII letter or digit."""
    return all(ch in _ALNUM for ch in string)


def is_digits(string: str) -> bool:
    """Return True if every character is an ASCII digit."""
    return all(ch in _DIGITS for ch in string)


def validate_input(
    label: str,
    issuer: str,
    secret: str,
    digits: str,
    period: str,
    period_active: bool,
    counter: str,
    counter_active: bool,
) -> None:
    """Check the form values, raising InvalidInputError on the first problem."""
    if not label or not secret:
        raise InvalidInputError("Label and/or secret can't be empty", label)
    if not label.isascii() or not issuer.isascii():
        raise InvalidInputError(
            "Only ASCII characters are supported. Entry with label '"
            f"{label}' will not be added.",
            label,
        )
    if not is_alnum_ascii(secret):
        raise InvalidInputError(
            "Secret can contain only characters from the english alphabet and digits. "
            f"Entry with label '{label}' will not be added.",
            label,
        )
    if not is_digits(digits) or not 4 <= _strtoll(digits) <= 10:
        raise InvalidInputError(
            "The digits entry should contain only digits and the value should be "
            "between 4 and 10 inclusive.\n"
            f"Entry with label '{label}' will not be added.",
            label,
        )
    if period_active and (not is_digits(period) or not 10 <= _strtoll(period) <= 120):
        raise InvalidInputError(
            "The period entry should contain only digits and the value should be "
            "between 10 and 120 (inclusive).\n"
            f"Entry with label '{label}' will not be added.",
            label,
        )
    if counter_active and (
        not is_digits(counter)
        or _strtoll(counter) < 1
        or _strtoll(counter) == _INT64_MAX
    ):
        raise InvalidInputError(
            "The counter entry should contain only digits and the value should be "
            "between 1 and G_MAXINT64-1 (inclusive).\n"
            f"Entry with label '{label}' will not be added.",
            label,
        )


def parse_user_data(entry: ManualEntry, db_data: DatabaseData) -> dict[str, Any]:
    """Validate ``entry`` and queue its record in ``db_data``.

    A record that duplicates a known one is not queued again. Returns the
    record built from the entry.
    """
    validate_input(
        entry.label,
        entry.issuer,
        entry.secret,
        entry.digits,
        entry.period,
        entry.period_active,
        entry.counter,
        entry.counter_active,
    )
    obj = build_json_obj(
        entry.otp_type,
        entry.label,
        entry.issuer,
        entry.secret,
        _strtoll(entry.digits),
        entry.algo,
        _strtoll(entry.period),
        _strtoll(entry.counter),
    )
    db_data.queue_object(obj)
    return obj


def steam_defaults() -> ManualEntry:
    """Return a form preset for a Steam account: TOTP, SHA1, 5 digits, 30 s."""
    return ManualEntry(
        issuer="Steam",
        digits="5",
        period="30",
        otp_type="TOTP",
        algo="SHA1",
        period_active=False,
        counter_active=False,
    )