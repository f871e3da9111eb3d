"""Error domains and the exception raised across the package."""

from __future__ import annotations

import enum


class ErrorDomain(enum.Enum):
    """Categories of failure, each with its numeric code."""

    MISSING_FILE = ("missing_file", 10)
    BAD_TAG = ("bad_tag", 11)
    KEY_DERIVATION = ("key_deriv", 12)
    FILE_TOO_BIG = ("file_too_big", 13)
    GENERIC = ("generic_error", 14)
    MEMLOCK = ("memlock_error", 15)

    @property
    def quark(self) -> str:
        """The domain's identifying name."""
        return self.value[0]

    @property
    def code(self) -> int:
        """The domain's numeric error code."""
        return self.value[1]


class OtpClientError(Exception):
    """An error belonging to one of the known error domains."""

    def __init__(self, domain: ErrorDomain, message: str) -> None:
        super().__init__(message)
        self.domain = domain
        self.message = message

    @property
    def code(self) -> int:
        return self.domain.code

    def matches(self, domain: ErrorDomain) -> bool:
        """Return True if this error belongs to ``domain``."""
        return self.domain is domain

    def __str__(self) -> str:
        return self.message