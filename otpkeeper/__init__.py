"""Account records, input validation, locking and settings logic for an OTP authenticator."""

__version__ = "0.1.0"
__all__ = ["accounts", "common", "data", "edits", "entries", "errors", "lock", "settings"]