"""Editing existing accounts and queuing imported ones."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .data import DatabaseData, OtpEntry
from .entries import InvalidInputError


def edit_entry(
    db_data: DatabaseData, row: int, label: str, issuer: str
) -> dict[str, Any]:
    """Set a new label and issuer on the record at ``row``.

    Raises InvalidInputError if either value is not ASCII or the label is
    empty, and IndexError if ``row`` is not a record. Returns the updated
    record.
    """
    if not label.isascii() or not issuer.isascii():
        raise InvalidInputError(
            "Only ASCII characters are supported at the moment.", label
        )
    if not label:
        raise InvalidInputError("Label must not be empty", label)
    if row < 0:
        raise IndexError(f"row {row} is out of range")
    obj = db_data.json_data[row]
    obj["label"] = label
    obj["issuer"] = issuer
    return obj


def queue_otps(otps: Iterable[OtpEntry], db_data: DatabaseData) -> list[dict[str, Any]]:
    """Queue the records of imported accounts, skipping duplicates.

    Returns the records that were queued, in order.
    """
    queued = []
    for otp in otps:
        obj = otp.to_json()
        if db_data.queue_object(obj):
            queued.append(obj)
    return queued