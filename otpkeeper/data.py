"""In-memory state of the account database."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .common import build_json_obj, object_hash

logger = logging.getLogger(__name__)


@dataclass
class OtpEntry:
    """One account as read from an import source."""

    type: str
    algo: str
    digits: int
    account_name: str
    issuer: str
    secret: str
    period: int = 0
    counter: int = 0

    def to_json(self) -> dict[str, Any]:
        """Return the database record for this account."""
        return build_json_obj(
            self.type,
            self.account_name,
            self.issuer,
            self.secret,
            self.digits,
            self.algo,
            self.period,
            self.counter,
        )


@dataclass
class DatabaseData:
    """Decrypted database contents plus records waiting to be written."""

    db_path: str | None = None
    key: str | None = None
    json_data: list[dict[str, Any]] = field(default_factory=list)
    objects_hash: list[int] = field(default_factory=list)
    data_to_add: list[dict[str, Any]] = field(default_factory=list)
    max_file_size_from_memlock: int = 0
    last_hotp: str | None = None
    last_hotp_update: datetime | None = None

    def is_duplicate(self, obj: dict[str, Any]) -> bool:
        """Return True if a record with the same content is already known."""
        return object_hash(obj) in self.objects_hash

    def queue_object(self, obj: dict[str, Any]) -> bool:
        """Queue ``obj`` for addition unless it duplicates a known record.

        Returns True if the record was queued.
        """
        digest = object_hash(obj)
        if digest in self.objects_hash:
            logger.info("Duplicate element not added")
            return False
        self.objects_hash.append(digest)
        self.data_to_add.append(obj)
        return True