"""The list of accounts shown to the user, one row per database record."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

HOTP_RATE_LIMIT_IN_SEC = 3
NOTIFICATION_ID = "otp-copied"


class Column(enum.IntEnum):
    """Columns of the account model, in model order."""

    TYPE = 0
    ACC_LABEL = 1
    ACC_ISSUER = 2
    OTP = 3
    VALIDITY = 4
    PERIOD = 5
    UPDATED = 6
    LESS_THAN_A_MINUTE = 7
    POSITION_IN_DB = 8


NUM_COLUMNS = len(Column)

# Column titles as shown to the user; the hidden ones are flagged False.
COLUMN_TITLES: tuple[tuple[Column, str, bool], ...] = (
    (Column.TYPE, "Type", True),
    (Column.ACC_LABEL, "Account", True),
    (Column.ACC_ISSUER, "Issuer", True),
    (Column.OTP, "OTP Value", True),
    (Column.VALIDITY, "Validity", True),
    (Column.PERIOD, "Period", False),
    (Column.UPDATED, "Updated", False),
    (Column.LESS_THAN_A_MINUTE, "Less Than a Minute", False),
    (Column.POSITION_IN_DB, "Position in Database", False),
)


def _int_field(obj: dict[str, Any], key: str) -> int:
    value = obj.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def _str_field(obj: dict[str, Any], key: str) -> str | None:
    value = obj.get(key)
    return value if isinstance(value, str) else None


@dataclass
class AccountRow:
    """One displayed account."""

    type: str | None
    label: str | None
    issuer: str | None
    position_in_db: int
    period: int = 0
    otp: str = ""
    validity: int = 0
    updated: bool = False
    less_than_a_minute: bool = False

    @classmethod
    def from_json(cls, obj: dict[str, Any], position: int) -> AccountRow:
        """Build a row from a database record at ``position``."""
        return cls(
            type=_str_field(obj, "type"),
            label=_str_field(obj, "label"),
            issuer=_str_field(obj, "issuer"),
            position_in_db=position,
            period=_int_field(obj, "period"),
        )


@dataclass
class AccountList:
    """The rows of the account view, kept in step with the database."""

    rows: list[AccountRow] = field(default_factory=list)
    search_column: int = 0

    @classmethod
    def from_json(cls, json_data: list[dict[str, Any]]) -> AccountList:
        """Build the list from the database records."""
        accounts = cls()
        accounts.reload(json_data)
        return accounts

    @property
    def tree_search_column(self) -> int:
        """Model column used for searching (label is setting 0)."""
        return self.search_column + 1

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[AccountRow]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> AccountRow:
        return self.rows[index]

    def reload(self, json_data: list[dict[str, Any]]) -> None:
        """Discard all rows and rebuild them from the database records."""
        self.rows = [
            AccountRow.from_json(obj, position)
            for position, obj in enumerate(json_data)
        ]

    def delete_row(self, index: int, json_data: list[dict[str, Any]]) -> dict[str, Any]:
        """Remove the row at ``index`` and its record from ``json_data``.

        Rows that pointed past the removed record are shifted down by one.
        Returns the removed record.
        """
        row = self.rows[index]
        removed = json_data.pop(row.position_in_db)
        del self.rows[index]
        for other in self.rows:
            if other.position_in_db > row.position_in_db:
                other.position_in_db -= 1
        return removed

    def hide_all_otps(self) -> None:
        """Clear every displayed OTP value."""
        for row in self.rows:
            if row.otp and len(row.otp) > 4:
                row.otp = ""
                row.validity = 0
                row.updated = False
                row.less_than_a_minute = False

    def needs_refresh(
        self,
        index: int,
        now: datetime,
        last_hotp_update: datetime | None,
    ) -> bool:
        """Return True if the OTP of the selected row must be (re)generated.

        An unset value always needs generating; a shown HOTP is regenerated
        only once the rate limit since the last HOTP update has passed.
        """
        row = self.rows[index]
        if not row.otp or len(row.otp) <= 3:
            return True
        if (row.type or "").upper() != "HOTP":
            return False
        if last_hotp_update is None:
            return True
        return now - last_hotp_update >= timedelta(seconds=HOTP_RATE_LIMIT_IN_SEC)