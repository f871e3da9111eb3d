from datetime import datetime, timedelta

import pytest

from otpkeeper.accounts import (
    HOTP_RATE_LIMIT_IN_SEC,
    AccountList,
    Column,
)


def _records():
    return [
        {"type": "TOTP", "label": "alpha", "issuer": "one", "period": 30},
        {"type": "HOTP", "label": "beta", "issuer": "two", "counter": 5},
        {"type": "TOTP", "label": "gamma", "issuer": "three", "period": 60},
    ]


def test_default_search_column_skips_type_column():
    accounts = AccountList.from_json(_records())
    accounts.search_column = 0
    assert accounts.tree_search_column == Column.TYPE + 1


def test_from_json_builds_rows_in_order():
    accounts = AccountList.from_json(_records())
    assert [row.label for row in accounts] == ["alpha", "beta", "gamma"]
    assert [row.position_in_db for row in accounts] == [0, 1, 2]
    assert accounts[0].period == 30
    assert accounts[1].period == 0
    assert accounts[1].type == "HOTP"
    assert all(row.otp == "" and not row.updated for row in accounts)


def test_reload_replaces_rows():
    accounts = AccountList.from_json(_records())
    accounts.reload([{"type": "TOTP", "label": "solo", "issuer": "", "period": 30}])
    assert len(accounts) == 1
    assert accounts[0].label == "solo"


def test_delete_row_removes_record_and_shifts_positions():
    data = _records()
    accounts = AccountList.from_json(data)
    removed = accounts.delete_row(1, data)
    assert removed["label"] == "beta"
    assert [obj["label"] for obj in data] == ["alpha", "gamma"]
    assert [row.label for row in accounts] == ["alpha", "gamma"]
    assert [row.position_in_db for row in accounts] == [0, 1]


def test_delete_row_out_of_range():
    data = _records()
    accounts = AccountList.from_json(data)
    with pytest.raises(IndexError):
        accounts.delete_row(7, data)


def test_hide_all_otps_clears_long_values_only():
    accounts = AccountList.from_json(_records())
    accounts[0].otp = "123456"
    accounts[0].validity = 20
    accounts[0].updated = True
    accounts[1].otp = "1234"
    accounts.hide_all_otps()
    assert accounts[0].otp == ""
    assert accounts[0].validity == 0
    assert accounts[0].updated is False
    assert accounts[1].otp == "1234"


def test_needs_refresh_when_unset():
    accounts = AccountList.from_json(_records())
    now = datetime(2024, 1, 1, 12, 0, 0)
    assert accounts.needs_refresh(0, now, now) is True


def test_totp_shown_is_not_refreshed():
    accounts = AccountList.from_json(_records())
    accounts[0].otp = "123456"
    now = datetime(2024, 1, 1, 12, 0, 0)
    assert accounts.needs_refresh(0, now, now - timedelta(hours=1)) is False


def test_hotp_rate_limit():
    accounts = AccountList.from_json(_records())
    accounts[1].otp = "123456"
    now = datetime(2024, 1, 1, 12, 0, 0)
    recent = now - timedelta(seconds=HOTP_RATE_LIMIT_IN_SEC - 1)
    old = now - timedelta(seconds=HOTP_RATE_LIMIT_IN_SEC)
    assert accounts.needs_refresh(1, now, recent) is False
    assert accounts.needs_refresh(1, now, old) is True
    assert accounts.needs_refresh(1, now, None) is True


def test_tree_search_column_is_offset():
    accounts = AccountList.from_json(_records())
    accounts.search_column = 1
    assert accounts.tree_search_column == Column.ACC_ISSUER