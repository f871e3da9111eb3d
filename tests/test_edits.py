import pytest

from otpkeeper.common import build_json_obj
from otpkeeper.data import DatabaseData, OtpEntry
from otpkeeper.edits import edit_entry, queue_otps
from otpkeeper.entries import InvalidInputError


def _db():
    return DatabaseData(
        json_data=[
            build_json_obj("TOTP", "alice", "Acme", "secret", 6, "SHA1", 30, 0),
            build_json_obj("HOTP", "bob", "Corp", "secret", 6, "SHA1", 0, 3),
        ]
    )


def _otp(name, otp_type="TOTP"):
    return OtpEntry(
        type=otp_type,
        algo="SHA1",
        digits=6,
        account_name=name,
        issuer="Acme",
        secret="secret",
        period=30,
        counter=1,
    )


def test_edit_updates_record():
    db = _db()
    obj = edit_entry(db, 1, "carol", "Other")
    assert db.json_data[1]["label"] == "carol"
    assert db.json_data[1]["issuer"] == "Other"
    assert obj is db.json_data[1]
    assert db.json_data[0]["label"] == "alice"


def test_edit_rejects_non_ascii():
    db = _db()
    with pytest.raises(InvalidInputError) as info:
        edit_entry(db, 0, "caf\u00e9", "Acme")
    assert info.value.message == "Only ASCII characters are supported at the moment."
    assert db.json_data[0]["label"] == "alice"


def test_edit_rejects_non_ascii_issuer():
    db = _db()
    with pytest.raises(InvalidInputError):
        edit_entry(db, 0, "alice", "\u00c5ngstr\u00f6m")


def test_edit_rejects_empty_label():
    db = _db()
    with pytest.raises(InvalidInputError) as info:
        edit_entry(db, 0, "", "Acme")
    assert info.value.message == "Label must not be empty"


def test_edit_bad_row():
    db = _db()
    with pytest.raises(IndexError):
        edit_entry(db, 5, "x", "y")
    with pytest.raises(IndexError):
        edit_entry(db, -1, "x", "y")


def test_queue_otps_adds_records():
    db = DatabaseData()
    otps = [_otp("alice"), _otp("bob", "HOTP")]
    queued = queue_otps(otps, db)
    assert queued == [o.to_json() for o in otps]
    assert db.data_to_add == queued
    assert "period" in queued[0]
    assert "counter" in queued[1]


def test_queue_otps_skips_duplicates():
    db = DatabaseData()
    queued = queue_otps([_otp("alice"), _otp("alice"), _otp("bob")], db)
    assert [obj["label"] for obj in queued] == ["alice", "bob"]
    assert len(db.objects_hash) == len(db.data_to_add)
    again = queue_otps([_otp("alice")], db)
    assert again == []