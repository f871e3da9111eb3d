"""Helpers shared by the database and user-interface code."""

from __future__ import annotations

import hashlib
import json
import os
from typing import Any

UI_PARTIAL_PATH = "share/otpclient/otpclient.ui"
SHORTCUTS_PARTIAL_PATH = "share/otpclient/shortcuts.ui"
DEFAULT_INSTALL_PREFIX = "/usr"
FLATPAK_PREFIX = "/app"


def build_json_obj(
    type: str,
    label: str,
    issuer: str,
    secret: str,
    digits: int,
    algo: str,
    period: int,
    counter: int,
) -> dict[str, Any]:
    """Build the database record for one account.

    TOTP records carry ``period``; every other type carries ``counter``.
    """
    obj: dict[str, Any] = {
        "type": type,
        "label": label,
        "issuer": issuer,
        "secret": secret,
        "digits": digits,
        "algo": algo,
    }
    if type.upper() == "TOTP":
        obj["period"] = period
    else:
        obj["counter"] = counter
    return obj


def object_hash(obj: dict[str, Any]) -> int:
    """Return a stable unsigned 32-bit hash of a record's content."""
    canonical = json.dumps(obj, sort_keys=True, separators=(",", ":"))
    digest = hashlib.blake2b(canonical.encode("utf-8"), digest_size=4).digest()
    return int.from_bytes(digest, "big")


def get_file_size(path: str | os.PathLike[str]) -> int:
    """Return the size of ``path`` in bytes without following symlinks.

    Raises OSError if the file cannot be queried.
    """
    return os.lstat(path).st_size


def builder_path(partial_path: str, prefix: str = DEFAULT_INSTALL_PREFIX) -> str:
    """Join an installation prefix and a path relative to it."""
    return f"{prefix}/{partial_path}"