"""User preferences stored in the configuration file."""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ErrorDomain, OtpClientError

CONFIG_FILE_NAME = "otpclient.cfg"
SECTION = "config"

_TRUE_WORDS = {"true", "1"}
_FALSE_WORDS = {"false", "0"}


def default_config_path(flatpak: bool = False) -> Path:
    """Return where the configuration file lives.

    Sandboxed installs keep it in the user data directory, others in the
    user configuration directory.
    """
    if flatpak:
        base = os.environ.get("XDG_DATA_HOME") or os.path.join(
            os.path.expanduser("~"), ".local", "share"
        )
    else:
        base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(
            os.path.expanduser("~"), ".config"
        )
    return Path(base) / CONFIG_FILE_NAME


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # type: ignore[assignment, method-assign]
    return parser


def _read(path: str | os.PathLike[str]) -> configparser.ConfigParser:
    parser = _new_parser()
    try:
        with open(path, encoding="utf-8") as handle:
            parser.read_file(handle)
    except FileNotFoundError as exc:
        raise OtpClientError(
            ErrorDomain.MISSING_FILE,
            f"Couldn't get data from config file: {exc.strerror}",
        ) from exc
    except (OSError, configparser.Error, UnicodeDecodeError) as exc:
        raise OtpClientError(
            ErrorDomain.GENERIC, f"Couldn't get data from config file: {exc}"
        ) from exc
    return parser


def _get_bool(parser: configparser.ConfigParser, key: str) -> bool:
    value = parser.get(SECTION, key, fallback=None)
    if value is None:
        return False
    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    return False if word in _FALSE_WORDS else False


def _get_int(parser: configparser.ConfigParser, key: str) -> int:
    value = parser.get(SECTION, key, fallback=None)
    if value is None:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


@dataclass
class Settings:
    """The preferences the application reads at start and on demand.

    Missing or unreadable keys fall back to False and 0.
    """

    show_next_otp: bool = False
    disable_notifications: bool = False
    search_column: int = 0
    auto_lock: bool = False
    inactivity_timeout: int = 0

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Settings:
        """Read the preferences from ``path``.

        Raises OtpClientError if the file cannot be read or parsed.
        """
        parser = _read(path)
        return cls(
            show_next_otp=_get_bool(parser, "show_next_otp"),
            disable_notifications=_get_bool(parser, "notifications"),
            search_column=_get_int(parser, "search_column"),
            auto_lock=_get_bool(parser, "auto_lock"),
            inactivity_timeout=_get_int(parser, "inactivity_timeout"),
        )

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the preferences to ``path``, keeping any other keys there."""
        try:
            parser = _read(path)
        except OtpClientError as exc:
            if not exc.matches(ErrorDomain.MISSING_FILE):
                raise
            parser = _new_parser()
        if not parser.has_section(SECTION):
            parser.add_section(SECTION)
        values = {
            "show_next_otp": "true" if self.show_next_otp else "false",
            "notifications": "true" if self.disable_notifications else "false",
            "search_column": str(self.search_column),
            "auto_lock": "true" if self.auto_lock else "false",
            "inactivity_timeout": str(self.inactivity_timeout),
        }
        for key, value in values.items():
            parser.set(SECTION, key, value)
        with open(path, "w", encoding="utf-8") as handle:
            parser.write(handle, space_around_delimiters=False)