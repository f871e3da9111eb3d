"""Locking the application on demand, on screen lock and on inactivity."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta

# (interface, object path, signal name) of the screen savers whose lock
# signals cause the application to lock.
SCREENSAVER_SIGNALS: tuple[tuple[str, str, str], ...] = (
    ("org.cinnamon.ScreenSaver", "/org/cinnamon/ScreenSaver", "ActiveChanged"),
    ("org.freedesktop.ScreenSaver", "/org/freedesktop/ScreenSaver", "ActiveChanged"),
    ("org.gnome.ScreenSaver", "/org/gnome/ScreenSaver", "ActiveChanged"),
    ("com.canonical.Unity.Session", "/com/canonical/Unity/Session", "Locked"),
)


@dataclass
class LockState:
    """Whether the application is locked, and the rules that lock it."""

    auto_lock: bool = False
    inactivity_timeout: int = 0
    app_locked: bool = False
    last_user_activity: datetime | None = None
    on_lock: Callable[[], None] | None = field(default=None, repr=False)

    def lock(self) -> None:
        """Lock the application and run the lock hook, if any."""
        self.app_locked = True
        if self.on_lock is not None:
            self.on_lock()

    def try_unlock(
        self, password: str, key: str | None, now: datetime | None = None
    ) -> bool:
        """Unlock if ``password`` equals the database ``key``.

        On success the activity clock restarts at ``now``. Returns whether
        the application was unlocked.
        """
        if password != key:
            return False
        self.app_locked = False
        self.last_user_activity = now if now is not None else datetime.now()
        return True

    def on_screen_lock(self, is_locked: bool) -> bool:
        """React to the screen being locked; return True if the app locked."""
        if is_locked and not self.app_locked and self.auto_lock:
            self.lock()
            return True
        return False

    def check_inactivity(self, now: datetime | None = None) -> bool:
        """Lock after the inactivity timeout has passed.

        Returns False once the application has been locked by this check,
        meaning polling should stop, and True otherwise.
        """
        if self.inactivity_timeout <= 0 or self.app_locked:
            return True
        if self.last_user_activity is None:
            return True
        now = now if now is not None else datetime.now()
        if now - self.last_user_activity >= timedelta(seconds=self.inactivity_timeout):
            self.lock()
            return False
        return True