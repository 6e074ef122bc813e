"""Notification region for generation results.

Two kinds of notices exist:

- **error**: replaces whatever the region shows and stays until replaced
- **success**: is prepended above existing notices, starts fading after
  ``success_seconds`` and disappears ``fade_seconds`` later

The browser dismisses success notices on its own: each one is rendered with a
fade animation whose delay is the time left before it starts fading, and the
page script removes the element when that animation ends. The delay is
recomputed (and goes negative once fading has begun) on every render, so a
re-render never restarts the countdown. On the server, expiry is evaluated
against a monotonic clock, so later renders no longer include the notice.
"""

import html
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

ERROR = "error"
SUCCESS = "success"


@dataclass
class Notification:
    """A single notice in the region."""

    kind: str
    message: str
    shown_at: float

    @property
    def css_class(self) -> str:
        return f"{self.kind}-message"

    @property
    def icon(self) -> str:
        return "⚠️" if self.kind == ERROR else "✅"


@dataclass
class NotificationArea:
    """Ordered notices, newest success first.

    Attributes
    ----------
    success_seconds : float
        Time a success notice stays fully visible
    fade_seconds : float
        Opacity transition before a success notice is removed
    clock : Callable[[], float]
        Monotonic time source in seconds
    entries : list[Notification]
        Current notices, top to bottom
    """

    success_seconds: float = 5.0
    fade_seconds: float = 0.5
    clock: Callable[[], float] = time.monotonic
    entries: list[Notification] = field(default_factory=list)

    def show_error(self, message: str) -> None:
        """Replace the region content with a single persistent error notice."""
        self.entries = [Notification(ERROR, message, self.clock())]

    def show_success(self, message: str) -> None:
        """Prepend a success notice that dismisses itself."""
        self.entries.insert(0, Notification(SUCCESS, message, self.clock()))

    def clear(self) -> None:
        self.entries = []

    def fade_delay(self, notice: Notification, now: float) -> float:
        """Seconds until the notice starts fading (negative once it has begun)."""
        return notice.shown_at + self.success_seconds - now

    def is_expired(self, notice: Notification, now: float) -> bool:
        return notice.kind == SUCCESS and now >= self.removal_time(notice)

    def removal_time(self, notice: Notification) -> float:
        """Clock time at which a success notice leaves the region."""
        return notice.shown_at + self.success_seconds + self.fade_seconds

    def visible(self, now: float | None = None) -> list[Notification]:
        """Drop expired notices and return the remaining ones."""
        now = self.clock() if now is None else now
        remaining = [n for n in self.entries if not self.is_expired(n, now)]
        if len(remaining) != len(self.entries):
            logger.debug(f"Dismissed {len(self.entries) - len(remaining)} notice(s)")
        self.entries = remaining
        return list(remaining)

    def render(self, now: float | None = None) -> str:
        """Render the region as HTML."""
        now = self.clock() if now is None else now
        parts = []
        for notice in self.visible(now):
            style = ""
            if notice.kind == SUCCESS:
                style = (
                    f' style="animation-delay: {self.fade_delay(notice, now):.3f}s; '
                    f'animation-duration: {self.fade_seconds:.3f}s"'
                )
            parts.append(
                f'<div class="{notice.css_class}"{style}>'
                f"{notice.icon} {html.escape(notice.message)}</div>"
            )
        return "".join(parts)
