"""Notifier boundary: permission-gated delivery of titled messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

from ..errors import NotificationUnavailable
from ..logging_config import get_logger

logger = get_logger(__name__)


class Notifier(Protocol):
    """Anything that can show a titled message to the user."""

    def notify(self, title: str, *, body: str) -> None:  # pragma: no cover - interface
        ...


class Permission(str, Enum):
    GRANTED = "granted"
    DENIED = "denied"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class Notification:
    title: str
    body: str


class PermissionGatedNotifier:
    """Deliver only once the platform grants notification permission.

    With permission still undecided the first notification triggers
    ``request_permission``; the message is delivered only if the answer is
    granted. A denied permission drops every message.
    """

    def __init__(
        self,
        deliver: Callable[[str, str], None],
        *,
        permission: Permission = Permission.DEFAULT,
        request_permission: Optional[Callable[[], Permission | str]] = None,
    ):
        self._deliver = deliver
        self._request_permission = request_permission
        self.permission = Permission(permission)

    def notify(self, title: str, *, body: str) -> None:
        if self.permission is Permission.DEFAULT and self._request_permission is not None:
            self.permission = Permission(self._request_permission())
            logger.debug("Notification permission resolved", extra={"permission": self.permission.value})

        if self.permission is not Permission.GRANTED:
            raise NotificationUnavailable(f"Notification permission is {self.permission.value}")
        self._deliver(title, body)


class RecordingNotifier:
    """Keep every notification in memory; used by tests and headless hosts."""

    def __init__(self) -> None:
        self.sent: list[Notification] = []

    def notify(self, title: str, *, body: str) -> None:
        self.sent.append(Notification(title=title, body=body))

    @property
    def titles(self) -> list[str]:
        return [n.title for n in self.sent]

    def clear(self) -> None:
        self.sent.clear()


class LoggingNotifier:
    """Write notifications to the ``habitkeeper`` log instead of a screen."""

    def notify(self, title: str, *, body: str) -> None:
        logger.info(title, extra={"body": body})


__all__ = [
    "LoggingNotifier",
    "Notification",
    "Notifier",
    "Permission",
    "PermissionGatedNotifier",
    "RecordingNotifier",
]
