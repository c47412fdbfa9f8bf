"""
smnotify exception hierarchy.

Every handler failure inherits from :class:`SmNotifyError`.  Remote
failures keep the raw transport response so callers can inspect the
status code without re-issuing the request.
"""

from __future__ import annotations

from typing import Any


# ── Base ──────────────────────────────────────────────────────────────
class SmNotifyError(Exception):
    """Root exception for all smnotify errors."""


# ── Session ───────────────────────────────────────────────────────────
class ClientSessionError(SmNotifyError):
    """Authenticator or SDK client could not be constructed."""


# ── Remote calls ──────────────────────────────────────────────────────
class RemoteCallError(SmNotifyError):
    """A call against the Secrets Manager API failed.

    Attributes:
        operation: SDK method name that failed.
        response: Transport response, or ``None`` if none was received.
        status_code: HTTP status code, when known.
    """

    def __init__(
        self,
        operation: str,
        error: BaseException,
        response: Any = None,
        status_code: int | None = None,
    ) -> None:
        self.operation = operation
        self.response = response
        self.status_code = status_code
        super().__init__(f"{operation} failed {error}\n{response}")


# ── Local state ───────────────────────────────────────────────────────
class StateError(SmNotifyError):
    """A field could not be written to the resource state."""


class InvalidIdentifierError(SmNotifyError):
    """The composite ``region/instance_id`` identifier is malformed."""
