"""Per-session values shared with the log formatter."""

from contextvars import ContextVar

# Human-readable id stamped on every log line of one app session
session_id: ContextVar[str | None] = ContextVar("session_id", default=None)


def current_session_id() -> str:
    return session_id.get() or "---"
