from __future__ import annotations


class BackendError(Exception):
    """Raised by a drawing backend when a primitive cannot be rendered."""


class DrawError(Exception):
    """A drawing failure surfaced to chart callers.

    Wraps the backend exception that caused it; whatever was drawn before the
    failure stays on the target.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class TargetConsumedError(RuntimeError):
    """Raised when a mesh configuration is drawn a second time."""
