"""Result values for callers that prefer branching over ``try``/``except``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .exceptions import ErrorKind, error_kind


@dataclass
class OpResult:
    """Outcome of a copy or move operation run through :func:`attempt`.

    Attributes:
        dst: Final destination path on success, else ``None``.
        error: The raised :class:`OSError` on failure, else ``None``.
    """
    dst: str | None = None
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        """``True`` if the operation succeeded."""
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """:class:`ErrorKind` of the failure, or ``None`` on success."""
        if self.error is None:
            return None
        return error_kind(self.error)


def attempt(func: Callable[..., Any], *args: Any, **kwargs: Any) -> OpResult:
    """Call ``func(*args, **kwargs)`` and capture the outcome.

    Any :class:`OSError` (which includes every fileshift error) is stored
    in the result; other exceptions propagate.  A ``None`` return (as from
    :func:`~fileshift.copy_mode`) gives a successful result with no *dst*.
    """
    try:
        dst = func(*args, **kwargs)
    except OSError as exc:
        return OpResult(error=exc)
    return OpResult(dst=dst)
