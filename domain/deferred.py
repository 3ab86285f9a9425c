from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DeferredResult:
    """Settled value of a deferred-completion handle."""

    ok: bool
    payload: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def fulfilled(cls, payload: str) -> "DeferredResult":
        return cls(ok=True, payload=payload)

    @classmethod
    def rejected(cls, error: str) -> "DeferredResult":
        return cls(ok=False, error=error)
