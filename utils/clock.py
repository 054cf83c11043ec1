"""Clock capability injected into the session (milliseconds)."""
from __future__ import annotations
import time
from typing import Callable

Clock = Callable[[], float]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0
