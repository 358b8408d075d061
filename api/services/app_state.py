# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Application message state.

Holds the loading flag, online flag and the transient error/success messages
shown by the app shell. Messages auto-clear after a delay measured by an
injected clock, so tests advance time instead of sleeping.
"""

import threading
import time
from dataclasses import dataclass
from typing import Optional, Protocol

ERROR_DISPLAY_SECONDS = 5.0
SUCCESS_DISPLAY_SECONDS = 3.0


class Clock(Protocol):
    """Source of monotonic time in seconds."""

    def now(self) -> float:
        ...


class MonotonicClock:
    """Clock backed by time.monotonic."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock:
    """Clock advanced explicitly by the caller."""

    def __init__(self, start: float = 0.0):
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("Cannot move a clock backwards")
        self._now += seconds


@dataclass(frozen=True)
class AppState:
    """Snapshot of the application message state."""
    is_loading: bool = False
    error: Optional[str] = None
    success: Optional[str] = None
    is_online: bool = True


class AppStateStore:
    """Thread-safe store for application message state."""

    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or MonotonicClock()
        self._lock = threading.Lock()
        self._is_loading = False
        self._is_online = True
        self._error: Optional[str] = None
        self._success: Optional[str] = None
        self._error_expires: Optional[float] = None
        self._success_expires: Optional[float] = None

    def _expire(self) -> None:
        now = self.clock.now()
        if self._error_expires is not None and now >= self._error_expires:
            self._error = None
            self._error_expires = None
        if self._success_expires is not None and now >= self._success_expires:
            self._success = None
            self._success_expires = None

    def snapshot(self) -> AppState:
        """Current state with expired messages cleared."""
        with self._lock:
            self._expire()
            return AppState(
                is_loading=self._is_loading,
                error=self._error,
                success=self._success,
                is_online=self._is_online
            )

    def set_loading(self, loading: bool) -> None:
        with self._lock:
            self._is_loading = loading

    def set_online_status(self, is_online: bool) -> None:
        with self._lock:
            self._is_online = is_online

    def set_error(self, error: Optional[str]) -> None:
        """Set a persistent error message, clearing any success message."""
        with self._lock:
            self._error = error
            self._error_expires = None
            self._success = None
            self._success_expires = None

    def set_success(self, success: Optional[str]) -> None:
        """Set a persistent success message, clearing any error message."""
        with self._lock:
            self._success = success
            self._success_expires = None
            self._error = None
            self._error_expires = None

    def clear_messages(self) -> None:
        with self._lock:
            self._error = None
            self._success = None
            self._error_expires = None
            self._success_expires = None

    def show_error(self, message: str, duration: float = ERROR_DISPLAY_SECONDS) -> None:
        """Show an error message that clears itself after `duration` seconds."""
        with self._lock:
            self._error = message
            self._error_expires = self.clock.now() + duration
            self._success = None
            self._success_expires = None

    def show_success(self, message: str, duration: float = SUCCESS_DISPLAY_SECONDS) -> None:
        """Show a success message that clears itself after `duration` seconds."""
        with self._lock:
            self._success = message
            self._success_expires = self.clock.now() + duration
            self._error = None
            self._error_expires = None
