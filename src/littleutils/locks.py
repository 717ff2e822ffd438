"""Run a callable while holding a lock.

``use_mutex`` works with any lock usable as a context manager
(``threading.Lock``, ``threading.RLock``, ...). ``use_read`` and ``use_write``
take the shared or exclusive side of a :class:`ReadWriteLock`.

All helpers block until the lock is acquired (no timeout, no cancellation)
and release it on every exit path, including when the callable raises.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import Any, TypeVar

T = TypeVar("T")


class ReadWriteLock:
    """Many concurrent readers or a single writer.

    Once a writer is waiting, new readers block until it has run, so a steady
    stream of readers cannot starve writers. The lock is not reentrant.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    # --- Shared side ---

    def acquire_read(self) -> None:
        """Block until a shared (read) hold is granted."""
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        """Release a shared hold.

        Raises:
            RuntimeError: If no read hold is outstanding.
        """
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("release_read() called without a read hold")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    # --- Exclusive side ---

    def acquire_write(self) -> None:
        """Block until the exclusive (write) hold is granted."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        """Release the exclusive hold.

        Raises:
            RuntimeError: If the write hold is not taken.
        """
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() called without the write hold")
            self._writer = False
            self._cond.notify_all()

    # --- Context managers ---

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        """Hold the shared side for the duration of a ``with`` block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        """Hold the exclusive side for the duration of a ``with`` block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


def use_mutex(mutex: AbstractContextManager[Any], function: Callable[[], T]) -> T:
    """Call ``function`` while holding ``mutex`` and return its result."""
    with mutex:
        return function()


def use_read(lock: ReadWriteLock, function: Callable[[], T]) -> T:
    """Call ``function`` while holding the read side of ``lock``."""
    with lock.read_lock():
        return function()


def use_write(lock: ReadWriteLock, function: Callable[[], T]) -> T:
    """Call ``function`` while holding the write side of ``lock``."""
    with lock.write_lock():
        return function()
