"""
Reader/writer lock for the Subber sideline tracker.

Many request threads read the roster to render pages while a few write to
it. Readers share the lock; a writer holds it alone. Waiting writers block
new readers so a steady stream of page refreshes cannot starve a
substitution.
"""
import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """
    Writer-preferring reader/writer lock built on a threading.Condition.

    The lock is not reentrant: a thread holding it must not acquire it again.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._condition = threading.Condition(self._lock)
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        """Block until no writer holds or is waiting for the lock."""
        with self._condition:
            while self._writer or self._waiting_writers:
                self._condition.wait()
            self._readers += 1

    def release_read(self) -> None:
        """
        Release a shared hold.

        Raises:
            RuntimeError: If the lock is not held for reading
        """
        with self._condition:
            if self._readers == 0:
                raise RuntimeError("release_read() called without a read lock held")
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        """Block until no reader or writer holds the lock."""
        with self._condition:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._condition.wait()
            except BaseException:
                # readers may be parked behind this writer
                self._waiting_writers -= 1
                self._condition.notify_all()
                raise
            self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        """
        Release the exclusive hold.

        Raises:
            RuntimeError: If the lock is not held for writing
        """
        with self._condition:
            if not self._writer:
                raise RuntimeError("release_write() called without the write lock held")
            self._writer = False
            self._condition.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
