"""Write-once, read-many cell for process-wide lazily built state.

The loaded configuration and the merged translation collection are each
built at most once per process. The first caller performs the build while
holding the cell's lock; concurrent first callers block until it finishes
and then observe the same object. Later callers take the lock-free fast
path.

A build that raises leaves the cell empty, so the next caller runs the
factory again and sees the same error for the same inputs.

Python 3.13+.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

__all__ = ["OnceCell"]

_UNSET = object()


class OnceCell[T]:
    """Lazily initialized, write-once value guarded by a lock.

    Uses double-checked locking: an unlocked read for the common
    already-initialized case, and the lock only while the value is built.

    Example:
        >>> cell: OnceCell[dict[str, int]] = OnceCell()
        >>> cell.get_or_init(lambda: {"a": 1})
        {'a': 1}
        >>> cell.get_or_init(lambda: {"b": 2})  # factory not called again
        {'a': 1}
    """

    __slots__ = ("_lock", "_value")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: object = _UNSET

    @property
    def is_initialized(self) -> bool:
        """True once a value has been stored."""
        return self._value is not _UNSET

    def get(self) -> T | None:
        """Return the stored value, or None if not yet initialized."""
        value = self._value
        if value is _UNSET:
            return None
        return value  # type: ignore[return-value]

    def get_or_init(self, factory: Callable[[], T]) -> T:
        """Return the stored value, building it with factory on first use.

        Args:
            factory: Zero-argument callable producing the value. Called at
                most once per successful initialization.

        Returns:
            The single shared value

        Raises:
            Exception: Whatever factory raises; the cell stays empty.
        """
        value = self._value
        if value is not _UNSET:
            return value  # type: ignore[return-value]

        with self._lock:
            # Another thread may have finished the build while we waited.
            if self._value is _UNSET:
                self._value = factory()
            return self._value  # type: ignore[return-value]

    def reset(self) -> None:
        """Forget the stored value. Intended for test isolation only."""
        with self._lock:
            self._value = _UNSET
