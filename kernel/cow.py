"""
Copy-on-write shared ownership.

`CowPtr` lets several owners share one mutable value. Copying a handle is
O(1): both handles point to the same storage and the owner count grows.
Reading never copies. The first write through a handle whose storage is
shared clones the value, so no owner ever observes a mutation made
through another one.

    >>> a = CowPtr([1, 2])
    >>> b = a.copy()
    >>> b.write().append(3)
    >>> a.read(), b.read()
    ([1, 2], [1, 2, 3])

Owners release their share when they are garbage collected. The count
check and the clone are not atomic: handles must not be shared across
threads without an external lock.
"""

from __future__ import annotations

import logging
import weakref
from typing import Generic, Protocol, Self, TypeVar

logger = logging.getLogger(__name__)


class Copyable(Protocol):
    def copy(self) -> Self: ...


V = TypeVar("V", bound=Copyable)


class _Storage(Generic[V]):
    """Shared value and the number of handles referring to it."""

    __slots__ = ("value", "owners")

    def __init__(self, value: V) -> None:
        self.value = value
        self.owners = 0

    def acquire(self) -> None:
        self.owners += 1

    def release(self) -> None:
        self.owners -= 1
        if self.owners == 0:
            self.value = None  # type: ignore[assignment]


class CowPtr(Generic[V]):
    """
    Copy-on-write handle over a value exposing `copy()`.

    The value given to the constructor is adopted, not copied: the caller
    should not keep mutating it through other references.
    """

    __slots__ = ("_storage", "_finalizer", "__weakref__")

    def __init__(self, value: V) -> None:
        self._bind(_Storage(value))

    def _bind(self, storage: _Storage[V]) -> None:
        storage.acquire()
        self._storage = storage
        self._finalizer = weakref.finalize(self, storage.release)

    def _unbind(self) -> None:
        # Calling the finalizer releases the share exactly once
        self._finalizer()

    def read(self) -> V:
        return self._storage.value

    def write(self) -> V:
        """
        Exclusive access to the value, cloning the storage first when it is
        shared with other handles.
        """
        if self._storage.owners > 1:
            logger.debug(
                f"Duplicating storage shared by {self._storage.owners} owners"
            )
            clone = self._storage.value.copy()
            self._unbind()
            self._bind(_Storage(clone))
        return self._storage.value

    def use_count(self) -> int:
        return self._storage.owners

    def is_unique(self) -> bool:
        return self._storage.owners == 1

    def shares_storage_with(self, other: CowPtr) -> bool:
        return self._storage is other._storage

    def copy(self) -> CowPtr[V]:
        """O(1) copy sharing the storage."""
        handle = CowPtr.__new__(CowPtr)
        handle._bind(self._storage)
        return handle

    def __copy__(self) -> CowPtr[V]:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> CowPtr[V]:
        return CowPtr(self._storage.value.copy())

    def __repr__(self) -> str:
        return f"CowPtr({self._storage.value!r}, owners={self._storage.owners})"
