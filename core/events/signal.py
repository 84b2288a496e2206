from __future__ import annotations

import weakref
from threading import RLock
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")

Callback = Callable[[T], None]
_Slot = Union[Callable[..., None], "weakref.WeakMethod"]


def _make_slot(callback: Callable[..., None]) -> _Slot:
    # Bound methods are held weakly so a discarded view unsubscribes itself.
    if hasattr(callback, "__self__") and hasattr(callback, "__func__"):
        return weakref.WeakMethod(callback)
    return callback


def _resolve(slot: _Slot):
    if isinstance(slot, weakref.WeakMethod):
        return slot()
    return slot


class Signal(Generic[T]):
    """
    Synchronous observer list for domain events.

    Subscribers run in connection order on the emitting thread. Bound methods
    are referenced weakly; plain functions and other callables strongly.
    """

    def __init__(self) -> None:
        self._slots: list[_Slot] = []
        self._lock: RLock = RLock()

    def _index_of(self, callback: Callable[[T], None]) -> int:
        for index, slot in enumerate(self._slots):
            target = _resolve(slot)
            if target is callback:
                return index
            if target is None or isinstance(target, weakref.ProxyTypes):
                continue
            if target == callback:
                return index
        return -1

    def connect(self, callback: Callable[[T], None]) -> None:
        with self._lock:
            if self._index_of(callback) < 0:
                self._slots.append(_make_slot(callback))

    def disconnect(self, callback: Callable[[T], None]) -> None:
        with self._lock:
            index = self._index_of(callback)
            if index >= 0:
                del self._slots[index]

    def emit(self, payload: T) -> None:
        with self._lock:
            slots = list(self._slots)

        stale: list[_Slot] = []
        for slot in slots:
            callback = _resolve(slot)
            if callback is None:
                stale.append(slot)
                continue
            try:
                callback(payload)
            except ReferenceError:
                # weakref.proxy subscriber whose referent is gone
                stale.append(slot)

        if stale:
            with self._lock:
                self._slots = [slot for slot in self._slots if not any(slot is s for s in stale)]

    def subscriber_count(self) -> int:
        with self._lock:
            return sum(1 for slot in self._slots if _resolve(slot) is not None)
