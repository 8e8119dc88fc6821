"""Ranking of the input values: a quicksort and a string-keyed hash table."""

from __future__ import annotations

from typing import Iterable, Optional

FNV_OFFSET = 2166136261
FNV_PRIME = 16777619
INITIAL_CAPACITY = 16
_MASK = 0xFFFFFFFF


def fnv1a_hash(key: str) -> int:
    """The 32-bit FNV-1a hash of the bytes of ``key``."""
    result = FNV_OFFSET
    for byte in key.encode():
        result ^= byte
        result = (result * FNV_PRIME) & _MASK
    return result


def _partition(array: list[int], left: int, right: int) -> int:
    pivot = array[right]
    pivot_index = right
    right -= 1
    while True:
        while array[left] < pivot:
            left += 1
        while right and array[right] > pivot:
            right -= 1
        if left >= right:
            break
        array[left], array[right] = array[right], array[left]
        left += 1
    array[left], array[pivot_index] = array[pivot_index], array[left]
    return left


def quicksort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, leaving the input untouched."""
    array = list(values)
    pending = [(0, len(array) - 1)]
    while pending:
        left, right = pending.pop()
        if right <= left:
            continue
        pivot_index = _partition(array, left, right)
        pending.append((left, pivot_index - 1))
        pending.append((pivot_index + 1, right))
    return array


class _RankTable:
    """Open-addressing table from decimal strings to ranks."""

    def __init__(self, capacity: int) -> None:
        size = capacity if capacity > 0 else INITIAL_CAPACITY
        self._slots: list[Optional[tuple[str, int]]] = [None] * size
        self._count = 0

    @property
    def _capacity(self) -> int:
        return len(self._slots)

    def _step(self, slot: int) -> int:
        slot += 1
        return 0 if slot == self._capacity - 1 else slot

    def _expand(self) -> None:
        entries = [entry for entry in self._slots if entry is not None]
        self._slots = [None] * (self._capacity * 2)
        self._count = 0
        for key, value in entries:
            self._place(key, value)

    def _place(self, key: str, value: int) -> bool:
        slot = fnv1a_hash(key) % self._capacity
        for _ in range(self._capacity):
            if self._slots[slot] is None:
                self._slots[slot] = (key, value)
                self._count += 1
                return True
            slot = self._step(slot)
        return False

    def insert(self, key: str, value: int) -> None:
        if self._count > self._capacity // 2:
            self._expand()
        while not self._place(key, value):
            self._expand()

    def get(self, key: str) -> int:
        slot = fnv1a_hash(key) % self._capacity
        for _ in range(self._capacity - 1):
            entry = self._slots[slot]
            if entry is not None and entry[0] == key:
                return entry[1]
            slot = self._step(slot)
        raise KeyError(key)


def assign_ranks(values: Iterable[int]) -> list[int]:
    """For each value, its position in the sorted order of all the values."""
    values = list(values)
    table = _RankTable(2 * len(values))
    for rank, value in enumerate(quicksort(values)):
        table.insert(str(value), rank)
    return [table.get(str(value)) for value in values]