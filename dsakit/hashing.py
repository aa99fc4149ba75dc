"""Employee records in a hash table with linear probing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from os import PathLike


@dataclass(frozen=True)
class Employee:
    """One employee record."""

    id: int
    name: str
    salary: int


class TableFull(Exception):
    """Raised when inserting into a table whose slots are all taken."""


class EmployeeTable:
    """A fixed-size open-addressing table keyed by ``employee_id % size``.

    Each inserted record is appended to ``log_path`` when one is given.
    """

    def __init__(self, size: int = 100, log_path: str | PathLike[str] | None = None) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._slots: list[Employee | None] = [None] * size
        self._count = 0
        self._log_path = log_path

    def _probe(self, home: int) -> Iterator[int]:
        size = len(self._slots)
        return ((home + step) % size for step in range(size))

    def _home(self, employee_id: int) -> int:
        if employee_id < 0:
            raise ValueError("employee id cannot be negative")
        return employee_id % len(self._slots)

    def insert(self, employee_id: int, name: str, salary: int) -> int:
        """Store a record and return the slot it was placed in."""
        home = self._home(employee_id)
        if self._count == len(self._slots):
            raise TableFull("hash table is full")
        slot = next(i for i in self._probe(home) if self._slots[i] is None)
        employee = Employee(employee_id, name, salary)
        self._slots[slot] = employee
        self._count += 1
        if self._log_path is not None:
            with open(self._log_path, "a", encoding="utf-8") as log:
                log.write(f"\n {employee.id} \t {employee.name} \t {employee.salary}")
        return slot

    def slot_for(self, employee_id: int) -> int:
        """Return the slot holding ``employee_id``; raise KeyError if absent."""
        for slot in self._probe(self._home(employee_id)):
            employee = self._slots[slot]
            if employee is None:
                break
            if employee.id == employee_id:
                return slot
        raise KeyError(employee_id)

    def entries(self) -> list[tuple[int, Employee]]:
        """Return ``(slot, employee)`` pairs in slot order."""
        return [(slot, emp) for slot, emp in enumerate(self._slots) if emp is not None]

    def __len__(self) -> int:
        return self._count