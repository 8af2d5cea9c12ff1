"""Student records in a binary file indexed by a ten-slot hash table.

Collisions are resolved by linear probing, either with replacement (a record
sitting outside its home slot is moved on) or without it.
"""

from __future__ import annotations

import argparse
import struct
import sys
from dataclasses import dataclass, replace
from functools import partial
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

TABLE_SIZE = 10
NAME_SIZE = 20
RECORD_FORMAT = struct.Struct("<ii20s")
EMPTY_ROLLNO = -1


class TableFullError(Exception):
    """The hash table has no free slot for a record."""


@dataclass(frozen=True)
class StudentRecord:
    """One fixed-size record as stored in the data file."""

    rollno: int
    name: str
    marks: int

    def pack(self) -> bytes:
        raw_name = self.name.encode("utf-8")[: NAME_SIZE - 1]
        return RECORD_FORMAT.pack(self.rollno, self.marks, raw_name)

    @classmethod
    def unpack(cls, data: bytes) -> StudentRecord:
        rollno, marks, raw_name = RECORD_FORMAT.unpack(data)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(rollno, name, marks)


@dataclass(frozen=True)
class HashSlot:
    """A hash table entry: a roll number and its record position in the file."""

    rollno: Optional[int] = None
    pos: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.rollno is None


def _fit_name(name: str) -> str:
    return name.encode("utf-8")[: NAME_SIZE - 1].decode("utf-8", errors="replace")


class StudentFile:
    """Records appended to a binary file and found through the hash table."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._slots: list[HashSlot] = [HashSlot() for _ in range(TABLE_SIZE)]
        self._next_pos = self._stored_count()

    def _stored_count(self) -> int:
        if not self.path.exists():
            return 0
        return self.path.stat().st_size // RECORD_FORMAT.size

    def _free_after(self, home: int) -> Optional[int]:
        probes = ((home + step) % TABLE_SIZE for step in range(1, TABLE_SIZE))
        return next((i for i in probes if self._slots[i].is_empty), None)

    def _place(self, rollno: int, pos: int, replacement: bool) -> int:
        home = rollno % TABLE_SIZE
        entry = HashSlot(rollno, pos)
        occupant = self._slots[home]
        if occupant.is_empty:
            self._slots[home] = entry
            return home
        if replacement and occupant.rollno % TABLE_SIZE != home:
            free = self._free_after(home)
            if free is None:
                raise TableFullError("Hash table full. Displaced record cannot be placed!")
            self._slots[home] = entry
            self._slots[free] = occupant
            return home
        free = self._free_after(home)
        if free is None:
            raise TableFullError("Hash table full. Cannot insert record.")
        self._slots[free] = entry
        return free

    def insert(self, rollno: int, name: str, marks: int, replacement: bool = False) -> int:
        """Store a record and index it; return the slot it was given.

        The record is written to the file even when the table is full, in
        which case TableFullError is raised afterwards.
        """
        if rollno < 0:
            raise ValueError("roll number must not be negative")
        record = StudentRecord(rollno, _fit_name(name), marks)
        pos = self._next_pos
        try:
            return self._place(rollno, pos, replacement)
        finally:
            with self.path.open("ab") as handle:
                handle.write(record.pack())
            self._next_pos += 1

    def _find(self, rollno: int) -> HashSlot:
        for slot in self._slots:
            if slot.rollno == rollno:
                return slot
        raise KeyError(rollno)

    def _read_at(self, pos: int) -> StudentRecord:
        with self.path.open("rb") as handle:
            handle.seek(pos * RECORD_FORMAT.size)
            data = handle.read(RECORD_FORMAT.size)
        if len(data) < RECORD_FORMAT.size:
            raise ValueError(f"record at position {pos} is missing from {self.path}")
        return StudentRecord.unpack(data)

    def retrieve(self, rollno: int) -> StudentRecord:
        """Return the record for a roll number, raising KeyError if unknown."""
        return self._read_at(self._find(rollno).pos)

    def modify(self, rollno: int, name: str, marks: int) -> StudentRecord:
        """Rewrite the name and marks of a stored record and return it."""
        slot = self._find(rollno)
        updated = replace(self._read_at(slot.pos), name=_fit_name(name), marks=marks)
        with self.path.open("r+b") as handle:
            handle.seek(slot.pos * RECORD_FORMAT.size)
            handle.write(updated.pack())
        return updated

    def records(self) -> list[StudentRecord]:
        """All records in the file, in file order."""
        if not self.path.exists():
            return []
        found = []
        with self.path.open("rb") as handle:
            for data in iter(partial(handle.read, RECORD_FORMAT.size), b""):
                if len(data) < RECORD_FORMAT.size:
                    break
                record = StudentRecord.unpack(data)
                if record.rollno != EMPTY_ROLLNO:
                    found.append(record)
        return found

    def table(self) -> tuple[HashSlot, ...]:
        return tuple(self._slots)


def _format_all(store: StudentFile) -> str:
    lines = ["", "Hash Table:", "Index\tRoll No\tPosition"]
    for index, slot in enumerate(store.table()):
        rollno = EMPTY_ROLLNO if slot.rollno is None else slot.rollno
        pos = -1 if slot.pos is None else slot.pos
        lines.append(f"{index}\t{rollno}\t{pos}")
    lines += ["", "Stored Records:", "Roll No\tName\tMarks"]
    records = store.records()
    lines += [f"{r.rollno}\t{r.name}\t{r.marks}" for r in records]
    if not records:
        lines.append("No records found.")
    return "\n".join(lines)


_MENU = (
    "\nMenu:\n"
    "1. Insert with Replacement\n"
    "2. Insert without Replacement\n"
    "3. Modify Record\n"
    "4. Retrieve Record\n"
    "5. Display All Records\n"
    "6. Exit\n"
    "Enter choice: "
)


def _insert_loop(store: StudentFile, tokens: Iterator[str], replacement: bool) -> None:
    while True:
        print("\nEnter Roll No: ", end="")
        rollno = int(next(tokens))
        print("Enter Name: ", end="")
        name = next(tokens)
        print("Enter Marks: ", end="")
        marks = int(next(tokens))
        try:
            store.insert(rollno, name, marks, replacement)
        except TableFullError as exc:
            print(exc)
        print(_format_all(store))
        print("Add another record? (y/n): ", end="")
        if next(tokens) not in ("y", "Y"):
            return


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Hashed student record file.")
    parser.add_argument("path", nargs="?", default="student.txt")
    args = parser.parse_args(argv)
    store = StudentFile(args.path)
    tokens = (token for line in sys.stdin for token in line.split())
    try:
        while True:
            print(_MENU, end="")
            choice = next(tokens)
            if choice in ("1", "2"):
                _insert_loop(store, tokens, replacement=choice == "1")
            elif choice == "3":
                print("\nEnter Roll No. to modify: ", end="")
                rollno = int(next(tokens))
                try:
                    store.retrieve(rollno)
                except KeyError:
                    print("Record not found!")
                    continue
                print("\nEnter new Name: ", end="")
                name = next(tokens)
                print("Enter new Marks: ", end="")
                store.modify(rollno, name, int(next(tokens)))
                print("Record updated successfully!")
            elif choice == "4":
                print("\nEnter Roll No. to retrieve: ", end="")
                try:
                    record = store.retrieve(int(next(tokens)))
                except KeyError:
                    print("Record not found!")
                    continue
                print(f"\nRoll No: {record.rollno}\nName: {record.name}\nMarks: {record.marks}")
            elif choice == "5":
                print(_format_all(store))
            elif choice == "6":
                print("Exiting...")
                return 0
            else:
                print("Invalid choice.")
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except (ValueError, OSError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())