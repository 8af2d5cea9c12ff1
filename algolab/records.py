"""Billing records sorted by heap sort or quick sort and searched by mobile number."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, TextIO

SORT_KEYS = ("bill_amt", "mobile_number")

_BORDER = "+----------------+----------------------+-------------+"


@dataclass(frozen=True)
class Record:
    name: str
    mobile_number: str
    bill_amt: float


def _by_bill(record: Record) -> object:
    return record.bill_amt


def _by_mobile(record: Record) -> object:
    return record.mobile_number


_KEY_FUNCS: dict[str, Callable[[Record], object]] = {
    "bill_amt": _by_bill,
    "mobile_number": _by_mobile,
}


def _key_func(key: str) -> Callable[[Record], object]:
    try:
        return _KEY_FUNCS[key]
    except KeyError:
        raise ValueError(f"unknown sort key {key!r}; expected one of {SORT_KEYS}") from None


def heap_sort(records: Iterable[Record], key: str) -> list[Record]:
    """Return the records in ascending order of key, using heap sort."""
    items = list(records)
    value = _key_func(key)

    def sift_down(size: int, root: int) -> None:
        while True:
            largest = root
            for child in (2 * root + 1, 2 * root + 2):
                if child < size and value(items[child]) > value(items[largest]):
                    largest = child
            if largest == root:
                return
            items[root], items[largest] = items[largest], items[root]
            root = largest

    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        sift_down(size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(end, 0)
    return items


def quick_sort(records: Iterable[Record], key: str) -> list[Record]:
    """Return the records in ascending order of key, using quick sort."""
    items = list(records)
    value = _key_func(key)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = value(items[high])
        boundary = low - 1
        for j in range(low, high):
            if value(items[j]) <= pivot:
                boundary += 1
                items[boundary], items[j] = items[j], items[boundary]
        split = boundary + 1
        items[split], items[high] = items[high], items[split]
        pending.append((split + 1, high))
        pending.append((low, split - 1))
    return items


def linear_search(records: Sequence[Record], mobile: str) -> Optional[int]:
    """Index of the first record with this mobile number, or None."""
    return next((i for i, record in enumerate(records) if record.mobile_number == mobile), None)


def binary_search(records: Sequence[Record], mobile: str) -> Optional[int]:
    """Search records sorted by mobile number; return an index or None."""
    low, high = 0, len(records) - 1
    while low <= high:
        mid = (low + high) // 2
        found = records[mid].mobile_number
        if found == mobile:
            return mid
        if found < mobile:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_recursive(records: Sequence[Record], mobile: str) -> Optional[int]:
    """Recursive form of binary_search."""

    def search(low: int, high: int) -> Optional[int]:
        if low > high:
            return None
        mid = (low + high) // 2
        found = records[mid].mobile_number
        if found == mobile:
            return mid
        if found < mobile:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(records) - 1)


def format_table(records: Iterable[Record]) -> str:
    """Render the records as a bordered text table."""
    lines = [_BORDER, "| Mobile Number  | Name                 | Bill Amount |", _BORDER]
    lines += [
        f"| {r.mobile_number:<14}| {r.name:<22}| {r.bill_amt:>11.2f} |" for r in records
    ]
    lines.append(_BORDER)
    return "\n".join(lines)


class _Console:
    """Reads whitespace-separated tokens and whole lines from one stream."""

    def __init__(self, stream: TextIO) -> None:
        self._lines = iter(stream)
        self._rest = ""

    def _fill(self) -> None:
        while not self._rest.strip():
            line = next(self._lines, None)
            if line is None:
                raise EOFError("unexpected end of input")
            self._rest = line

    def token(self) -> str:
        self._fill()
        parts = self._rest.split(maxsplit=1)
        self._rest = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def line(self) -> str:
        self._fill()
        text = self._rest.lstrip().rstrip("\n")
        self._rest = ""
        return text


_MENU = (
    "\nWELCOME TO THE MENU DRIVEN PROGRAM\n"
    "1. Accept Data\n2. Display Data\n3. Sort Data (Heap Sort)\n"
    "4. Linear Search\n5. Binary Search (Non-recursive)\n"
    "6. Binary Search (Recursive)\n7. Quick Sort\n8. Exit\n"
    "Enter your choice: "
)


def _report(index: Optional[int]) -> None:
    if index is None:
        print("Record not found")
    else:
        print(f"Record found at index: {index}")


def main(argv: Sequence[str] | None = None) -> int:
    console = _Console(sys.stdin)
    records: list[Record] = []
    try:
        while True:
            print(_MENU, end="")
            choice = console.token()
            if choice == "1":
                print("Enter number of records: ", end="")
                for _ in range(int(console.token())):
                    print("Enter name: ", end="")
                    name = console.line()
                    print("Enter mobile number: ", end="")
                    mobile = console.token()
                    print("Enter bill amount: ", end="")
                    records.append(Record(name, mobile, float(console.token())))
                print("Data accepted successfully.")
            elif choice == "2":
                print(format_table(records))
            elif choice == "3":
                records = heap_sort(records, "bill_amt")
                print("Data sorted using Heap Sort (by bill amount):")
                print(format_table(records))
            elif choice == "4":
                print("Enter mobile number to search: ", end="")
                _report(linear_search(records, console.token()))
            elif choice in ("5", "6"):
                records = heap_sort(records, "mobile_number")
                print("Enter mobile number to search: ", end="")
                mobile = console.token()
                search = binary_search if choice == "5" else binary_search_recursive
                _report(search(records, mobile))
            elif choice == "7":
                records = quick_sort(records, "mobile_number")
                print("Data sorted using Quick Sort:")
                print(format_table(records))
            elif choice == "8":
                print("Exiting program...")
                return 0
            else:
                print("Invalid choice. Try again.")
    except (EOFError, ValueError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())