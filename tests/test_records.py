import io

import pytest

from algolab.records import (
    Record,
    binary_search,
    binary_search_recursive,
    format_table,
    heap_sort,
    linear_search,
    main,
    quick_sort,
)

SAMPLE = [
    Record("Carol", "m300", 45.5),
    Record("Alice", "m100", 120.0),
    Record("Dave", "m400", 10.25),
    Record("Bob", "m200", 80.0),
    Record("Eve", "m150", 80.0),
]


def _as_tuples(records):
    return sorted((r.name, r.mobile_number, r.bill_amt) for r in records)


@pytest.mark.parametrize("sort", [heap_sort, quick_sort])
@pytest.mark.parametrize("key", ["bill_amt", "mobile_number"])
def test_sorts_order_and_keep_records(sort, key):
    result = sort(SAMPLE, key)
    values = [getattr(r, key) for r in result]
    assert values == sorted(values)
    assert _as_tuples(result) == _as_tuples(SAMPLE)


@pytest.mark.parametrize("sort", [heap_sort, quick_sort])
def test_sort_does_not_mutate_input(sort):
    original = list(SAMPLE)
    sort(SAMPLE, "mobile_number")
    assert SAMPLE == original


@pytest.mark.parametrize("sort", [heap_sort, quick_sort])
def test_unknown_key_rejected(sort):
    with pytest.raises(ValueError):
        sort(SAMPLE, "name")


@pytest.mark.parametrize("sort", [heap_sort, quick_sort])
def test_sort_empty(sort):
    assert sort([], "bill_amt") == []


def test_linear_search():
    assert linear_search(SAMPLE, "m400") == 2
    assert linear_search(SAMPLE, "m999") is None


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
def test_binary_search_finds_every_record(search):
    ordered = heap_sort(SAMPLE, "mobile_number")
    for record in ordered:
        index = search(ordered, record.mobile_number)
        assert ordered[index].mobile_number == record.mobile_number


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
def test_binary_search_missing(search):
    ordered = quick_sort(SAMPLE, "mobile_number")
    assert search(ordered, "m999") is None
    assert search(ordered, "m000") is None
    assert search([], "m100") is None


def test_format_table_layout():
    lines = format_table([Record("Alice", "m100", 12.5)]).splitlines()
    border = "+----------------+----------------------+-------------+"
    assert lines[0] == border
    assert lines[1] == "| Mobile Number  | Name                 | Bill Amount |"
    assert lines[-1] == border
    row = lines[3]
    assert row.startswith("| m100")
    assert "| Alice" in row
    assert row.endswith("12.50 |")
    assert len(row) == len(border)


def test_main_binary_search(monkeypatch, capsys):
    script = "1\n2\nAlice Smith\nm200\n120.5\nBob\nm100\n80\n5\nm200\n8\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Record found at index: 1" in out
    assert "Exiting program..." in out


def test_main_display_keeps_full_name(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\nAlice Smith\nm200\n9\n2\n8\n"))
    assert main([]) == 0
    assert "| Alice Smith" in capsys.readouterr().out