# algolab

Classic algorithms and data structures, each usable as a small Python
library and as an interactive console tool that reads its input from
standard input.

No third-party libraries are needed.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

| Module              | Contents |
|---------------------|----------|
| `algolab.knapsack`  | `knapsack_01(weights, profits, capacity)` returning a `KnapsackResult` (`max_profit`, `selected` item numbers, 1-based, last item first); `fractional_knapsack(capacity, items)` over `Item(value, weight)` objects |
| `algolab.avl`       | `AVLTree`: `insert(word, meaning)` (returns `False` for a duplicate, which is ignored), `lookup(word)` (raises `KeyError` if absent), `inorder()` yielding `(word, meaning, balance_factor)`, `root_balance()`, `height()`, `len()` |
| `algolab.graph`     | `SocialGraph(vertices)` with `add_edge(u, v)`, `bfs(start)` and `dfs(start)` returning visit orders |
| `algolab.huffman`   | `huffman_codes(frequencies)` mapping each symbol to its bit string, in tree preorder |
| `algolab.jobs`      | `Job(job_id, deadline, profit)` and `job_sequencing(jobs)` returning scheduled job ids in slot order |
| `algolab.nqueens`   | `solve_n_queens(n)` (a board with queens labelled by row number, or `None`), `is_safe(board, row, col)`, `format_board(board)` |
| `algolab.hashing`   | `StudentFile(path)`: fixed-size binary records indexed by a ten-slot hash table with linear probing, with or without replacement; `insert`, `modify`, `retrieve`, `records`, `table`; `StudentRecord`, `HashSlot`, `TableFullError` |
| `algolab.records`   | `Record(name, mobile_number, bill_amt)`, `heap_sort` and `quick_sort` by `"bill_amt"` or `"mobile_number"`, `linear_search`, `binary_search`, `binary_search_recursive` (index or `None`), `format_table` |
| `algolab.prims`     | `CityGraph(cities)` with `connect(a, b, cost)`, `cost(a, b)`, `format_matrix()` and `prims(start)` returning a `SpanningTree` (`edges`, `total_cost`, per-iteration `steps` as `PrimStep`) |

Invalid arguments raise `ValueError`; unknown keys (words, roll numbers,
city names) raise `KeyError`.

## Library use

    from algolab.knapsack import knapsack_01, fractional_knapsack, Item

    result = knapsack_01([3, 4, 6, 5], [2, 3, 1, 4], 8)
    print(result.max_profit, result.selected)        # 6 (4, 1)

    print(fractional_knapsack(50, [Item(60, 10), Item(100, 20), Item(120, 30)]))  # 240.0

    from algolab.avl import AVLTree

    tree = AVLTree()
    tree.insert("apple", "a fruit")
    tree.insert("banana", "another fruit")
    print(tree.lookup("apple"), tree.root_balance(), len(tree))

    from algolab.graph import SocialGraph

    g = SocialGraph(3)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    print(g.bfs(0), g.dfs(0))

    from algolab.prims import CityGraph

    cities = CityGraph(["A", "B", "C"])
    cities.connect("A", "B", 4)
    cities.connect("B", "C", 2)
    cities.connect("A", "C", 7)
    print(cities.format_matrix())
    print(cities.prims("A").total_cost)              # 6

## Command-line tools

Each tool prompts for its input and reads it from standard input:

    algolab-knapsack              # 0/1 knapsack with item traceback
    algolab-knapsack fractional   # fractional knapsack
    algolab-avl                   # build a dictionary and list it in order
    algolab-graph                 # BFS and DFS over a friendship network
    algolab-huffman               # Huffman codes for given frequencies
    algolab-jobs                  # job order for maximum profit
    algolab-nqueens [SIZE]        # one N-Queens solution (default size 5)
    algolab-hashing [PATH]        # menu for the hashed student file (default student.txt)
    algolab-records               # menu for sorting and searching billing records
    algolab-prims                 # minimum spanning tree between cities

## Limits

- `knapsack_01` takes at most 100 items and a capacity of at most 100;
  `CityGraph` holds at most 10 cities, and costs must be below 999.
- The hash index of `StudentFile` lives in memory only. Opening an existing
  file appends new records after the ones already there, but those earlier
  records are not put back into the index, so they cannot be retrieved or
  modified by roll number.