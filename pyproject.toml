[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic algorithms and data structures as small Python functions and interactive console tools: knapsack, AVL dictionary, graph traversal, Huffman codes, job sequencing, N-Queens, hashed student file, record sorting and Prim's MST."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "knapsack",
    "avl-tree",
    "bfs",
    "dfs",
    "huffman",
    "job-sequencing",
    "n-queens",
    "hashing",
    "heap-sort",
    "quick-sort",
    "binary-search",
    "prims",
    "minimum-spanning-tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-knapsack = "algolab.knapsack:main"
algolab-avl = "algolab.avl:main"
algolab-graph = "algolab.graph:main"
algolab-huffman = "algolab.huffman:main"
algolab-jobs = "algolab.jobs:main"
algolab-nqueens = "algolab.nqueens:main"
algolab-hashing = "algolab.hashing:main"
algolab-records = "algolab.records:main"
algolab-prims = "algolab.prims:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
