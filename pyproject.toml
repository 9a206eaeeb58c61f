[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Classic data structures and graph algorithms: AVL and binary search trees, linked lists, stacks, queues, a max-heap and graphs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "avl-tree",
    "binary-search-tree",
    "linked-list",
    "stack",
    "queue",
    "heap",
    "heapsort",
    "graph",
    "kosaraju",
    "dijkstra",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structkit-avl = "structkit.avl_tree:main"
structkit-bst = "structkit.binary_search_tree:main"
structkit-list = "structkit.linked_list:main"
structkit-dlist = "structkit.doubly_linked_list:main"
structkit-stack = "structkit.stack:main"
structkit-queue = "structkit.linked_queue:main"
structkit-heapsort = "structkit.max_heap:main"
structkit-scc = "structkit.directed_graph:main"
structkit-components = "structkit.undirected_graph:main"
structkit-dijkstra = "structkit.weighted_graph:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.hatch.build.targets.sdist]
include = ["structkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
packages = ["structkit"]
