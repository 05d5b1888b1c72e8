[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adjgraph"
version = "0.1.0"
description = "Undirected weighted graphs on adjacency lists with BFS, DFS, Dijkstra, Prim and Kruskal"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "adjacency list", "bfs", "dfs", "dijkstra", "prim", "kruskal", "minimum spanning tree", "union-find"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adjgraph = "adjgraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adjgraph"]

[tool.pytest.ini_options]
addopts = "-ra"
