[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alchemypath"
version = "0.1.0"
description = "Find recipe trees for Little Alchemy 2 elements with BFS, DFS and bidirectional search, served over a small JSON HTTP API"
requires-python = ">=3.10"
keywords = ["little alchemy", "recipes", "bfs", "dfs", "bidirectional search", "scraper"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "requests",
    "beautifulsoup4",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
alchemypath = "alchemypath.server:main"

[tool.hatch.build.targets.wheel]
packages = ["alchemypath"]

[tool.pytest.ini_options]
addopts = "-ra"
