[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoworks"
version = "0.1.0"
description = "Classic algorithms and data structures with small runnable demonstrations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "trie",
    "boggle",
    "string-search",
    "z-algorithm",
    "circular-queue",
    "backtracking",
    "dijkstra",
    "gale-shapley",
    "scheduling",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
algoworks-boggle = "algoworks.boggle:main"
algoworks-brute-force = "algoworks.brute_force:main"
algoworks-zsearch = "algoworks.zsearch:main"
algoworks-circular-queue = "algoworks.circular_queue:main"
algoworks-maze = "algoworks.maze:main"
algoworks-dijkstra = "algoworks.dijkstra:main"
algoworks-stable-marriage = "algoworks.stable_marriage:main"
algoworks-jobs = "algoworks.jobs:main"

[tool.hatch.build.targets.wheel]
packages = ["algoworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
