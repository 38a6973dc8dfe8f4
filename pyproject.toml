[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tidbits"
version = "0.1.0"
description = "Small teaching programs: ciphers, collections, graphs, concurrency and data handling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "caesar-cipher",
    "collections",
    "graphs",
    "pagerank",
    "dining-philosophers",
    "csv",
    "examples",
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
tidbits-caesar = "tidbits.caesar:main"
tidbits-decoder = "tidbits.decoder:main"
tidbits-homophonic = "tidbits.homophonic:main"
tidbits-dupes = "tidbits.dupes:main"
tidbits-vector-salad = "tidbits.salads:main_vector"
tidbits-framed-salad = "tidbits.salads:main_framed"
tidbits-cli-salad = "tidbits.salads:main_cli_salad"
tidbits-custom-salad = "tidbits.salads:main_customize"
tidbits-lowmem-salad = "tidbits.salads:main_lowmem"
tidbits-fig-heap = "tidbits.picks:main_heap"
tidbits-fruit-sets = "tidbits.picks:main_sets"
tidbits-unique-fruits = "tidbits.picks:main_unique"
tidbits-fruits = "tidbits.picks:main_fruits"
tidbits-languages = "tidbits.languages:main"
tidbits-count = "tidbits.counting:main_count"
tidbits-add = "tidbits.counting:main_add"
tidbits-collections = "tidbits.counting:main_overview"
tidbits-community = "tidbits.community:main"
tidbits-centrality = "tidbits.network:main_centrality"
tidbits-shortest-path = "tidbits.network:main_shortest_path"
tidbits-pagerank = "tidbits.network:main_pagerank"
tidbits-philosophers = "tidbits.philosophers:main"
tidbits-plot = "tidbits.asciiplot:main"
tidbits-csv-records = "tidbits.csvtools:main_records"
tidbits-csv-table = "tidbits.csvtools:main_table"
tidbits-wikicrawl = "tidbits.wikicrawl:main"

[tool.hatch.build.targets.wheel]
packages = ["tidbits"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
