[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bunnyhq"
version = "0.1.0"
description = "Solvers for the Easter Bunny HQ puzzle series: taxicab walks, keypads, hashes, screens, bots, elevators and mazes."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "assembunny", "bfs", "md5"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bunnyhq-taxicab = "bunnyhq.taxicab:main"
bunnyhq-keypad = "bunnyhq.keypad:main"
bunnyhq-triangles = "bunnyhq.triangles:main"
bunnyhq-rooms = "bunnyhq.rooms:main"
bunnyhq-doorhash = "bunnyhq.doorhash:main"
bunnyhq-signals = "bunnyhq.signals:main"
bunnyhq-ipv7 = "bunnyhq.ipv7:main"
bunnyhq-screen = "bunnyhq.screen:main"
bunnyhq-decompress = "bunnyhq.decompress:main"
bunnyhq-balance-bots = "bunnyhq.balance_bots:main"
bunnyhq-rtg = "bunnyhq.rtg:main"
bunnyhq-assembunny = "bunnyhq.assembunny:main"
bunnyhq-cubicles = "bunnyhq.cubicles:main"
bunnyhq-onetimepad = "bunnyhq.onetimepad:main"

[tool.hatch.build.targets.wheel]
packages = ["bunnyhq"]

[tool.hatch.build.targets.sdist]
include = ["bunnyhq", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
