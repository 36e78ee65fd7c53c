[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contest_solvers"
version = "0.1.0"
description = "Solvers for a set of small competitive-programming problems, usable as functions or as stdin/stdout commands."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "number-theory", "prefix-sums", "greedy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
prefix-reach = "contest_solvers.prefix_reach:main"
shared-attacks = "contest_solvers.shared_attacks:main"
odd-sum-queries = "contest_solvers.odd_sum_queries:main"
wheel-count = "contest_solvers.wheel_count:main"
halving = "contest_solvers.halving:main"
palindrome-removal = "contest_solvers.palindrome_removal:main"
subset-sum = "contest_solvers.subset_sum:main"
timer = "contest_solvers.timer:main"
divisor-prefix = "contest_solvers.divisor_prefix:main"
balance = "contest_solvers.balance:main"
run-length = "contest_solvers.run_length:main"

[tool.hatch.build.targets.wheel]
packages = ["contest_solvers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
