[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liquibook"
version = "0.1.0"
description = "Order tracking, a simple order model and order-entry helpers for a limit order book"
requires-python = ">=3.10"
dependencies = []
keywords = ["order book", "trading", "orders", "exchange", "order entry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["liquibook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
