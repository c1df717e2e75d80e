[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "authrules"
version = "0.1.0"
description = "Payloads, program-derived addresses and instruction encoding for a token authorization rules program"
requires-python = ">=3.10"
dependencies = []
keywords = ["solana", "borsh", "pda", "base58", "authorization", "rules", "payload"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["authrules"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
