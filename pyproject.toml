[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkvm_primitives"
version = "3.0.0"
description = "Core primitives for a zkVM: BabyBear field arithmetic, Poseidon2 hashing, bincode buffers and public values."
requires-python = ">=3.10"
dependencies = []
keywords = ["zkvm", "poseidon2", "babybear", "bincode", "zero-knowledge"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["zkvm_primitives"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
