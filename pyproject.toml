[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastvlq"
version = "2.0.0"
description = "A fast variant of variable-length quantity encoding where the length is known from the first byte."
requires-python = ">=3.10"
dependencies = []
keywords = ["vlq", "varint", "encoding", "zigzag", "serialization"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "hypothesis",
]

[project.scripts]
fastvlq = "fastvlq.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fastvlq"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
