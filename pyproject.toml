[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcwss"
version = "0.1.0"
description = "Websocket server for Minecraft Bedrock Edition: run commands, control agents and listen to game events."
requires-python = ">=3.10"
dependencies = [
    "websockets",
]
keywords = [
    "minecraft",
    "bedrock",
    "websocket",
    "server",
    "events",
    "commands",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["mcwss"]

[tool.hatch.build.targets.sdist]
include = [
    "mcwss",
    "tests",
]

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
