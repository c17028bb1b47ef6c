[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sampo"
version = "0.1.0"
description = "A small application framework with layers, events, input devices, allocators, graphics helpers and TCP networking"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "framework",
    "layers",
    "events",
    "input",
    "allocator",
    "sockets",
    "chat",
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sampo-chat-server = "sampo.chat:server_main"
sampo-chat-client = "sampo.chat:client_main"

[tool.hatch.build.targets.wheel]
packages = ["sampo"]

[tool.hatch.build.targets.sdist]
include = [
    "sampo",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
