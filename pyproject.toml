[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "canva_connect"
version = "0.1.0"
description = "Data models, error types, rate limiting and tracing helpers for the Canva Connect API"
requires-python = ">=3.10"
keywords = ["canva", "api", "design", "models", "rate-limit"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["canva_connect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
