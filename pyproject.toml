[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cqrsbus"
version = "0.1.0"
description = "Small in-process command, query and event buses for CQRS-style applications"
requires-python = ">=3.10"
dependencies = []
keywords = ["cqrs", "command bus", "query bus", "event bus", "domain events"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cqrsbus-get-username = "cqrsbus.get_username:main"

[tool.hatch.build.targets.wheel]
packages = ["cqrsbus"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
