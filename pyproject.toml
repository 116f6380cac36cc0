[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plugin-discovery"
version = "0.1.0"
description = "HTTP service that lists plugins registered as tagged routes in a Kong API gateway"
requires-python = ">=3.10"
keywords = ["kong", "api-gateway", "plugins", "discovery", "flask", "microservice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "requests>=2.28",
    "flask>=2.2",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
plugin-discovery = "plugin_discovery.app:main"

[tool.hatch.build.targets.wheel]
packages = ["plugin_discovery"]

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
warn_unused_ignores = true
ignore_missing_imports = true
