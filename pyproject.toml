[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vdomhtml"
version = "0.1.0"
description = "Building blocks for HTML processing: byte strings, input scanning, element attributes and CSS-style query selectors"
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "query-selector", "css-selector", "attributes", "scanner"]
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
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vdomhtml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
