[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tera"
version = "1.12.1"
description = "HTML escaping and render-buffer helpers for a Jinja2/Django style template engine"
requires-python = ">=3.10"
keywords = ["template", "html", "escape", "django", "jinja2"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: HTML",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tera"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
