[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "widgetkit"
version = "0.1.0"
description = "Toolkit-independent state and geometry models for small custom widgets: scroll label, overlay table, joystick pad, round progress bar and spinning progress indicator."
requires-python = ">=3.10"
dependencies = []
keywords = ["widgets", "progress bar", "joystick", "scroll label", "spinner", "geometry"]
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
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
widgetkit-demo = "widgetkit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["widgetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
