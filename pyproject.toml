[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fwidgetkit"
version = "0.1.0"
description = "Widget support utilities: theme state, control colours, value animations, image filters and Windows version helpers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["widgets", "theme", "animation", "ripple", "image", "blur", "ui"]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fwidgetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
