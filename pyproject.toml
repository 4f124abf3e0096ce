[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weixin"
version = "0.1.0"
description = "Chat client data models, sample data, theme tokens and widget logic for a desktop messenger"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "messenger", "theme", "widgets", "sample-data"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["weixin"]

[tool.pytest.ini_options]
addopts = "-ra"
