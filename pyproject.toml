[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "code_racer"
version = "0.4.0"
description = "Find the minimum keystroke-cost encoding route for typing a whole text with an input-method dictionary"
requires-python = ">=3.10"
dependencies = []
keywords = ["keyboard-layout", "typing-speed", "input-method", "chinese-input"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
code-racer = "code_racer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["code_racer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
