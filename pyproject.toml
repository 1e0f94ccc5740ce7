[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minedenc"
version = "0.1.0"
description = "Character mapping tables, CJK byte codes and keyboard input maps for text editors"
requires-python = ">=3.10"
dependencies = []
keywords = ["unicode", "cjk", "charset", "encoding", "keymap", "ebcdic", "gb18030"]
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
    "Topic :: Software Development :: Internationalization",
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minedenc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
