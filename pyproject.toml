[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wiktparse"
version = "0.1.0"
description = "Tools for reading Wiktionary, Wikipedia and Wikidata multistream dumps and parsing their wikitext markup"
requires-python = ">=3.10"
dependencies = []
keywords = ["wiktionary", "wikipedia", "wikidata", "wikitext", "mediawiki", "dump", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wiktparse = "wiktparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wiktparse"]

[tool.pytest.ini_options]
addopts = "-ra"
