[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "minishparse"
version = "0.1.0"
description = "A small shell loop with quote-aware command-line parsing, variable and tilde expansion and pipelines"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "parser", "pipes", "quoting", "expansion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minishparse = "minishparse.shell:main"

[tool.setuptools]
packages = ["minishparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
