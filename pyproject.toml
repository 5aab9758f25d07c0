[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terracetools"
version = "0.1.0"
description = "Phylogenetic tree utilities for terrace analysis: bitvectors, union-find, rerooting, subtree extraction and isomorphism checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["phylogenetics", "terraces", "newick", "supertree", "bioinformatics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
terrace-tree-gen = "terracetools.tree_gen:main"
terrace-site-gen = "terracetools.site_gen:main"

[tool.hatch.build.targets.wheel]
packages = ["terracetools"]

[tool.pytest.ini_options]
addopts = "-ra"
