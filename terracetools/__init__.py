"""Phylogenetic tree structures, rerooting, subtree extraction and isomorphism checks for terrace analysis."""

__version__ = "0.1.0"