"""A small shell loop with quote-aware command-line parsing, expansion and pipelines."""

__version__ = "0.1.0"