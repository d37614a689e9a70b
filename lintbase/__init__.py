"""LintBase - sample a document database and lint it against a fixed rule catalog."""

__version__ = "0.4.0"
