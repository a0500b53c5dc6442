"""Kappa Language Server package.

This package provides:
- A pygls-based Language Server for the Kappa language.
- An indexer/checker that scans documents and runs the reader and AST builder
  without evaluating anything.
"""

__all__ = [
    "server",
    "indexer",
]
