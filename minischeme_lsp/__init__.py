"""minischeme Language Server package.

This package provides:
- A pygls-based Language Server for minischeme source files.
- An indexer that scans documents with the minischeme reader, without evaluation.

Note: the LSP never evaluates user buffers; it builds a static index from text.
"""

__all__ = [
    "server",
    "indexer",
]
