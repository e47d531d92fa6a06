"""Parser, syntax-tree, edit, completion and protocol-conversion building blocks for a shader language server."""

__version__ = "0.9.3"