"""Chessburn: chess notation viewer with ply-indexed game timelines."""

__version__ = "0.1.0"
