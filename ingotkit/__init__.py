"""General-purpose helpers: text extraction, math, collections, filesystem and reactive lists."""

__version__ = "0.1.0"

__all__ = ["text", "mathutil", "seqtools", "fsutil", "reactive"]