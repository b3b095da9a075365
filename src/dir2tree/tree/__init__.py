"""Rendering of directory trees with branch connectors and file sizes.

This package walks a directory depth-first, applies exclusion rules to every entry and
writes one annotated line per surviving entry.
"""
