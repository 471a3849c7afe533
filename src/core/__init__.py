"""
Core numeric primitives and value models.

This module contains the foundational building blocks of range search:
extended-precision step arithmetic, step offsets, and the immutable
progression/interval models. Nothing here depends on the search layer.
"""
