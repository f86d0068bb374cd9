"""
Core value types, mathematical primitives, and invariants.

This module contains the foundational building blocks of the kernel: the
tolerance model, angle normalization, coordinate value types and the error
taxonomy. Nothing here depends on curves or intersection algorithms.
"""
