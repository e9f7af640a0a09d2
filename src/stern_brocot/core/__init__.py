"""
Core domain models, mathematical primitives, and invariants.

Matrix algebra, signature mapping, and the Fraction/Tree value types.
Nothing here performs I/O or holds shared mutable state.
"""
