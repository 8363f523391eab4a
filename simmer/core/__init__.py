"""
Core domain models, numerical primitives, and contracts.

Everything here is pure, synchronous and independent of any I/O.
"""
