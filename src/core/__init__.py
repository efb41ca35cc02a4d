"""
Core domain models, mathematical primitives, and contracts.

This module contains the NumberWithUnit value type and the building blocks
it relies on. Nothing here performs I/O except the schema loader.
"""
