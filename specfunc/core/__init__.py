"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks shared by all
special-function evaluators: status/result types, machine constants,
auxiliary gamma functions and serialized result contracts.
"""
