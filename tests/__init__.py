"""
Test suite for specfunc-exp

Contains:
- tests/unit/          : Unit tests for individual modules
"""
