"""
Test suite for numtheory64

Contains:
- tests/unit/          : Unit tests for individual modules
"""
