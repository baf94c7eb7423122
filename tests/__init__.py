"""
Test suite for largenum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
