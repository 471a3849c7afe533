"""
Test suite for steprange-search

Contains:
- tests/unit/          : Unit tests for individual modules
"""
