"""
Test suite для perplex

Contains:
- tests/unit/          : Unit tests for individual modules
"""
