"""
Test suite for Decimal Time

Contains:
- tests/unit/          : Unit tests for individual modules
"""
