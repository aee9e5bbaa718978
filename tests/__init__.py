"""
Test suite for the Sign value type

Contains:
- tests/unit/          : Unit tests for individual modules
"""
