"""
Test suite for ring-elements

Contains:
- tests/unit/          : Unit tests for individual modules
"""
