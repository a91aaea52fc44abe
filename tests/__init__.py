"""
Test suite for the loan simulation core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
