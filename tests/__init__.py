"""
Test suite for linked-numerals

Contains:
- tests/unit/          : Unit tests for individual modules
"""
