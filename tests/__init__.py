"""
Test suite for weavecore

Contains:
- tests/unit/          : Unit tests for individual modules
"""
