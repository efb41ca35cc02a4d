"""
Test suite for wanshu-magnitude

Contains:
- tests/unit/          : Unit tests for individual modules
"""
