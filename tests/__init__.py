"""
Test suite for rangebounds

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
