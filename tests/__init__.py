"""
Test suite for mini-marketplace

Contains:
- tests/unit/          : Unit tests for individual modules and the demo scenario
"""
