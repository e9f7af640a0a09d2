"""
Test suite for stern_brocot

Contains:
- tests/unit/          : Unit tests for individual modules
"""
