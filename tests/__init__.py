"""
Test suite for persian-calendar-engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
