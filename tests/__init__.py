"""
Test suite for epochdate

Contains:
- tests/unit/          : Unit tests for value types, civil helpers and contracts
"""
