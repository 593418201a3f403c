"""
Test suite for lagrange-secret-recovery

Contains:
- tests/unit/          : Unit tests for arithmetic, interpolation, contracts and CLI
"""
