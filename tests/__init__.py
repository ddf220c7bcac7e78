"""
Test suite for kvector

Contains:
- tests/unit/          : Unit tests for the kernels and both vector types
"""
