"""
Test suite for geokernel

Contains:
- tests/unit/          : Unit tests for value types, curves, transforms and intersections
"""
