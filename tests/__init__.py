"""
Test Suite
==========

Test suite matching the footlights/ package structure.

Test Categories:
- unit: Unit tests for individual components
"""
