"""Unit tests for core domain logic.

These tests exercise the invoice state machine and traversal without
external dependencies. Visitors are replaced with fakes from tests/fakes/.
"""
