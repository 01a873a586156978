"""Test suite for the invoice engine.

Organized into three categories:

1. core/: Unit tests for the invoice state machine and traversal
   - No external dependencies, fast execution

2. adapters/: Tests for statement rendering

3. fakes/: Port implementations for testing
   - RecordingVisitor captures visitor callbacks for assertions
"""
