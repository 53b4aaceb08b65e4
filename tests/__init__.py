"""Test suite for data-operation-result.

Test structure:
- unit/: Unit tests - result types, validators, config and logging in isolation
"""
