"""Domain layer - Pure contracts.

This layer contains the protocols (ports) the core depends on. It has NO
dependencies on any framework or infrastructure - it is pure Python.

Structure:
- protocols/: Domain protocols (service interfaces)
"""
