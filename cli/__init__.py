"""
Command-line entry points.

Provides command-line interfaces for:
- Signal evaluation from CSV price history
- Parameter reference
"""
