"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Rule-based destination classification and activity tagging
- Package sources (in-memory, JSON file)
"""
