"""
Core digit container, conversion algorithms, and invariants.

This module contains the foundational building blocks that are independent
of any I/O (files, consoles, etc.).
"""
