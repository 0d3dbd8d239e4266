"""
Core calendar arithmetic, date values, and contracts.

This module contains the foundational building blocks that are independent
of any presentation layer (pickers, locale frameworks, etc.).
"""
