#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/utils/__init__.py
"""Shared helpers for dependency checks, encoding detection and output writing."""
