"""Utilities module.

Shared exceptions and console display helpers.
"""
