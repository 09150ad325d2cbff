"""CLI module.

Click command group, non-interactive billing commands and the interactive
billing session.
"""
