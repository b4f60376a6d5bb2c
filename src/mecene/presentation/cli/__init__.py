"""Mecene command-line interface."""
