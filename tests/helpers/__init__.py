"""Test helpers for Mecene."""
