"""Dependency injection."""

from mecene.di.container import Container

__all__ = ["Container"]
