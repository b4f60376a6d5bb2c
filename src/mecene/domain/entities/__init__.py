"""
Domain entities.
"""

from mecene.domain.entities.project import Project, ProjectStatus

__all__ = [
    "Project",
    "ProjectStatus",
]
