from __future__ import annotations

from core.models import Project
from infra.db.models import ProjectORM


def project_to_orm(project: Project) -> ProjectORM:
    return ProjectORM(
        id=project.id,
        name=project.name,
        description=project.description,
        start_date=project.start_date,
        end_date=project.end_date,
        status=project.status,
        methodology=project.methodology,
    )


def project_from_orm(obj: ProjectORM) -> Project:
    return Project(
        id=obj.id,
        name=obj.name,
        description=obj.description,
        start_date=obj.start_date,
        end_date=obj.end_date,
        status=obj.status,
        methodology=obj.methodology,
    )


__all__ = ["project_to_orm", "project_from_orm"]
