# infra/db/repositories.py
from infra.db.project import SqlAlchemyProjectRepository
from infra.db.task import SqlAlchemyDependencyRepository, SqlAlchemyTaskRepository

__all__ = [
    "SqlAlchemyProjectRepository",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyDependencyRepository",
]
