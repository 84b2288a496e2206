"""create project, task and dependency tables

Revision ID: 4b8e2c1d9a70
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "4b8e2c1d9a70"
down_revision = None
branch_labels = None
depends_on = None


_PROJECT_STATUS = sa.Enum("PLANNED", "ACTIVE", "ON_HOLD", "COMPLETED", name="projectstatus")
_METHODOLOGY = sa.Enum("AGILE", "PREDICTIVE", "HYBRID", name="methodology")
_TASK_TYPE = sa.Enum("TASK", "MILESTONE", "PHASE", "SUMMARY", name="tasktype")
_TASK_STATUS = sa.Enum("TODO", "IN_PROGRESS", "REVIEW", "DONE", "BLOCKED", name="taskstatus")
_DEPENDENCY_TYPE = sa.Enum(
    "FINISH_TO_START",
    "FINISH_TO_FINISH",
    "START_TO_START",
    "START_TO_FINISH",
    name="dependencytype",
)


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("status", _PROJECT_STATUS, nullable=False),
        sa.Column("methodology", _METHODOLOGY, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "tasks",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("project_id", sa.String(), nullable=False),
        sa.Column("parent_task_id", sa.String(), nullable=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("wbs_code", sa.String(), nullable=True),
        sa.Column("task_type", _TASK_TYPE, nullable=False),
        sa.Column("is_summary", sa.Boolean(), nullable=True),
        sa.Column("order_index", sa.Integer(), nullable=True),
        sa.Column("status", _TASK_STATUS, nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("planned_duration", sa.Integer(), nullable=True),
        sa.Column("percent_complete", sa.Float(), nullable=True),
        sa.Column("early_start", sa.Date(), nullable=True),
        sa.Column("early_finish", sa.Date(), nullable=True),
        sa.Column("late_start", sa.Date(), nullable=True),
        sa.Column("late_finish", sa.Date(), nullable=True),
        sa.Column("slack", sa.Integer(), nullable=True),
        sa.Column("is_critical", sa.Boolean(), nullable=True),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_tasks_project_id", "tasks", ["project_id"])
    op.create_index("idx_tasks_parent_id", "tasks", ["parent_task_id"])

    op.create_table(
        "task_dependencies",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("predecessor_task_id", sa.String(), nullable=False),
        sa.Column("successor_task_id", sa.String(), nullable=False),
        sa.Column("dependency_type", _DEPENDENCY_TYPE, nullable=False),
        sa.Column("lag_days", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["predecessor_task_id"], ["tasks.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["successor_task_id"], ["tasks.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_dep_predecessor", "task_dependencies", ["predecessor_task_id"])
    op.create_index("idx_dep_successor", "task_dependencies", ["successor_task_id"])


def downgrade() -> None:
    op.drop_index("idx_dep_successor", table_name="task_dependencies")
    op.drop_index("idx_dep_predecessor", table_name="task_dependencies")
    op.drop_table("task_dependencies")
    op.drop_index("idx_tasks_parent_id", table_name="tasks")
    op.drop_index("idx_tasks_project_id", table_name="tasks")
    op.drop_table("tasks")
    op.drop_table("projects")
