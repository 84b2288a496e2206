from __future__ import annotations

from uuid import uuid4

# Synthetic node id used when several top-level tasks share one WBS diagram.
WBS_ROOT_ID = "wbs-root"


def generate_id() -> str:
    """Random UUID4 string; never collides with the reserved ids above."""
    return str(uuid4())


__all__ = ["WBS_ROOT_ID", "generate_id"]
