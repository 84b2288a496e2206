"""Project-level change notifications for hosts that cache derived views."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.tasks_changed: Signal[str] = Signal()      # project_id
        self.schedule_changed: Signal[str] = Signal()   # project_id


# SINGLE global instance
domain_events = DomainEvents()
