"""
TaskTarget Value Object

Addresses a remote task either by internal id or by custom task id.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskTarget:
    """
    Resolved address of a remote task.

    Attributes:
        task_id: Identifier placed in the request path
        use_custom_id: True when `task_id` is a custom task id (e.g. "DTCA-2601"),
            in which case calls must carry `custom_task_ids=true&team_id=...`
    """

    task_id: str
    use_custom_id: bool = False
