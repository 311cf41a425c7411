"""Project export report

Builds the JSON document written for a completed export. Key names and
their order are read by consumers of exported files and must not change.
"""
import json
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional
from src.domain import Project, Task, TaskPriority, TaskStatus, User

UNASSIGNED = "Unassigned"


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """ISO-8601 in UTC with millisecond precision, e.g. 2025-01-31T10:15:00.123Z"""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def export_filename(project_id: str, now: datetime) -> str:
    """Artifact name derived from the project ID and the generation time"""
    stamp = format_timestamp(now).replace(":", "-").replace(".", "-")
    return f"project-{project_id}-{stamp}.json"


def summarize_tasks(tasks: Iterable[Task]) -> Dict[str, Any]:
    """Task totals partitioned by status and by priority"""
    by_status = {"todo": 0, "inProgress": 0, "done": 0}
    by_priority = {"low": 0, "medium": 0, "high": 0}
    status_keys = {
        TaskStatus.TODO.value: "todo",
        TaskStatus.IN_PROGRESS.value: "inProgress",
        TaskStatus.DONE.value: "done",
    }
    priority_keys = {
        TaskPriority.LOW.value: "low",
        TaskPriority.MEDIUM.value: "medium",
        TaskPriority.HIGH.value: "high",
    }

    total = 0
    for task in tasks:
        total += 1
        by_status[status_keys[TaskStatus(task.status).value]] += 1
        by_priority[priority_keys[TaskPriority(task.priority).value]] += 1

    return {
        "totalTasks": total,
        "byStatus": by_status,
        "byPriority": by_priority,
    }


def build_export_report(
    project: Project,
    tasks: List[Task],
    assignees: Mapping[str, User],
) -> Dict[str, Any]:
    """
    Build the export payload for a project

    Args:
        project: Project being exported
        tasks: Tasks of the project, in export order
        assignees: Users referenced by ``Task.assigned_to``, keyed by ID

    Returns:
        dict: {project, summary, tasks}
    """
    task_entries = []
    for task in tasks:
        assignee = assignees.get(task.assigned_to) if task.assigned_to else None
        task_entries.append({
            "title": task.title,
            "description": task.description,
            "status": TaskStatus(task.status).value,
            "priority": TaskPriority(task.priority).value,
            "assignee": assignee.name if assignee else UNASSIGNED,
            "assigneeEmail": assignee.email if assignee else None,
            "dueDate": format_timestamp(task.due_date),
            "createdAt": format_timestamp(task.created_at),
        })

    return {
        "project": {
            "name": project.name,
            "description": project.description,
            "createdAt": format_timestamp(project.created_at),
        },
        "summary": summarize_tasks(tasks),
        "tasks": task_entries,
    }


def serialize_report(report: Dict[str, Any]) -> bytes:
    return json.dumps(report, indent=2, ensure_ascii=False).encode("utf-8")
