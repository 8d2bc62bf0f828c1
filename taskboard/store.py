"""SQLite storage for tasks."""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path
from typing import Optional, Union

from platformdirs import user_data_dir

from taskboard.models import Task, format_date, parse_date

DATABASE_NAME = "task.db"
APP_NAME = "taskboard"

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS task ("
    "name TEXT PRIMARY KEY NOT NULL, "
    "prio TEXT, "
    "description TEXT, "
    "start_time TEXT, "
    "end_time TEXT, "
    "reminder_method TEXT, "
    "review TEXT)"
)

_INSERT = (
    "INSERT INTO task (prio, name, description, start_time, end_time, "
    "reminder_method, review) VALUES (:prio, :name, :description, "
    ":start_time, :end_time, :reminder_method, :review)"
)

_SELECT = (
    "SELECT prio, name, description, start_time, end_time, "
    "reminder_method, review FROM task"
)


class TaskStoreError(Exception):
    """Raised when the task database cannot be opened, read or changed."""


def default_database_path() -> Path:
    """Where the task database lives when no path is given."""
    return Path(user_data_dir(APP_NAME)) / DATABASE_NAME


class TaskStore:
    """Tasks kept in an SQLite database file."""

    def __init__(self, path: Optional[Union[str, os.PathLike]] = None) -> None:
        target = default_database_path() if path is None else path
        if str(target) != ":memory:":
            Path(target).parent.mkdir(parents=True, exist_ok=True)
        try:
            self._conn = sqlite3.connect(str(target))
            self._conn.execute(_SCHEMA)
            self._conn.commit()
        except sqlite3.Error as exc:
            raise TaskStoreError(f"文件没有正确打开:{exc}") from exc

    def add(self, task: Task) -> None:
        """Insert a task; names are unique."""
        params = {
            "prio": str(task.priority),
            "name": task.name,
            "description": task.description,
            "start_time": format_date(task.start),
            "end_time": format_date(task.end),
            "reminder_method": task.reminder,
            "review": task.review,
        }
        try:
            with self._conn:
                self._conn.execute(_INSERT, params)
        except sqlite3.Error as exc:
            raise TaskStoreError(f"插入失败: {exc}") from exc

    def delete(self, name: str) -> bool:
        """Remove the task with this name; report whether one was removed."""
        try:
            with self._conn:
                cursor = self._conn.execute(
                    "DELETE FROM task WHERE name = :name", {"name": name}
                )
        except sqlite3.Error as exc:
            raise TaskStoreError(f"删除失败{exc}") from exc
        return cursor.rowcount > 0

    def tasks(self) -> list[Task]:
        """All tasks, highest priority first."""
        try:
            rows = self._conn.execute(_SELECT).fetchall()
        except sqlite3.Error as exc:
            raise TaskStoreError(f"查询失败: {exc}") from exc
        loaded = [
            Task(
                name=name,
                priority=int(prio),
                description=description or "",
                start=parse_date(start),
                end=parse_date(end),
                reminder=reminder,
                review=review or "",
            )
            for prio, name, description, start, end, reminder, review in rows
        ]
        return sorted(loaded, key=lambda task: task.priority, reverse=True)

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self) -> "TaskStore":
        return self

    def __exit__(self, *args) -> None:
        self.close()