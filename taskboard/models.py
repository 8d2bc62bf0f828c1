"""Task records shown on the board and the date format they use."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional

MIN_PRIORITY = 1
MAX_PRIORITY = 5
DEFAULT_DURATION = timedelta(days=7)
ALARM_REMINDER = "闹钟提醒"
REMINDERS = (ALARM_REMINDER,)
HEADERS = ("优先级", "任务名称", "任务描述", "起止时间", "提醒方式", "吐槽")

_DATE_PATTERN = "%m/%d/%y"


def format_date(value: date) -> str:
    """Format a date as M/d/yy: no leading zeros, two-digit year."""
    return f"{value.month}/{value.day}/{value.year % 100:02d}"


def parse_date(text: str) -> date:
    """Read a date written by :func:`format_date`."""
    try:
        return datetime.strptime(text.strip(), _DATE_PATTERN).date()
    except ValueError as exc:
        raise ValueError(f"invalid date {text!r}, expected M/d/yy") from exc


@dataclass
class Task:
    """One task on the board."""

    name: str
    priority: int = MIN_PRIORITY
    description: str = ""
    start: date = field(default_factory=date.today)
    end: Optional[date] = None
    reminder: str = ALARM_REMINDER
    review: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise TypeError("priority must be an integer")
        if not MIN_PRIORITY <= self.priority <= MAX_PRIORITY:
            raise ValueError(
                f"priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}"
            )
        if self.reminder not in REMINDERS:
            raise ValueError(f"unknown reminder method {self.reminder!r}")
        if self.end is None:
            self.end = self.start + DEFAULT_DURATION

    def time_range(self) -> str:
        """The start and end dates joined the way the table shows them."""
        return f"{format_date(self.start)} - {format_date(self.end)}"

    def as_row(self) -> tuple[str, str, str, str, str, str]:
        """The six table cells, in the order of :data:`HEADERS`."""
        return (
            str(self.priority),
            self.name,
            self.description,
            self.time_range(),
            self.reminder,
            self.review,
        )