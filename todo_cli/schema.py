"""
TODO CLI - Task Schema Definition
=================================
One task per record, held in a flat list and stored as a JSON array.
"""

from enum import Enum
from typing import Optional, List
from pydantic import AwareDatetime, BaseModel, Field, field_validator


class TaskPriority(str, Enum):
    """Task priority levels"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, text: str) -> "TaskPriority":
        """Parse a priority name, case-insensitively"""
        try:
            return cls(text.strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Invalid priority '{text}'. Expected one of: {allowed}"
            ) from None


class Task(BaseModel):
    """Individual todo entry"""
    id: int = Field(gt=0)
    text: str = Field(min_length=1)
    done: bool = False
    priority: Optional[TaskPriority] = None
    tags: List[str] = Field(default_factory=list)
    due_date: Optional[AwareDatetime] = None    # Fixed local offset

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Task text must not be empty")
        return v

    @property
    def status_marker(self) -> str:
        return "x" if self.done else " "
