# todo_api/models.py
"""Task table model and request bodies for the task API.

Field names are camelCase because they are the column names of the
``tasks`` table and the keys clients send and receive.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from sqlalchemy import text
from sqlmodel import Field, SQLModel


class Task(SQLModel, table=True):
    """Task database table."""
    __tablename__ = "tasks"

    id: str = Field(primary_key=True)
    title: str
    description: Optional[str] = Field(default="")
    dueDate: Optional[str] = Field(default="", sa_column_kwargs={"server_default": ""})
    isCompleted: int = Field(default=0, sa_column_kwargs={"server_default": text("0")})
    priority: int = Field(default=1, sa_column_kwargs={"server_default": text("1")})


class TaskCreate(BaseModel):
    """Body of the add route. Presence of id and title is checked by the repository."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


class TaskUpdate(BaseModel):
    """Body of the edit route. Every mutable column is overwritten."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    dueDate: Optional[str] = None
    isCompleted: Optional[bool] = None
    priority: Optional[int] = None

    def column_values(self) -> dict:
        """Values for the UPDATE statement, with defaults for omitted fields."""
        return {
            "title": self.title,
            "description": self.description or "",
            "dueDate": self.dueDate if self.dueDate is not None else "",
            "isCompleted": 1 if self.isCompleted else 0,
            "priority": self.priority if self.priority is not None else 0,
        }


SAMPLE_TASKS: list[TaskCreate] = [
    TaskCreate(id="2025112601", title="Task-01", description="Task content 01"),
    TaskCreate(id="2025112602", title="Task-02", description="Task content 02"),
    TaskCreate(id="2025112603", title="Task-03", description="Task content 03"),
]
