"""
Comments module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Comment(BaseModel):
    """A comment left by a user on a todo."""

    id: int
    contents: str
    todo_id: int
    user_id: int
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None
