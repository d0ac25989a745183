from typing import Optional

from pydantic import BaseModel, Field


class ToDo(BaseModel):
    """
    ToDo item

    Used as request body, response body and the unit the persistence
    stores exchange. ``id`` may be omitted on create; the store assigns one.
    """
    id: Optional[str] = Field(default=None, description="ToDo ID")
    name: Optional[str] = Field(default=None, description="Label")
    done: bool = Field(default=False, description="Completion flag")
