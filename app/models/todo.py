from typing import Dict, Any

from sqlalchemy import Column, VARCHAR, Boolean

from app.db.base import Base


class ToDoRecord(Base):
    """
    ToDo database model
    """
    __tablename__ = "t_todo"

    id = Column(VARCHAR(64), primary_key=True, index=True)
    name = Column(VARCHAR(255), nullable=True)
    done = Column(Boolean, nullable=False, default=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "done": bool(self.done),
        }
