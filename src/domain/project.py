from datetime import datetime
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid


class Project(BaseModel, table=True):
    __tablename__ = "projects"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    owner_id: str = Field(foreign_key="users.id", index=True, nullable=False)
    name: str = Field(max_length=255, nullable=False)
    description: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    def is_owned_by(self, user_id: str) -> bool:
        return str(self.owner_id) == str(user_id)
