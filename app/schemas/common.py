# schemas/common.py

from pydantic import BaseModel, Field


class RequestModel(BaseModel):
    """Request bodies reject fields they do not declare."""

    class Config:
        extra = "forbid"


class UpdateModel(RequestModel):
    id: int = Field(..., description="ID of the record to update")

    def changes(self) -> dict:
        """Fields the caller actually sent, minus the id."""
        return self.model_dump(exclude_unset=True, exclude_none=True, exclude={"id"})
