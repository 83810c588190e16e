"""Note Schemas — title/body input and note rendering."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NoteInput(BaseModel):
    """Note create/update payload. Any owner/id field sent by the client is dropped."""
    model_config = ConfigDict(extra="ignore")

    title: str = Field("", max_length=255)
    body: str = ""


class NoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    body: str
    created_at: datetime
    updated_at: datetime


class DeleteResponse(BaseModel):
    message: str
