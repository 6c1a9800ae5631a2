"""
Pydantic schemas for event-related request/response validation.

Request schemas only check shapes; emptiness, formats and limits are
enforced by the event pipeline so every write path reports them the same way.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class EventCreate(BaseModel):
    title: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: list[str]
    organizer: str
    tags: list[str]


class EventUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    overview: Optional[str] = None
    image: Optional[str] = None
    venue: Optional[str] = None
    location: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    mode: Optional[str] = None
    audience: Optional[str] = None
    agenda: Optional[list[str]] = None
    organizer: Optional[str] = None
    tags: Optional[list[str]] = None


class EventResponse(BaseModel):
    id: int
    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: list[str]
    organizer: str
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class EventListResponse(BaseModel):
    events: list[EventResponse]
    total: int
    page: int
    page_size: int
