"""Journal request/response schemas."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field


class JournalEntryCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    body: str = Field(min_length=1)
    entry_time: Optional[dt.datetime] = None


class JournalEntryUpdate(BaseModel):
    title: Optional[str] = Field(default=None, max_length=255)
    body: Optional[str] = None


class JournalEntryListFilter(BaseModel):
    q: Optional[str] = None
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=20, ge=1, le=200)


class JournalEntryResponse(BaseModel):
    id: int
    title: str
    body: str
    entry_time: str
    created_at: str
    updated_at: str
