"""Request/response bodies — camelCase on the wire, snake_case in Python."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class LanguageWrite(ApiModel):
    """Body for both create and update; blank fields are rejected by the handler."""

    name: str | None = None
    code: str | None = None


class LanguageResponse(ApiModel):
    id: str
    name: str
    code: str
    created_at: datetime
    updated_at: datetime


class GreetingWrite(ApiModel):
    language_id: str | None = None
    greeting_text: str | None = None
    formal: bool = False


class GreetingResponse(ApiModel):
    id: str
    language_id: str
    greeting_text: str
    formal: bool
    created_at: datetime
    updated_at: datetime


class GreetingByLanguageResponse(ApiModel):
    language: str
    language_code: str
    greeting_text: str
    formal: bool


class HealthResponse(ApiModel):
    status: str
    database: str
    timestamp: datetime
