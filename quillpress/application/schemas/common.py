"""Shared pydantic building blocks for request and response bodies."""

from typing import Annotated
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes to camelCase JSON keys and accepts both camelCase and snake_case input."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


def _check_url(value: str | None) -> str | None:
    """Accept a well-formed absolute URL or the empty string."""
    if value is None or value == "":
        return value
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError("Invalid url")
    return value


UrlOrEmpty = Annotated[str, AfterValidator(_check_url)]


class SuccessResponse(CamelModel):
    success: bool = True
