from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Url(BaseModel):
    """One entry of the Swagger UI ``urls`` config.

    ``name`` is shown in the select dropdown when there are multiple docs,
    ``url`` is the path which exposes the OpenAPI doc. ``primary`` marks the
    doc preselected in the dropdown and is never serialized.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    url: str
    primary: bool = Field(default=False, exclude=True)

    @classmethod
    def named(cls, name: str, url: str) -> "Url":
        return cls(name=name, url=url)

    @classmethod
    def with_primary(cls, name: str, url: str, primary: bool = True) -> "Url":
        return cls(name=name, url=url, primary=primary)

    @classmethod
    def from_value(cls, value: "UrlLike") -> "Url":
        if isinstance(value, Url):
            return value.model_copy()
        if isinstance(value, str):
            return cls(url=value)
        raise TypeError(f"expected str or Url, got {type(value).__name__}")


UrlLike = Union[str, Url]


__all__ = ["Url", "UrlLike"]
