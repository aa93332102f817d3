"""Generic pagination envelope used by list endpoints."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


class PaginationLinks(BaseModel):
    """Pagination links of a list response.

    Links are opaque URLs. An empty ``next`` means there is no further page.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    self_: str = Field("", alias="self")
    next: str = ""
    prev: str = ""

    @field_validator("self_", "next", "prev", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ListResponse(BaseModel, Generic[T]):
    """A page of results: ``{"results": [...], "links": {...}}``.

    ``results`` keeps the server order and is never None.
    """

    model_config = ConfigDict(frozen=True)

    results: list[T] = Field(default_factory=list)
    links: PaginationLinks = Field(default_factory=PaginationLinks)

    @field_validator("results", mode="before")
    @classmethod
    def null_to_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("links", mode="before")
    @classmethod
    def null_to_empty_links(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def has_next(self) -> bool:
        return bool(self.links.next)
