"""Shared base types for API records."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

ItemT = TypeVar("ItemT")


class FaceitModel(BaseModel):
    """Base for every record returned by the API.

    Unknown fields are ignored so new API fields never break parsing. Optional
    fields missing from a payload stay None.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class ItemPage(FaceitModel, Generic[ItemT]):
    """One page of a list endpoint; ``start``/``end`` echo the requested window."""

    start: int
    end: int
    items: list[ItemT]
