"""Organizer records, embedded in hubs and championships when expanded."""

from pydantic import Field

from faceit_client.models.common import FaceitModel


class Organizer(FaceitModel):
    organizer_id: str
    name: str
    avatar: str | None = None
    cover: str | None = None
    description: str | None = None
    faceit_url: str | None = None
    twitter: str | None = None
    youtube: str | None = None
    twitch: str | None = None
    facebook: str | None = None
    vk: str | None = None
    website: str | None = None
    followers_count: int | None = None
    organizer_type: str | None = Field(default=None, alias="type")
