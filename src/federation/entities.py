"""Federation entity definitions carried inside XML payloads."""

from __future__ import annotations

from pydantic import Field

from federation.entity import Entity
from federation.validation import Guid


class Profile(Entity):
    """Public profile data of a person."""

    diaspora_handle: str
    first_name: str | None = None
    last_name: str | None = None
    image_url: str | None = None
    image_url_medium: str | None = None
    image_url_small: str | None = None
    birthday: str | None = None
    gender: str | None = None
    bio: str | None = None
    location: str | None = None
    searchable: str | None = None
    nsfw: str | None = None
    tag_string: str | None = None


class Person(Entity):
    """A person known to a pod, with its public key and profile."""

    guid: Guid
    diaspora_handle: str
    url: str
    profile: Profile
    exported_key: str


class Location(Entity):
    address: str
    lat: str
    lng: str


class Photo(Entity):
    guid: Guid
    diaspora_handle: str
    public: str
    created_at: str
    remote_photo_path: str
    remote_photo_name: str
    status_message_guid: Guid | None = None
    text: str | None = None
    height: str | None = None
    width: str | None = None


class StatusMessage(Entity):
    """A post; photos and location travel nested inside it."""

    guid: Guid
    diaspora_handle: str
    raw_message: str
    created_at: str
    public: str
    photos: list[Photo] = Field(default_factory=list)
    location: Location | None = None
    provider_display_name: str | None = None


class Comment(Entity):
    guid: Guid
    parent_guid: Guid
    diaspora_handle: str
    text: str
    parent_author_signature: str | None = None
    author_signature: str | None = None


ENTITIES = (Profile, Person, Location, Photo, StatusMessage, Comment)
