"""Data types for subreddit wiki pages, revisions and settings."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Mapping, Optional

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Convert a Unix timestamp (or ``false``) from the API into a UTC datetime."""
    if value is None:
        return None
    if value is False or value == "false":
        return ZERO_TIME
    if value is True:
        raise ValueError("invalid timestamp: True")
    try:
        seconds = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid timestamp: {value!r}") from exc
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def _thing_data(thing: Any, kind: str) -> Optional[Mapping[str, Any]]:
    if not isinstance(thing, Mapping) or thing.get("kind") != kind:
        return None
    data = thing.get("data")
    return data if isinstance(data, Mapping) else {}


@dataclass
class User:
    """A Reddit account."""

    id: str = ""
    name: str = ""
    created: Optional[datetime] = None
    post_karma: int = 0
    comment_karma: int = 0
    is_friend: bool = False
    is_employee: bool = False
    has_verified_email: bool = False
    nsfw: bool = False
    is_suspended: bool = False


def parse_user(thing: Any) -> Optional[User]:
    """Build a User from a ``t2`` thing; return None for any other kind."""
    data = _thing_data(thing, "t2")
    if data is None:
        return None
    return User(
        id=data.get("id", ""),
        name=data.get("name", ""),
        created=parse_timestamp(data.get("created_utc")),
        post_karma=data.get("link_karma", 0),
        comment_karma=data.get("comment_karma", 0),
        is_friend=data.get("is_friend", False),
        is_employee=data.get("is_employee", False),
        has_verified_email=data.get("has_verified_email", False),
        nsfw=data.get("over_18", False),
        is_suspended=data.get("is_suspended", False),
    )


@dataclass
class Post:
    """A submission in a subreddit."""

    id: str = ""
    full_id: str = ""
    created: Optional[datetime] = None
    edited: Optional[datetime] = None
    permalink: str = ""
    url: str = ""
    title: str = ""
    body: str = ""
    likes: Optional[bool] = None
    score: int = 0
    upvote_ratio: float = 0.0
    number_of_comments: int = 0
    subreddit_name: str = ""
    subreddit_name_prefixed: str = ""
    subreddit_id: str = ""
    subreddit_subscribers: int = 0
    author: str = ""
    author_id: str = ""
    spoiler: bool = False
    locked: bool = False
    nsfw: bool = False
    is_self_post: bool = False
    saved: bool = False
    stickied: bool = False


def parse_post(thing: Any) -> Optional[Post]:
    """Build a Post from a ``t3`` thing; return None for any other kind."""
    data = _thing_data(thing, "t3")
    if data is None:
        return None
    return Post(
        id=data.get("id", ""),
        full_id=data.get("name", ""),
        created=parse_timestamp(data.get("created_utc")),
        edited=parse_timestamp(data.get("edited")),
        permalink=data.get("permalink", ""),
        url=data.get("url", ""),
        title=data.get("title", ""),
        body=data.get("selftext", ""),
        likes=data.get("likes"),
        score=data.get("score", 0),
        upvote_ratio=float(data.get("upvote_ratio", 0)),
        number_of_comments=data.get("num_comments", 0),
        subreddit_name=data.get("subreddit", ""),
        subreddit_name_prefixed=data.get("subreddit_name_prefixed", ""),
        subreddit_id=data.get("subreddit_id", ""),
        subreddit_subscribers=data.get("subreddit_subscribers", 0),
        author=data.get("author", ""),
        author_id=data.get("author_fullname", ""),
        spoiler=data.get("spoiler", False),
        locked=data.get("locked", False),
        nsfw=data.get("over_18", False),
        is_self_post=data.get("is_self", False),
        saved=data.get("saved", False),
        stickied=data.get("stickied", False),
    )


class PermissionLevel(IntEnum):
    """Who may edit a wiki page."""

    SUBREDDIT_WIKI_PERMISSIONS = 0
    APPROVED_CONTRIBUTORS_ONLY = 1
    MODERATORS_ONLY = 2


@dataclass
class WikiPage:
    """A wiki page in a subreddit."""

    content: str = ""
    reason: str = ""
    may_revise: bool = False
    revision_id: str = ""
    revision_date: Optional[datetime] = None
    revision_by: Optional[User] = None


def parse_wiki_page(data: Mapping[str, Any]) -> WikiPage:
    """Build a WikiPage from the data of a ``wikipage`` thing."""
    return WikiPage(
        content=data.get("content_md", ""),
        reason=data.get("reason") or "",
        may_revise=data.get("may_revise", False),
        revision_id=data.get("revision_id") or "",
        revision_date=parse_timestamp(data.get("revision_date")),
        revision_by=parse_user(data.get("revision_by")),
    )


@dataclass
class WikiPageEditRequest:
    """A request to edit a wiki page in a subreddit."""

    subreddit: str
    page: str
    content: str
    reason: str = ""  # optional, up to 256 characters

    def to_form(self) -> dict[str, str]:
        """Return the form fields sent with the edit."""
        form = {"page": self.page, "content": self.content}
        if self.reason:
            form["reason"] = self.reason
        return form


@dataclass
class WikiPageSettings:
    """Settings of a single wiki page."""

    permission_level: PermissionLevel = PermissionLevel.SUBREDDIT_WIKI_PERMISSIONS
    listed: bool = False
    editors: list[User] = field(default_factory=list)


def parse_wiki_page_settings(data: Mapping[str, Any]) -> WikiPageSettings:
    """Build WikiPageSettings from the data of a ``wikipagesettings`` thing."""
    editors = [user for user in map(parse_user, data.get("editors") or []) if user]
    return WikiPageSettings(
        permission_level=PermissionLevel(data.get("permlevel", 0)),
        listed=data.get("listed", False),
        editors=editors,
    )


@dataclass
class WikiPageSettingsUpdateRequest:
    """A request to change the visibility and permissions of a wiki page."""

    # Always sent: the API answers 500 without it.
    permission_level: PermissionLevel
    listed: Optional[bool] = None

    def to_form(self) -> dict[str, str]:
        """Return the form fields sent with the update."""
        form = {"permlevel": str(int(self.permission_level))}
        if self.listed is not None:
            form["listed"] = "true" if self.listed else "false"
        return form


@dataclass
class WikiPageRevision:
    """A revision of a wiki page."""

    id: str = ""
    page: str = ""
    created: Optional[datetime] = None
    reason: str = ""
    hidden: bool = False
    author: Optional[User] = None


def parse_wiki_page_revision(data: Mapping[str, Any]) -> WikiPageRevision:
    """Build a WikiPageRevision from one entry of a revision listing."""
    return WikiPageRevision(
        id=data.get("id", ""),
        page=data.get("page", ""),
        created=parse_timestamp(data.get("timestamp")),
        reason=data.get("reason") or "",
        hidden=data.get("revision_hidden", False),
        author=parse_user(data.get("author")),
    )


@dataclass
class ListOptions:
    """Paging options for listing endpoints."""

    limit: int = 0
    after: str = ""
    before: str = ""

    def to_params(self) -> dict[str, str]:
        """Return the query parameters, leaving out empty ones."""
        params: dict[str, str] = {}
        if self.limit:
            params["limit"] = str(self.limit)
        if self.after:
            params["after"] = self.after
        if self.before:
            params["before"] = self.before
        return params

    def replace(self, **changes: Any) -> "ListOptions":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)