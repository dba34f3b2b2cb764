"""Client for the wiki endpoints of the Reddit API."""

from __future__ import annotations

from typing import Any, Mapping, Optional

import requests

from redditwiki.models import (
    ListOptions,
    Post,
    WikiPage,
    WikiPageEditRequest,
    WikiPageRevision,
    WikiPageSettings,
    WikiPageSettingsUpdateRequest,
    parse_post,
    parse_wiki_page,
    parse_wiki_page_revision,
    parse_wiki_page_settings,
)

DEFAULT_BASE_URL = "https://oauth.reddit.com"
_REVISION_PREFIX = "WikiRevision_"


class APIError(Exception):
    """The API answered with a status outside the 2xx range."""

    def __init__(self, status_code: int, message: str, url: str) -> None:
        super().__init__(f"{status_code} {message} ({url})")
        self.status_code = status_code
        self.message = message
        self.url = url


def _thing_data(payload: Any, kind: str) -> Any:
    if isinstance(payload, Mapping) and payload.get("kind") == kind:
        return payload.get("data")
    return None


def _with_revision_prefix(opts: Optional[ListOptions]) -> Optional[ListOptions]:
    if opts is None:
        return None

    def prefixed(value: str) -> str:
        if value and not value.startswith(_REVISION_PREFIX):
            return _REVISION_PREFIX + value
        return value

    return opts.replace(after=prefixed(opts.after), before=prefixed(opts.before))


class WikiService:
    """Wiki related calls of the Reddit API."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url.rstrip("/")

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        form: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        url = f"{self.base_url}/{path}"
        response = self.session.request(method, url, params=params or None, data=form)
        if not 200 <= response.status_code < 300:
            try:
                body = response.json()
                message = body.get("message") if isinstance(body, dict) else None
            except ValueError:
                message = None
            raise APIError(response.status_code, message or response.text, url)
        return response

    def _get(self, path: str, params: Optional[Mapping[str, str]] = None) -> Any:
        return self._request("GET", path, params=params).json()

    def _post(self, path: str, form: Mapping[str, str]) -> requests.Response:
        return self._request("POST", path, form=form)

    def page(self, subreddit: str, page: str) -> Optional[WikiPage]:
        """Get the current version of a wiki page."""
        return self.page_revision(subreddit, page, "")

    def page_revision(
        self, subreddit: str, page: str, revision_id: str
    ) -> Optional[WikiPage]:
        """Get a wiki page as it was at a revision; an empty id means the latest."""
        params = {"v": revision_id} if revision_id else None
        data = _thing_data(self._get(f"r/{subreddit}/wiki/{page}", params), "wikipage")
        return parse_wiki_page(data) if data is not None else None

    def pages(self, subreddit: str) -> list[str]:
        """List the names of the wiki pages in a subreddit."""
        data = _thing_data(self._get(f"r/{subreddit}/wiki/pages"), "wikipagelisting")
        return list(data) if data else []

    def edit(self, edit_request: Optional[WikiPageEditRequest]) -> None:
        """Edit a wiki page."""
        if edit_request is None:
            raise ValueError("edit_request cannot be None")
        self._post(f"r/{edit_request.subreddit}/api/wiki/edit", edit_request.to_form())

    def revert(self, subreddit: str, page: str, revision_id: str) -> None:
        """Revert a wiki page to a revision."""
        self._post(
            f"r/{subreddit}/api/wiki/revert",
            {"page": page, "revision": revision_id},
        )

    def settings(self, subreddit: str, page: str) -> Optional[WikiPageSettings]:
        """Get the settings of a wiki page."""
        payload = self._get(f"r/{subreddit}/wiki/settings/{page}")
        data = _thing_data(payload, "wikipagesettings")
        return parse_wiki_page_settings(data) if data is not None else None

    def update_settings(
        self,
        subreddit: str,
        page: str,
        update_request: Optional[WikiPageSettingsUpdateRequest],
    ) -> Optional[WikiPageSettings]:
        """Change the settings of a wiki page and return the new settings."""
        if update_request is None:
            raise ValueError("update_request cannot be None")
        response = self._post(
            f"r/{subreddit}/wiki/settings/{page}", update_request.to_form()
        )
        data = _thing_data(response.json(), "wikipagesettings")
        return parse_wiki_page_settings(data) if data is not None else None

    def discussions(
        self, subreddit: str, page: str, opts: Optional[ListOptions] = None
    ) -> list[Post]:
        """List the posts that discuss a wiki page."""
        params = opts.to_params() if opts else None
        payload = self._get(f"r/{subreddit}/wiki/discussions/{page}", params)
        data = _thing_data(payload, "Listing") or {}
        return [post for post in map(parse_post, data.get("children") or []) if post]

    def toggle_visibility(self, subreddit: str, page: str, revision_id: str) -> bool:
        """Toggle the public visibility of a revision; return True if now hidden."""
        response = self._post(
            f"r/{subreddit}/api/wiki/hide",
            {"page": page, "revision": revision_id},
        )
        return bool(response.json().get("status", False))

    def _revisions(
        self, subreddit: str, page: str, opts: Optional[ListOptions]
    ) -> list[WikiPageRevision]:
        path = f"r/{subreddit}/wiki/revisions"
        if page:
            path += f"/{page}"
        opts = _with_revision_prefix(opts)
        params = opts.to_params() if opts else None
        payload = self._get(path, params)
        data = payload.get("data") or {} if isinstance(payload, Mapping) else {}
        return [parse_wiki_page_revision(child) for child in data.get("children") or []]

    def revisions(
        self, subreddit: str, opts: Optional[ListOptions] = None
    ) -> list[WikiPageRevision]:
        """List revisions of all pages in the wiki."""
        return self._revisions(subreddit, "", opts)

    def revisions_page(
        self, subreddit: str, page: str, opts: Optional[ListOptions] = None
    ) -> list[WikiPageRevision]:
        """List revisions of one wiki page; an empty page means all pages."""
        return self._revisions(subreddit, page, opts)

    def allow(self, subreddit: str, page: str, username: str) -> None:
        """Allow a user to edit a wiki page."""
        self._post(
            f"r/{subreddit}/api/wiki/alloweditor/add",
            {"page": page, "username": username},
        )

    def deny(self, subreddit: str, page: str, username: str) -> None:
        """Take away a user's permission to edit a wiki page."""
        self._post(
            f"r/{subreddit}/api/wiki/alloweditor/del",
            {"page": page, "username": username},
        )