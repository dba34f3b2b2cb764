# redditwiki

A small client for the wiki endpoints of the Reddit API. It reads pages and
their revisions, edits and reverts pages, reads and changes page settings,
lists the posts that discuss a page, hides or shows revisions, and manages
who may edit a page.

## Installation

```
pip install redditwiki
```

## Usage

`WikiService(session, base_url)` sends its requests through a
`requests.Session`. The session must already carry authentication. If no
session is given, a new, unauthenticated one is created. `base_url` defaults
to Reddit's OAuth API host. A trailing slash on it is ignored.

```python
import requests

from redditwiki.models import (
    ListOptions,
    PermissionLevel,
    WikiPageEditRequest,
    WikiPageSettingsUpdateRequest,
)
from redditwiki.service import APIError, WikiService

session = requests.Session()
session.headers["Authorization"] = "Bearer token"

wiki = WikiService(session)

page = wiki.page("mysubreddit", "index")
print(page.content, page.revision_by.name if page.revision_by else None)

old = wiki.page_revision("mysubreddit", "index", "some-revision-id")

print(wiki.pages("mysubreddit"))          # e.g. ["faq", "index"]

wiki.edit(WikiPageEditRequest(
    subreddit="mysubreddit",
    page="index",
    content="# Hello",
    reason="first edit",
))

settings = wiki.update_settings(
    "mysubreddit",
    "index",
    WikiPageSettingsUpdateRequest(
        permission_level=PermissionLevel.APPROVED_CONTRIBUTORS_ONLY,
        listed=False,
    ),
)
print(settings.permission_level, settings.listed, [u.name for u in settings.editors])

for revision in wiki.revisions_page("mysubreddit", "index", ListOptions(limit=10)):
    print(revision.id, revision.created, revision.reason)

hidden = wiki.toggle_visibility("mysubreddit", "index", "some-revision-id")

wiki.allow("mysubreddit", "index", "someuser")
wiki.deny("mysubreddit", "index", "someuser")
```

### `WikiService` methods

| Method | What it does |
| --- | --- |
| `page(subreddit, page)` | Current version of a page, as a `WikiPage` |
| `page_revision(subreddit, page, revision_id)` | A page at a given revision; an empty id means the latest |
| `pages(subreddit)` | Names of the wiki pages |
| `edit(edit_request)` | Edit a page from a `WikiPageEditRequest` |
| `revert(subreddit, page, revision_id)` | Revert a page to a revision |
| `settings(subreddit, page)` | A page's `WikiPageSettings` |
| `update_settings(subreddit, page, update_request)` | Change settings; returns the new `WikiPageSettings` |
| `discussions(subreddit, page, opts)` | Posts about a page, as `Post` objects |
| `toggle_visibility(subreddit, page, revision_id)` | Hide or show a revision; `True` if it is now hidden |
| `revisions(subreddit, opts)` | Revisions of all pages, as `WikiPageRevision` objects |
| `revisions_page(subreddit, page, opts)` | Revisions of one page; an empty page means all pages |
| `allow(subreddit, page, username)` | Let a user edit a page |
| `deny(subreddit, page, username)` | Stop a user from editing a page |

### Models

`redditwiki.models` holds the dataclasses `User`, `Post`, `WikiPage`,
`WikiPageSettings`, `WikiPageRevision`, `WikiPageEditRequest`,
`WikiPageSettingsUpdateRequest` and `ListOptions`. It also holds the
`PermissionLevel` enum, whose members are `SUBREDDIT_WIKI_PERMISSIONS`,
`APPROVED_CONTRIBUTORS_ONLY` and `MODERATORS_ONLY`.

The parsers `parse_timestamp`, `parse_user`, `parse_post`, `parse_wiki_page`,
`parse_wiki_page_settings` and `parse_wiki_page_revision` turn API JSON into
these types. Timestamps become timezone-aware UTC datetimes. A `false`
timestamp, which the API sends for posts that were never edited, becomes
`datetime(1, 1, 1, tzinfo=timezone.utc)`.

`ListOptions(limit, after, before)` leaves empty values out of the query.
The revision listings add the `WikiRevision_` prefix to `after` and `before`
when it is missing. The caller's `ListOptions` object is left unchanged.

### Errors

- A response with a status outside the 2xx range raises
  `redditwiki.service.APIError`. It has `status_code`, `message` and `url`.
- Passing `None` instead of a request object to `edit` or `update_settings`
  raises `ValueError`.

## What it does not do

The package covers the wiki endpoints only. It does not obtain or refresh
OAuth tokens, and it does not handle rate limits. Authentication is whatever
the `requests.Session` you pass in carries. Other parts of the Reddit API,
such as posting, commenting, messaging and moderation outside the wiki, are
not included.

## Running the tests

```
pip install -e ".[test]"
pytest
```