import datetime

import pydantic

from scm_client.models import base


class ListOptions(pydantic.BaseModel):
    """Pagination parameters for list calls, zero meaning "omit"."""

    page: int = 0
    size: int = 0


class Page(base.BaseModel):
    first: int = 0
    next: int = 0
    prev: int = 0
    last: int = 0
    next_url: str = ''


class Rate(base.BaseModel):
    limit: int = 0
    remaining: int = 0
    reset: int = 0  # epoch seconds

    @property
    def reset_at(self) -> datetime.datetime | None:
        if not self.reset:
            return None
        return datetime.datetime.fromtimestamp(self.reset, datetime.UTC)


class ResponseMeta(base.BaseModel):
    """Request id, pagination and rate-limit data from response headers."""

    id: str = ''
    status: int = 0
    headers: dict[str, str] = {}
    page: Page = Page()
    rate: Rate = Rate()
