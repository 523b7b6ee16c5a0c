"""Query parameters shared by list endpoints."""

from fastapi import Query

MAX_PAGE_SIZE = 100


class Page:
    """``limit``/``offset`` pagination. No limit returns every match."""

    def __init__(
        self,
        limit: int | None = Query(None, ge=1, le=MAX_PAGE_SIZE),
        offset: int = Query(0, ge=0),
    ):
        self.limit = limit
        self.offset = offset
