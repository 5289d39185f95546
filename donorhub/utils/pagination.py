import math

from sqlalchemy.orm import Query

from donorhub.config import settings


def clamp_page(page: int | None) -> int:
    if not page or page < 1:
        return 1
    return page


def clamp_limit(limit: int | None) -> int:
    if limit is None:
        return settings.DEFAULT_PAGE_SIZE
    if limit < 1:
        return 1
    return min(limit, settings.MAX_PAGE_SIZE)


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


def paginate(query: Query, page: int | None, limit: int | None) -> tuple[list, dict]:
    """Run ``query`` for one page and return ``(rows, meta)``.

    ``query`` must already carry its ordering; the count is taken on the same
    filters.
    """
    page = clamp_page(page)
    limit = clamp_limit(limit)
    total = query.order_by(None).count()
    offset = (page - 1) * limit
    # past the last page; also keeps oversized offsets away from the driver
    rows = query.offset(offset).limit(limit).all() if offset < total else []
    meta = {
        "page": page,
        "limit": limit,
        "total": total,
        "totalPages": total_pages(total, limit),
        "hasNext": page * limit < total,
    }
    return rows, meta
