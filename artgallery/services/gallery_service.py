"""Gallery store: thin persistence functions over the ``galleries`` table.

Functions flush but never commit; the route that calls them owns the
transaction. Unresolvable ids raise ``NotFoundError``.
"""
from datetime import datetime

from sqlalchemy.orm import Session

from artgallery.core.exceptions import NotFoundError
from artgallery.models.gallery import Gallery, utcnow

DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100


def parse_id(raw) -> int:
    """Path ids arrive as strings; anything non-numeric cannot resolve."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise NotFoundError(f"Invalid id {raw!r}")


# --------------------------------------------------
# CREATE
# --------------------------------------------------
def create_gallery(db: Session, data: dict) -> Gallery:
    gallery = Gallery(**data)
    db.add(gallery)
    db.flush()
    db.refresh(gallery)
    return gallery


# --------------------------------------------------
# READ
# --------------------------------------------------
def get_all_galleries(db: Session) -> list[Gallery]:
    return db.query(Gallery).order_by(Gallery.id.asc()).all()


def get_filtered_galleries(
    db: Session,
    page: int | None = 1,
    per_page: int | None = DEFAULT_PER_PAGE,
    category: str | None = None,
    title: str | None = None,
    nickname: str | None = None,
) -> list[Gallery]:
    page = page if page and page > 0 else 1
    per_page = per_page if per_page and per_page > 0 else DEFAULT_PER_PAGE
    per_page = min(per_page, MAX_PER_PAGE)

    query = db.query(Gallery)

    if category:
        query = query.filter(Gallery.category == category)
    if title:
        # autoescape so "%" and "_" are matched literally
        query = query.filter(Gallery.title.icontains(title, autoescape=True))
    if nickname:
        query = query.filter(Gallery.nickname == nickname)

    return (
        query
        .order_by(Gallery.id.asc())
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )


def get_upcoming_galleries(db: Session, now: datetime | None = None) -> list[Gallery]:
    now = now or utcnow()
    return (
        db.query(Gallery)
        .filter(Gallery.start_date > now)
        .order_by(Gallery.start_date.asc(), Gallery.id.asc())
        .all()
    )


def get_todays_galleries(db: Session, now: datetime | None = None) -> list[Gallery]:
    now = now or utcnow()
    return (
        db.query(Gallery)
        .filter(Gallery.start_date <= now, Gallery.end_date >= now)
        .order_by(Gallery.start_date.asc(), Gallery.id.asc())
        .all()
    )


def get_gallery_by_id(db: Session, gallery_id) -> Gallery:
    gallery = db.query(Gallery).filter(Gallery.id == parse_id(gallery_id)).first()
    if not gallery:
        raise NotFoundError(f"Gallery {gallery_id} not found")
    return gallery


def get_user_own_galleries(db: Session, author_id) -> list[Gallery]:
    return (
        db.query(Gallery)
        .filter(Gallery.author_id == parse_id(author_id))
        .order_by(Gallery.id.asc())
        .all()
    )


def get_author_id(db: Session, gallery_id) -> int:
    row = (
        db.query(Gallery.author_id)
        .filter(Gallery.id == parse_id(gallery_id))
        .first()
    )
    if row is None:
        raise NotFoundError(f"Gallery {gallery_id} not found")
    return row[0]


# --------------------------------------------------
# UPDATE / DELETE
# --------------------------------------------------
def update_gallery_by_id(db: Session, gallery_id, patch: dict) -> Gallery:
    gallery = get_gallery_by_id(db, gallery_id)

    # Callers pass only the fields to replace; None clears a nullable column
    for field, value in patch.items():
        setattr(gallery, field, value)

    db.flush()
    return gallery


def delete_gallery_by_id(db: Session, gallery_id) -> None:
    gallery = get_gallery_by_id(db, gallery_id)
    db.delete(gallery)
    db.flush()
