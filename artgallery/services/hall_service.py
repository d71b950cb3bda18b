"""Hall store. Halls always belong to an existing gallery."""
from sqlalchemy.orm import Session

from artgallery.core.exceptions import NotFoundError
from artgallery.models.gallery import Gallery
from artgallery.models.hall import Hall
from artgallery.services.gallery_service import parse_id


def _require_gallery(db: Session, gallery_id) -> int:
    gid = parse_id(gallery_id)
    if not db.query(Gallery.id).filter(Gallery.id == gid).first():
        raise NotFoundError(f"Gallery {gallery_id} not found")
    return gid


def create_hall(db: Session, data: dict) -> Hall:
    gallery_id = _require_gallery(db, data["gallery_id"])

    hall = Hall(
        gallery_id=gallery_id,
        hall_name=data["hall_name"],
        images_data=list(data.get("images_data") or []),
    )
    db.add(hall)
    db.flush()
    db.refresh(hall)
    return hall


def update_hall_by_id(db: Session, hall_id, patch: dict, gallery_id=None) -> Hall:
    """Replace the given hall fields.

    When ``gallery_id`` is passed the hall must already belong to it, so an
    update can never move a hall into someone else's gallery.
    """
    if hall_id is None:
        raise NotFoundError("Hall id missing")

    hall = db.query(Hall).filter(Hall.id == parse_id(hall_id)).first()
    if not hall:
        raise NotFoundError(f"Hall {hall_id} not found")

    if gallery_id is not None and hall.gallery_id != parse_id(gallery_id):
        raise NotFoundError(f"Hall {hall_id} not found in gallery {gallery_id}")

    if patch.get("hall_name") is not None:
        hall.hall_name = patch["hall_name"]
    if patch.get("images_data") is not None:
        hall.images_data = list(patch["images_data"])

    db.flush()
    return hall


def get_hall_by_gallery_id(db: Session, gallery_id) -> list[Hall]:
    return (
        db.query(Hall)
        .filter(Hall.gallery_id == parse_id(gallery_id))
        .order_by(Hall.id.asc())
        .all()
    )


def delete_hall_by_gallery_id(db: Session, gallery_id) -> int:
    gid = _require_gallery(db, gallery_id)

    deleted = (
        db.query(Hall)
        .filter(Hall.gallery_id == gid)
        .delete()
    )
    db.flush()
    return deleted
