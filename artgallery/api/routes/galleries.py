from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from artgallery.core.dependencies import get_db, get_current_principal
from artgallery.core.exceptions import GalleryAPIError, ForbiddenError
from artgallery.core.logging_config import get_logger
from artgallery.models.gallery import Gallery
from artgallery.models.hall import Hall
from artgallery.schemas.gallery import GalleryCreate, GalleryUpdate, gallery_fields
from artgallery.schemas.hall import HallSummary
from artgallery.schemas.user import Principal
from artgallery.services import gallery_service, hall_service, user_service

router = APIRouter(prefix="/galleries", tags=["Galleries"])
logger = get_logger().bind(log_type="gallery")

PREVIEW_QUERIES = {
    "upcoming": gallery_service.get_upcoming_galleries,
    "todays": gallery_service.get_todays_galleries,
}


# ---------------------------------------------------------------------
# RESPONSE SHAPING
# ---------------------------------------------------------------------
def ok(message: str, data=None):
    body = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    return body


def preview_date(value) -> str:
    # YYYY-MM-DD, whatever time component was stored
    return value.isoformat().replace("T", " ")[:10]


def serialize_gallery(gallery: Gallery) -> dict:
    return {
        "objectId": str(gallery.id),
        "authorId": str(gallery.author_id),
        "nickname": gallery.nickname,
        "title": gallery.title,
        "category": gallery.category,
        "startDate": gallery.start_date.isoformat(),
        "endDate": gallery.end_date.isoformat(),
        "description": gallery.description,
        "posterUrl": gallery.poster_url,
    }


def serialize_hall(hall: Hall) -> dict:
    return {
        "hallId": str(hall.id),
        "hallName": hall.hall_name,
        "imagesData": hall.images_data,
    }


def require_owner(db: Session, gallery_id: str, principal: Principal):
    author_id = gallery_service.get_author_id(db, gallery_id)

    # Stored ids are ints, token ids are strings
    if principal.id != str(author_id):
        raise ForbiddenError()


# =====================================================================
# LIST ALL GALLERIES
# =====================================================================
@router.get("")
def get_all_galleries(db: Session = Depends(get_db)):
    try:
        galleries = gallery_service.get_all_galleries(db)
    except Exception as e:
        logger.exception(f"List galleries failed | {e}")
        raise GalleryAPIError("failed Get Gallery") from e

    return ok("get galleries success", [serialize_gallery(g) for g in galleries])


# =====================================================================
# FILTERED / PAGINATED SEARCH
# =====================================================================
@router.get("/filtering")
def get_filtered_galleries(
    page: int = Query(1),
    per_page: int = Query(gallery_service.DEFAULT_PER_PAGE, alias="perPage"),
    category: str | None = None,
    title: str | None = None,
    nickname: str | None = None,
    db: Session = Depends(get_db),
):
    try:
        galleries = gallery_service.get_filtered_galleries(
            db,
            page=page,
            per_page=per_page,
            category=category,
            title=title,
            nickname=nickname,
        )
    except Exception as e:
        logger.exception(f"Filter galleries failed | {e}")
        raise GalleryAPIError("failed Get Gallery") from e

    return ok("get galleries success", [serialize_gallery(g) for g in galleries])


# =====================================================================
# PREVIEW (upcoming | todays)
# =====================================================================
@router.get("/preview/{code}")
def get_preview_galleries(code: str, db: Session = Depends(get_db)):
    query = PREVIEW_QUERIES.get(code)
    if query is None:
        logger.warning(f"Unknown preview code {code!r}")
        raise GalleryAPIError("failed Get Gallery")

    try:
        results = []
        for gallery in query(db):
            author = user_service.get_user_by_id(db, gallery.author_id)
            results.append({
                "title": gallery.title,
                "author": {
                    "nickname": author.nickname,
                    "contact": author.contact,
                    "email": author.email,
                },
                "objectId": str(gallery.id),
                "posterUrl": gallery.poster_url,
                "description": gallery.description,
                "startDate": preview_date(gallery.start_date),
                "endDate": preview_date(gallery.end_date),
            })
    except Exception as e:
        logger.exception(f"Preview {code} failed | {e}")
        raise GalleryAPIError("failed Get Gallery") from e

    return ok("get galleries success", results)


# =====================================================================
# MY GALLERIES (auth)
# =====================================================================
@router.get("/myGallery")
def get_my_galleries(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    try:
        galleries = gallery_service.get_user_own_galleries(db, principal.id)
    except Exception as e:
        logger.exception(f"My galleries failed | user={principal.id} | {e}")
        raise GalleryAPIError("failed get Gallery") from e

    return ok("success get Gallery", [serialize_gallery(g) for g in galleries])


# =====================================================================
# GALLERY DETAIL (+ halls + author)
# =====================================================================
@router.get("/{gallery_id}")
def get_gallery_by_id(gallery_id: str, db: Session = Depends(get_db)):
    try:
        gallery = gallery_service.get_gallery_by_id(db, gallery_id)
        halls = hall_service.get_hall_by_gallery_id(db, gallery_id)
        user = user_service.get_user_by_id(db, gallery.author_id)
    except Exception as e:
        logger.exception(f"Get gallery {gallery_id} failed | {e}")
        raise GalleryAPIError("failed Get Gallery") from e

    return ok("Get Gallery", {
        "authorId": str(gallery.author_id),
        "author": {
            "email": user.email,
            "nickname": user.nickname,
            "contact": user.contact,
        },
        "title": gallery.title,
        "category": gallery.category,
        "startDate": gallery.start_date.isoformat(),
        "endDate": gallery.end_date.isoformat(),
        "description": gallery.description,
        "posterUrl": gallery.poster_url,
        "halls": [
            HallSummary(hallId=str(h.id), hallName=h.hall_name).model_dump()
            for h in halls
        ],
    })


# =====================================================================
# CREATE GALLERY + HALLS (auth)
# =====================================================================
@router.post("")
def create_gallery(
    data: GalleryCreate,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    try:
        gallery = gallery_service.create_gallery(db, {
            **gallery_fields(data),
            "author_id": int(principal.id),
            "nickname": principal.nickname,
        })

        halls = [
            hall_service.create_hall(db, {
                "gallery_id": gallery.id,
                "hall_name": hall.hallName,
                "images_data": hall.imagesData or [],
            })
            for hall in data.halls
        ]

        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception(f"Create gallery failed | user={principal.id} | {e}")
        raise GalleryAPIError("failed Creating Gallery") from e

    logger.info(
        f"Gallery Created | User={principal.id} | Gallery={gallery.id} | Halls={len(halls)}"
    )

    payload = serialize_gallery(gallery)
    payload["halls"] = [serialize_hall(h) for h in halls]
    return ok("Created Gallery", payload)


# =====================================================================
# UPDATE GALLERY + HALLS (auth + ownership)
# =====================================================================
@router.put("/{gallery_id}")
def update_gallery_by_id(
    gallery_id: str,
    data: GalleryUpdate,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    try:
        require_owner(db, gallery_id, principal)

        gallery = gallery_service.update_gallery_by_id(
            db, gallery_id, gallery_fields(data, only_set=True)
        )

        halls = [
            hall_service.update_hall_by_id(
                db,
                hall.hallObjectId,
                {"hall_name": hall.hallName, "images_data": hall.imagesData},
                gallery_id=gallery_id,
            )
            for hall in data.halls
        ]

        db.commit()
    except ForbiddenError:
        db.rollback()
        logger.warning(f"Update forbidden | user={principal.id} | gallery={gallery_id}")
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Update gallery {gallery_id} failed | user={principal.id} | {e}")
        raise GalleryAPIError("failed Updating Gallery") from e

    logger.info(
        f"Gallery Updated | User={principal.id} | Gallery={gallery_id} | Halls={len(halls)}"
    )

    payload = serialize_gallery(gallery)
    payload["halls"] = [serialize_hall(h) for h in halls]
    return ok("Updated Gallery", payload)


# =====================================================================
# DELETE GALLERY + HALLS (auth + ownership)
# =====================================================================
@router.delete("/{gallery_id}")
def delete_gallery_by_id(
    gallery_id: str,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    try:
        require_owner(db, gallery_id, principal)

        # Halls first, they must never outlive the gallery
        removed = hall_service.delete_hall_by_gallery_id(db, gallery_id)
        gallery_service.delete_gallery_by_id(db, gallery_id)

        db.commit()
    except ForbiddenError:
        db.rollback()
        logger.warning(f"Delete forbidden | user={principal.id} | gallery={gallery_id}")
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Delete gallery {gallery_id} failed | user={principal.id} | {e}")
        raise GalleryAPIError("failed Deleting Gallery") from e

    logger.info(f"Gallery Deleted | User={principal.id} | Gallery={gallery_id} | Halls={removed}")

    return ok("delete gallery success.")
