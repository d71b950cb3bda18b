from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, field_validator

from artgallery.schemas.hall import HallIn

# Wire format is camelCase, so field names follow it directly.


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class GalleryCreate(BaseModel):
    title: str
    category: str
    startDate: datetime
    endDate: datetime
    description: str = ""
    posterUrl: Optional[str] = None
    halls: List[HallIn] = []

    @field_validator("startDate", "endDate")
    @classmethod
    def normalize_dates(cls, v: datetime) -> datetime:
        return _to_naive_utc(v)


class GalleryUpdate(BaseModel):
    """Partial update: only fields present in the body are written.

    ``posterUrl`` and ``description`` may be cleared with an explicit null,
    the required fields may not.
    """

    title: Optional[str] = None
    category: Optional[str] = None
    startDate: Optional[datetime] = None
    endDate: Optional[datetime] = None
    description: Optional[str] = None
    posterUrl: Optional[str] = None
    halls: List[HallIn] = []

    # Validators only run on supplied values, so omitted fields stay unset
    @field_validator("title", "category")
    @classmethod
    def reject_null_text(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("cannot be null")
        return v

    @field_validator("startDate", "endDate")
    @classmethod
    def normalize_dates(cls, v: Optional[datetime]) -> datetime:
        if v is None:
            raise ValueError("cannot be null")
        return _to_naive_utc(v)


# payload field -> Gallery column
GALLERY_COLUMNS = {
    "title": "title",
    "category": "category",
    "startDate": "start_date",
    "endDate": "end_date",
    "description": "description",
    "posterUrl": "poster_url",
}


def gallery_fields(data: GalleryCreate | GalleryUpdate, only_set: bool = False) -> dict:
    """Map the camelCase payload onto Gallery column names.

    With ``only_set`` the result holds just the fields the client sent, so a
    PUT never overwrites what it did not mention. Halls are handled
    separately and author fields are never taken from the payload.
    """
    values = data.model_dump(exclude_unset=only_set, exclude={"halls"})
    return {GALLERY_COLUMNS[field]: value for field, value in values.items()}
