from pydantic import BaseModel, field_validator
from typing import Any, List, Optional


class HallIn(BaseModel):
    hallName: str
    # Required on update, ignored on create
    hallObjectId: Optional[str] = None
    # None leaves stored images untouched on update
    imagesData: Optional[List[Any]] = None

    @field_validator("hallObjectId", mode="before")
    @classmethod
    def stringify_id(cls, v):
        return str(v) if v is not None else v


class HallSummary(BaseModel):
    hallId: str
    hallName: str
