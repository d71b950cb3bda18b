from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from artgallery.db.session import Base


def utcnow():
    """Naive UTC now, matching how gallery dates are stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Gallery(Base):
    __tablename__ = "galleries"

    id = Column(Integer, primary_key=True, index=True)

    # Ownership (captured from the caller, never from the body)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    nickname = Column(String, nullable=False, index=True)

    title = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    description = Column(Text, default="")
    poster_url = Column(String, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)

    # RELATIONSHIPS -------------------------------------

    author = relationship("User", back_populates="galleries")

    # Halls are removed explicitly before the gallery, see delete route
    halls = relationship(
        "Hall",
        back_populates="gallery",
        order_by="Hall.id",
        passive_deletes=True
    )
