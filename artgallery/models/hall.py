from sqlalchemy import Column, Integer, String, ForeignKey, JSON
from sqlalchemy.orm import relationship
from artgallery.db.session import Base


class Hall(Base):
    __tablename__ = "halls"

    id = Column(Integer, primary_key=True, index=True)
    gallery_id = Column(Integer, ForeignKey("galleries.id"), nullable=False, index=True)

    hall_name = Column(String, nullable=False)

    # Ordered list of image references / metadata objects
    images_data = Column(JSON, nullable=False, default=list)

    gallery = relationship("Gallery", back_populates="halls")
