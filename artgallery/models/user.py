from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from artgallery.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    nickname = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    contact = Column(String, nullable=True)
    password_hash = Column(String, nullable=False)

    # Weak reference: galleries never cascade from here
    galleries = relationship("Gallery", back_populates="author")
