"""Author directory: profile lookups for joining into gallery payloads."""
from sqlalchemy.orm import Session

from artgallery.core.exceptions import NotFoundError
from artgallery.models.user import User
from artgallery.services.gallery_service import parse_id


def get_user_by_id(db: Session, user_id) -> User:
    user = db.query(User).filter(User.id == parse_id(user_id)).first()
    if not user:
        raise NotFoundError(f"User {user_id} not found")
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def get_user_by_nickname(db: Session, nickname: str) -> User | None:
    return db.query(User).filter(User.nickname == nickname).first()


def create_user(db: Session, nickname: str, email: str, password_hash: str, contact: str | None = None) -> User:
    user = User(
        nickname=nickname,
        email=email,
        contact=contact,
        password_hash=password_hash,
    )
    db.add(user)
    db.flush()
    db.refresh(user)
    return user
