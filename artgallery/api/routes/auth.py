from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from artgallery.core.dependencies import get_db
from artgallery.core.jwt import create_principal_token
from artgallery.core.logging_config import get_logger
from artgallery.core.security import hash_password, verify_password
from artgallery.schemas.user import UserCreate, UserLogin, UserOut
from artgallery.services import user_service

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = get_logger().bind(log_type="auth")


# =====================================================================
#                           REGISTER
# =====================================================================
@router.post("/register")
def register(data: UserCreate, db: Session = Depends(get_db)):
    if user_service.get_user_by_email(db, data.email):
        raise HTTPException(status_code=400, detail="User already exists")

    if user_service.get_user_by_nickname(db, data.nickname):
        raise HTTPException(status_code=400, detail="Nickname already taken")

    user = user_service.create_user(
        db,
        nickname=data.nickname,
        email=data.email,
        contact=data.contact,
        password_hash=hash_password(data.password),
    )
    db.commit()

    logger.info(f"User Registered | User={user.id} | Nickname={user.nickname}")

    return {
        "success": True,
        "message": "User registered successfully",
        "data": UserOut.model_validate(user).model_dump(),
    }


# =====================================================================
#                           LOGIN
# =====================================================================
@router.post("/login")
def login(data: UserLogin, db: Session = Depends(get_db)):
    user = user_service.get_user_by_email(db, data.email)

    if not user or not verify_password(data.password, user.password_hash):
        logger.warning(f"Failed login | Email={data.email}")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_principal_token(user)

    return {
        "success": True,
        "message": "Login success",
        "data": {
            "access_token": token,
            "token_type": "bearer",
        },
    }
