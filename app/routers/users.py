# app/routers/users.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.user import User
from app.schemas.user import UserResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def get_user_or_404(db: Session, user_id: str) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        logger.warning("User %s not found", user_id)
        raise HTTPException(status_code=404, detail="User not found.")
    return user


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, db: Session = Depends(get_db)):
    user = get_user_or_404(db, user_id)
    return UserResponse(
        id=user.id,
        github_id=user.github_id,
        username=user.username,
        email=user.email,
        name=user.name,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.delete("/delete/{user_id}")
def delete_user(user_id: str, db: Session = Depends(get_db)):
    """
    Delete a user along with every app and provider they own.
    """
    user = get_user_or_404(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s", user_id)
    return {"detail": "User and all associated data deleted successfully."}
