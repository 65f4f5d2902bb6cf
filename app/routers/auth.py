# app/routers/auth.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.ids import new_record_id
from app.models.user import User
from app.schemas.auth import AuthRequest, AuthResponse, UserApp, UserProvider

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/login", response_model=AuthResponse)
def auth(payload: AuthRequest, db: Session = Depends(get_db)):
    """
    Receives the GitHub identity of a signed-in user.
    If no user exists for that github_id, creates one; otherwise refreshes
    the stored username, email and name from the payload.
    Returns the user's info along with their apps and providers.
    """
    # 1. Check if the user exists
    user = db.query(User).filter(User.github_id == payload.github_id).first()

    # 2. Create or refresh the user
    if not user:
        user = User(
            id=new_record_id(),
            github_id=payload.github_id,
            username=payload.username,
            email=payload.email,
            name=payload.name,
        )
        db.add(user)
        logger.info("Created user %s for github_id %s", user.id, payload.github_id)
    else:
        user.username = payload.username
        user.email = payload.email
        user.name = payload.name
    db.commit()
    db.refresh(user)

    # 3. Summaries of the user's apps and providers
    app_list = [
        UserApp(
            id=app.id,
            s_id=app.s_id,
            name=app.name,
            description=app.description,
            visibility=app.visibility,
        )
        for app in user.apps
    ]
    provider_list = [
        UserProvider(id=provider.id, name=provider.name)
        for provider in user.providers
    ]

    return AuthResponse(
        user_id=user.id,
        github_id=user.github_id,
        username=user.username,
        email=user.email,
        name=user.name,
        apps=app_list,
        providers=provider_list,
    )
