# app/routers/apps.py
import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Form, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.ids import new_record_id, new_app_uid, app_sid
from app.models.app import App
from app.routers.users import get_user_or_404
from app.schemas.app import AppResponse, AppDetailResponse, AppSpecificationResponse

router = APIRouter()
logger = logging.getLogger(__name__)

Visibility = Literal["public", "private"]
DEFAULT_VISIBILITY = "private"


def _app_response(app: App) -> AppResponse:
    return AppResponse(
        id=app.id,
        u_id=app.u_id,
        s_id=app.s_id,
        name=app.name,
        description=app.description,
        visibility=app.visibility,
        dust_api_project_id=app.dust_api_project_id,
        user_id=app.user_id,
        created_at=app.created_at,
        updated_at=app.updated_at,
    )


def _get_app_or_404(db: Session, app_id: str) -> App:
    app = db.query(App).filter(App.id == app_id).first()
    if not app:
        logger.warning("App %s not found", app_id)
        raise HTTPException(status_code=404, detail="App not found.")
    return app


@router.post("/new", response_model=AppResponse)
def create_app(
    user_id: str = Form(...),
    name: str = Form(...),
    dust_api_project_id: str = Form(...),
    description: Optional[str] = Form(None),
    visibility: Visibility = Form(DEFAULT_VISIBILITY),
    db: Session = Depends(get_db)
):
    """
    Create a new app owned by a user.

    - **user_id**: The owning user.
    - **name**: The app name.
    - **dust_api_project_id**: The project backing the app in the runtime.
    - **description** and **visibility** are optional.

    A uId is generated for the app and its sId is derived from it.
    """
    get_user_or_404(db, user_id)

    u_id = new_app_uid()
    new_app = App(
        id=new_record_id(),
        u_id=u_id,
        s_id=app_sid(u_id),
        name=name,
        description=description,
        visibility=visibility,
        dust_api_project_id=dust_api_project_id,
        user_id=user_id,
    )
    db.add(new_app)
    db.commit()
    db.refresh(new_app)
    logger.info("Created app %s (%s) for user %s", new_app.id, new_app.s_id, user_id)
    return _app_response(new_app)


@router.get("/user/{user_id}", response_model=List[AppResponse])
def list_apps(user_id: str, db: Session = Depends(get_db)):
    get_user_or_404(db, user_id)
    apps = db.query(App).filter(App.user_id == user_id).order_by(App.created_at).all()
    return [_app_response(app) for app in apps]


@router.get("/{app_id}", response_model=AppDetailResponse)
def get_app(app_id: str, db: Session = Depends(get_db)):
    app = _get_app_or_404(db, app_id)
    return AppDetailResponse(
        **_app_response(app).model_dump(),
        saved_specification=app.saved_specification,
    )


@router.patch("/update", response_model=AppResponse)
def update_app(
    app_id: str = Form(...),
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    visibility: Optional[Visibility] = Form(None),
    clear_description: bool = Form(False),
    db: Session = Depends(get_db)
):
    """
    Update the settings of an existing app. Fields left out are unchanged.

    An empty form value reads as left out, so unsetting the description
    goes through **clear_description**.
    """
    app = _get_app_or_404(db, app_id)
    if name is not None:
        app.name = name
    if clear_description:
        app.description = None
    elif description is not None:
        app.description = description
    if visibility is not None:
        app.visibility = visibility
    db.commit()
    db.refresh(app)
    return _app_response(app)


@router.patch("/specification", response_model=AppSpecificationResponse)
def save_specification(
    app_id: str = Form(...),
    saved_specification: str = Form(...),
    db: Session = Depends(get_db)
):
    """
    Store the latest specification of an app, replacing the previous one.
    """
    app = _get_app_or_404(db, app_id)
    app.saved_specification = saved_specification
    db.commit()
    db.refresh(app)
    return AppSpecificationResponse(app_id=app.id, saved_specification=app.saved_specification)


@router.delete("/delete/{app_id}")
def delete_app(app_id: str, db: Session = Depends(get_db)):
    app = _get_app_or_404(db, app_id)
    db.delete(app)
    db.commit()
    logger.info("Deleted app %s", app_id)
    return {"detail": "App deleted successfully."}
