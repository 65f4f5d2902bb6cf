# app/routers/providers.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Form, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.ids import new_record_id
from app.core.providers import KNOWN_PROVIDERS, get_provider_info, parse_config, missing_config_keys
from app.models.provider import Provider
from app.routers.users import get_user_or_404
from app.schemas.provider import ProviderResponse, AvailableProvider

router = APIRouter()
logger = logging.getLogger(__name__)


def _provider_response(provider: Provider) -> ProviderResponse:
    try:
        keys = sorted(parse_config(provider.config).keys())
    except ValueError:
        logger.warning("Stored config of provider %s is not a JSON object", provider.id)
        keys = []
    return ProviderResponse(
        id=provider.id,
        name=provider.name,
        user_id=provider.user_id,
        configured_keys=keys,
    )


@router.get("/available", response_model=List[AvailableProvider])
def available_providers():
    """
    List the model providers apps can be configured against.
    """
    return [
        AvailableProvider(provider_id=provider_id, name=info["name"], config_keys=info["config_keys"])
        for provider_id, info in KNOWN_PROVIDERS.items()
    ]


@router.post("/new", response_model=ProviderResponse)
def upsert_provider(
    user_id: str = Form(...),
    name: str = Form(...),
    config: str = Form(...),
    db: Session = Depends(get_db)
):
    """
    Create or replace a provider configuration for a user.

    - **user_id**: The ID of the user adding this provider.
    - **name**: The provider id, one of the available providers.
    - **config**: JSON object with the provider credentials.

    A user holds at most one configuration per provider name: posting again
    replaces the stored config.
    """
    get_user_or_404(db, user_id)

    if get_provider_info(name) is None:
        raise HTTPException(status_code=400, detail=f"Unknown provider: {name}")
    try:
        parsed = parse_config(config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    missing = missing_config_keys(name, parsed)
    if missing:
        raise HTTPException(
            status_code=400,
            detail=f"Provider config is missing: {', '.join(missing)}",
        )

    provider = (
        db.query(Provider)
        .filter(Provider.user_id == user_id, Provider.name == name)
        .first()
    )
    if provider:
        provider.config = config
        logger.info("Updated provider %s for user %s", name, user_id)
    else:
        provider = Provider(
            id=new_record_id(),
            name=name,
            config=config,
            user_id=user_id,
        )
        db.add(provider)
        logger.info("Created provider %s for user %s", name, user_id)
    db.commit()
    db.refresh(provider)
    return _provider_response(provider)


@router.get("/user/{user_id}", response_model=List[ProviderResponse])
def list_providers(user_id: str, db: Session = Depends(get_db)):
    get_user_or_404(db, user_id)
    providers = db.query(Provider).filter(Provider.user_id == user_id).order_by(Provider.name).all()
    return [_provider_response(provider) for provider in providers]


@router.delete("/delete/{provider_id}")
def delete_provider(provider_id: str, db: Session = Depends(get_db)):
    """
    Delete an existing provider configuration by its provider_id.
    """
    provider = db.query(Provider).filter(Provider.id == provider_id).first()
    if not provider:
        raise HTTPException(status_code=404, detail="Provider not found.")

    db.delete(provider)
    db.commit()
    logger.info("Deleted provider %s", provider_id)
    return {"detail": "Provider deleted successfully."}
