# app/schemas/provider.py
from pydantic import BaseModel
from typing import List

class ProviderResponse(BaseModel):
    id: str
    name: str
    user_id: str
    configured_keys: List[str] = []  # Keys present in the stored config, never their values

class AvailableProvider(BaseModel):
    provider_id: str
    name: str
    config_keys: List[str]
