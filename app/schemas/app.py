# app/schemas/app.py
from datetime import datetime
from pydantic import BaseModel
from typing import Optional

class AppResponse(BaseModel):
    id: str
    u_id: str
    s_id: str
    name: str
    description: Optional[str] = None
    visibility: str
    dust_api_project_id: str
    user_id: str
    created_at: datetime
    updated_at: datetime

class AppDetailResponse(AppResponse):
    saved_specification: Optional[str] = None

class AppSpecificationResponse(BaseModel):
    app_id: str
    saved_specification: str
