# app/schemas/user.py
from datetime import datetime
from pydantic import BaseModel

class UserResponse(BaseModel):
    id: str
    github_id: str
    username: str
    email: str
    name: str
    created_at: datetime
    updated_at: datetime
