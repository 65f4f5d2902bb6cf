# app/schemas/auth.py
from pydantic import BaseModel
from typing import List, Optional

class UserApp(BaseModel):
    id: str
    s_id: str
    name: str
    description: Optional[str] = None
    visibility: str

class UserProvider(BaseModel):
    id: str
    name: str

class AuthRequest(BaseModel):
    github_id: str
    username: str
    email: str
    name: str

class AuthResponse(BaseModel):
    user_id: str
    github_id: str
    username: str
    email: str
    name: str
    apps: List[UserApp] = []
    providers: List[UserProvider] = []
