from pydantic import BaseModel
from typing import Optional


class CurrentUser(BaseModel):
    """Identity of the signed-in user, passed explicitly to every accessor call."""
    id: str
    email: Optional[str] = None


class SyncResult(BaseModel):
    status: str
    user_id: str
    new: bool


class LogoutResult(BaseModel):
    message: str
