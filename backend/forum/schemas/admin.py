# forum/schemas/admin.py
"""
Pydantic schemas for admin endpoints.
"""
from pydantic import BaseModel, Field

class SetAdminIn(BaseModel):
    """
    Request model for granting or revoking the admin flag.
    Accepts both "isAdmin" and "is_admin" keys.
    """
    username: str = Field(min_length=1)
    isAdmin: bool = Field(alias="is_admin")

    class Config:
        """Pydantic configuration: allow both field name and alias for population."""
        populate_by_name = True


class SetAdminOut(BaseModel):
    username: str
    isAdmin: bool
