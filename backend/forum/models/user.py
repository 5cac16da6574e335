# forum/models/user.py
"""
Database model for users.
Represents a forum account: login credentials, contact email and admin flag.
"""
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Relationships:
    - Has many Posts (via related_name="posts")
    - Has many Replies (via related_name="replies")
    - Has many Sessions (via related_name="sessions")

    Security:
    - Password is stored as an Argon2 hash, never returned by the API
    - Username and email are unique (enforced by the database)
    - is_admin is only changed through the admin set-admin endpoint
    """
    id = fields.IntField(pk=True)
    username = fields.CharField(max_length=20, unique=True, index=True)  # 3-20 chars of [A-Za-z0-9_]
    email = fields.CharField(max_length=254, unique=True)
    password_hash = fields.CharField(max_length=255)
    is_admin = fields.BooleanField(default=False)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"

    def __str__(self) -> str:
        return self.username
