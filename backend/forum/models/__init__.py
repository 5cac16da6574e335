# forum/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User: Forum account and credentials
- Session: Server-held login session referenced by bearer tokens
- Subject: Fixed topic category
- Post: Topic opened under a subject
- Reply: Answer to a post
"""
from .user import User
from .session import Session
from .subject import Subject
from .post import Post
from .reply import Reply
