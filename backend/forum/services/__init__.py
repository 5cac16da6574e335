# forum/services/__init__.py
"""
Service layer.
- auth: registration, login and session token resolution
- content: subjects, posts and replies
"""
