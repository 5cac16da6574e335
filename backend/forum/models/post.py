# forum/models/post.py
"""
Database model for posts.
A post is a topic opened by a user under one subject; replies hang off it.
"""
from tortoise import fields, models

class Post(models.Model):
    """
    Post database model.

    Relationships:
    - Belongs to a User (author, many-to-one); author never changes after creation
    - Belongs to a Subject (many-to-one)
    - Has many Replies (via related_name="replies"); deleting a post deletes its replies
    """
    id = fields.IntField(pk=True)
    title = fields.CharField(max_length=200)
    content = fields.TextField()
    author = fields.ForeignKeyField(
        "models.User",
        related_name="posts",
        on_delete=fields.CASCADE,
    )
    author_name = fields.CharField(max_length=20)  # Author's username at creation time
    subject = fields.ForeignKeyField(
        "models.Subject",
        related_name="posts",
        on_delete=fields.RESTRICT,
    )
    created_at = fields.DatetimeField(auto_now_add=True, index=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "posts"
