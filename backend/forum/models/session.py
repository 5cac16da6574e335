# forum/models/session.py
from tortoise import fields, models

class Session(models.Model):
    """
    Server-held login session.
    - token_id: random identifier carried (signed) inside the bearer token
    - expires_at: matches the token's exp claim
    - revoked: set on logout; a revoked session never authenticates again
    """
    id = fields.IntField(pk=True)
    token_id = fields.CharField(max_length=64, unique=True, index=True)
    user = fields.ForeignKeyField("models.User", related_name="sessions", on_delete=fields.CASCADE)
    created_at = fields.DatetimeField(auto_now_add=True)
    expires_at = fields.DatetimeField()
    revoked = fields.BooleanField(default=False)

    class Meta:
        table = "sessions"
