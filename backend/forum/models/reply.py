# forum/models/reply.py
from tortoise import fields, models

class Reply(models.Model):
    id = fields.IntField(pk=True)
    post = fields.ForeignKeyField("models.Post", related_name="replies", on_delete=fields.CASCADE)

    content = fields.TextField()

    author = fields.ForeignKeyField("models.User", related_name="replies", on_delete=fields.CASCADE)
    author_name = fields.CharField(max_length=20)  # Username at creation time

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "replies"
