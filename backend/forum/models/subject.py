# forum/models/subject.py
from tortoise import fields, models

class Subject(models.Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=64, unique=True)  # Seeded once, read-only afterwards

    class Meta:
        table = "subjects"
