# Importing the models registers them with Base.metadata (Alembic, create_all)
from notedesk.models.note import Note
from notedesk.models.user import User

__all__ = ["Note", "User"]
