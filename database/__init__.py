"""Process-wide document store instance."""
from config import Config
from database.db import InMemoryStore

db = InMemoryStore()
db.load_from_files(Config.PETS_DB_DIR)

__all__ = ["db", "InMemoryStore"]
