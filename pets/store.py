"""Read access to pet records, scoped by session."""
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from auth.models import Session
from database import db, InMemoryStore
from pets.models import Pet
from utils.logger import get_logger

logger = get_logger("pets.store")

PETS_COLLECTION = "pets"


class PetStore:
    """Owner-scoped, read-only view over the pets collection."""

    def __init__(self, store: InMemoryStore = db):
        self._store = store

    def _to_pet(self, doc) -> Optional[Pet]:
        try:
            return Pet.model_validate(doc)
        except PydanticValidationError as e:
            logger.warning(f"Skipping malformed pet record {doc.get('id')}: {e}")
            return None

    def list_pets(self, session: Session) -> List[Pet]:
        docs = self._store.find(PETS_COLLECTION, owner_id=session.user_id)
        pets = [p for p in (self._to_pet(d) for d in docs) if p is not None]
        logger.info(f"Listed {len(pets)} pets for user {session.user_id}")
        return pets


pet_store = PetStore()
