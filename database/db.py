"""In-memory document store backing the read-only pet store."""
import os
import json
from uuid import uuid4
from threading import Lock
from typing import Dict, Any, Optional, List

from utils.logger import get_logger

logger = get_logger("database")


class InMemoryStore:
    """A tiny thread-safe in-memory DB with Mongo-like read semantics.

    - Collections: arbitrary string keys (e.g. 'pets')
    - Each collection is a dict of id -> document
    - find supports simple equality matching across top-level keys
    - owner scoping is supported by passing owner_id to queries (it filters by owner_id)
    """

    def __init__(self):
        self._lock = Lock()
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}

    def insert_one(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document into a collection."""
        with self._lock:
            docs = self._collections.setdefault(collection, {})
            doc = dict(document)
            if "id" not in doc:
                doc["id"] = str(uuid4())
            docs[doc["id"]] = doc
            return dict(doc)

    def find(self, collection: str, filter: Optional[Dict[str, Any]] = None, owner_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """Find documents matching the filter."""
        results = []
        with self._lock:
            for doc in self._collections.get(collection, {}).values():
                if owner_id is not None and doc.get("owner_id") != owner_id:
                    continue
                if filter and any(doc.get(k) != v for k, v in filter.items()):
                    continue
                results.append(dict(doc))
        return results

    def clear(self, collection: Optional[str] = None):
        """Drop one collection, or every collection when none is given."""
        with self._lock:
            if collection is None:
                self._collections.clear()
            else:
                self._collections.pop(collection, None)

    def load_from_files(self, db_folder: str) -> int:
        """
        Load collections from <db_folder>/<collection>.json if present.

        Each file is expected to look like { "<collection>": [ ...docs... ] }.
        Returns the number of documents loaded.
        """
        if not os.path.isdir(db_folder):
            logger.info(f"No seed directory at {db_folder}, starting empty")
            return 0

        loaded_count = 0
        for fname in sorted(os.listdir(db_folder)):
            if not fname.endswith(".json"):
                continue
            full = os.path.join(db_folder, fname)
            try:
                with open(full, "r", encoding="utf-8") as f:
                    payload = json.load(f)
            except (IOError, OSError) as e:
                logger.warning(f"Failed to read file {full}: {e}")
                continue
            except json.JSONDecodeError as e:
                logger.warning(f"Failed to parse JSON from {full}: {e}")
                continue

            if not isinstance(payload, dict):
                logger.warning(f"Invalid JSON structure in {fname}: expected dictionary")
                continue

            for coll_name, docs in payload.items():
                if not isinstance(docs, list):
                    logger.warning(f"Invalid data format in {fname}: expected list of documents")
                    continue
                for d in docs:
                    if isinstance(d, dict):
                        self.insert_one(coll_name, d)
                        loaded_count += 1
            logger.info(f"Loaded documents from {fname}")

        return loaded_count
