from typing import Any, Dict, List
import logging

from inventoria.core.database import Record, WorkbookStore
from inventoria.middleware.transaction_handler import transactional
from inventoria.models.storage import STORAGE_LOCATIONS
from inventoria.utils.date_helpers import utc_timestamp
from inventoria.utils.exceptions import (
    StorageException,
    StorageLocationNotFoundException,
    ValidationException,
)
from inventoria.utils.identifiers import new_id
from inventoria.utils.validators import is_blank

logger = logging.getLogger(__name__)


class StorageService:
    """Emplacements de stockage : un nom et une adresse libre"""

    def __init__(self, store: WorkbookStore):
        self.store = store

    def list_locations(self) -> List[Record]:
        logger.debug("Fetching all storage locations")
        return self.store.read_collection(STORAGE_LOCATIONS)

    def get_location(self, location_id: str) -> Record:
        location = self.store.get_record_by_id(STORAGE_LOCATIONS, location_id)
        if not location:
            raise StorageLocationNotFoundException()
        return location

    def create_location(self, fields: Dict[str, Any]) -> Record:
        name = fields.get("name")
        if is_blank(name):
            raise ValidationException("Name is required")

        now = utc_timestamp()
        location = {
            "id": new_id(),
            "name": name.strip(),
            "location": fields.get("location") or "",
            "createdAt": now,
            "updatedAt": now,
        }

        if not self.store.append_record(STORAGE_LOCATIONS, location):
            raise StorageException("Failed to add storage location")

        logger.info(f"Storage location created: {location['id']} - {location['name']}")
        return location

    @transactional
    def update_location(self, location_id: str, changes: Dict[str, Any]) -> Record:
        self.get_location(location_id)
        changes = {key: value for key, value in changes.items() if value is not None}

        if "name" in changes:
            if is_blank(changes["name"]):
                raise ValidationException("Name cannot be empty")
            changes["name"] = changes["name"].strip()

        updated = self.store.update_record(STORAGE_LOCATIONS, location_id, changes)
        if updated is None:
            raise StorageException("Failed to update storage location")
        return updated

    @transactional
    def delete_location(self, location_id: str) -> Record:
        existing = self.get_location(location_id)

        if not self.store.delete_record(STORAGE_LOCATIONS, location_id):
            raise StorageException("Failed to delete storage location")

        logger.info(f"Storage location deleted: {location_id}")
        return existing
