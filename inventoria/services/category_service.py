from typing import Any, Dict, List
import logging

from inventoria.core.database import Record, WorkbookStore
from inventoria.middleware.transaction_handler import transactional
from inventoria.models.category import CATEGORIES
from inventoria.utils.date_helpers import utc_timestamp
from inventoria.utils.exceptions import (
    CategoryNotFoundException,
    StorageException,
    ValidationException,
)
from inventoria.utils.identifiers import new_id
from inventoria.utils.validators import is_blank

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, store: WorkbookStore):
        self.store = store

    def list_categories(self) -> List[Record]:
        return self.store.read_collection(CATEGORIES)

    def get_category(self, category_id: str) -> Record:
        category = self.store.get_record_by_id(CATEGORIES, category_id)
        if not category:
            raise CategoryNotFoundException()
        return category

    def create_category(self, fields: Dict[str, Any]) -> Record:
        name = fields.get("name")
        if is_blank(name):
            raise ValidationException("Name is required")

        now = utc_timestamp()
        category = {
            "id": new_id(),
            "name": name.strip(),
            "createdAt": now,
            "updatedAt": now,
        }

        if not self.store.append_record(CATEGORIES, category):
            raise StorageException("Failed to add category")

        logger.info(f"Category created: {category['id']} - {category['name']}")
        return category

    @transactional
    def update_category(self, category_id: str, changes: Dict[str, Any]) -> Record:
        self.get_category(category_id)
        changes = {key: value for key, value in changes.items() if value is not None}

        if "name" in changes:
            if is_blank(changes["name"]):
                raise ValidationException("Name cannot be empty")
            changes["name"] = changes["name"].strip()

        updated = self.store.update_record(CATEGORIES, category_id, changes)
        if updated is None:
            raise StorageException("Failed to update category")
        return updated

    @transactional
    def delete_category(self, category_id: str) -> Record:
        """Les produits gardent le nom de catégorie : pas de cascade"""
        existing = self.get_category(category_id)

        if not self.store.delete_record(CATEGORIES, category_id):
            raise StorageException("Failed to delete category")

        logger.info(f"Category deleted: {category_id}")
        return existing
