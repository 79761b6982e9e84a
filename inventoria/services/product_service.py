from typing import Any, Dict, List, NamedTuple, Optional
import logging

from inventoria.core.database import Record, WorkbookStore
from inventoria.middleware.transaction_handler import transactional
from inventoria.models.product import PRODUCTS
from inventoria.services import code_generator
from inventoria.services.code_service import CodeService
from inventoria.utils.date_helpers import utc_timestamp
from inventoria.utils.exceptions import (
    ArtifactGenerationError,
    ProductNotFoundException,
    StorageException,
    UnsupportedSymbologyError,
    ValidationException,
)
from inventoria.utils.identifiers import generate_sku, new_id
from inventoria.utils.validators import is_blank

logger = logging.getLogger(__name__)

CREATE_WARNING = "Product created but QR code/barcode generation failed"
UPDATE_WARNING = "Product updated but QR code/barcode regeneration failed"


class ProductResult(NamedTuple):
    product: Record
    warning: Optional[str] = None


class ProductService:
    """
    Service de gestion des produits
    Génère id, sku et images (QR code, code-barres) à la création
    """

    def __init__(self, store: WorkbookStore):
        self.store = store
        self.codes = CodeService(store)

    def list_products(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        location: Optional[str] = None,
    ) -> List[Record]:
        products = self.store.read_collection(PRODUCTS)

        if search and search.strip():
            term = search.strip().lower()
            products = [
                p
                for p in products
                if term in str(p.get("name", "")).lower()
                or term in str(p.get("sku", "")).lower()
            ]

        if category:
            products = [
                p
                for p in products
                if str(p.get("category", "")).lower() == category.strip().lower()
            ]

        if location:
            products = [
                p
                for p in products
                if str(p.get("location", "")).lower() == location.strip().lower()
            ]

        return products

    def get_product(self, product_id: str) -> Record:
        product = self.store.get_record_by_id(PRODUCTS, product_id)
        if not product:
            raise ProductNotFoundException()
        return product

    @transactional
    def create_product(self, fields: Dict[str, Any]) -> ProductResult:
        name = fields.get("name")
        category = fields.get("category")

        if is_blank(name) or is_blank(category):
            raise ValidationException("Name and category are required")

        sku = fields.get("sku")
        if is_blank(sku):
            sku = generate_sku(name, self.store.read_collection(PRODUCTS))
        else:
            sku = str(sku).strip()

        now = utc_timestamp()
        product = {
            "id": new_id(),
            "name": name.strip(),
            "category": category.strip(),
            "price": fields.get("price") or 0,
            "stock": fields.get("stock") or 0,
            "sku": sku,
            "qrCodePath": "",
            "barcodePath": "",
            "barcodeType": code_generator.DEFAULT_BARCODE_TYPE,
            "createdAt": now,
            "updatedAt": now,
        }
        for optional in ("description", "location"):
            if fields.get(optional) is not None:
                product[optional] = fields[optional]

        if not self.store.append_record(PRODUCTS, product):
            raise StorageException("Failed to add product")

        logger.info(f"Product created: {product['id']} - {product['name']} ({sku})")

        try:
            paths = self.codes.generate_for_product(product)
        except ArtifactGenerationError as e:
            logger.warning(f"Error generating codes for {product['id']}: {e}")
            return ProductResult(product, CREATE_WARNING)

        updated = self.store.update_record(PRODUCTS, product["id"], paths, touch=False)
        if updated is None:
            logger.warning(f"Could not save code paths for {product['id']}")
            self.codes.remove_artifact(paths["qrCodePath"], owner_id=product["id"])
            self.codes.remove_artifact(paths["barcodePath"], owner_id=product["id"])
            return ProductResult(product, CREATE_WARNING)

        return ProductResult(updated)

    @transactional
    def update_product(self, product_id: str, changes: Dict[str, Any]) -> ProductResult:
        """
        Mise à jour partielle : les champs absents ou None sont conservés.
        Un changement de sku ou de type de code-barres régénère les images
        et supprime les anciennes.
        """
        existing = self.get_product(product_id)
        changes = {key: value for key, value in changes.items() if value is not None}

        for field in ("name", "category"):
            if field in changes:
                if is_blank(changes[field]):
                    raise ValidationException(f"{field.capitalize()} cannot be empty")
                changes[field] = str(changes[field]).strip()

        if "barcodeType" in changes:
            changes["barcodeType"] = code_generator.normalize_symbology(changes["barcodeType"])
        type_changed = "barcodeType" in changes and changes["barcodeType"] != (
            existing.get("barcodeType") or code_generator.DEFAULT_BARCODE_TYPE
        )

        if "sku" in changes:
            changes["sku"] = str(changes["sku"]).strip()
        sku_changed = "sku" in changes and changes["sku"] != str(existing.get("sku") or "")

        updated = self.store.update_record(PRODUCTS, product_id, changes)
        if updated is None:
            raise StorageException("Failed to update product")

        logger.info(f"Product updated: {product_id}")

        if not sku_changed and not type_changed:
            return ProductResult(updated)

        self.codes.remove_for_product(existing)
        try:
            paths = self.codes.generate_for_product(
                updated, updated.get("barcodeType") or code_generator.DEFAULT_BARCODE_TYPE
            )
        except (ArtifactGenerationError, UnsupportedSymbologyError) as e:
            logger.warning(f"Error regenerating codes for {product_id}: {e}")
            cleared = self.store.update_record(
                PRODUCTS, product_id, {"qrCodePath": "", "barcodePath": ""}, touch=False
            )
            return ProductResult(cleared or updated, UPDATE_WARNING)

        refreshed = self.store.update_record(PRODUCTS, product_id, paths, touch=False)
        if refreshed is None:
            logger.warning(f"Could not save regenerated code paths for {product_id}")
            return ProductResult(updated, UPDATE_WARNING)

        return ProductResult(refreshed)

    @transactional
    def delete_product(self, product_id: str) -> Record:
        existing = self.get_product(product_id)

        if not self.store.delete_record(PRODUCTS, product_id):
            raise StorageException("Failed to delete product")

        self.codes.remove_for_product(existing)

        logger.info(f"Product deleted: {product_id}")
        return existing
