from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import logging

from inventoria.core.database import Record, WorkbookStore
from inventoria.middleware.transaction_handler import transactional
from inventoria.models.product import PRODUCTS
from inventoria.services import code_generator
from inventoria.utils.exceptions import (
    ArtifactGenerationError,
    ArtifactNotFoundException,
    ProductNotFoundException,
    StorageException,
)
from inventoria.utils.validators import sanitize_filename_token

logger = logging.getLogger(__name__)

ARTIFACT_FIELDS = ("qrCodePath", "barcodePath")


class CodeService:
    """
    Cycle de vie des QR codes et codes-barres d'un produit.
    Un fichier appartient au seul produit dont le sku (ou l'id) l'a nommé.
    """

    def __init__(self, store: WorkbookStore):
        self.store = store

    @staticmethod
    def payload_for(product: Record) -> str:
        return str(product.get("sku") or product["id"])

    def qr_path_for(self, payload: str) -> Path:
        return self.store.media_dir / f"qr_{sanitize_filename_token(payload)}.png"

    def barcode_path_for(self, payload: str) -> Path:
        return self.store.media_dir / f"barcode_{sanitize_filename_token(payload)}.png"

    def generate_for_product(
        self, product: Record, barcode_type: Optional[str] = None
    ) -> Dict[str, Any]:
        """Génère les deux images ; aucune n'est conservée si l'une échoue"""
        payload = self.payload_for(product)
        barcode_type = code_generator.normalize_symbology(
            barcode_type or code_generator.DEFAULT_BARCODE_TYPE
        )
        self.store.ensure_media_dir()

        qr_path = code_generator.generate_qr_image(payload, self.qr_path_for(payload))
        try:
            barcode_path = code_generator.generate_barcode_image(
                payload, self.barcode_path_for(payload), barcode_type
            )
        except ArtifactGenerationError:
            self._unlink(qr_path)
            raise

        return {
            "qrCodePath": str(qr_path),
            "barcodePath": str(barcode_path),
            "barcodeType": barcode_type,
        }

    def remove_for_product(self, product: Record) -> None:
        for field in ARTIFACT_FIELDS:
            self.remove_artifact(product.get(field), owner_id=product.get("id"))

    def remove_artifact(self, path: Optional[str], owner_id: Optional[str] = None) -> bool:
        """
        Supprime un fichier d'image s'il se trouve dans le dossier media
        et qu'aucun autre produit ne le référence. Les erreurs sont ignorées.
        """
        if not path:
            return False

        target = Path(path)
        try:
            media_dir = self.store.media_dir.resolve()
            if target.resolve().parent != media_dir:
                logger.warning(f"Refusing to delete {target}: outside {media_dir}")
                return False
        except OSError as e:
            logger.warning(f"Failed to resolve artifact path {target}: {e}")
            return False

        for other in self.store.read_collection(PRODUCTS):
            if other.get("id") == owner_id:
                continue
            if str(target) in (str(other.get(f) or "") for f in ARTIFACT_FIELDS):
                logger.warning(f"Keeping {target}: still used by product {other.get('id')}")
                return False

        return self._unlink(target)

    @transactional
    def generate_qr(self, product_id: str) -> Tuple[Record, str]:
        product = self._get_product(product_id)
        payload = self.payload_for(product)
        self.store.ensure_media_dir()

        qr_path = str(code_generator.generate_qr_image(payload, self.qr_path_for(payload)))
        if product.get("qrCodePath") and product["qrCodePath"] != qr_path:
            self.remove_artifact(product["qrCodePath"], owner_id=product_id)

        updated = self.store.update_record(PRODUCTS, product_id, {"qrCodePath": qr_path})
        if updated is None:
            raise StorageException("Failed to save QR code path")

        logger.info(f"QR code generated for product {product_id}")
        return updated, qr_path

    @transactional
    def generate_barcode(
        self, product_id: str, barcode_type: Optional[str] = None
    ) -> Tuple[Record, str, str]:
        barcode_type = code_generator.normalize_symbology(
            barcode_type or code_generator.DEFAULT_BARCODE_TYPE
        )
        product = self._get_product(product_id)
        payload = self.payload_for(product)
        self.store.ensure_media_dir()

        barcode_path = str(
            code_generator.generate_barcode_image(
                payload, self.barcode_path_for(payload), barcode_type
            )
        )
        if product.get("barcodePath") and product["barcodePath"] != barcode_path:
            self.remove_artifact(product["barcodePath"], owner_id=product_id)

        updated = self.store.update_record(
            PRODUCTS,
            product_id,
            {"barcodePath": barcode_path, "barcodeType": barcode_type},
        )
        if updated is None:
            raise StorageException("Failed to save barcode path")

        logger.info(f"{barcode_type} barcode generated for product {product_id}")
        return updated, barcode_path, barcode_type

    def get_qr_file(self, product_id: str) -> Path:
        return self._existing_artifact(product_id, "qrCodePath", "QR code")

    def get_barcode_file(self, product_id: str) -> Path:
        return self._existing_artifact(product_id, "barcodePath", "Barcode")

    def _existing_artifact(self, product_id: str, field: str, kind: str) -> Path:
        product = self._get_product(product_id)
        path = product.get(field)
        if not path or not Path(path).is_file():
            raise ArtifactNotFoundException(kind)
        return Path(path)

    def _get_product(self, product_id: str) -> Record:
        product = self.store.get_record_by_id(PRODUCTS, product_id)
        if not product:
            raise ProductNotFoundException()
        return product

    @staticmethod
    def _unlink(path: Path) -> bool:
        try:
            Path(path).unlink(missing_ok=True)
            return True
        except OSError as e:
            logger.warning(f"Failed to delete {path}: {e}")
            return False
