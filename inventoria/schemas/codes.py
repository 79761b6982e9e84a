from typing import Optional

from inventoria.schemas.common import CamelModel
from inventoria.schemas.product import ProductResponse


class GenerateQRRequest(CamelModel):
    product_id: Optional[str] = None


class GenerateBarcodeRequest(CamelModel):
    product_id: Optional[str] = None
    barcode_type: Optional[str] = None


class QRCodeData(CamelModel):
    product: ProductResponse
    qr_code_path: str


class BarcodeData(CamelModel):
    product: ProductResponse
    barcode_path: str
    barcode_type: str


class BarcodeTypeResponse(CamelModel):
    value: str
    label: str
    description: str
