from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse
from typing import List

from inventoria.core.database import WorkbookStore
from inventoria.core.dependencies import get_store
from inventoria.schemas.codes import (
    BarcodeData,
    BarcodeTypeResponse,
    GenerateBarcodeRequest,
    GenerateQRRequest,
    QRCodeData,
)
from inventoria.schemas.common import ApiResponse
from inventoria.services import code_generator
from inventoria.services.code_service import CodeService
from inventoria.utils.exceptions import ValidationException
from inventoria.utils.validators import is_blank

router = APIRouter(tags=["Codes"])


@router.post(
    "/generate-qr",
    response_model=ApiResponse[QRCodeData],
    response_model_exclude_none=True,
)
def generate_qr(request: GenerateQRRequest, store: WorkbookStore = Depends(get_store)):
    """Régénère le QR code d'un produit à partir de son sku (ou de son id)"""
    if is_blank(request.product_id):
        raise ValidationException("Product ID is required")

    service = CodeService(store)
    product, qr_code_path = service.generate_qr(request.product_id)
    return {"success": True, "data": {"product": product, "qrCodePath": qr_code_path}}


@router.get("/qr/{product_id}", response_class=FileResponse)
def get_qr(product_id: str, store: WorkbookStore = Depends(get_store)):
    service = CodeService(store)
    return FileResponse(service.get_qr_file(product_id), media_type="image/png")


@router.post(
    "/generate-barcode",
    response_model=ApiResponse[BarcodeData],
    response_model_exclude_none=True,
)
def generate_barcode(
    request: GenerateBarcodeRequest, store: WorkbookStore = Depends(get_store)
):
    if is_blank(request.product_id):
        raise ValidationException("Product ID is required")

    service = CodeService(store)
    product, barcode_path, barcode_type = service.generate_barcode(
        request.product_id, request.barcode_type
    )
    return {
        "success": True,
        "data": {
            "product": product,
            "barcodePath": barcode_path,
            "barcodeType": barcode_type,
        },
    }


@router.get("/barcode/{product_id}", response_class=FileResponse)
def get_barcode(product_id: str, store: WorkbookStore = Depends(get_store)):
    service = CodeService(store)
    return FileResponse(service.get_barcode_file(product_id), media_type="image/png")


@router.get("/barcode-types", response_model=ApiResponse[List[BarcodeTypeResponse]])
def list_barcode_types():
    return {"success": True, "data": code_generator.get_barcode_types()}
