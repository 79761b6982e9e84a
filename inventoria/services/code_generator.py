"""
QR code and barcode rendering to PNG files.

Linear symbologies are drawn by python-barcode; UPC-E and Data Matrix go
through BWIPP (treepoem), which needs Ghostscript on the machine.
"""

import io
import logging
from pathlib import Path
from typing import Dict, List, NamedTuple, Union

import barcode
import qrcode
import treepoem
from barcode.errors import BarcodeError
from barcode.writer import ImageWriter
from qrcode.exceptions import DataOverflowError

from inventoria.core.config import settings
from inventoria.utils.exceptions import ArtifactGenerationError, UnsupportedSymbologyError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class BarcodeType(NamedTuple):
    value: str
    label: str
    description: str


BARCODE_TYPES = [
    BarcodeType("code128", "Code 128", "Most versatile, supports all ASCII characters"),
    BarcodeType("code39", "Code 39", "Supports letters, numbers, and some symbols"),
    BarcodeType("ean13", "EAN-13", "13-digit European Article Number"),
    BarcodeType("ean8", "EAN-8", "8-digit European Article Number"),
    BarcodeType("upca", "UPC-A", "12-digit Universal Product Code"),
    BarcodeType("upce", "UPC-E", "8-digit Universal Product Code"),
    BarcodeType("interleaved2of5", "Interleaved 2 of 5", "Numeric only, high density"),
    BarcodeType("datamatrix", "Data Matrix", "2D matrix barcode"),
]

DEFAULT_BARCODE_TYPE = settings.DEFAULT_BARCODE_TYPE.strip().lower()

# python-barcode names
LINEAR_SYMBOLOGIES = {
    "code128": "code128",
    "code39": "code39",
    "ean13": "ean13",
    "ean8": "ean8",
    "upca": "upca",
    "interleaved2of5": "itf",
}

BWIPP_SYMBOLOGIES = {
    "upce": {"includetext": True},
    "datamatrix": {},
}

WRITER_OPTIONS = {"module_height": 10.0, "quiet_zone": 6.5, "write_text": True}


def get_barcode_types() -> List[Dict[str, str]]:
    return [barcode_type._asdict() for barcode_type in BARCODE_TYPES]


def normalize_symbology(symbology: str) -> str:
    value = (symbology or DEFAULT_BARCODE_TYPE).strip().lower()
    if value not in LINEAR_SYMBOLOGIES and value not in BWIPP_SYMBOLOGIES:
        raise UnsupportedSymbologyError(symbology)
    return value


def generate_qr_image(data: str, destination: PathLike) -> Path:
    """Encode `data` en QR code ; réécrit le fichier s'il existe déjà"""
    destination = Path(destination)

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        image = qrcode.make(data)
        image.save(str(destination))
    except (DataOverflowError, ValueError, OSError) as e:
        raise ArtifactGenerationError("QR code", data, str(e)) from e

    logger.info(f"QR code written to {destination}")
    return destination


def generate_barcode_image(
    data: str, destination: PathLike, symbology: str = DEFAULT_BARCODE_TYPE
) -> Path:
    symbology = normalize_symbology(symbology)
    destination = Path(destination)

    try:
        if symbology in LINEAR_SYMBOLOGIES:
            content = _render_linear(data, symbology)
        else:
            content = _render_bwipp(data, symbology)

        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(content)
    except (BarcodeError, treepoem.TreepoemError, ValueError, OSError) as e:
        raise ArtifactGenerationError(f"{symbology} barcode", data, str(e)) from e

    logger.info(f"{symbology} barcode written to {destination}")
    return destination


def _render_linear(data: str, symbology: str) -> bytes:
    barcode_class = barcode.get_barcode_class(LINEAR_SYMBOLOGIES[symbology])
    code = barcode_class(data, writer=ImageWriter())

    buffer = io.BytesIO()
    code.write(buffer, options=WRITER_OPTIONS)
    return buffer.getvalue()


def _render_bwipp(data: str, symbology: str) -> bytes:
    image = treepoem.generate_barcode(
        barcode_type=symbology,
        data=data,
        options=BWIPP_SYMBOLOGIES[symbology] or None,
    )

    buffer = io.BytesIO()
    image.convert("1").save(buffer, "PNG")
    return buffer.getvalue()
