"""Tests des QR codes et codes-barres"""

import shutil
from pathlib import Path

import pytest

from inventoria.services import code_generator
from inventoria.utils.exceptions import ArtifactGenerationError, UnsupportedSymbologyError

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

requires_ghostscript = pytest.mark.skipif(
    shutil.which("gs") is None, reason="BWIPP symbologies need Ghostscript"
)


def test_generate_qr_image(tmp_path):
    destination = code_generator.generate_qr_image("WP", tmp_path / "qr_WP.png")

    assert destination.read_bytes().startswith(PNG_SIGNATURE)


def test_generate_qr_image_overwrites(tmp_path):
    destination = tmp_path / "qr_WP.png"
    destination.write_bytes(b"stale")

    code_generator.generate_qr_image("WP", destination)

    assert destination.read_bytes().startswith(PNG_SIGNATURE)


@pytest.mark.parametrize(
    "symbology, data",
    [
        ("code128", "WP-2"),
        ("code39", "WP"),
        ("ean13", "590123412345"),
        ("ean8", "9638507"),
        ("upca", "03600029145"),
        ("interleaved2of5", "12345678"),
    ],
)
def test_generate_linear_barcodes(tmp_path, symbology, data):
    destination = code_generator.generate_barcode_image(
        data, tmp_path / "barcode.png", symbology
    )

    assert destination.read_bytes().startswith(PNG_SIGNATURE)


@requires_ghostscript
@pytest.mark.parametrize("symbology, data", [("upce", "01234565"), ("datamatrix", "WP")])
def test_generate_bwipp_barcodes(tmp_path, symbology, data):
    destination = code_generator.generate_barcode_image(
        data, tmp_path / "barcode.png", symbology
    )

    assert destination.read_bytes().startswith(PNG_SIGNATURE)


def test_unsupported_symbology(tmp_path):
    with pytest.raises(UnsupportedSymbologyError):
        code_generator.generate_barcode_image("WP", tmp_path / "b.png", "pdf417")


def test_data_the_symbology_cannot_encode(tmp_path):
    destination = tmp_path / "barcode.png"

    with pytest.raises(ArtifactGenerationError):
        code_generator.generate_barcode_image("WP", destination, "ean13")
    assert not destination.exists()


def test_barcode_type_catalog():
    values = [t["value"] for t in code_generator.get_barcode_types()]

    assert values == [
        "code128",
        "code39",
        "ean13",
        "ean8",
        "upca",
        "upce",
        "interleaved2of5",
        "datamatrix",
    ]


def test_list_barcode_types(client):
    response = client.get("/api/barcode-types")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert len(data["data"]) == 8
    assert data["data"][0] == {
        "value": "code128",
        "label": "Code 128",
        "description": "Most versatile, supports all ASCII characters",
    }


def test_generate_qr_endpoint(client, test_product, media_files):
    response = client.post("/api/generate-qr", json={"productId": test_product["id"]})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["qrCodePath"].endswith("qr_WP.png")
    assert data["product"]["qrCodePath"] == data["qrCodePath"]
    assert media_files() == ["barcode_WP.png", "qr_WP.png"]


def test_generate_qr_requires_product_id(client):
    response = client.post("/api/generate-qr", json={})
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Product ID is required"}


def test_generate_qr_unknown_product(client):
    response = client.post("/api/generate-qr", json={"productId": "missing"})
    assert response.status_code == 404
    assert response.json()["message"] == "Product not found"


def test_get_qr_image(client, test_product):
    response = client.get(f"/api/qr/{test_product['id']}")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(PNG_SIGNATURE)


def test_get_qr_unknown_product(client):
    response = client.get("/api/qr/missing")
    assert response.status_code == 404


def test_generate_barcode_with_type(client, test_product):
    response = client.post(
        "/api/generate-barcode",
        json={"productId": test_product["id"], "barcodeType": "code39"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["barcodeType"] == "code39"
    assert data["product"]["barcodeType"] == "code39"
    assert data["barcodePath"].endswith("barcode_WP.png")


def test_generate_barcode_unsupported_type(client, test_product):
    response = client.post(
        "/api/generate-barcode",
        json={"productId": test_product["id"], "barcodeType": "pdf417"},
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_generate_barcode_unencodable_data(client, test_product):
    """Un sku alphabétique ne peut pas devenir un EAN-13"""
    response = client.post(
        "/api/generate-barcode",
        json={"productId": test_product["id"], "barcodeType": "ean13"},
    )
    assert response.status_code == 500
    assert response.json()["success"] is False


def test_get_barcode_image(client, test_product):
    response = client.get(f"/api/barcode/{test_product['id']}")
    assert response.status_code == 200
    assert response.content.startswith(PNG_SIGNATURE)


def test_missing_artifact_file_is_404(client, test_product):
    for path in (test_product["qrCodePath"], test_product["barcodePath"]):
        Path(path).unlink()

    assert client.get(f"/api/qr/{test_product['id']}").status_code == 404
    response = client.get(f"/api/barcode/{test_product['id']}")
    assert response.status_code == 404
    assert response.json()["message"] == "Barcode not found for this product"


def test_media_routes_serve_artifacts(client, test_product):
    assert client.get("/images/qr_WP.png").status_code == 200
    assert client.get("/qr-codes/barcode_WP.png").status_code == 200
    assert client.get("/images/qr_nothing.png").status_code == 404


def test_media_routes_stay_in_media_dir(client, test_product, store):
    (store.path.parent / "secret.txt").write_text("nope")

    assert client.get("/images/..%2Fsecret.txt").status_code == 404
