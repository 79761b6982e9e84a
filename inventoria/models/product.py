from inventoria.models.base import Collection

PRODUCTS = Collection(
    sheet_name="Products",
    columns=(
        "id",
        "name",
        "category",
        "price",
        "stock",
        "sku",
        "qrCodePath",
        "barcodePath",
        "barcodeType",
        "description",
        "location",
        "createdAt",
        "updatedAt",
    ),
)
