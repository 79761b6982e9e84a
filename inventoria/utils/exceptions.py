from fastapi import HTTPException, status


class RecordNotFoundException(HTTPException):
    def __init__(self, label: str = "Record"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found"
        )


class ProductNotFoundException(RecordNotFoundException):
    def __init__(self):
        super().__init__("Product")


class CategoryNotFoundException(RecordNotFoundException):
    def __init__(self):
        super().__init__("Category")


class StorageLocationNotFoundException(RecordNotFoundException):
    def __init__(self):
        super().__init__("Storage location")


class ValidationException(HTTPException):
    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


class StorageException(HTTPException):
    def __init__(self, message: str = "Failed to write to the data file"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
        )


class UnsupportedSymbologyError(ValidationException):
    def __init__(self, symbology: str):
        self.symbology = symbology
        super().__init__(f"Unsupported barcode type: {symbology}")


class ArtifactGenerationError(Exception):
    def __init__(self, kind: str, data: str, reason: str):
        self.kind = kind
        self.data = data
        self.reason = reason
        super().__init__(f"Failed to generate {kind} for '{data}': {reason}")


class ArtifactNotFoundException(HTTPException):
    def __init__(self, kind: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{kind} not found for this product",
        )
