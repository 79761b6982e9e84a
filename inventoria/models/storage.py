from inventoria.models.base import Collection

STORAGE_LOCATIONS = Collection(
    sheet_name="Storage",
    columns=("id", "name", "location", "createdAt", "updatedAt"),
)
