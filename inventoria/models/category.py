from inventoria.models.base import Collection

CATEGORIES = Collection(
    sheet_name="Categories",
    columns=("id", "name", "createdAt", "updatedAt"),
)
