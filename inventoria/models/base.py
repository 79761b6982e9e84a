from typing import NamedTuple, Tuple


class Collection(NamedTuple):
    """Feuille nommée du classeur et l'ordre de ses colonnes"""

    sheet_name: str
    columns: Tuple[str, ...]

    def __repr__(self):
        return f"<Collection(sheet_name={self.sheet_name})>"
