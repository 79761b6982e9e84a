from typing import Any, Dict, Iterable
import re
import uuid

FALLBACK_SKU = "SKU"


def new_id() -> str:
    return str(uuid.uuid4())


def sku_initials(name: str) -> str:
    initials = "".join(word[0] for word in (name or "").split())
    return re.sub(r"[^A-Za-z0-9]", "", initials).upper()


def generate_sku(name: str, existing_products: Iterable[Dict[str, Any]]) -> str:
    """
    SKU lisible dérivé des initiales du nom.
    En cas de collision (insensible à la casse) : -2, -3, ...
    """
    base = sku_initials(name) or FALLBACK_SKU
    taken = {str(p.get("sku") or "").upper() for p in existing_products}

    candidate = base
    counter = 1
    while candidate.upper() in taken:
        counter += 1
        candidate = f"{base}-{counter}"

    return candidate
