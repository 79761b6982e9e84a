from typing import Any
import re


def is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def sanitize_filename_token(value: str) -> str:
    return re.sub(r"[^a-zA-Z0-9_-]", "_", str(value))
