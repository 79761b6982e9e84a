"""
Record store backed by a single .xlsx workbook.

Each collection is one sheet: a header row followed by one row per record.
Every mutation reads the whole workbook, replaces one sheet and saves the
file again. Calls never raise; failures are logged and reported through the
return value.
"""

import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import IllegalCharacterError, InvalidFileException

from inventoria.core.app_config import AppConfig
from inventoria.models import ALL_COLLECTIONS, Collection
from inventoria.utils.date_helpers import utc_timestamp

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
CollectionRef = Union[Collection, str]

STORE_ERRORS = (
    OSError,
    KeyError,
    ValueError,
    TypeError,
    BadZipFile,
    InvalidFileException,
    IllegalCharacterError,
)


def _sheet_name(collection: CollectionRef) -> str:
    if isinstance(collection, Collection):
        return collection.sheet_name
    return collection


def _rows_to_records(rows: Iterable[Sequence[Any]]) -> List[Record]:
    rows = iter(rows)
    header = next(rows, None)
    if not header:
        return []

    keys = [str(cell) if cell not in (None, "") else None for cell in header]
    records = []
    for row in rows:
        record = {
            key: value
            for key, value in zip(keys, row)
            if key is not None and value is not None and value != ""
        }
        if record:
            records.append(record)
    return records


class WorkbookStore:
    def __init__(
        self, config: AppConfig, collections: Sequence[Collection] = ALL_COLLECTIONS
    ):
        self.config = config
        self.collections = {c.sheet_name: c for c in collections}
        # Guards every read-modify-write cycle on the workbook.
        self.lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self.config.resolve_database_path()

    @property
    def media_dir(self) -> Path:
        return self.config.resolve_media_dir()

    def ensure_media_dir(self) -> Path:
        media_dir = self.media_dir
        media_dir.mkdir(parents=True, exist_ok=True)
        return media_dir

    def initialize(self) -> bool:
        """Crée le classeur avec ses feuilles s'il n'existe pas encore"""
        path = self.path
        if path.exists():
            return True

        with self.lock:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                workbook = Workbook()
                workbook.remove(workbook.active)
                for collection in self.collections.values():
                    sheet = workbook.create_sheet(collection.sheet_name)
                    sheet.append(list(collection.columns))
                workbook.save(path)
            except STORE_ERRORS as e:
                logger.error(f"Error initializing workbook {path}: {e}")
                return False

        logger.info(f"Workbook initialized at {path}")
        return True

    def read_collection(self, collection: CollectionRef) -> List[Record]:
        name = _sheet_name(collection)

        with self.lock:
            try:
                if not self.initialize():
                    return []

                workbook = load_workbook(self.path)
                if name not in workbook.sheetnames:
                    logger.error(f"Sheet '{name}' does not exist")
                    return []

                return _rows_to_records(workbook[name].iter_rows(values_only=True))
            except STORE_ERRORS as e:
                logger.error(f"Error reading {name} sheet: {e}")
                return []

    def write_collection(self, collection: CollectionRef, records: List[Record]) -> bool:
        """Remplace tout le contenu d'une feuille puis réécrit le fichier"""
        name = _sheet_name(collection)

        with self.lock:
            try:
                if not self.initialize():
                    return False

                workbook = load_workbook(self.path)
                if name in workbook.sheetnames:
                    index = workbook.sheetnames.index(name)
                    workbook.remove(workbook[name])
                    sheet = workbook.create_sheet(name, index)
                else:
                    sheet = workbook.create_sheet(name)

                header = self._header_for(name, records)
                sheet.append(header)
                for row_index, record in enumerate(records, start=2):
                    for column_index, key in enumerate(header, start=1):
                        value = record.get(key)
                        cell = sheet.cell(row=row_index, column=column_index, value=value)
                        # Text starting with "=" stays text, not a formula.
                        if isinstance(value, str) and value.startswith("="):
                            cell.data_type = "s"

                workbook.save(self.path)
                return True
            except STORE_ERRORS as e:
                logger.error(f"Error writing to {name} sheet: {e}")
                return False

    def append_record(self, collection: CollectionRef, record: Record) -> bool:
        name = _sheet_name(collection)

        with self.lock:
            records = self.read_collection(name)
            records.append(record)
            return self.write_collection(name, records)

    def update_record(
        self,
        collection: CollectionRef,
        record_id: str,
        patch: Record,
        touch: bool = True,
    ) -> Optional[Record]:
        """
        Fusionne `patch` dans l'enregistrement et met à jour updatedAt
        (sauf touch=False). Les clés à None sont ignorées ; 0 et "" sont écrits.
        """
        name = _sheet_name(collection)
        changes = {key: value for key, value in patch.items() if value is not None}

        with self.lock:
            records = self.read_collection(name)
            for index, record in enumerate(records):
                if str(record.get("id")) != str(record_id):
                    continue

                updated = {**record, **changes}
                if touch:
                    updated["updatedAt"] = utc_timestamp()
                records[index] = updated
                if not self.write_collection(name, records):
                    return None
                return updated

        logger.error(f"Row with ID {record_id} not found in {name}")
        return None

    def delete_record(self, collection: CollectionRef, record_id: str) -> bool:
        name = _sheet_name(collection)

        with self.lock:
            records = self.read_collection(name)
            remaining = [r for r in records if str(r.get("id")) != str(record_id)]

            if len(remaining) == len(records):
                logger.error(f"Row with ID {record_id} not found in {name}")
                return False

            return self.write_collection(name, remaining)

    def get_record_by_id(
        self, collection: CollectionRef, record_id: str
    ) -> Optional[Record]:
        for record in self.read_collection(collection):
            if str(record.get("id")) == str(record_id):
                return record
        return None

    def _header_for(self, name: str, records: List[Record]) -> List[str]:
        collection = self.collections.get(name)
        header = list(collection.columns) if collection else []
        for record in records:
            for key in record:
                if key not in header:
                    header.append(key)
        return header
