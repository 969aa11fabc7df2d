"""
Content loader service for site search.
Handles loading and validation of the source collections from JSON files.
"""

import json
import os
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from ..base import BaseService
from ....core.config import settings
from .source_records import SourceCollections

# Collection name -> file under the data directory
SOURCE_FILES = {
    "glossary_terms": "glossary_terms.json",
    "criminal_charges": "criminal_charges.json",
    "diversion_programs": "diversion_programs.json",
    "expungement_rules": "expungement_rules.json",
    "mock_qa": "mock_qa.json",
}


class ContentLoader(BaseService):
    """
    Service for loading searchable source collections from files.
    Handles file I/O, record validation and in-memory memoisation.
    """

    def __init__(self, data_dir: Optional[str] = None):
        """
        Initialize the content loader.

        Args:
            data_dir: Optional directory holding the JSON collections
        """
        super().__init__()
        self._data_dir = Path(data_dir or settings.search_data_dir)
        self._collections: Optional[SourceCollections] = None

    def get_service_name(self) -> str:
        """Get the service name."""
        return "content_loader"

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def _load_collection_file(self, file_name: str) -> List[dict]:
        """
        Load one collection from its JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not valid JSON or not a list
        """
        file_path = self._data_dir / file_name
        if not os.path.exists(file_path):
            error_msg = f"Search data file not found at {file_path}"
            self.logger.error(error_msg)
            raise FileNotFoundError(error_msg)

        try:
            with open(file_path, 'r', encoding='utf-8') as file:
                data = json.load(file)
        except json.JSONDecodeError as e:
            error_msg = f"Error parsing search data file {file_name}: {e}"
            self.logger.error(error_msg)
            raise ValueError(error_msg)

        if not isinstance(data, list):
            raise ValueError(f"Search data file {file_name} must contain a list")

        return data

    def load_collections(self, force_reload: bool = False) -> SourceCollections:
        """
        Get the source collections, reading the data directory on first use.

        Args:
            force_reload: Reread the files even if already loaded

        Returns:
            SourceCollections: Validated source records

        Raises:
            FileNotFoundError: If a collection file is missing
            ValueError: If a collection file is malformed
        """
        if self._collections is not None and not force_reload:
            return self._collections

        raw = {}
        for collection, file_name in SOURCE_FILES.items():
            raw[collection] = self._load_collection_file(file_name)

        try:
            collections = SourceCollections(**raw)
        except PydanticValidationError as e:
            error_msg = f"Invalid search source records in {self._data_dir}: {e}"
            self.logger.error(error_msg)
            raise ValueError(error_msg)

        self._collections = collections

        counts = ", ".join(f"{name}={len(raw[name])}" for name in SOURCE_FILES)
        self._log_info(f"Search source data loaded from {self._data_dir} ({counts})")
        return collections
