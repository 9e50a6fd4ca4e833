"""Application settings and extension table loading."""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .formats import DEFAULT_CATEGORY, DEFAULT_FORMATS, FormatTable

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings loaded from DIR_ORGANIZER_* environment variables."""

    # Optional JSON file replacing the built-in extension table
    formats_file: Optional[Path] = None

    # Folder for files whose extension is in no category
    default_category: str = DEFAULT_CATEGORY

    # Thread pool size used for concurrent moves
    max_workers: int = Field(default=8, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="DIR_ORGANIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def load_format_table(path: Optional[Union[str, Path]] = None) -> FormatTable:
    """
    Load the extension table.

    Args:
        path: JSON file with an object of category -> list of extensions.
            When None, a copy of the built-in table is returned.

    Returns:
        Category -> extensions mapping, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a valid extension table
    """
    if path is None:
        return {category: list(exts) for category, exts in DEFAULT_FORMATS.items()}

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Formats file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Formats file is not valid JSON: {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Formats file must contain a JSON object: {path}")

    table: FormatTable = {}
    for category, extensions in data.items():
        if not isinstance(extensions, list) or not all(
            isinstance(ext, str) for ext in extensions
        ):
            raise ValueError(
                f"Category '{category}' must map to a list of extension strings"
            )
        # Extensions are stored without the leading dot
        table[category] = [ext.lstrip(".") for ext in extensions]

    logger.debug(f"Loaded {len(table)} categories from {path}")
    return table
