"""Utility functions for file I/O and timestamps."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('fpldraft.utils')


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load a JSON file, optionally validating it against a Pydantic model.

    Args:
        path: Path to JSON file
        schema: Optional Pydantic model to validate against

    Returns:
        Parsed JSON (validated if schema provided)

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If schema validation fails

    Example:
        from fpldraft.schemas import LeagueDetails
        details = load_json('snapshots/details.json', schema=LeagueDetails)
    """
    path = Path(path)

    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    with open(path, encoding='utf-8') as f:
        data = json.load(f)

    if schema:
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            logger.error(f'Schema validation failed for {path}: {e}')
            raise ValueError(f'Schema validation failed for {path}:\n{e}') from e

    return data


def save_json(path: Path | str, data: Any, indent: int = 2) -> None:
    """
    Save data as a JSON file, creating parent directories.

    Args:
        path: Path to write to
        data: JSON-serializable data or Pydantic model
        indent: Indentation level
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    json_data = data.model_dump() if isinstance(data, BaseModel) else data

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(json_data, f, indent=indent, ensure_ascii=False)
    logger.debug(f'Saved JSON to: {path}')


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an upstream ISO-8601 timestamp into an aware UTC datetime.

    Upstream uses a trailing ``Z``; naive values are taken as UTC.
    Returns None for missing or unparseable values.
    """
    if not value:
        return None
    try:
        ts = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        logger.warning(f'Unparseable timestamp: {value!r}')
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
