from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

import aiofiles
from fastapi import UploadFile

logger = logging.getLogger(__name__)


def create_temp_file(suffix: str = "") -> str:
    """
    Create a temporary file synchronously and return its path.
    """
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as tmp:
        return tmp.name


def safe_suffix_from_filename(filename: Optional[str]) -> str:
    """
    Build a safe suffix for a temporary file based on the original filename's suffix.
    Returns an empty string if the filename has no extension.
    """
    try:
        if not filename:
            return ""
        return Path(filename).suffix
    except (TypeError, ValueError):
        return ""


async def save_upload_to_temp_async(upload: UploadFile) -> str:
    """
    Asynchronously save an UploadFile to a temporary file and return the file path.
    """
    temp_path = create_temp_file(safe_suffix_from_filename(upload.filename))

    await upload.seek(0)
    async with aiofiles.open(temp_path, 'wb') as out_file:
        content = await upload.read()
        await out_file.write(content)

    return temp_path


def cleanup_temp_file(file_path: Optional[str]) -> None:
    """
    Clean up a temporary file if it exists.
    """
    if file_path and os.path.exists(file_path):
        try:
            os.remove(file_path)
        except OSError as e:
            logger.warning(f"Could not remove temp file {file_path}: {e}")
