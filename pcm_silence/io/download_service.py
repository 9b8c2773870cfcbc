import logging
import os
from urllib.parse import urlparse
from urllib.request import url2pathname

import aiofiles
import aiohttp

from pcm_silence.config.constants import WAVE_FORMAT
from pcm_silence.error.silence_error import UnsupportedEncodingError
from pcm_silence.io.file_service import cleanup_temp_file, create_temp_file

logger = logging.getLogger(__name__)


def ensure_wave_header(content: bytes, source: str) -> None:
    """Reject content that does not start with a RIFF/WAVE header."""
    if content[0:4] != b"RIFF" or content[8:12] != b"WAVE":
        raise UnsupportedEncodingError(f"Only PCM WAVE files are supported: {source} has no RIFF/WAVE header")


async def _read_local_async(source_path: str) -> bytes:
    if not os.path.exists(source_path):
        raise ValueError(f"File not found: {source_path}")

    async with aiofiles.open(source_path, 'rb') as src:
        return await src.read()


async def _read_http_async(uri: str) -> bytes:
    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(uri) as response:
                if response.status != 200:
                    raise ValueError(f"Failed to download from {uri}: {response.status}")
                return await response.read()
    except aiohttp.ClientError as e:
        raise ValueError(f"Failed to download from {uri}: {e}") from e


async def fetch_wave_to_temp_async(uri: str) -> str:
    """
    Fetch a WAVE file into a fresh temp file and return its path.
    Supports:
      - file:// and bare paths (the source file is copied, never handed out)
      - http://, https://
    The temp file is created only after the content has been read and its
    RIFF/WAVE header checked.
    """
    parsed = urlparse(uri)
    scheme = parsed.scheme.lower()

    if scheme == "file" or not scheme:
        content = await _read_local_async(url2pathname(parsed.path))
    elif scheme in ("http", "https"):
        content = await _read_http_async(uri)
    else:
        raise ValueError(f"Unsupported URI scheme: {scheme}")

    ensure_wave_header(content, uri)

    temp_path = create_temp_file(f".{WAVE_FORMAT}")
    try:
        async with aiofiles.open(temp_path, 'wb') as out_file:
            await out_file.write(content)
    except OSError:
        cleanup_temp_file(temp_path)
        raise

    logger.info(f"Fetched {len(content)} bytes from {uri} into {temp_path}")
    return temp_path
