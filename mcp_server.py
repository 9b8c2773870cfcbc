import asyncio
import json
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from starlette.applications import Starlette
from starlette.routing import Mount

from pcm_silence.config.logging_config import setup_logging
from pcm_silence.config.settings import settings
from pcm_silence.detector import detect_silences as run_detection, silence_to_payload
from pcm_silence.error.silence_error import SilenceDetectionError
from pcm_silence.io.download_service import fetch_wave_to_temp_async
from pcm_silence.io.file_service import cleanup_temp_file


def create_error_response(message: str):
    return {"content": [TextContent(type="text", text=message)], "is_error": True}


async def detect_silences(
        audio_uri: str,
        min_silence_ms: Optional[int] = None,
        threshold_db: Optional[int] = None,
):
    if not audio_uri:
        return create_error_response("URI not provided")

    min_silence = settings.MIN_SILENCE_MS if min_silence_ms is None else min_silence_ms
    threshold = settings.SILENCE_THRESHOLD_DB if threshold_db is None else threshold_db

    temp_file_path = None
    try:
        temp_file_path = await fetch_wave_to_temp_async(audio_uri)
        silences = await asyncio.to_thread(
            run_detection,
            temp_file_path,
            min_silence_ms=min_silence,
            threshold_db=threshold,
        )
        payload = {
            "source": "pcm-silence",
            "audio_uri": audio_uri,
            "min_silence_ms": min_silence,
            "threshold_db": threshold,
            "silences": [silence_to_payload(s) for s in silences],
        }
        return {"content": [TextContent(type="text", text=json.dumps(payload))]}
    except (SilenceDetectionError, ValueError, IOError) as error:
        return create_error_response(str(error))
    finally:
        cleanup_temp_file(temp_file_path)


async def health():
    return {"content": [TextContent(type="text", text="ok")]}


def create_app() -> Starlette:
    setup_logging(settings.LOG_LEVEL)

    silence_mcp_server = FastMCP("pcm-silence")

    silence_mcp_server.tool(
        name="detect_silences",
        description="Detects silent regions in a PCM WAVE file. "
                    "Parameters: "
                    "- audio_uri: The URI of the audio file (e.g., 'file:///path/to/file.wav' or 'http://...'). "
                    "- min_silence_ms: Minimum silence duration in milliseconds (default: 500). "
                    "- threshold_db: Silence threshold in dB (default: -40). "
                    "Returns JSON with start_ms, duration_ms, end_ms, index_start and index_end per silence."
    )(detect_silences)
    silence_mcp_server.tool(name="health", description="Simple health check tool.")(health)

    streamable_http_subapp = silence_mcp_server.streamable_http_app()
    sse_subapp = silence_mcp_server.sse_app()

    @asynccontextmanager
    async def _parent_lifespan(_app: Starlette):
        # The streamable HTTP session manager only exists once its app was built
        async with silence_mcp_server.session_manager.run():
            yield

    return Starlette(
        routes=[
            Mount("/sse-root", app=sse_subapp),
            Mount("/", app=streamable_http_subapp),
        ],
        lifespan=_parent_lifespan,
    )


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.MCP_HOST, port=settings.MCP_PORT)
