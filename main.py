from __future__ import annotations

import asyncio
from typing import Annotated

import uvicorn
from fastapi import FastAPI, UploadFile, File, Query
from fastapi.responses import JSONResponse

from pcm_silence.config.constants import DEFAULT_AUDIO_NAME
from pcm_silence.config.logging_config import setup_logging
from pcm_silence.config.settings import settings
from pcm_silence.detector import detect_silences, silence_to_payload
from pcm_silence.error.handler import handle_silence_error
from pcm_silence.error.silence_error import SilenceDetectionError
from pcm_silence.io.file_service import save_upload_to_temp_async, cleanup_temp_file

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="PcmSilence",
    description="Detect silent regions in PCM WAVE audio",
    version="0.1.0",
)


@app.get("/")
async def root():
    return {"message": "Welcome to the PCM silence detection API"}


@app.post("/api/v1/audio/silences", summary="Detect silences in a PCM WAVE file")
async def detect_silences_endpoint(
        file: UploadFile = File(...),

        min_silence_ms: Annotated[
            int,
            Query(description="Minimum silence duration in milliseconds", ge=0)
        ] = settings.MIN_SILENCE_MS,

        threshold_db: Annotated[
            int,
            Query(description="Silence threshold in dB, e.g. `-40`")
        ] = settings.SILENCE_THRESHOLD_DB,
):
    """
    Returns every silent region of the uploaded file, ordered by position.
    - **start_ms** / **duration_ms**: timing of the region
    - **index_start** / **index_end**: inclusive byte range in the PCM data
    """
    temp_in_path = await save_upload_to_temp_async(file)
    try:
        silences = await asyncio.to_thread(
            detect_silences,
            temp_in_path,
            min_silence_ms=min_silence_ms,
            threshold_db=threshold_db,
        )
    except SilenceDetectionError as e:
        handle_silence_error(e)
    finally:
        cleanup_temp_file(temp_in_path)
        await file.close()

    return JSONResponse(content={
        "filename": file.filename or DEFAULT_AUDIO_NAME,
        "min_silence_ms": min_silence_ms,
        "threshold_db": threshold_db,
        "silences": [silence_to_payload(s) for s in silences],
    })


if __name__ == "__main__":
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
