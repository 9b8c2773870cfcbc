from fastapi import HTTPException

from pcm_silence.error.silence_error import SilenceDetectionError


def handle_silence_error(e: SilenceDetectionError) -> None:
    """
    Raise HTTPException mapped from SilenceDetectionError.
    All detection errors come from malformed client input, so they map to 400.
    """
    raise HTTPException(status_code=400, detail=str(e))
