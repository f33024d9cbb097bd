"""Model answer text-to-speech endpoint."""

from fastapi import APIRouter
from fastapi.responses import Response

from linguist_vision.config.dependencies import RuntimeDep
from linguist_vision.pipelines.lesson import synthesize_model_answer
from linguist_vision.views import SpeechRequest

router = APIRouter(prefix="/speech", tags=["speech"])


@router.post("/", response_class=Response)
async def text_to_speech(request: SpeechRequest, runtime: RuntimeDep) -> Response:
    """Speak the text with the Gemini TTS voice and return WAV bytes."""

    wav_bytes = await synthesize_model_answer(runtime, request.text)
    return Response(content=wav_bytes, media_type="audio/wav")
