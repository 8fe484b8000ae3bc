import asyncio
import uuid
import logging
from fastapi import FastAPI, HTTPException
from celery import Celery, Task

from config import Config
from models import (
    AnalysisRequest,
    AnalysisResponse,
    PracticeSession,
    SessionRequest,
    SpeechSynthesisRequest,
    Utterance,
)
from services.analysis import SpeechAnalysisEngine
from services.feedback_generator import select_highlights
from services.session import build_session
from services.speech_synthesis import build_utterance

# Configure logging
logging.basicConfig(level=Config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

app = FastAPI(title="Speech Practice Feedback Service", version="1.0.0")

# Initialize Celery
celery_app = Celery(
    "speech_feedback",
    broker=Config.CELERY_BROKER_URL,
    backend=Config.CELERY_RESULT_BACKEND
)

# Stateless, shared by the HTTP handlers and the Celery task
analysis_engine = SpeechAnalysisEngine()


class ContextTask(Task):
    """Celery task that runs its body directly when called in-process."""
    def __call__(self, *args, **kwargs):
        return self.run(*args, **kwargs)

celery_app.Task = ContextTask


def _analysis_response(transcript: str, original_text=None) -> AnalysisResponse:
    evaluation = analysis_engine.evaluate(transcript, original_text)
    return AnalysisResponse(
        feedback=evaluation.feedback,
        scores=evaluation.scores,
        highlights=select_highlights(evaluation.feedback),
    )


@celery_app.task(name="analyze_transcript_task")
def analyze_transcript_task(transcript: str, original_text=None) -> dict:
    """
    Celery task running the same analysis as POST /analyze in a worker process.
    """
    request_id = str(uuid.uuid4())[:8]
    logging.info(f"[{request_id}] Starting background analysis ({len(transcript)} chars)")

    try:
        response_data = _analysis_response(transcript, original_text).model_dump()
        logging.info(f"[{request_id}] Finished background analysis")
        return response_data
    except Exception as e:
        logging.error(f"[{request_id}] Background analysis error: {str(e)}")
        raise


@app.post("/analyze", response_model=AnalysisResponse)
async def analyze(request: AnalysisRequest):
    """
    Analyze a finalized transcript and return feedback, scores and highlights.
    """
    request_id = str(uuid.uuid4())[:8]
    logging.info(f"[{request_id}] Received analysis request ({len(request.transcript)} chars)")

    if Config.SIMULATED_LATENCY_SEC > 0:
        await asyncio.sleep(Config.SIMULATED_LATENCY_SEC)

    return _analysis_response(request.transcript.strip(), request.original_text)


@app.post("/analyze/async", response_model=dict)
async def analyze_async(request: AnalysisRequest):
    """
    Enqueue the analysis as a background task and return its task ID.
    """
    request_id = str(uuid.uuid4())[:8]
    try:
        task = analyze_transcript_task.delay(request.transcript.strip(), request.original_text)
        logging.info(f"[{request_id}] Enqueued task {task.id}")
        return {"message": "Processing started", "task_id": task.id}
    except Exception as e:
        logging.error(f"[{request_id}] Error enqueuing task: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to start processing: {str(e)}")


@app.get("/status/{task_id}", response_model=dict)
async def get_task_status(task_id: str):
    """
    Check the status of a background analysis task.
    """
    task = celery_app.AsyncResult(task_id)

    if task.state == "PENDING":
        response = {
            "status": "PENDING",
            "message": "Task is pending or not found"
        }
    elif task.state == "SUCCESS":
        response = {
            "status": "SUCCESS",
            "result": task.result
        }
    elif task.state == "FAILURE":
        response = {
            "status": "FAILURE",
            "message": str(task.info),
            "traceback": task.traceback
        }
    else:
        response = {
            "status": task.state,
            "message": "Unknown state"
        }
    return response


@app.post("/sessions", response_model=PracticeSession)
async def create_session(request: SessionRequest):
    """
    Analyze a completed recording and wrap the result into a practice session.
    """
    transcript = request.transcript.strip()
    if not transcript:
        raise HTTPException(status_code=400, detail="No speech detected")

    feedback = analysis_engine.analyze_complete(transcript, request.original_text)
    session = build_session(
        transcript,
        feedback,
        request.user_id,
        request.duration_seconds,
        original_text=request.original_text,
    )
    logging.info(f"Created {session.id} for user {session.user_id} (+{session.xp_gained} XP)")
    return session


@app.post("/speech/utterance", response_model=Utterance)
async def speech_utterance(request: SpeechSynthesisRequest):
    """Playback settings for lesson text or a phonetic correction"""
    try:
        return build_utterance(request.text, request.options, request.voices)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "Speech Practice Feedback Service is running"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
