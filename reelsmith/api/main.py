"""Main FastAPI application"""

import asyncio
import logging
import shutil
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api_types import GenerateVideoRequest, GenerateVideoResponse, ErrorResponse
from ..core import config
from ..core.workflow import run_workflow

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="reelsmith",
    description="Prompt-to-video service: style triage, narration, still frame, Veo clips",
    version="1.0.0"
)

# CORS configuration for client applications
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, message: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "name": "reelsmith",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint"""
    ffmpeg_path = shutil.which("ffmpeg")
    return {
        "status": "healthy",
        "ffmpeg": "available" if ffmpeg_path else "missing",
        "output_dir": config.OUTPUT_DIR,
        "timestamp": datetime.now().isoformat()
    }


@app.post("/api/generate-video", response_model=GenerateVideoResponse)
async def generate_video_endpoint(request: Optional[GenerateVideoRequest] = None):
    """Route the prompt to a style agent and generate the video"""
    prompt = request.prompt.strip() if request and request.prompt else ""
    logger.info(f"[API] New video generation request: {prompt}")

    if not prompt:
        logger.error("[API] No prompt provided")
        return _error(400, "Prompt is required")

    if request.style and request.style not in config.VIDEO_STYLES:
        logger.error(f"[API] Unknown style: {request.style}")
        return _error(400, f"Unknown style: {request.style}. Must be one of {config.VIDEO_STYLES}")

    try:
        logger.info("[API] Running workflow with prompt...")
        # Generation is blocking (polling + downloads), keep it off the event loop
        state = await asyncio.to_thread(run_workflow, prompt, request.style)
    except Exception as e:
        logger.exception("[API] Error in video generation")
        return _error(500, str(e) or "Failed to generate video")

    if state.get("error"):
        logger.error(f"[API] Error in video generation: {state['error']}")
        return _error(500, state["error"], details=state.get("error_details"))

    if not state.get("file_paths") and not state.get("final_answer"):
        logger.error("[API] No output received from workflow")
        return _error(500, "No output received from agent")

    response = GenerateVideoResponse(
        style=state.get("selected_style"),
        file_paths=state.get("file_paths", []),
        video_path=state.get("video_path"),
        image_path=state.get("image_path"),
        narration=state.get("narration"),
        final_answer=state.get("final_answer")
    )
    logger.info(f"[API] Workflow completed successfully, returning file paths: {response.file_paths}")
    return response


def main():
    """Run the API server with uvicorn"""
    logging.basicConfig(level=logging.INFO)
    logger.info(f"Server running on port {config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
