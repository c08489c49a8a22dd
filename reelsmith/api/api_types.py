"""Type definitions for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class GenerateVideoRequest(BaseModel):
    """Request type for video generation"""
    prompt: Optional[str] = None
    style: Optional[str] = Field(default=None, description="Skip triage and force hype / ad / cinematic")


class GenerateVideoResponse(BaseModel):
    """Files produced for a request, or the orchestrator's direct answer"""
    style: Optional[str] = None
    file_paths: List[str] = Field(default_factory=list)
    video_path: Optional[str] = None
    image_path: Optional[str] = None
    narration: Optional[str] = None
    final_answer: Optional[str] = None


class ErrorResponse(BaseModel):
    """Type for error responses"""
    error: str
    details: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.now)
