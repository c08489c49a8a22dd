"""State definition for the video generation workflow"""

from typing import List, Dict, Any, Optional, TypedDict


class VideoState(TypedDict, total=False):
    # Current request
    user_query: str
    requested_style: Optional[str]  # Caller-forced style, skips triage when set
    output_dir: str

    # Orchestrator routing
    selected_style: Optional[str]  # "hype" / "ad" / "cinematic", None for direct answers
    selected_agent: Optional[str]
    routing_analysis: str
    final_answer: str

    # Pipeline outputs
    narration: str
    image_path: str
    file_paths: List[str]  # Downloaded clips, in generation order
    video_path: str  # Final (possibly stitched) video

    # Failure reporting
    error: Optional[str]
    error_details: Optional[str]  # Underlying cause (provider message, ffmpeg stderr)

    # Progress tracking
    current_agent: str
    events: List[Dict[str, Any]]
    component_timings: Dict[str, float]
