"""
Google Veo video generation using google-genai SDK
"""

import time
import logging
from typing import Dict, Any, Optional
from google.genai import types
from google.genai.types import GenerateVideosConfig, Image
from ...core.config import MODEL_CONFIG, VIDEO_GENERATION_CONFIG

logger = logging.getLogger(__name__)


class GoogleVeoGenerator:
    """Google Veo image-to-video generation via the google-genai client"""

    def __init__(self, client=None, tag: str = "GoogleVeo"):
        self._client = client
        self.tag = tag

    @property
    def client(self):
        """Lazy client initialization"""
        if self._client is None:
            from ...core.llm import get_genai_client
            self._client = get_genai_client()
        return self._client

    def generate_video(
        self,
        prompt: str,
        image_bytes: Optional[bytes] = None,
        mime_type: str = "image/png",
        model: str = MODEL_CONFIG["video"],
        aspect_ratio: str = VIDEO_GENERATION_CONFIG["aspect_ratio"],
        number_of_videos: int = VIDEO_GENERATION_CONFIG["number_of_videos"],
        **kwargs
    ) -> Dict[str, Any]:
        """
        Submit video generation task to Google Veo

        Args:
            prompt: Video generation prompt (the narration)
            image_bytes: Raw bytes of the starting frame
            mime_type: MIME type of the starting frame
            model: Veo model name
            aspect_ratio: Video aspect ratio (16:9 or 9:16)
            number_of_videos: Number of clips to request

        Returns:
            Dict with code (0=success), data (operation), and message
        """
        try:
            logger.info(f"[{self.tag}] Submitting video generation task")
            logger.info(f"[{self.tag}] Model: {model}, Aspect ratio: {aspect_ratio}, Clips: {number_of_videos}")
            logger.info(f"[{self.tag}] Prompt: {prompt[:200]}...")

            config = GenerateVideosConfig(
                aspect_ratio=aspect_ratio,
                number_of_videos=number_of_videos,
                **kwargs
            )

            request_params = {
                "model": model,
                "prompt": prompt,
                "config": config
            }
            if image_bytes:
                request_params["image"] = Image(image_bytes=image_bytes, mime_type=mime_type)

            # Returns a long-running operation
            operation = self.client.models.generate_videos(**request_params)

            logger.info(f"[{self.tag}] Task submitted successfully: {operation.name}")
            return {
                "code": 0,
                "data": {
                    "task_id": operation.name,
                    "task_status": "submitted",
                    "operation": operation
                },
                "message": "Success"
            }

        except Exception as e:
            logger.error(f"[{self.tag}] Error submitting task: {str(e)}")
            return {
                "code": -1,
                "data": {"task_id": None, "task_status": "failed"},
                "message": f"Google Veo error: {str(e)}"
            }

    def query_task(self, operation) -> Dict[str, Any]:
        """
        Refresh a Veo operation and report its status

        Args:
            operation: Operation object (or operation name) returned by generate_video

        Returns:
            Dict with code, data (task_id, task_status, operation, task_result), and message
        """
        if isinstance(operation, str):
            operation = types.GenerateVideosOperation(name=operation)
        operation_name = operation.name

        try:
            operation = self.client.operations.get(operation)

            if not operation.done:
                return {
                    "code": 0,
                    "data": {
                        "task_id": operation_name,
                        "task_status": "processing",
                        "operation": operation
                    },
                    "message": "Processing"
                }

            if operation.error:
                error_msg = str(operation.error)
                logger.error(f"[{self.tag}] Task failed: {error_msg}")
                return {
                    "code": -1,
                    "data": {"task_id": operation_name, "task_status": "failed", "operation": operation},
                    "message": error_msg
                }

            result = operation.response or operation.result
            generated = getattr(result, "generated_videos", None) or []
            videos = [
                {"uri": item.video.uri, "video_bytes": item.video.video_bytes}
                for item in generated
                if item.video is not None
            ]

            if not videos:
                logger.warning(f"[{self.tag}] Task completed but no videos in result")
                return {
                    "code": -1,
                    "data": {"task_id": operation_name, "task_status": "failed", "operation": operation},
                    "message": "No videos in result"
                }

            logger.info(f"[{self.tag}] Task completed with {len(videos)} video(s)")
            return {
                "code": 0,
                "data": {
                    "task_id": operation_name,
                    "task_status": "succeed",
                    "operation": operation,
                    "task_result": {"videos": videos}
                },
                "message": "Success"
            }

        except Exception as e:
            logger.error(f"[{self.tag}] Error querying task {operation_name}: {str(e)}")
            return {
                "code": -1,
                "data": {"task_id": operation_name, "task_status": "failed"},
                "message": f"Query error: {str(e)}"
            }

    def wait_for_completion(
        self,
        operation,
        max_wait_time: int = VIDEO_GENERATION_CONFIG["max_wait_time"],
        poll_interval: int = VIDEO_GENERATION_CONFIG["check_interval"]
    ) -> Dict[str, Any]:
        """
        Poll at a fixed interval until the operation finishes or max_wait_time elapses

        Returns:
            Final task result dict (task_status succeed / failed / timeout)
        """
        operation_name = operation if isinstance(operation, str) else operation.name
        start_time = time.time()
        poll_count = 0

        while time.time() - start_time < max_wait_time:
            result = self.query_task(operation)
            status = result.get("data", {}).get("task_status")

            if status in ("succeed", "failed"):
                return result

            # Keep the refreshed operation for the next poll
            operation = result["data"].get("operation", operation)
            poll_count += 1
            logger.info(f"[{self.tag}] Waiting for video generation... (poll #{poll_count})")
            time.sleep(poll_interval)

        logger.error(f"[{self.tag}] Timeout after {max_wait_time}s waiting for {operation_name}")
        return {
            "code": -1,
            "data": {
                "task_id": operation_name,
                "task_status": "timeout"
            },
            "message": f"Timeout after {max_wait_time}s"
        }
