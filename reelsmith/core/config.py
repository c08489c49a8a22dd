"""Configuration and setup for the reelsmith video workflow"""

import os
import json
from dotenv import load_dotenv
from google.oauth2 import service_account

# Load environment variables
load_dotenv()

# Gemini Developer API
GEMINI_API_KEY = os.getenv('GEMINI_API_KEY', '')

# GCP Configuration (Vertex AI mode, used when a project is set)
PROJECT_ID = os.getenv('GCP_PROJECT_ID')
LOCATION = os.getenv('GOOGLE_CLOUD_REGION', 'us-central1')

# Output Configuration
OUTPUT_DIR = os.getenv('OUTPUT_DIR', os.path.join(os.getcwd(), 'output'))

# Server Configuration
HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', '3001'))

# Retry Configuration
DEFAULT_MAX_RETRIES = 3

# Video styles handled by the style agents
VIDEO_STYLES = ["hype", "ad", "cinematic"]

# Model Configuration
MODEL_CONFIG = {
    "orchestrator": os.getenv('ORCHESTRATOR_MODEL', 'gemini-2.5-flash'),
    "narration": os.getenv('NARRATION_MODEL', 'gemini-2.5-flash'),
    "image": os.getenv('IMAGE_MODEL', 'imagen-3.0-generate-002'),
    "video": os.getenv('VIDEO_MODEL', 'veo-2.0-generate-001'),
}

# Video Generation Settings
VIDEO_GENERATION_CONFIG = {
    "aspect_ratio": "9:16",
    "number_of_videos": 2,
    "check_interval": 10,  # seconds between operation polls
    "max_wait_time": int(os.getenv('VIDEO_MAX_WAIT_TIME', '600')),
    "download_timeout": 60,
    "download_chunk_size": 1024 * 1024,  # 1MB chunks
    "stitch_clips": os.getenv('STITCH_CLIPS', 'true').lower() != 'false',
}

# Image Generation Settings
IMAGE_GENERATION_CONFIG = {
    "number_of_images": 1,
    "mime_type": "image/png",
}


_credentials = None


def get_credentials():
    """Service account credentials for Vertex AI, or None when not configured"""
    global _credentials
    if _credentials is None:
        credentials_json = os.getenv('credentials_dict')
        if not credentials_json:
            return None
        credentials_info = json.loads(credentials_json)
        _credentials = service_account.Credentials.from_service_account_info(
            credentials_info,
            scopes=['https://www.googleapis.com/auth/cloud-platform']
        )
    return _credentials


def use_vertex_ai() -> bool:
    """Vertex AI is used whenever a GCP project is configured"""
    return bool(PROJECT_ID)
