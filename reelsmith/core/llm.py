"""Gemini LLM integration for the style routing and narration agents"""

import logging
from typing import Any, Dict, List, Optional
from langchain_core.callbacks.manager import CallbackManagerForLLMRun
from langchain_core.language_models.llms import LLM
from google import genai
from google.genai import types
from . import config
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_client = None


def get_genai_client():
    """Shared google-genai client (Vertex AI when a project is configured, API key otherwise)"""
    global _client
    if _client is None:
        if config.use_vertex_ai():
            logger.info(f"[LLM] Using Vertex AI client (project={config.PROJECT_ID}, location={config.LOCATION})")
            _client = genai.Client(
                vertexai=True,
                project=config.PROJECT_ID,
                location=config.LOCATION,
                credentials=config.get_credentials()
            )
        elif config.GEMINI_API_KEY:
            logger.info("[LLM] Using Gemini Developer API client")
            _client = genai.Client(api_key=config.GEMINI_API_KEY)
        else:
            raise ConfigurationError("Set GEMINI_API_KEY or GCP_PROJECT_ID to call the Gemini APIs")
    return _client


class GeminiLLM(LLM):
    """Gemini text generation exposed as a LangChain LLM"""

    model: str = config.MODEL_CONFIG["narration"]
    gemini_configs: Dict[str, Any] = {
        'max_output_tokens': 2048,
        'temperature': 1,
    }
    system_instruction: Optional[str] = None
    client: Any = None

    @property
    def _llm_type(self) -> str:
        return "gemini"

    def _build_config(self, response_schema: Optional[str] = None) -> types.GenerateContentConfig:
        config_params = dict(self.gemini_configs)
        if self.system_instruction:
            config_params["system_instruction"] = self.system_instruction
        if response_schema:
            from ..schemas import get_schema
            config_params["response_mime_type"] = "application/json"
            config_params["response_schema"] = get_schema(response_schema)
        return types.GenerateContentConfig(**config_params)

    def _call(
        self,
        prompt: str,
        stop: Optional[List[str]] = None,
        run_manager: Optional[CallbackManagerForLLMRun] = None,
        response_schema: Optional[str] = None,
        **kwargs: Any,
    ) -> str:
        client = self.client or get_genai_client()
        logger.debug(f"[LLM] {self.model} <- {prompt[:200]}")

        response = client.models.generate_content(
            model=self.model,
            contents=[prompt],
            config=self._build_config(response_schema)
        )
        text = response.text or ""

        # Stop sequences are applied client side
        if stop:
            for token in stop:
                if token in text:
                    text = text[:text.index(token)]
        return text


def get_llm(**kwargs) -> GeminiLLM:
    """Get Gemini LLM instance

    Args:
        **kwargs: Configuration parameters passed to GeminiLLM

    Returns:
        GeminiLLM instance
    """
    return GeminiLLM(**kwargs)
