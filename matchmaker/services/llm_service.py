"""LLM Service - Abstraction layer for AI model calls.

This module provides a unified interface for calling different LLM providers
(Gemini, OpenAI) with consistent error handling and response formatting.

Interface Contract:
- call() returns str (raw text)
- generate_object_array() returns list[dict] (parsed JSON)
- All methods raise LLMServiceError on failure
- Callers should not depend on specific LLM provider details
"""

from __future__ import annotations

import json
import logging
import os
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

import google.generativeai as genai
from openai import OpenAI

from config import (
    LARGE_MODEL,
    LLM_PROVIDER,
    OPENAI_LARGE_MODEL,
    OPENAI_SMALL_MODEL,
    SMALL_MODEL,
)

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


class LLMServiceError(Exception):
    """Raised when LLM call fails."""
    pass


class ModelClass(Enum):
    """Size class of the model to use for a call."""
    SMALL = "small"
    LARGE = "large"


class BaseLLMService(ABC):
    """Abstract base class for LLM services."""

    @abstractmethod
    def call(
        self,
        prompt: str,
        *,
        json_mode: bool = False,
        model_class: ModelClass = ModelClass.LARGE,
    ) -> str:
        """Call the LLM with a prompt.

        Args:
            prompt: The prompt to send to the LLM
            json_mode: If True, expect JSON response
            model_class: Which configured model size to use

        Returns:
            str: The LLM response text

        Raises:
            LLMServiceError: If the call fails
        """
        pass


class GeminiService(BaseLLMService):
    """Google Gemini LLM service implementation."""

    def __init__(self, small_model: str = SMALL_MODEL, large_model: str = LARGE_MODEL):
        self.models = {ModelClass.SMALL: small_model, ModelClass.LARGE: large_model}
        self._configured = False

    def _configure(self) -> None:
        """Configure Gemini API (lazy initialization)."""
        if self._configured:
            return
        api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY")
        if not api_key:
            raise LLMServiceError("GEMINI_API_KEY or GOOGLE_API_KEY environment variable not set")
        genai.configure(api_key=api_key)
        self._configured = True

    def call(
        self,
        prompt: str,
        *,
        json_mode: bool = False,
        model_class: ModelClass = ModelClass.LARGE,
    ) -> str:
        """Call Gemini model."""
        self._configure()
        try:
            gen_config = None
            if json_mode:
                gen_config = genai.GenerationConfig(
                    response_mime_type="application/json"
                )
            model = genai.GenerativeModel(self.models[model_class])
            response = model.generate_content(prompt, generation_config=gen_config)
            return response.text
        except Exception as e:
            raise LLMServiceError(f"Gemini call failed: {e}") from e


class OpenAIService(BaseLLMService):
    """OpenAI LLM service implementation."""

    def __init__(self, small_model: str = OPENAI_SMALL_MODEL, large_model: str = OPENAI_LARGE_MODEL):
        self.models = {ModelClass.SMALL: small_model, ModelClass.LARGE: large_model}
        self._client: OpenAI | None = None

    def _get_client(self) -> OpenAI:
        """Get or create OpenAI client (lazy initialization)."""
        if self._client is None:
            api_key = os.environ.get("OPENAI_API_KEY")
            if not api_key:
                raise LLMServiceError("OPENAI_API_KEY environment variable not set")
            self._client = OpenAI(api_key=api_key)
        return self._client

    def call(
        self,
        prompt: str,
        *,
        json_mode: bool = False,
        model_class: ModelClass = ModelClass.LARGE,
    ) -> str:
        """Call OpenAI model.

        OpenAI's json_object format only allows a top-level object, so JSON
        mode is left to the prompt here; arrays are requested by most templates.
        """
        try:
            client = self._get_client()
            response = client.chat.completions.create(
                model=self.models[model_class],
                messages=[{"role": "user", "content": prompt}],
            )
            return response.choices[0].message.content or ""
        except LLMServiceError:
            raise
        except Exception as e:
            raise LLMServiceError(f"OpenAI call failed: {e}") from e


# Default service instance (can be swapped for testing)
class LLMService:
    """Facade for LLM services with provider switching."""

    _instance: BaseLLMService | None = None

    @classmethod
    def get_instance(cls) -> BaseLLMService:
        """Get the configured LLM service instance."""
        if cls._instance is None:
            if LLM_PROVIDER == "openai":
                cls._instance = OpenAIService()
            else:
                cls._instance = GeminiService()
        return cls._instance

    @classmethod
    def set_instance(cls, service: BaseLLMService) -> None:
        """Set a custom LLM service (useful for testing)."""
        cls._instance = service

    @classmethod
    def reset(cls) -> None:
        """Reset to default service."""
        cls._instance = None


def parse_object_array(content: str) -> list[dict[str, Any]]:
    """Parse an LLM reply into a list of JSON objects.

    Accepts a bare array, a single object (wrapped into a list) or either of
    those inside a markdown code fence. Non-object items are dropped.

    Raises:
        LLMServiceError: If the reply is not JSON
    """
    text = (content or "").strip()
    if not text:
        return []
    fenced = _FENCE_RE.match(text)
    if fenced:
        text = fenced.group(1)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LLMServiceError(f"Invalid JSON response: {e}") from e
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise LLMServiceError(f"Expected a JSON array, got {type(data).__name__}")
    return [item for item in data if isinstance(item, dict)]


def generate_object_array(
    llm: BaseLLMService,
    context: str,
    *,
    model_class: ModelClass = ModelClass.LARGE,
) -> list[dict[str, Any]]:
    """Send a composed context and parse the reply as a JSON object array."""
    response = llm.call(context, json_mode=True, model_class=model_class)
    results = parse_object_array(response)
    logger.debug("LLM returned %d object(s)", len(results))
    return results
