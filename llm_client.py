"""
LLM CLIENT - STRUCTURED COMPLETION
Sends a rendered prompt to an OpenAI-compatible chat completions endpoint and
returns the model's JSON object.

Purpose:
- Attach the output-shape instruction as the system message
- POST the prompt with the configured model / temperature / token limit
- Parse the message content as a JSON object

Errors are raised, never swallowed: the analysis service owns the fault boundary.
"""
from typing import Any, Dict, Optional
import json
import logging

import requests

import config
from prompt_builder import build_output_instructions

logger = logging.getLogger(__name__)


class ModelResponseError(Exception):
    """The model answered, but not with a JSON object."""


class LLMClient:
    """Thin wrapper around one chat completions endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        endpoint: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None
    ):
        self.api_key = api_key if api_key is not None else config.API_KEY
        self.endpoint = endpoint or config.LLM_ENDPOINT
        self.model = model or config.LLM_MODEL
        self.temperature = temperature if temperature is not None else config.LLM_TEMPERATURE
        self.max_tokens = max_tokens or config.LLM_MAX_TOKENS
        self.timeout = timeout or config.LLM_TIMEOUT

        logger.debug(f"[LLMClient] API Key set: {bool(self.api_key)}")
        logger.debug(f"[LLMClient] Endpoint: {self.endpoint}")

        if not self.api_key:
            raise ValueError("API_KEY environment variable is not set")

    def complete(self, prompt: str) -> Dict[str, Any]:
        """
        Run one completion.

        Args:
            prompt: Rendered user prompt

        Returns:
            The JSON object produced by the model, e.g. {"summary": "..."}
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}"
        }

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": build_output_instructions()},
                {"role": "user", "content": prompt}
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "response_format": {"type": "json_object"}
        }

        logger.info(f"[LLM] Model: {self.model}, prompt length: {len(prompt)}")

        response = requests.post(
            self.endpoint,
            json=payload,
            headers=headers,
            timeout=self.timeout
        )
        logger.info(f"[LLM] Response status: {response.status_code}")
        response.raise_for_status()

        data = response.json()
        content = data["choices"][0]["message"]["content"]
        return _parse_json_object(content)


def _parse_json_object(content: Optional[str]) -> Dict[str, Any]:
    if content is None:
        raise ModelResponseError("Model returned no content")

    text = content.strip()
    # Some proxies still wrap JSON in a markdown fence
    if text.startswith("```"):
        text = text.strip("`")
        if text.startswith("json"):
            text = text[4:]

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise ModelResponseError(f"Model content is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise ModelResponseError(f"Expected a JSON object, got {type(parsed).__name__}")
    return parsed


def complete(prompt: str) -> Dict[str, Any]:
    """Complete `prompt` with a client built from config."""
    return LLMClient().complete(prompt)
