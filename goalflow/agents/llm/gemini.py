import logging

import httpx
from google import genai
from google.genai import errors, types

from goalflow.agents.errors import ConfigurationError, TransportError
from .base import LLMClient

logger = logging.getLogger(__name__)

class GeminiClient(LLMClient):
    provider = "gemini"

    def __init__(self, * , api_key: str | None, model: str, timeout: float = 120, client=None):
        if client is None:
            if not api_key:
                raise ConfigurationError("GEMINI_API_KEY is not set")
            # google-genai expects the timeout in milliseconds
            client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(timeout=int(timeout * 1000)),
            )
        self.client = client
        self.model = model

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        config = types.GenerateContentConfig(
            system_instruction=system,
            temperature=temperature,
        )
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=user,
                config=config,
            )
        except (errors.APIError, httpx.HTTPError) as e:
            raise TransportError(f"gemini request failed: {e}") from e

        # Join the non-thought parts of the first candidate
        text = ""
        if response.candidates and response.candidates[0].content:
            for part in response.candidates[0].content.parts or []:
                if getattr(part, "thought", False):
                    continue
                text += getattr(part, "text", "") or ""

        if not text.strip():
            logger.warning("gemini model=%s returned no text parts", self.model)
        return self._require_content(text)
