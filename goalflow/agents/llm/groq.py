from openai import OpenAI, OpenAIError

from goalflow.agents.errors import ConfigurationError, TransportError
from .base import LLMClient

class GroqOpenAIClient(LLMClient):
    provider = "groq"

    def __init__(self, * , api_key: str | None, base_url: str, model: str, timeout: float = 120,
    client=None):
        if client is None:
            if not api_key:
                raise ConfigurationError("GROQ_API_KEY is not set")
            client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)
        self.client = client
        self.model = model

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except OpenAIError as e:
            raise TransportError(f"groq request failed: {e}") from e

        if not resp.choices:
            return self._require_content(None)
        return self._require_content(resp.choices[0].message.content).strip()
