import httpx
from goalflow.agents.errors import TransportError
from goalflow.agents.llm.base import LLMClient

class OllamaOpenAIClient(LLMClient):
    provider = "ollama"

    def __init__(self, base_url: str, model: str, timeout: float = 120,
    transport: httpx.BaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.transport = transport

    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        # Ollama OpenAI-compatible endpoint
        # POST {base_url}/chat/completions with OpenAI message format

        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": temperature
        }

        headers = {
            "Content-Type": "application/json",
            #OpenAI-compatible clients require an api key field; Ollama ignores it
            "Authorization": "Bearer ollama",
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.post(url, json=payload, headers=headers)
                r.raise_for_status()
                data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            raise TransportError(f"ollama request failed: {e}") from e

        if not isinstance(data, dict):
            raise TransportError(f"ollama returned unexpected body: {type(data).__name__}")

        choices = data.get("choices") or []
        if not isinstance(choices, list):
            raise TransportError("ollama returned malformed choices")
        if not choices:
            return self._require_content(None)
        if not isinstance(choices[0], dict):
            raise TransportError("ollama returned malformed choices")

        message = choices[0].get("message") or {}
        content = message.get("content") if isinstance(message, dict) else None
        return self._require_content(content if isinstance(content, str) else None)
