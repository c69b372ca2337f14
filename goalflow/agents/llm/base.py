## Base LLM Client Interface
from abc import ABC, abstractmethod

from goalflow.agents.errors import EmptyOutputError

class LLMClient(ABC):
    provider: str = "unknown"

    @abstractmethod
    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        """
        Send one prompt to the provider and return the completion text.

        Implementations raise TransportError when the call itself fails and
        EmptyOutputError when the provider answers without usable content.
        They never retry.
        """
        raise NotImplementedError

    def _require_content(self, content: str | None) -> str:
        if content is None or not content.strip():
            raise EmptyOutputError(f"{self.provider} returned no content")
        return content
