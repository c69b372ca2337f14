from goalflow.settings import Settings
from goalflow.agents.errors import ConfigurationError
from goalflow.agents.llm.base import LLMClient
from goalflow.agents.llm.gemini import GeminiClient
from goalflow.agents.llm.groq import GroqOpenAIClient
from goalflow.agents.llm.ollama import OllamaOpenAIClient

def get_llm_client(settings: Settings) -> LLMClient:
    provider = settings.LLM_PROVIDER.strip().lower()

    if provider == "gemini":
        return GeminiClient(
            api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            timeout=settings.llm_timeout_seconds,
        )

    if provider == "groq":
        return GroqOpenAIClient(
            api_key=settings.GROQ_API_KEY,
            base_url=settings.GROQ_BASE_URL,
            model=settings.GROQ_MODEL,
            timeout=settings.llm_timeout_seconds,
        )

    if provider == "ollama":
        return OllamaOpenAIClient(
            base_url = settings.ollama_base_url,
            model = settings.ollama_model,
            timeout = settings.llm_timeout_seconds,
        )

    raise ConfigurationError(f"Unknown LLM_PROVIDER: {settings.LLM_PROVIDER!r}")
