## Main application entry point
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from goalflow.settings import Settings
from goalflow.agents.errors import ConfigurationError, InvalidRequestError, WorkflowError
from goalflow.agents.llm.base import LLMClient
from goalflow.agents.llm.client import get_llm_client
from goalflow.agents.workflow import WorkflowController
from goalflow.goals.routes import router as goals_router

logger = logging.getLogger(__name__)


class _UnconfiguredClient(LLMClient):
    """Stands in when the provider could not be built; every call reports why."""
    provider = "unconfigured"

    def __init__(self, error: ConfigurationError):
        self.error = error

    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        raise ConfigurationError(str(self.error))


def create_app(settings: Settings | None = None, llm: LLMClient | None = None) -> FastAPI:
    settings = settings or Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if llm is None:
        try:
            llm = get_llm_client(settings)
        except ConfigurationError as e:
            logger.error("LLM client not configured: %s", e)
            llm = _UnconfiguredClient(e)

    app = FastAPI(title="goalflow")
    app.state.settings = settings
    app.state.controller = WorkflowController(llm, temperature=settings.llm_temperature)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("rejected request to %s: %d validation errors", request.url.path, len(exc.errors()))
        return JSONResponse({"error": "invalid request"}, status_code=400)

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidRequestError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(WorkflowError)
    async def workflow_error_handler(request: Request, exc: WorkflowError):
        # Detail stays in the server log
        logger.error("request to %s failed: %s: %s", request.url.path, type(exc).__name__, exc)
        return JSONResponse({"error": "failed to process request"}, status_code=500)

    @app.get("/health")
    def health():
        return {"status": "ok", "provider": app.state.controller.llm.provider}

    app.include_router(goals_router)
    return app


def run() -> None:
    import uvicorn

    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
