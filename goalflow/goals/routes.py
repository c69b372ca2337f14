# goalflow/goals/routes.py
from fastapi import APIRouter, Depends, Request

from goalflow.agents.schemas import StageRequest, StageResult
from goalflow.agents.workflow import WorkflowController

router = APIRouter(prefix="/api")


def get_controller(request: Request) -> WorkflowController:
    return request.app.state.controller


@router.post("/tasks", response_model=StageResult, response_model_exclude_none=True)
def process_stage(
    payload: StageRequest,
    controller: WorkflowController = Depends(get_controller),
):
    # Sync endpoint: runs in the threadpool, one LLM call per request
    return controller.run(payload)
