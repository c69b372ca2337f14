# goalflow/agents/workflow.py
import logging
from dataclasses import dataclass
from typing import Callable

from pydantic import ValidationError

from goalflow.agents.errors import InvalidRequestError, UnrecognizedFormatError, EmptyExtractionError
from goalflow.agents.llm.base import LLMClient
from goalflow.agents.parsing import Tag, parse_block
from goalflow.agents.prompts import (
    SYSTEM_COACH,
    build_analyze_prompt,
    build_roadmap_prompt,
    build_tasks_prompt,
)
from goalflow.agents.schemas import (
    QuestionsResult,
    RoadmapResult,
    Stage,
    StageRequest,
    StageResult,
    TasksResult,
)

logger = logging.getLogger(__name__)

QUESTIONS_MESSAGE = "Answer these questions so we can build a roadmap that fits you."
ROADMAP_MESSAGE = "Here is your roadmap. Today's tasks will target the first milestone."


@dataclass(frozen=True)
class StageSpec:
    build_prompt: Callable[[StageRequest], str]
    tag: Tag
    make_result: Callable[[list[str]], StageResult]


STAGES: dict[Stage, StageSpec] = {
    Stage.ANALYZE_GOAL: StageSpec(
        build_prompt=lambda r: build_analyze_prompt(r.goal, r.context),
        tag=Tag.QUESTIONS,
        make_result=lambda lines: QuestionsResult(message=QUESTIONS_MESSAGE, questions=lines),
    ),
    Stage.CREATE_ROADMAP: StageSpec(
        build_prompt=lambda r: build_roadmap_prompt(r.goal, r.context, r.answers, r.questions),
        tag=Tag.ROADMAP,
        make_result=lambda lines: RoadmapResult(message=ROADMAP_MESSAGE, roadmap=lines),
    ),
    Stage.GENERATE_TASKS: StageSpec(
        build_prompt=lambda r: build_tasks_prompt(r.goal, r.context, r.roadmap),
        tag=Tag.TASKS,
        make_result=lambda lines: TasksResult(tasks=lines),
    ),
}


def _get_stage(step) -> StageSpec:
    try:
        stage = Stage(step)
    except ValueError:
        raise InvalidRequestError(f"Unknown step: {step!r}")

    spec = STAGES.get(stage)
    if spec is None:
        raise InvalidRequestError(f"No handler registered for step: {stage.value}")
    return spec


def compose_prompt(request: StageRequest) -> str:
    """Build the prompt for the stage named by `request.step`."""
    if request.step is Stage.GENERATE_TASKS and not request.roadmap:
        raise InvalidRequestError("generate_tasks requires a non-empty roadmap")
    return _get_stage(request.step).build_prompt(request)


class WorkflowController:
    """
    Runs one stage of the goal -> questions -> roadmap -> tasks workflow.

    Holds only its injected LLM client and temperature. Everything a stage
    needs arrives with the request, so one instance can serve concurrent
    requests.
    """

    def __init__(self, llm: LLMClient, * , temperature: float = 0.7):
        self.llm = llm
        self.temperature = temperature

    def process(self, step: Stage | str, goal: str, context: str, answers: list[str] | None = None,
    roadmap: list[str] | None = None, questions: list[str] | None = None) -> StageResult:
        _get_stage(step)
        try:
            request = StageRequest(
                step=step,
                goal=goal,
                context=context,
                answers=answers,
                roadmap=roadmap,
                questions=questions,
            )
        except ValidationError as e:
            raise InvalidRequestError(f"Invalid request for step {step!r}: {e}") from e
        return self.run(request)

    def run(self, request: StageRequest) -> StageResult:
        spec = _get_stage(request.step)
        prompt = compose_prompt(request)

        logger.info("stage=%s provider=%s prompt_chars=%d", request.step.value,
        self.llm.provider, len(prompt))

        raw_text = self.llm.generate_text(system=SYSTEM_COACH, user=prompt,
        temperature=self.temperature)

        try:
            lines = parse_block(raw_text, spec.tag)
        except (UnrecognizedFormatError, EmptyExtractionError) as e:
            logger.warning("stage=%s unusable completion: %s", request.step.value, e)
            raise

        logger.info("stage=%s parsed %d lines", request.step.value, len(lines))
        return spec.make_result(lines)
