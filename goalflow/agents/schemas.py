## Pydantic schemas for stage requests and results
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class Stage(str, Enum):
    ANALYZE_GOAL = "analyze_goal"
    CREATE_ROADMAP = "create_roadmap"
    GENERATE_TASKS = "generate_tasks"


class StageRequest(BaseModel):
    step: Stage
    goal: str
    context: str = ""
    # Positional: answers[i] answers questions[i]
    answers: Optional[List[str]] = None
    questions: Optional[List[str]] = None
    roadmap: Optional[List[str]] = None


class QuestionsResult(BaseModel):
    type: Literal["questions"] = "questions"
    message: str
    questions: List[str] = Field(min_length=1)


class RoadmapResult(BaseModel):
    type: Literal["roadmap"] = "roadmap"
    message: str
    roadmap: List[str] = Field(min_length=1)


class TasksResult(BaseModel):
    type: Literal["tasks"] = "tasks"
    tasks: List[str] = Field(min_length=1)


StageResult = Annotated[
    Union[QuestionsResult, RoadmapResult, TasksResult],
    Field(discriminator="type"),
]
