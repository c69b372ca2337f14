# goalflow/agents/prompts.py


SYSTEM_COACH = """You are a practical personal goal coach.

You must start your reply with the exact tag requested (for example QUESTIONS:),
followed by one item per line. No markdown, no commentary, no closing remarks.
"""


def build_analyze_prompt(goal: str, context: str) -> str:
    return f"""
Someone wants to achieve this goal: {goal}

Context: {context}

Before building a plan, ask 3-5 direct questions that reveal:
- their current experience with this goal
- what they have already tried or done
- what a concrete finished result looks like for them

Requirements:
- Start the reply with QUESTIONS: on its own line
- One question per line
- No numbering or bullet points
- Keep each question short and specific

Example format:
QUESTIONS:
How many hours per week can you spend on this?
Have you built anything related to this before?
What would you like to have finished in three months?
""".strip()


def _format_answers(answers: list[str], questions: list[str] | None) -> str:
    if not answers:
        return "(no answers given)"

    rows = []
    for i, answer in enumerate(answers):
        n = i + 1
        if questions and i < len(questions):
            rows.append(f"Q{n}: {questions[i]}\nA{n}: {answer}")
        else:
            rows.append(f"Answer {n}: {answer}")
    return "\n".join(rows)


def build_roadmap_prompt(goal: str, context: str, answers: list[str] | None = None,
questions: list[str] | None = None) -> str:
    answers_text = _format_answers(answers or [], questions)

    return f"""
Create a step-by-step roadmap for someone who wants to: {goal}

Context: {context}

Their answers to your earlier questions (numbered in the order the questions were asked):
{answers_text}

Requirements:
- Start the reply with ROADMAP: on its own line
- One milestone per line, ordered from nearest-term to final
- Each milestone is a concrete achievement, not an abstract principle
- No numbering or bullet points

Example format:
ROADMAP:
Finish an introductory Python course
Build and publish a small data analysis project
Complete a machine learning course with graded exercises
Apply to five junior data science roles
""".strip()


def build_tasks_prompt(goal: str, context: str, roadmap: list[str]) -> str:
    roadmap_text = "\n".join(f"{i}. {m}" for i, m in enumerate(roadmap, start=1))
    current = roadmap[0]

    return f"""
Someone wants to: {goal}

Context: {context}

Their roadmap:
{roadmap_text}

Current milestone: {current}

Generate exactly 5 simple, actionable daily tasks that move them toward the current milestone only.

Requirements:
- Start the reply with TASKS: on its own line
- Each task should be completable in 15-30 minutes
- Tasks should be concrete and specific
- Focus on small, incremental progress toward: {current}
- Do not plan for any later milestone
- Return only the tasks, one per line
- No numbering or bullet points
- Do not use any emojis or special characters

Example format:
TASKS:
research one specific skill needed for becoming a data scientist
identify one person in your network who works in data science
read one article about machine learning fundamentals
practice one Python coding exercise
reflect on what you learned today
""".strip()