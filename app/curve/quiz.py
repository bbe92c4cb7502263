"""Hardcoded quiz definition — configuration only.

Option values are the tags the answer tables in ``app.curve.tables`` key on.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class QuizOption:
    id: str
    text: str
    value: str


@dataclass(frozen=True, slots=True)
class QuizQuestion:
    id: int
    field: str  # QuizAnswers attribute this question fills
    question: str
    options: list[QuizOption] = field(default_factory=list)


QUESTIONS: dict[int, QuizQuestion] = {
    1: QuizQuestion(
        id=1,
        field="cycle_length",
        question="How long is your overall menstrual cycle (first day of one period to the next)?",
        options=[
            QuizOption(id="1-1", text="Less than 28 days", value="less28days"),
            QuizOption(id="1-2", text="28–32 days", value="28to32days"),
            QuizOption(id="1-3", text="More than 32 days", value="more32days"),
            QuizOption(id="1-4", text="Inconsistent", value="inconsistent"),
            QuizOption(id="1-5", text="I don't know", value="unknown"),
        ],
    ),
    2: QuizQuestion(
        id=2,
        field="period_length",
        question="How many days does your period usually last?",
        options=[
            QuizOption(id="2-1", text="1–2 days", value="1-2days"),
            QuizOption(id="2-2", text="3–5 days", value="3-5days"),
            QuizOption(id="2-3", text="6–7 days", value="6-7days"),
            QuizOption(id="2-4", text="Longer / varies", value="longer"),
        ],
    ),
    3: QuizQuestion(
        id=3,
        field="peak_energy",
        question="When do you typically feel most energized, motivated, or confident?",
        options=[
            QuizOption(id="3-1", text="Just after my period", value="afterPeriod"),
            QuizOption(id="3-2", text="Around ovulation", value="ovulation"),
            QuizOption(id="3-3", text="Hard to say", value="inconsistent"),
        ],
    ),
    4: QuizQuestion(
        id=4,
        field="peak_energy_intensity",
        question="When energy peaks, how high does it feel?",
        options=[
            QuizOption(id="4-1", text="A gentle lift, I feel lighter than usual", value="3.5"),
            QuizOption(id="4-2", text="Energized, like I can take on my day with ease", value="4"),
            QuizOption(id="4-3", text="Strong and focused, I get a lot done", value="4.5"),
            QuizOption(id="4-4", text="I feel on top of the world, unstoppable!", value="5"),
            QuizOption(id="4-5", text="It varies", value="4.25"),
        ],
    ),
    5: QuizQuestion(
        id=5,
        field="lowest_energy",
        question="When do you tend to feel your lowest — physically, emotionally, or in motivation?",
        options=[
            QuizOption(id="5-1", text="Just before my period (PMS)", value="prePeriod"),
            QuizOption(id="5-2", text="During my period", value="duringPeriod"),
            QuizOption(id="5-3", text="Week after ovulation", value="postOvulation"),
            QuizOption(id="5-4", text="It varies", value="varies"),
        ],
    ),
    6: QuizQuestion(
        id=6,
        field="low_energy_intensity",
        question="When energy dips, how low does it feel?",
        options=[
            QuizOption(id="6-1", text="Barely noticeable, just a little slower", value="2.5"),
            QuizOption(id="6-2", text="I drag myself through the day", value="2"),
            QuizOption(id="6-3", text="Hard to focus or get things done", value="1.5"),
            QuizOption(id="6-4", text="Completely drained, need to crash", value="1"),
            QuizOption(id="6-5", text="It varies", value="1.75"),
        ],
    ),
    7: QuizQuestion(
        id=7,
        field="condition",
        question="Do you currently experience any diagnosed hormonal conditions?",
        options=[
            QuizOption(id="7-1", text="PCOD", value="pcod"),
            QuizOption(id="7-2", text="PCOS", value="pcos"),
            QuizOption(id="7-3", text="Thyroid", value="thyroid"),
            QuizOption(id="7-4", text="Menopause / Peri-menopause", value="menopause"),
            QuizOption(id="7-5", text="None", value="none"),
        ],
    ),
}


def list_questions() -> list[QuizQuestion]:
    return list(QUESTIONS.values())


def get_question(question_id: int) -> QuizQuestion | None:
    return QUESTIONS.get(question_id)
