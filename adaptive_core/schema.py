# adaptive_core/schema.py

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Tuple


# Question types
MULTIPLE_CHOICE = "multiple_choice"
CODE = "code"
OPEN_ENDED = "open_ended"
QUESTION_TYPES = (MULTIPLE_CHOICE, CODE, OPEN_ENDED)

# Ability / difficulty scale
ABILITY_MIN, ABILITY_MAX = 1.0, 10.0

# Level labels
BEGINNER = "Beginner"
MID_LEVEL = "Mid-Level"
ADVANCED = "Advanced"


@dataclass(frozen=True)
class Question:
    """
    A scored catalog entry:
    - difficulty on the 1-10 scale, hand-assigned and never changed by the engine
    - options/correct_answer only for multiple_choice
    - time_limit in seconds
    """
    id: str
    skill: str
    difficulty: float
    question: str
    type: str = MULTIPLE_CHOICE  # multiple_choice | code | open_ended
    points: int = 10
    time_limit: int = 60

    options: Optional[Tuple[str, ...]] = None
    correct_answer: Optional[str] = None
    hints: Tuple[str, ...] = ()
    explanation: str = ""

    def public_view(self) -> Dict[str, Any]:
        """Fields safe to show the candidate (no answer key, no explanation)."""
        view: Dict[str, Any] = {
            "id": self.id,
            "skill": self.skill,
            "difficulty": self.difficulty,
            "question": self.question,
            "type": self.type,
            "points": self.points,
            "time_limit": self.time_limit,
            "hints": list(self.hints),
        }
        if self.options is not None:
            view["options"] = list(self.options)
        return view


@dataclass(frozen=True)
class ResponseRecord:
    """
    One answered question. `difficulty` is the question's difficulty at the
    time of answering, `response_time` is in seconds.
    """
    question_id: str
    difficulty: float
    is_correct: bool
    response_time: float
    partial_credit: Optional[float] = None  # 0..1

    @property
    def credit(self) -> float:
        if self.partial_credit is None:
            return 1.0 if self.is_correct else 0.0
        return min(1.0, max(0.0, self.partial_credit))


@dataclass
class SessionState:
    """
    Running state of one adaptive session. Owned by a single caller; the engine
    returns updated copies and never keeps a reference between calls.
    """
    current_ability: float
    confidence: float = 0.3
    questions_answered: int = 0
    correct_answers: int = 0
    consecutive_correct: int = 0
    consecutive_incorrect: int = 0
    response_history: List[ResponseRecord] = field(default_factory=list)
    difficulty_history: List[float] = field(default_factory=list)  # ability snapshots


@dataclass(frozen=True)
class SessionConfig:
    skill: str
    target_questions: int = 10
    min_questions: int = 5
    max_time_minutes: float = 30.0
    starting_difficulty: float = 5.0
    adaptation_rate: float = 0.5  # 0.1 - 1.0
    termination_confidence: float = 0.9


@dataclass(frozen=True)
class TerminationDecision:
    stop: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class AdaptiveResult:
    estimated_ability: float
    ability_level: str
    confidence: float
    percentile_rank: int
    questions_answered: int
    accuracy: int
    average_response_time: float  # seconds
    strength_areas: List[str]
    weakness_areas: List[str]
    recommended_level: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
