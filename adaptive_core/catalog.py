# adaptive_core/catalog.py

"""
Question catalog: read-only mapping skill -> ordered questions.

The catalog on disk is a directory of `<Skill>.json` files, each holding a
JSON list of question records:

    [{"id": "react_1", "difficulty": 1, "question": "...",
      "type": "multiple_choice", "options": [...], "correct_answer": "...",
      "points": 10, "time_limit": 30, "hints": [...], "explanation": "..."}]

The skill name comes from the record's "skill" field, falling back to the
file name.
"""

import json
import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .errors import CatalogError
from .schema import MULTIPLE_CHOICE, QUESTION_TYPES, Question

logger = logging.getLogger(__name__)

Catalog = Dict[str, Tuple[Question, ...]]

DEFAULT_CATALOG_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", "catalog")


def _string_list(raw: Mapping[str, Any], key: str, qid: Any) -> Optional[Tuple[str, ...]]:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise CatalogError(f"Question {qid}: '{key}' must be a list")
    return tuple(str(v) for v in value)


def _int_field(raw: Mapping[str, Any], key: str, default: int, qid: Any) -> int:
    value = raw.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise CatalogError(f"Question {qid}: invalid {key} {value!r}")


def question_from_dict(raw: Mapping[str, Any], skill: Optional[str] = None) -> Question:
    """Build a Question from a JSON record, validating the fields the engine relies on."""
    if not isinstance(raw, Mapping):
        raise CatalogError(f"Question record must be an object, got {type(raw).__name__}")

    qid = raw.get("id")
    if qid is None or str(qid).strip() == "":
        raise CatalogError(f"Question without id: {raw!r}")

    qtype = raw.get("type", MULTIPLE_CHOICE)
    if qtype not in QUESTION_TYPES:
        raise CatalogError(f"Question {qid}: unknown type '{qtype}'")

    try:
        difficulty = float(raw["difficulty"])
    except (KeyError, TypeError, ValueError):
        raise CatalogError(f"Question {qid}: missing or invalid difficulty")

    options = _string_list(raw, "options", qid)
    hints = _string_list(raw, "hints", qid) or ()
    correct_answer = raw.get("correct_answer")
    if qtype == MULTIPLE_CHOICE:
        if not options or correct_answer is None:
            raise CatalogError(f"Question {qid}: multiple_choice needs options and correct_answer")

    return Question(
        id=str(qid),
        skill=str(raw.get("skill") or skill or ""),
        difficulty=difficulty,
        question=str(raw.get("question", "")),
        type=qtype,
        points=_int_field(raw, "points", 10, qid),
        time_limit=_int_field(raw, "time_limit", 60, qid),
        options=options,
        correct_answer=str(correct_answer) if correct_answer is not None else None,
        hints=hints,
        explanation=str(raw.get("explanation") or ""),
    )


def load_skill_file(path: str) -> Tuple[str, Tuple[Question, ...]]:
    """One file holds one skill; records naming a different skill reject the file."""
    skill = os.path.splitext(os.path.basename(path))[0]
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise CatalogError(f"{path}: expected a JSON list of questions", source=path)

    questions = tuple(question_from_dict(r, skill) for r in records)
    skills = sorted({q.skill for q in questions})
    if len(skills) > 1:
        raise CatalogError(f"{path}: mixes skills {skills}", source=path)
    if skills:
        skill = skills[0]
    return skill, questions


def load_catalog(base_dir: str = DEFAULT_CATALOG_DIR) -> Catalog:
    """
    Load every `*.json` file under base_dir (sorted by file name).
    Broken files are logged and skipped so one bad bank does not take the
    others down.
    """
    if not os.path.isdir(base_dir):
        raise CatalogError(f"Catalog directory not found: {base_dir}", source=base_dir)

    catalog: Catalog = {}
    for name in sorted(os.listdir(base_dir)):
        if not name.endswith(".json"):
            continue
        path = os.path.join(base_dir, name)
        try:
            skill, questions = load_skill_file(path)
        except (OSError, ValueError, CatalogError) as e:
            logger.warning(f"Cannot read {path}: {e}")
            continue

        if skill in catalog:
            catalog[skill] = catalog[skill] + questions
        else:
            catalog[skill] = questions
        logger.info(f"Loaded {len(questions)} questions for {skill} from {path}")

    if not catalog:
        logger.warning(f"No questions found under {base_dir}")
    return catalog


def get_questions_for_skill(catalog: Mapping[str, Sequence[Question]], skill: str) -> Tuple[Question, ...]:
    return tuple(catalog.get(skill, ()))


def get_available_skills(catalog: Mapping[str, Sequence[Question]]) -> List[str]:
    return list(catalog.keys())


def _normalize(text: str) -> str:
    return " ".join(str(text).split()).lower()


def score_answer(question: Question, answer: str) -> Optional[bool]:
    """
    Check a multiple-choice answer against the key.
    Code and open-ended answers need an external grader: returns None.
    """
    if question.type != MULTIPLE_CHOICE or question.correct_answer is None:
        return None
    return _normalize(answer) == _normalize(question.correct_answer)
