# services/assessment_service.py
import logging
import math
import numbers
from copy import deepcopy

from models.assessment import (
    CATEGORIES,
    CHOICE_TYPES,
    LIKERT_MAX,
    LIKERT_MIN,
    QUESTION_TYPES,
    QuestionDefinition,
)
from questions.assessment_questions import QUESTIONS, SECTION_DESCRIPTIONS, SECTION_TITLES
from questions.option_scores import OPTION_SCORES

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when the question catalog or option-scoring table is inconsistent."""


class AnswerValidationError(ValueError):
    """Raised when a submitted answer is not legal for its question."""


def load_catalog(raw_questions, option_scores=None):
    """
    Build and validate the question catalog.

    Returns (questions, option_scores) where questions is a tuple of
    QuestionDefinition in catalog order and option_scores maps question id
    to a tuple of per-option scores. Raises CatalogError listing every
    problem found.
    """
    option_scores = option_scores or {}
    errors = []
    questions = []
    seen_ids = set()

    for position, raw in enumerate(raw_questions):
        q = QuestionDefinition.from_dict(raw)
        label = q.id or f"#{position}"

        if not q.id:
            errors.append(f"Question {label} has no id")
        elif q.id in seen_ids:
            errors.append(f"Duplicate question id '{q.id}'")
        seen_ids.add(q.id)

        if q.category not in CATEGORIES:
            errors.append(f"Question {label} has unknown category '{q.category}'")
        if q.type not in QUESTION_TYPES:
            errors.append(f"Question {label} has unknown type '{q.type}'")
        if (isinstance(q.weight, bool) or not isinstance(q.weight, numbers.Real)
                or not math.isfinite(q.weight) or q.weight <= 0):
            errors.append(f"Question {label} must have a positive, finite weight")
        if q.type in CHOICE_TYPES and not q.options:
            errors.append(f"Question {label} of type '{q.type}' needs options")

        questions.append(q)

    by_id = {q.id: q for q in questions}
    table = {}
    for qid, scores in option_scores.items():
        question = by_id.get(qid)
        if question is None:
            errors.append(f"Option scores given for unknown question '{qid}'")
            continue
        if len(scores) != len(question.answer_options):
            errors.append(
                f"Option scores for '{qid}' have {len(scores)} entries, "
                f"question has {len(question.answer_options)} options"
            )
        if any(not 0 <= s <= 100 for s in scores):
            errors.append(f"Option scores for '{qid}' must lie in [0, 100]")
        table[qid] = tuple(scores)

    if errors:
        raise CatalogError("Invalid question catalog:\n" + "\n".join(errors))

    logger.info(f"Loaded {len(questions)} questions ({len(table)} with option scores)")
    return tuple(questions), table


class AssessmentService:
    """
    Service encapsulating the question catalog: lookups, answer validation
    and the payloads the routes send to the client.
    """

    def __init__(self, raw_questions=None, option_scores=None):
        # Load static question sets once
        self.questions, self.option_scores = load_catalog(
            deepcopy(QUESTIONS if raw_questions is None else raw_questions),
            OPTION_SCORES if option_scores is None else option_scores,
        )
        self._by_id = {q.id: q for q in self.questions}

    # -------------------------
    # Public helpers for routes
    # -------------------------
    def total_questions(self):
        return len(self.questions)

    def get_question(self, question_id):
        return self._by_id.get(question_id)

    def get_question_by_index(self, index):
        if not 0 <= index < len(self.questions):
            raise IndexError(f"Question index {index} out of range (0..{len(self.questions) - 1})")
        return self.questions[index]

    def get_questions_for_client(self):
        return [q.to_client_dict() for q in self.questions]

    def get_section_info(self, question):
        """Title and description of the section a question belongs to."""
        return {
            'category': question.category,
            'title': SECTION_TITLES.get(question.category, ''),
            'description': SECTION_DESCRIPTIONS.get(question.category, ''),
        }

    def get_sections(self):
        return [
            {
                'category': category,
                'title': SECTION_TITLES.get(category, ''),
                'description': SECTION_DESCRIPTIONS.get(category, ''),
                'question_count': sum(1 for q in self.questions if q.category == category),
            }
            for category in CATEGORIES
        ]

    def get_progress(self, answer_set, current_step=0):
        total = len(self.questions)
        answered = sum(1 for q in self.questions if q.id in answer_set)
        return {
            'current_step': current_step,
            'question_number': current_step + 1,
            'total_questions': total,
            'answered': answered,
            'percent': int(round((current_step + 1) / total * 100)) if total else 0,
            'is_last': current_step >= total - 1,
        }

    # -------------------------
    # Answer validation
    # -------------------------
    def validate_answer(self, question_id, value):
        """
        Check a submitted value against its question's answer domain.
        Returns the normalised value; raises AnswerValidationError.
        """
        if not isinstance(question_id, str):
            raise AnswerValidationError("question_id must be a string")
        question = self.get_question(question_id)
        if question is None:
            raise AnswerValidationError(f"Unknown question id '{question_id}'")

        if question.type == 'likert':
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise AnswerValidationError(f"Question '{question_id}' expects a number between {LIKERT_MIN} and {LIKERT_MAX}")
            if not LIKERT_MIN <= value <= LIKERT_MAX:
                raise AnswerValidationError(f"Answer {value} out of range {LIKERT_MIN}-{LIKERT_MAX} for '{question_id}'")
            return value

        if not isinstance(value, str):
            raise AnswerValidationError(f"Question '{question_id}' expects one of its options as text")
        if question.type == 'yes-no':
            value = value.strip().lower()
        if question.option_index(value) is None:
            raise AnswerValidationError(f"'{value}' is not an option of question '{question_id}'")
        return value
