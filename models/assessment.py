# models/assessment.py
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple, Union

QUESTION_TYPES = ('multiple-choice', 'likert', 'yes-no', 'scenario')
CHOICE_TYPES = ('multiple-choice', 'scenario')
CATEGORIES = ('psychometric', 'technical', 'aptitude', 'wiscar')
WISCAR_DIMENSIONS = ('will', 'interest', 'skill', 'cognitive', 'ability', 'realWorld')
YES_NO_OPTIONS = ('yes', 'no')
RECOMMENDATIONS = ('yes', 'maybe', 'no')

RECOMMENDATION_LABELS = {
    'yes': 'Highly Recommended',
    'maybe': 'Conditionally Recommended',
    'no': 'Not Recommended Currently',
}

LIKERT_MIN = 1
LIKERT_MAX = 5


def _utcnow():
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class QuestionDefinition:
    id: str
    type: str
    category: str
    question: str = ''
    subcategory: Optional[str] = None
    options: Tuple[str, ...] = ()
    weight: float = 1.0
    description: Optional[str] = None
    likert_labels: Optional[Dict[str, str]] = field(default=None, compare=False)

    @classmethod
    def from_dict(cls, data):
        """Build a definition from a catalog entry (see questions/assessment_questions.py)."""
        return cls(
            id=data.get('id'),
            type=data.get('type'),
            category=data.get('category'),
            question=data.get('question', ''),
            subcategory=data.get('subcategory'),
            options=tuple(data.get('options') or ()),
            weight=data.get('weight', 1.0),
            description=data.get('description'),
            likert_labels=data.get('likert_labels'),
        )

    @property
    def answer_options(self):
        """Legal string answers; yes-no questions imply ('yes', 'no')."""
        if self.type == 'yes-no' and not self.options:
            return YES_NO_OPTIONS
        return self.options

    def option_index(self, value):
        try:
            return self.answer_options.index(value)
        except ValueError:
            return None

    def to_client_dict(self):
        """Presentation fields only (no weight)."""
        q = {
            'id': self.id,
            'type': self.type,
            'category': self.category,
            'subcategory': self.subcategory,
            'question': self.question,
        }
        if self.description:
            q['description'] = self.description
        if self.answer_options:
            q['options'] = list(self.answer_options)
        if self.likert_labels:
            q['likert_labels'] = dict(self.likert_labels)
        return q


@dataclass(frozen=True)
class Answer:
    question_id: str
    value: Union[int, float, str]
    timestamp: datetime = field(default_factory=_utcnow)

    def to_dict(self):
        return {
            'question_id': self.question_id,
            'value': self.value,
            'timestamp': self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data):
        timestamp = data.get('timestamp')
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp)
        return cls(
            question_id=data['question_id'],
            value=data['value'],
            timestamp=timestamp or _utcnow(),
        )


class AnswerSet:
    """
    Answers collected so far, at most one per question.

    Owned by whoever collects the answers (the HTTP session in routes/);
    the scoring code only ever reads a snapshot via value_map().
    """

    def __init__(self, answers=None):
        self._answers = {}
        for answer in answers or []:
            self._store(answer)

    def _store(self, answer):
        # Re-answering moves the question to the end, like a fresh answer
        self._answers.pop(answer.question_id, None)
        self._answers[answer.question_id] = answer

    def upsert(self, question_id, value, timestamp=None):
        """Record an answer, replacing any earlier answer to the same question."""
        answer = Answer(question_id, value, timestamp or _utcnow())
        self._store(answer)
        return answer

    def remove(self, question_id):
        return self._answers.pop(question_id, None) is not None

    def get(self, question_id):
        return self._answers.get(question_id)

    def value_map(self):
        return {qid: answer.value for qid, answer in self._answers.items()}

    def answers(self):
        return list(self._answers.values())

    def to_list(self):
        return [answer.to_dict() for answer in self._answers.values()]

    @classmethod
    def from_list(cls, items):
        return cls(Answer.from_dict(item) for item in items or [])

    def __len__(self):
        return len(self._answers)

    def __contains__(self, question_id):
        return question_id in self._answers

    def __iter__(self):
        return iter(self._answers.values())


@dataclass(frozen=True)
class WiscarScores:
    will: int = 0
    interest: int = 0
    skill: int = 0
    cognitive: int = 0
    ability: int = 0
    real_world: int = 0

    def values(self):
        return (self.will, self.interest, self.skill, self.cognitive, self.ability, self.real_world)

    def average(self):
        values = self.values()
        return sum(values) / len(values)

    def to_dict(self):
        return dict(zip(WISCAR_DIMENSIONS, self.values()))


@dataclass(frozen=True)
class CategoryScores:
    psychometric: int
    technical: int
    aptitude: int
    wiscar: WiscarScores
    overall: int

    def to_dict(self):
        return {
            'psychometric': self.psychometric,
            'technical': self.technical,
            'aptitude': self.aptitude,
            'wiscar': self.wiscar.to_dict(),
            'overall': self.overall,
        }


@dataclass(frozen=True)
class LearningPath:
    beginner: Tuple[str, ...]
    intermediate: Tuple[str, ...]
    advanced: Tuple[str, ...]

    def to_dict(self):
        return {
            'beginner': list(self.beginner),
            'intermediate': list(self.intermediate),
            'advanced': list(self.advanced),
        }


@dataclass(frozen=True)
class ResultsRecord:
    scores: CategoryScores
    recommendation: str
    confidence: int
    insights: Tuple[str, ...]
    next_steps: Tuple[str, ...]
    learning_path: LearningPath
    alternative_roles: Optional[Tuple[str, ...]] = None

    @property
    def recommendation_text(self):
        return RECOMMENDATION_LABELS[self.recommendation]

    def to_dict(self):
        """Wire shape consumed by the results page."""
        results = {
            'scores': self.scores.to_dict(),
            'recommendation': self.recommendation,
            'recommendationText': self.recommendation_text,
            'confidence': self.confidence,
            'insights': list(self.insights),
            'nextSteps': list(self.next_steps),
            'learningPath': self.learning_path.to_dict(),
        }
        if self.alternative_roles is not None:
            results['alternativeRoles'] = list(self.alternative_roles)
        return results
