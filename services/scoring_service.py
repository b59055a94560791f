# services/scoring_service.py
import logging
import math
import numbers

from config import Config
from models.assessment import (
    AnswerSet,
    CategoryScores,
    ResultsRecord,
    WiscarScores,
)
from questions.option_scores import NEUTRAL_OPTION_SCORE
from services.guidance_rules import (
    generate_alternative_roles,
    generate_insights,
    generate_learning_path,
    generate_next_steps,
)

logger = logging.getLogger(__name__)


def round_half_up(value):
    """Round x.5 upwards (0.5 -> 1, 2.5 -> 3), unlike round()."""
    return int(math.floor(value + 0.5))


def normalize_likert(value):
    """Map a 1-5 scale position linearly onto 0-100."""
    return ((value - 1) / 4) * 100


def _answer_map(answers):
    """Accept an AnswerSet, a list of Answers or a question_id -> value dict."""
    if isinstance(answers, AnswerSet):
        return answers.value_map()
    if isinstance(answers, dict):
        return dict(answers)
    return {answer.question_id: answer.value for answer in answers or []}


class ScoringService:
    """
    Pure scoring engine: answers in, ResultsRecord out.

    Holds only the validated catalog and settings, never any answers, so a
    single instance can serve every request.
    """

    def __init__(self, questions, option_scores=None, config=Config):
        self.questions = tuple(questions)
        self.option_scores = dict(option_scores or {})
        self.config = config
        self.unmatched_policy = config.UNMATCHED_OPTION_POLICY

    @classmethod
    def from_assessment_service(cls, assessment_service, config=Config):
        return cls(assessment_service.questions, assessment_service.option_scores, config)

    # -------------------------
    # Category scorer
    # -------------------------
    def score_answer(self, question, value):
        """
        Normalised 0-100 score of one answer, or None when the answer
        should not count (unmatched option under the 'skip' policy).
        """
        if isinstance(value, numbers.Real) and not isinstance(value, bool):
            return normalize_likert(value)

        index = question.option_index(value)
        if index is None:
            if self.unmatched_policy == 'first':
                index = 0
            else:
                logger.warning(f"Ignoring answer '{value}' to '{question.id}': not one of its options")
                return None

        scores = self.option_scores.get(question.id)
        if scores is None:
            return NEUTRAL_OPTION_SCORE
        return scores[index]

    def score_category(self, category, subcategory=None, answers=None):
        """Weighted 0-100 score over the answered questions of a category."""
        values = _answer_map(answers)
        total_score = 0.0
        total_weight = 0.0

        for question in self.questions:
            if question.category != category:
                continue
            if subcategory and question.subcategory != subcategory:
                continue
            if question.id not in values:
                continue

            normalized = self.score_answer(question, values[question.id])
            if normalized is None:
                continue
            total_score += normalized * question.weight
            total_weight += question.weight

        return round_half_up(total_score / total_weight) if total_weight > 0 else 0

    def calculate_wiscar_scores(self, answers):
        values = _answer_map(answers)
        return WiscarScores(
            will=self.score_category('wiscar', 'will', values),
            interest=self.score_category('wiscar', 'interest', values),
            skill=self.score_category('wiscar', 'skill', values),
            cognitive=self.score_category('wiscar', 'cognitive', values),
            ability=self.score_category('wiscar', 'ability', values),
            real_world=self.score_category('wiscar', 'realWorld', values),
        )

    # -------------------------
    # Results synthesizer
    # -------------------------
    def calculate_overall(self, psychometric, technical, aptitude, wiscar):
        weights = self.config.OVERALL_WEIGHTS
        return round_half_up(
            psychometric * weights['psychometric']
            + technical * weights['technical']
            + aptitude * weights['aptitude']
            + wiscar.average() * weights['wiscar']
        )

    def determine_recommendation(self, overall):
        """Return (recommendation, confidence) for an overall score."""
        cfg = self.config
        if overall >= cfg.YES_THRESHOLD:
            recommendation = 'yes'
            confidence = min(cfg.MAX_CONFIDENCE, overall + cfg.YES_CONFIDENCE_BONUS)
        elif overall >= cfg.MAYBE_THRESHOLD:
            recommendation = 'maybe'
            confidence = overall
        else:
            recommendation = 'no'
            confidence = max(cfg.MIN_CONFIDENCE, 100 - overall)

        # Confidence always lies within [MIN_CONFIDENCE, MAX_CONFIDENCE]
        confidence = max(cfg.MIN_CONFIDENCE, min(cfg.MAX_CONFIDENCE, confidence))
        return recommendation, int(confidence)

    def calculate_scores(self, answers):
        values = _answer_map(answers)
        psychometric = self.score_category('psychometric', answers=values)
        technical = self.score_category('technical', answers=values)
        aptitude = self.score_category('aptitude', answers=values)
        wiscar = self.calculate_wiscar_scores(values)
        overall = self.calculate_overall(psychometric, technical, aptitude, wiscar)
        return CategoryScores(
            psychometric=psychometric,
            technical=technical,
            aptitude=aptitude,
            wiscar=wiscar,
            overall=overall,
        )

    def calculate_results(self, answers):
        """Score a snapshot of the answers and build the full results record."""
        scores = self.calculate_scores(answers)
        recommendation, confidence = self.determine_recommendation(scores.overall)

        alternative_roles = None
        if recommendation == 'no':
            alternative_roles = tuple(generate_alternative_roles(scores))

        logger.info(
            f"Assessment scored: overall={scores.overall} "
            f"recommendation={recommendation} confidence={confidence}"
        )

        return ResultsRecord(
            scores=scores,
            recommendation=recommendation,
            confidence=confidence,
            insights=tuple(generate_insights(scores)),
            next_steps=tuple(generate_next_steps(recommendation)),
            learning_path=generate_learning_path(scores),
            alternative_roles=alternative_roles,
        )
