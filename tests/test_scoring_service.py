"""Tests for the category scorer and results synthesizer."""

import pytest

from config import TestingConfig
from models.assessment import AnswerSet, QuestionDefinition, WiscarScores
from services.scoring_service import ScoringService, normalize_likert, round_half_up


class LegacyFallbackConfig(TestingConfig):
    UNMATCHED_OPTION_POLICY = 'first'


def likert(qid, category='psychometric', subcategory=None, weight=1.0):
    return QuestionDefinition(id=qid, type='likert', category=category, subcategory=subcategory, weight=weight)


def choice(qid, options, category='technical', subcategory=None, weight=1.0):
    return QuestionDefinition(id=qid, type='multiple-choice', category=category,
                              subcategory=subcategory, options=tuple(options), weight=weight)


class TestNormalization:
    """Likert normalisation and rounding."""

    @pytest.mark.parametrize("value,expected", [(1, 0), (2, 25), (3, 50), (4, 75), (5, 100)])
    def test_likert_is_linear(self, value, expected):
        assert normalize_likert(value) == expected

    def test_round_half_up(self):
        assert round_half_up(12.5) == 13
        assert round_half_up(0.5) == 1
        assert round_half_up(2.4999) == 2
        assert round_half_up(0) == 0


class TestScoreCategory:
    """Weighted category scoring."""

    def test_unanswered_category_scores_zero(self):
        scorer = ScoringService([likert('q1')], config=TestingConfig)
        assert scorer.score_category('psychometric', answers={}) == 0

    def test_single_likert_answer(self):
        scorer = ScoringService([likert('q1')], config=TestingConfig)
        assert scorer.score_category('psychometric', answers={'q1': 4}) == 75

    def test_option_table_lookup_with_weight(self):
        question = choice('tech_x', ['A', 'B', 'C', 'D'], weight=1.5)
        scorer = ScoringService([question], {'tech_x': (20, 100, 10, 15)}, TestingConfig)
        assert scorer.score_category('technical', answers={'tech_x': 'B'}) == 100

    def test_zero_option_score_is_kept(self):
        question = choice('apt', ['25ms', '40ms', '50ms', '60ms'], category='aptitude')
        scorer = ScoringService([question], {'apt': (0, 0, 100, 0)}, TestingConfig)
        assert scorer.score_category('aptitude', answers={'apt': '40ms'}) == 0

    def test_missing_option_table_entry_is_neutral(self):
        question = choice('free', ['x', 'y'])
        scorer = ScoringService([question], {}, TestingConfig)
        assert scorer.score_category('technical', answers={'free': 'y'}) == 50

    def test_weighted_average_across_questions(self):
        questions = [likert('a', weight=1.0), likert('b', weight=3.0)]
        scorer = ScoringService(questions, config=TestingConfig)
        # (0 * 1 + 100 * 3) / 4 = 75
        assert scorer.score_category('psychometric', answers={'a': 1, 'b': 5}) == 75

    def test_unanswered_questions_do_not_dilute(self):
        questions = [likert('a'), likert('b'), likert('c')]
        scorer = ScoringService(questions, config=TestingConfig)
        assert scorer.score_category('psychometric', answers={'a': 5}) == 100

    def test_subcategory_filter(self):
        questions = [
            likert('w1', category='wiscar', subcategory='will'),
            likert('i1', category='wiscar', subcategory='interest'),
        ]
        scorer = ScoringService(questions, config=TestingConfig)
        answers = {'w1': 5, 'i1': 1}
        assert scorer.score_category('wiscar', 'will', answers) == 100
        assert scorer.score_category('wiscar', 'interest', answers) == 0
        assert scorer.score_category('wiscar', answers=answers) == 50

    def test_other_categories_ignored(self):
        questions = [likert('p'), likert('t', category='technical')]
        scorer = ScoringService(questions, config=TestingConfig)
        assert scorer.score_category('technical', answers={'p': 5, 't': 1}) == 0

    def test_yes_no_question_uses_implied_options(self):
        question = QuestionDefinition(id='yn', type='yes-no', category='aptitude')
        scorer = ScoringService([question], {'yn': (100, 0)}, TestingConfig)
        assert scorer.score_category('aptitude', answers={'yn': 'yes'}) == 100
        assert scorer.score_category('aptitude', answers={'yn': 'no'}) == 0

    def test_accepts_answer_set(self):
        scorer = ScoringService([likert('q1')], config=TestingConfig)
        answer_set = AnswerSet()
        answer_set.upsert('q1', 2)
        answer_set.upsert('q1', 5)
        assert scorer.score_category('psychometric', answers=answer_set) == 100

    def test_score_stays_in_bounds(self, scoring_service, best_answers, worst_answers):
        for answers in (best_answers, worst_answers):
            for category in ('psychometric', 'technical', 'aptitude', 'wiscar'):
                assert 0 <= scoring_service.score_category(category, answers=answers) <= 100


class TestUnmatchedOption:
    """Choice answers that are not one of the question's options."""

    def test_skip_policy_ignores_answer(self):
        questions = [choice('c', ['A', 'B']), likert('l', category='technical')]
        scorer = ScoringService(questions, {'c': (10, 90)}, TestingConfig)
        assert scorer.score_category('technical', answers={'c': 'Z', 'l': 5}) == 100
        assert scorer.score_category('technical', answers={'c': 'Z'}) == 0

    def test_first_policy_scores_as_first_option(self):
        scorer = ScoringService([choice('c', ['A', 'B'])], {'c': (10, 90)}, LegacyFallbackConfig)
        assert scorer.score_category('technical', answers={'c': 'Z'}) == 10


class TestRecommendation:
    """Tier and confidence mapping."""

    @pytest.mark.parametrize("overall,expected", [
        (100, ('yes', 95)),
        (90, ('yes', 95)),
        (80, ('yes', 90)),
        (75, ('yes', 85)),
        (74, ('maybe', 74)),
        (55, ('maybe', 55)),
        (54, ('no', 46)),
        (20, ('no', 80)),
        (0, ('no', 95)),
    ])
    def test_tiers(self, scoring_service, overall, expected):
        assert scoring_service.determine_recommendation(overall) == expected

    def test_confidence_always_in_range(self, scoring_service):
        for overall in range(0, 101):
            _, confidence = scoring_service.determine_recommendation(overall)
            assert 30 <= confidence <= 95


class TestOverall:
    """Overall blend of category scores."""

    def test_weighted_blend(self, scoring_service):
        wiscar = WiscarScores(60, 60, 60, 60, 60, 60)
        # 80*0.25 + 70*0.30 + 50*0.20 + 60*0.25 = 20 + 21 + 10 + 15
        assert scoring_service.calculate_overall(80, 70, 50, wiscar) == 66

    def test_all_zero(self, scoring_service):
        assert scoring_service.calculate_overall(0, 0, 0, WiscarScores()) == 0


class TestCalculateResults:
    """End-to-end synthesis over the real catalog."""

    def test_empty_answers(self, scoring_service):
        results = scoring_service.calculate_results({})
        assert results.scores.overall == 0
        assert results.recommendation == 'no'
        assert results.confidence == 95
        assert results.alternative_roles == ("Site Reliability Engineer", "Network Engineer")
        assert "Consider building foundational knowledge in networking and distributed systems." in results.insights

    def test_best_answers(self, scoring_service, best_answers):
        results = scoring_service.calculate_results(best_answers)
        # psych_3 and psych_5 top out at 85 and 90
        assert results.scores.psychometric == 95
        assert results.scores.technical == 100
        assert results.scores.aptitude == 100
        assert results.scores.wiscar.values() == (100,) * 6
        assert results.scores.overall == 99
        assert results.recommendation == 'yes'
        assert results.confidence == 95
        assert results.alternative_roles is None
        assert len(results.insights) == 4
        assert len(results.next_steps) == 4

    def test_worst_answers(self, scoring_service, worst_answers):
        results = scoring_service.calculate_results(worst_answers)
        assert results.scores.psychometric == 20
        assert results.scores.technical == 11
        assert results.scores.aptitude == 0
        assert results.scores.wiscar.to_dict() == {
            'will': 0, 'interest': 10, 'skill': 25,
            'cognitive': 70, 'ability': 0, 'realWorld': 60,
        }
        assert results.scores.overall == 15
        assert results.recommendation == 'no'
        assert results.confidence == 85
        assert results.alternative_roles == ("Site Reliability Engineer", "Network Engineer")
        assert len(results.next_steps) == 3

    def test_is_deterministic(self, scoring_service, best_answers):
        assert scoring_service.calculate_results(best_answers) == scoring_service.calculate_results(best_answers)

    def test_alternative_roles_only_for_no(self, scoring_service, best_answers, worst_answers):
        for answers in (best_answers, worst_answers, {}):
            results = scoring_service.calculate_results(answers)
            assert (results.alternative_roles is not None) == (results.recommendation == 'no')

    def test_new_answers_give_new_record(self, scoring_service):
        answer_set = AnswerSet()
        answer_set.upsert('psych_1', 1)
        first = scoring_service.calculate_results(answer_set)
        answer_set.upsert('psych_1', 5)
        second = scoring_service.calculate_results(answer_set)
        assert first.scores.psychometric == 0
        assert second.scores.psychometric == 100
