"""Shared fixtures for the assessment test suite."""

import pytest

from app import create_app
from config import TestingConfig
from services.assessment_service import AssessmentService
from services.scoring_service import ScoringService


@pytest.fixture
def assessment_service():
    return AssessmentService()


@pytest.fixture
def scoring_service(assessment_service):
    return ScoringService.from_assessment_service(assessment_service, TestingConfig)


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def best_answers(assessment_service):
    """Top answer for every question: 5 on likert, highest-scoring option otherwise."""
    answers = {}
    for question in assessment_service.questions:
        if question.type == 'likert':
            answers[question.id] = 5
        else:
            scores = assessment_service.option_scores.get(question.id)
            index = scores.index(max(scores)) if scores else 0
            answers[question.id] = question.answer_options[index]
    return answers


@pytest.fixture
def worst_answers(assessment_service):
    """Lowest answer for every question."""
    answers = {}
    for question in assessment_service.questions:
        if question.type == 'likert':
            answers[question.id] = 1
        else:
            scores = assessment_service.option_scores.get(question.id)
            index = scores.index(min(scores)) if scores else 0
            answers[question.id] = question.answer_options[index]
    return answers
