# routes/assessment.py
import logging
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request, session
from werkzeug.exceptions import HTTPException

from models.assessment import AnswerSet
from services.assessment_service import AnswerValidationError, AssessmentService
from services.scoring_service import ScoringService

logger = logging.getLogger(__name__)

assessment_bp = Blueprint('assessment_bp', __name__)
service = AssessmentService()


def _scoring_service():
    # Built per request so the active app config (policy, weights) applies
    return ScoringService.from_assessment_service(service, current_app.config['ASSESSMENT_CONFIG'])


# Initialize keys helper
def _ensure_session_keys():
    if 'assessment_answers' not in session:
        session['assessment_answers'] = []
    if 'current_step' not in session:
        session['current_step'] = 0
    if 'time_started' not in session:
        session['time_started'] = datetime.now(timezone.utc).isoformat()
    if 'is_completed' not in session:
        session['is_completed'] = False
    session.modified = True


def _reset_session():
    session['assessment_answers'] = []
    session['current_step'] = 0
    session['time_started'] = datetime.now(timezone.utc).isoformat()
    session['is_completed'] = False
    session.modified = True


def _elapsed_seconds():
    started = datetime.fromisoformat(session['time_started'])
    return int((datetime.now(timezone.utc) - started).total_seconds())


def _load_answers():
    return AnswerSet.from_list(session.get('assessment_answers', []))


def _save_answers(answer_set):
    session['assessment_answers'] = answer_set.to_list()
    session.modified = True


def _current_question_payload(answer_set):
    step = session.get('current_step', 0)
    question = service.get_question_by_index(step)
    existing = answer_set.get(question.id)
    return {
        "question": question.to_client_dict(),
        "section": service.get_section_info(question),
        "answer": existing.value if existing else None,
        "progress": service.get_progress(answer_set, step),
    }


@assessment_bp.route('/start-assessment', methods=['POST'])
def start_assessment():
    """
    Initialize assessment session
    """
    _reset_session()
    return jsonify({"success": True, "message": "Assessment started",
                    "total_questions": service.total_questions()})


@assessment_bp.route('/reset', methods=['POST'])
def reset_assessment():
    _reset_session()
    return jsonify({"success": True, "message": "Assessment reset"})


@assessment_bp.route('/get-questions', methods=['GET'])
def get_questions():
    _ensure_session_keys()
    return jsonify({
        "success": True,
        "questions": service.get_questions_for_client(),
        "sections": service.get_sections()
    })


@assessment_bp.route('/current-question', methods=['GET'])
def current_question():
    _ensure_session_keys()
    payload = _current_question_payload(_load_answers())
    return jsonify({"success": True, **payload})


@assessment_bp.route('/submit-answer', methods=['POST'])
def submit_answer():
    """
    Expected payload:
    {
      question_id: 'psych_1',
      value: 4 | 'option text' | 'yes'
    }
    Returns: JSON with the stored answer and progress
    """
    _ensure_session_keys()
    data = request.get_json(silent=True) or {}
    question_id = data.get('question_id')
    value = data.get('value')

    if question_id is None or value is None:
        return jsonify({"error": "Missing question_id or value"}), 400

    try:
        value = service.validate_answer(question_id, value)
    except AnswerValidationError as e:
        logger.info(f"Rejected answer: {e}")
        return jsonify({"error": str(e)}), 400

    answer_set = _load_answers()
    answer = answer_set.upsert(question_id, value)
    _save_answers(answer_set)

    return jsonify({
        "success": True,
        "answer": answer.to_dict(),
        "progress": service.get_progress(answer_set, session.get('current_step', 0))
    })


@assessment_bp.route('/next', methods=['POST'])
def next_step():
    _ensure_session_keys()
    answer_set = _load_answers()
    question = service.get_question_by_index(session['current_step'])
    if question.id not in answer_set:
        return jsonify({"error": f"Answer question '{question.id}' before moving on"}), 400

    session['current_step'] = min(session['current_step'] + 1, service.total_questions() - 1)
    session.modified = True
    payload = _current_question_payload(answer_set)
    return jsonify({"success": True, **payload})


@assessment_bp.route('/previous', methods=['POST'])
def previous_step():
    _ensure_session_keys()
    session['current_step'] = max(0, session['current_step'] - 1)
    session.modified = True
    payload = _current_question_payload(_load_answers())
    return jsonify({"success": True, **payload})


@assessment_bp.route('/progress', methods=['GET'])
def get_progress():
    _ensure_session_keys()
    answer_set = _load_answers()
    return jsonify({
        "success": True,
        "progress": service.get_progress(answer_set, session.get('current_step', 0)),
        "is_completed": session.get('is_completed', False)
    })


@assessment_bp.route('/submit-test', methods=['POST'])
def submit_test():
    _ensure_session_keys()
    answer_set = _load_answers()

    if len(answer_set) < service.total_questions():
        logger.info(f"Scoring partial assessment: {len(answer_set)}/{service.total_questions()} answered")

    results = _scoring_service().calculate_results(answer_set)

    session['is_completed'] = True
    session.modified = True

    return jsonify({
        "success": True,
        "results": results.to_dict(),
        "answered": len(answer_set),
        "total_questions": service.total_questions(),
        "time_started": session['time_started'],
        "elapsed_seconds": _elapsed_seconds(),
        "message": "Assessment completed successfully"
    })


@assessment_bp.errorhandler(Exception)
def handle_unexpected_error(e):
    if isinstance(e, HTTPException):
        return jsonify({"error": e.description}), e.code
    logger.exception(f"Unhandled error in assessment API: {e}")
    return jsonify({"error": str(e)}), 500
