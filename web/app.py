"""
Cyber Law Readiness Assessment - Flask Web Application

JSON API that drives assessment sessions for a browser front end.
"""

import os
import sys
import logging
from datetime import timedelta
from flask import Flask, request, jsonify
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.settings import get_config
from src.assessment.questions import QuestionType, get_question_bank
from src.assessment.report import ROLE_OVERVIEW, build_report
from src.assessment.scoring_engine import is_valid_answer
from src.assessment.session import Navigation, SessionError
from src.assessment.session_manager import AssessmentSessionManager, SessionLimitError, SessionNotFoundError

logger = logging.getLogger(__name__)

# =============================================================================
# App Factory
# =============================================================================

def create_app(config_class=None, session_manager=None):
    """Create Flask application"""
    app = Flask(__name__)

    # Load configuration
    if config_class is None:
        config_class = get_config()
    app.config.from_object(config_class)

    # Configure logging
    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))

    # Rate limiting
    limiter = Limiter(
        key_func=get_remote_address,
        app=app,
        default_limits=[app.config['RATELIMIT_DEFAULT']],
        storage_uri=app.config['RATELIMIT_STORAGE_URI']
    )

    bank = get_question_bank()
    if session_manager is None:
        session_manager = AssessmentSessionManager(
            bank=bank,
            max_sessions=app.config.get('MAX_ACTIVE_SESSIONS'),
            session_ttl=timedelta(minutes=app.config['SESSION_TTL_MINUTES'])
        )
    app.extensions['assessment_sessions'] = session_manager

    def _session_payload(assessment, navigation=None):
        payload = assessment.to_dict()
        if navigation is not None:
            payload['navigation'] = navigation.value
        return payload

    # =============================================================================
    # Routes - Overview
    # =============================================================================

    @app.route('/')
    @app.route('/api/assessment/overview', methods=['GET'])
    def api_overview():
        """Landing content: role overview and assessment outline"""
        return jsonify({
            'app_name': app.config['APP_NAME'],
            'role': ROLE_OVERVIEW,
            'sections': bank.sections,
            'question_count': len(bank)
        })

    @app.route('/api/questions', methods=['GET'])
    def api_list_questions():
        """List all questions in order"""
        return jsonify({
            'questions': bank.to_list()
        })

    # =============================================================================
    # API Routes - Assessment Sessions
    # =============================================================================

    @app.route('/api/assessment/start', methods=['POST'])
    def api_start_assessment():
        """Start a new assessment session"""
        assessment = session_manager.create_session()
        return jsonify(_session_payload(assessment)), 201

    @app.route('/api/assessment/<session_id>', methods=['GET'])
    def api_get_assessment(session_id):
        """Current state of an assessment session"""
        assessment = session_manager.get_session(session_id)
        return jsonify(_session_payload(assessment))

    @app.route('/api/assessment/<session_id>', methods=['DELETE'])
    def api_discard_assessment(session_id):
        """Discard an assessment session"""
        if not session_manager.discard_session(session_id):
            raise SessionNotFoundError(session_id)
        return jsonify({'success': True})

    @app.route('/api/assessment/<session_id>/answer', methods=['POST'])
    def api_answer(session_id):
        """Record an answer for one question"""
        assessment = session_manager.get_session(session_id)
        data = request.get_json(silent=True) or {}

        question_id = data.get('question_id')
        answer = data.get('answer')

        if not question_id or answer is None:
            return jsonify({'error': 'question_id and answer required'}), 400
        if isinstance(answer, bool) or not isinstance(answer, (str, int)):
            return jsonify({'error': 'answer must be a string or integer'}), 400

        question = assessment.bank.get(question_id)
        if question is None:
            return jsonify({'error': f'Unknown question: {question_id}'}), 400

        answer = str(answer)
        if question.type is not QuestionType.TEXT and answer and not is_valid_answer(question, answer):
            logger.warning(f"Rejected answer {answer!r} for {question_id} in session {session_id}")
            return jsonify({'error': f'Invalid answer for {question_id}'}), 400

        assessment.answer(question_id, answer)
        return jsonify(_session_payload(assessment))

    @app.route('/api/assessment/<session_id>/next', methods=['POST'])
    def api_next(session_id):
        """Advance to the next question or complete the assessment"""
        assessment = session_manager.get_session(session_id)
        navigation = assessment.advance()
        return jsonify(_session_payload(assessment, navigation))

    @app.route('/api/assessment/<session_id>/previous', methods=['POST'])
    def api_previous(session_id):
        """Go back one question, or leave the assessment from the first"""
        assessment = session_manager.get_session(session_id)
        navigation = assessment.retreat()
        payload = _session_payload(assessment, navigation)
        if navigation is Navigation.EXITED:
            payload['redirect'] = '/'
        return jsonify(payload)

    @app.route('/api/assessment/<session_id>/restart', methods=['POST'])
    def api_restart(session_id):
        """Start the assessment over"""
        assessment = session_manager.get_session(session_id)
        assessment.restart()
        return jsonify(_session_payload(assessment))

    @app.route('/api/assessment/<session_id>/results', methods=['GET'])
    def api_results(session_id):
        """Results and readiness report for a completed assessment"""
        assessment = session_manager.get_session(session_id)
        if not assessment.is_completed:
            return jsonify({'error': 'Assessment not completed'}), 409

        results = assessment.results
        validation = assessment.engine.validate_answers(results.answers, assessment.bank)
        if not validation['valid']:
            logger.warning(f"Session {session_id} completed with answer issues: {validation}")

        report = build_report(results)
        return jsonify({
            'session_id': session_id,
            'report': report.to_dict(),
            'validation': validation
        })

    # =============================================================================
    # Error Handlers
    # =============================================================================

    @app.errorhandler(SessionNotFoundError)
    def session_not_found(e):
        return jsonify({'error': 'Session not found'}), 404

    @app.errorhandler(SessionError)
    def session_error(e):
        return jsonify({'error': str(e)}), 409

    @app.errorhandler(SessionLimitError)
    def session_limit_reached(e):
        logger.warning(f"Session limit reached: {e}")
        return jsonify({'error': str(e)}), 429

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f"Server error: {e}")
        return jsonify({'error': 'Internal server error'}), 500

    return app


# =============================================================================
# Main
# =============================================================================

if __name__ == '__main__':
    app = create_app()
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('FLASK_DEBUG', 'True').lower() == 'true'
    app.run(debug=debug, port=port, host='0.0.0.0')
