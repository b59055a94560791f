import logging
import os

from flask import Flask, jsonify

from config import TARGET_ROLE, get_config
from routes.assessment import assessment_bp, service


def create_app(config_class=None):
    config_class = config_class or get_config()

    logging.basicConfig(
        level=getattr(logging, config_class.LOG_LEVEL, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s - %(message)s'
    )

    app = Flask(__name__)
    app.config.from_object(config_class)
    # Scoring settings are read as class attributes, keep the class itself around
    app.config['ASSESSMENT_CONFIG'] = config_class

    # Register blueprints
    app.register_blueprint(assessment_bp, url_prefix='/api/assessment')

    @app.route('/health')
    def health():
        return jsonify({
            "status": "ok",
            "role": TARGET_ROLE,
            "questions": service.total_questions()
        })

    return app


if __name__ == '__main__':
    app = create_app()
    port = int(os.environ.get('PORT', 5000))
    app.run(debug=app.config['DEBUG'], host='0.0.0.0', port=port)
