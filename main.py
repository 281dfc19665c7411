"""
Main Flask Application
Foresyte landing page and waitlist API
"""
import logging

from flask import Flask, jsonify, render_template
from flask_cors import CORS

from config.settings import settings
from api.base.base_schemas import ErrorResponse
from lib.landing_content import FEATURES, FORM_COPY, MARKET_CATEGORIES, PAGE_METADATA, SYSTEM_INFO
from utils.helpers import setup_logging

# Import blueprints
from api.waitlist import waitlist_bp

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


# ============== APP INITIALIZATION ==============
app = Flask(__name__)

# CORS configuration
CORS(app, resources=settings.get_cors_config())


# ============== REGISTER BLUEPRINTS ==============
app.register_blueprint(waitlist_bp, url_prefix='/api')


# ============== ROUTES ==============
@app.route('/', methods=['GET'])
def home():
    """Landing page with the waitlist form"""
    return render_template(
        'index.html',
        meta=PAGE_METADATA,
        system_info=SYSTEM_INFO,
        features=FEATURES,
        categories=MARKET_CATEGORIES,
        form=FORM_COPY,
        confirmation_delay_ms=int(settings.WAITLIST_CONFIRMATION_DELAY_SECONDS * 1000)
    )


@app.route('/health', methods=['GET'])
def health():
    """Health check"""
    return jsonify({
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.VERSION
    })


# ============== ERROR HANDLERS ==============
@app.errorhandler(404)
def not_found(error):
    return jsonify(ErrorResponse.from_message("Endpoint not found").model_dump()), 404

@app.errorhandler(405)
def method_not_allowed(error):
    return jsonify(ErrorResponse.from_message("Method not allowed").model_dump()), 405

@app.errorhandler(500)
def internal_error(error):
    logger.error(f"Unhandled error: {error}")
    return jsonify(ErrorResponse.from_message("Internal server error").model_dump()), 500


# ============== APPLICATION STARTUP ==============
if __name__ == '__main__':
    settings.validate()

    logger.info("=" * 50)
    logger.info(f"Starting {settings.APP_NAME}")
    for key, value in settings.config_summary().items():
        logger.info(f"  {key}: {value}")
    logger.info("=" * 50)

    app.run(debug=settings.DEBUG, host=settings.HOST, port=settings.PORT)
