from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException
from shakes.domain.exceptions import ModerationError

def register_error_handlers(app):
    @app.errorhandler(ModerationError)
    def handle_moderation_error(error):
        current_app.logger.info("%s: %s", error.__class__.__name__, error.message)

        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({
            "error": error.name,
            "message": error.description,
        })
        response.status_code = error.code
        return response
