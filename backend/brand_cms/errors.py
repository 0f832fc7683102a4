from flask import current_app, jsonify

from brand_cms.domain.exceptions import BrandPageError, TransientIOFailure
from brand_cms.extensions import jwt


def _error_response(kind: str, message: str, status_code: int):
    response = jsonify({
        "error": kind,
        "message": message
    })
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(BrandPageError)
    def handle_brand_page_error(error):
        if isinstance(error, TransientIOFailure):
            current_app.logger.error(f"Transient failure: {error}")
        return _error_response(error.kind, str(error), error.status_code)

    # Token problems are authentication failures, never permission failures
    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        return _error_response("Unauthenticated", reason, 401)

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        return _error_response("Unauthenticated", reason, 401)

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return _error_response("Unauthenticated", "Token has expired", 401)
