from flask import jsonify, g, current_app, request
from werkzeug.exceptions import HTTPException


class VotingError(Exception):
    """Base class for failures surfaced by the vote and results services."""

    status_code = 500
    default_message = "An error occurred while processing your request."

    def __init__(self, message: str | None = None, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_response(self):
        body = {"message": self.message}
        if self.details:
            body["errors"] = self.details
        return body, self.status_code


class ValidationError(VotingError):
    status_code = 400
    default_message = "Invalid input: Please provide a valid email and meme ID."


class DuplicateVoteError(VotingError):
    status_code = 409

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"The email address {email} has already voted.")


class StorageUnavailableError(VotingError):
    status_code = 503
    default_message = "Database not connected"


class StorageError(VotingError):
    status_code = 500


def _payload(code: str, message: str, details=None, status=400):
    return (
        jsonify({
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "details": details or None,
            },
            "request_id": getattr(g, "request_id", None),
        }),
        status,
    )


def register_error_handlers(app):
    # Domain errors that escape a route keep the {"message": ...} shape
    @app.errorhandler(VotingError)
    def handle_voting_error(e: VotingError):
        return e.to_response()

    # Generic HTTP errors (404, 405, malformed JSON, ...)
    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        desc = e.description

        if isinstance(desc, dict):
            code = desc.get("code") or e.name.replace(" ", "_").upper()
            message = desc.get("message") or e.name
            details = desc.get("errors") or desc.get("details")
            return _payload(code=code, message=message, details=details, status=e.code or 400)

        return _payload(
            code=e.name.replace(" ", "_").upper(),
            message=desc or e.name,
            details=None,
            status=e.code or 400
        )

    @app.errorhandler(404)
    def handle_404(_):
        return _payload("NOT_FOUND", "Resource not found", status=404)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        # Don't leak internals
        current_app.logger.exception(
            "Unhandled exception request_id=%s path=%s", getattr(g, "request_id", None), request.path
        )
        return _payload("INTERNAL_SERVER_ERROR", "An unexpected error occurred", status=500)
