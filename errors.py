from flask import jsonify


class JobBoardError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message

    def to_response(self):
        return self.message, self.status_code, {"Content-Type": "text/plain; charset=utf-8"}


class AuthenticationRequired(JobBoardError):
    status_code = 401
    message = "Unauthorized"


class AuthorizationDenied(JobBoardError):
    status_code = 403
    message = "Forbidden"


class NotFound(JobBoardError):
    status_code = 404
    message = "Not found"


class MissingField(JobBoardError):
    status_code = 400
    message = "Bad request"


class MissingUpload(JobBoardError):
    status_code = 400
    message = "Resume is required"


class ValidationFailed(JobBoardError):
    """Request body did not match its schema; carries per-field errors."""

    status_code = 400
    message = "Validation failed"

    def __init__(self, errors, message=None):
        super().__init__(message)
        self.errors = errors

    def to_response(self):
        return jsonify({"message": self.message, "errors": self.errors}), self.status_code


def register_error_handlers(app):
    @app.errorhandler(JobBoardError)
    def handle_job_board_error(error):
        if error.status_code in (401, 403):
            app.logger.info("Denied: %s", error.message)
        return error.to_response()
