# fitflex/errors.py
"""
Domain errors. Each carries the HTTP status the API answers with; the
handlers in main.py turn them into the {success: false, error} envelope.
"""


class FitflexError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(FitflexError):
    status_code = 400


class NotFound(FitflexError):
    status_code = 404


class Conflict(FitflexError):
    status_code = 409
