"""
Error taxonomy
Services raise these; main.py turns them into {"message": ...} responses
"""


class PMSError(Exception):
    """Base error, surfaced as a generic 500"""
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message


class NotFoundError(PMSError):
    """Unknown id or key"""
    status_code = 404


class DuplicateKeyError(PMSError):
    """A unique-like business key is already taken"""
    status_code = 409


class InvalidStateError(PMSError):
    """Operation not allowed from the entity's current status"""
    status_code = 400


class PaymentNotConfiguredError(PMSError):
    status_code = 400


class UpstreamPaymentError(PMSError):
    status_code = 500
