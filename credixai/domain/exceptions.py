"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ExplanationError(DomainException):
    """Natural-language explanation could not be produced"""

    pass


class ExplanationNotConfiguredError(ExplanationError):
    """No API key configured for the text-generation service"""

    pass


class ExplanationServiceError(ExplanationError):
    """Text-generation service timed out, failed or returned malformed data"""

    pass
