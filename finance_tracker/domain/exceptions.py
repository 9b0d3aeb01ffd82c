"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidSchemeError(DomainException):
    """Scheme figures cannot support the requested calculation"""

    pass


class InvalidPeriodError(DomainException):
    """Report period is not one of weekly, monthly or yearly"""

    pass
