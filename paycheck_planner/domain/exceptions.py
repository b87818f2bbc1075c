"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidDayOfMonthError(DomainException):
    """Recurring due day is not a calendar day of month (1-31)"""

    pass


class InvalidPaycheckFrequencyError(DomainException):
    """Paycheck frequency is not weekly, biweekly, semimonthly or monthly"""

    pass
