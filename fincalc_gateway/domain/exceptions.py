"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidTermsError(DomainException):
    """Loan or deposit terms violate a precondition (amount, term or rate)"""

    pass


class UnknownProductError(DomainException):
    """Requested product id is not in the catalog"""

    pass
