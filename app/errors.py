"""Exceptions raised by the data layer.

A lookup that finds nothing is not an error: ``get_*`` functions return
``None`` and the routes answer 404. Storage failures (``OperationalError``
and friends) are not wrapped and propagate as-is.
"""


class PortfolioError(Exception):
    """Base class for data layer errors"""


class ValidationError(PortfolioError):
    """Input rejected before anything was written"""


class ConstraintViolation(PortfolioError):
    """Uniqueness or foreign-key constraint failed on write"""
