"""Base exceptions for ospreylint domain."""


class OspreyLintError(Exception):
    """Root exception for all ospreylint errors.

    All domain exceptions inherit from this.
    Allows catching all ospreylint-specific errors.
    """
