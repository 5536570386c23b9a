class NullVectorError(ZeroDivisionError):
    """Raised when asking for the direction of a vector of magnitude zero."""

    def __init__(self, message="Cannot normalize zero vector"):
        super().__init__(message)
