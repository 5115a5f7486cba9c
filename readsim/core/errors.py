class ValidationError(ValueError):
    """Raised when arguments to the read writer are invalid.

    Nothing has been written to disk when this is raised.
    """
