class ValueAccessError(TypeError):
    """Raised when reading the inner value of an Absent container."""
