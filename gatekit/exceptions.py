class GateTerminatedError(RuntimeError):
    """Raised when a value is pushed into an adapter after it has completed or failed."""
