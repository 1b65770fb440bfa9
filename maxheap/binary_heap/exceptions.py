class EmptyHeapError(RuntimeError):
    """Raised when the top of an empty heap is read or removed."""
