class ShareIntakeError(Exception):
    """
    Base exception for all share-intake failures.
    """

    pass


class ShareSerializationError(ShareIntakeError):
    """
    Raised when a normalized share result cannot be assembled into the
    output contract.
    """

    pass


class ShareEventFormatError(ShareIntakeError, ValueError):
    """
    Raised when a share event mapping has an unexpected shape.
    """

    pass
