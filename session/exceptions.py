"""Custom exception classes for the upload session."""


class SessionError(Exception):
    """
    Base exception class for all upload session errors.
    """
    pass


class EmptySelectionError(SessionError):
    """
    Raised when a submission is attempted with no files selected.
    """

    def __init__(self, message: str = "Please select at least one file."):
        super().__init__(message)


class TransportError(SessionError):
    """
    Raised when the conversion service cannot be reached or times out.
    """
    pass


class NoArtifactError(SessionError):
    """
    Raised when a download is requested but no converted PDF is available.
    """
    pass


class ArtifactReleasedError(SessionError):
    """
    Raised when saving an artifact whose resource was already released.
    """
    pass
