# m3ucatalog/core/errors.py


class PlaylistError(ValueError):
    """Base class for fatal playlist parse errors."""


class EmptyInputError(PlaylistError):
    def __init__(self, message: str = "Empty file"):
        super().__init__(message)


class MissingHeaderError(PlaylistError):
    def __init__(self, message: str = "Invalid M3U file: missing #EXTM3U header"):
        super().__init__(message)
