from PySubDraft.Helpers.Localization import _


class SubtitleError(Exception):
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def __str__(self) -> str:
        if self.error:
            return str(self.error)
        elif self.message:
            return self.message
        return super().__str__()

class InputNotFoundError(SubtitleError):
    def __init__(self, path : str, error : Exception|None = None):
        super().__init__(_("Input file not found: {}").format(path), error)
        self.path = path

    def __str__(self) -> str:
        return self.message or super().__str__()

class SubtitleIOError(SubtitleError):
    def __init__(self, message : str, error : Exception|None = None):
        super().__init__(message, error)

    def __str__(self) -> str:
        if self.error:
            return f"{self.message}: {self.error}"
        return self.message or super().__str__()

class SubtitleParseError(SubtitleError):
    def __init__(self, message : str, error : Exception|None = None):
        super().__init__(message, error)

    def __str__(self) -> str:
        return self.message or super().__str__()
