from abc import ABC, abstractmethod
from typing import TextIO

from PySubDraft.Helpers.Localization import _
from PySubDraft.Options import Options
from PySubDraft.SubtitleData import SubtitleData
from PySubDraft.SubtitleError import SubtitleIOError


class SubtitleFileHandler(ABC):
    """Abstract interface for reading and writing subtitle and draft files."""

    SUPPORTED_EXTENSIONS: dict[str, int] = {}

    def __init__(self, options : Options|None = None):
        self.options : Options = options or Options()

    @abstractmethod
    def parse_file(self, file_obj: TextIO) -> SubtitleData:
        """Parse file content and return cues with file-level metadata."""
        raise NotImplementedError

    @abstractmethod
    def parse_string(self, content: str) -> SubtitleData:
        """Parse string content and return cues with file-level metadata."""
        raise NotImplementedError

    @abstractmethod
    def compose(self, data: SubtitleData) -> str:
        """Compose cues into the file format."""
        raise NotImplementedError

    def load_file(self, path: str) -> SubtitleData:
        """Open a file and parse it, retrying with the fallback encoding if it is not valid in the default one."""
        try:
            try:
                with open(path, 'r', encoding=self.options.encoding) as f:
                    return self.parse_file(f)
            except UnicodeDecodeError:
                with open(path, 'r', encoding=self.options.fallback_encoding) as f:
                    return self.parse_file(f)

        except (OSError, UnicodeDecodeError) as e:
            raise SubtitleIOError(_("Unable to read {}").format(path), e)

    def get_file_extensions(self) -> list[str]:
        """Get file extensions supported by this handler."""
        return list(self.__class__.SUPPORTED_EXTENSIONS.keys())

    def get_extension_priorities(self) -> dict[str, int]:
        """Get priority for each supported extension."""
        return self.__class__.SUPPORTED_EXTENSIONS.copy()
