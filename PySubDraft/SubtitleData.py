from __future__ import annotations

from typing import Any

from PySubDraft.SubtitleCue import SubtitleCue


class SubtitleData:
    """Container for parsed cues and file-level metadata."""

    def __init__(
        self,
        cues : list[SubtitleCue]|None = None,
        metadata : dict[str, Any]|None = None,
        detected_format : str|None = None
    ):
        self.cues : list[SubtitleCue] = cues or []
        self.metadata : dict[str, Any] = metadata or {}
        self.detected_format : str|None = detected_format
