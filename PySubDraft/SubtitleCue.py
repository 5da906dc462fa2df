from __future__ import annotations

from PySubDraft.Helpers.Time import MicrosecondsToSrtTime, SrtTimeToMicroseconds


class SubtitleCue:
    """
    A single parsed subtitle cue: a position in the sequence, a time range and display text.

    Cues are not modified once created, use WithTiming/WithText to derive an updated copy.
    """
    def __init__(self, index : int, start : str|None, end : str|None, start_micros : int, end_micros : int, text : str = ""):
        self._index : int = index
        self._start : str|None = start
        self._end : str|None = end
        self._start_micros : int = start_micros
        self._end_micros : int = end_micros
        self._text : str = text or ""

    @classmethod
    def Construct(cls, index : int, start : str|None, end : str|None, text : str = "") -> SubtitleCue:
        """
        Create a cue from HH:MM:SS,mmm timestamps. A cue without timestamps starts and ends at zero.
        """
        start_micros = SrtTimeToMicroseconds(start) if start else 0
        end_micros = SrtTimeToMicroseconds(end) if end else 0
        return cls(index, start, end, start_micros, end_micros, text)

    @classmethod
    def FromMicroseconds(cls, index : int, start_micros : int, end_micros : int, text : str = "") -> SubtitleCue:
        return cls(index, MicrosecondsToSrtTime(start_micros), MicrosecondsToSrtTime(end_micros), start_micros, end_micros, text)

    @property
    def index(self) -> int:
        return self._index

    @property
    def start(self) -> str|None:
        return self._start

    @property
    def end(self) -> str|None:
        return self._end

    @property
    def start_micros(self) -> int:
        return self._start_micros

    @property
    def end_micros(self) -> int:
        return self._end_micros

    @property
    def duration(self) -> int:
        return self._end_micros - self._start_micros

    @property
    def text(self) -> str:
        return self._text

    @property
    def has_timing(self) -> bool:
        return self._start is not None and self._end is not None

    def WithTiming(self, start_micros : int, end_micros : int) -> SubtitleCue:
        return SubtitleCue.FromMicroseconds(self._index, start_micros, end_micros, self._text)

    def WithText(self, text : str) -> SubtitleCue:
        return SubtitleCue(self._index, self._start, self._end, self._start_micros, self._end_micros, text)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SubtitleCue):
            return NotImplemented
        return (self._index, self._start_micros, self._end_micros, self._text) == (other._index, other._start_micros, other._end_micros, other._text)

    def __hash__(self) -> int:
        return hash((self._index, self._start_micros, self._end_micros, self._text))

    def __repr__(self) -> str:
        return f"SubtitleCue({self._index}, {self._start} --> {self._end}, {self._text!r})"
