from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, TextIO

import regex

from PySubDraft.Helpers.Localization import _
from PySubDraft.Helpers.Time import MicrosecondsToSrtTime, TimeComponentsToMicroseconds
from PySubDraft.SubtitleCue import SubtitleCue
from PySubDraft.SubtitleData import SubtitleData
from PySubDraft.SubtitleError import SubtitleIOError
from PySubDraft.SubtitleFileHandler import SubtitleFileHandler


class ParserState(Enum):
    IDLE = "idle"
    HAS_INDEX = "has-index"
    HAS_RANGE = "has-range"

class LineKind(Enum):
    INDEX = "index"
    TIME_RANGE = "time-range"
    TEXT = "text"

class SrtCueScanner:
    """
    Line-by-line state machine that assembles cues from SRT content.

    Lines that do not fit the current state are dropped rather than treated as errors.
    """
    _INDEX_PATTERN = regex.compile(r'^[0-9]+$')
    _TIME_RANGE_PATTERN = regex.compile(r'(\d{2,}):(\d{2}):(\d{2}),(\d{3}) --> (\d{2,}):(\d{2}):(\d{2}),(\d{3})')

    def __init__(self):
        self.cues : list[SubtitleCue] = []
        self.state : ParserState = ParserState.IDLE
        self.dropped_lines : int = 0

        self._index : int = 0
        self._start : str|None = None
        self._end : str|None = None
        self._start_micros : int = 0
        self._end_micros : int = 0
        self._text_lines : list[str] = []

        self._transitions : dict[tuple[ParserState, LineKind], Callable[[str, regex.Match|None], ParserState]] = {
            (ParserState.IDLE, LineKind.INDEX): self._open_cue,
            (ParserState.IDLE, LineKind.TIME_RANGE): self._drop_line,
            (ParserState.IDLE, LineKind.TEXT): self._drop_line,
            (ParserState.HAS_INDEX, LineKind.INDEX): self._open_cue,
            (ParserState.HAS_INDEX, LineKind.TIME_RANGE): self._set_time_range,
            (ParserState.HAS_INDEX, LineKind.TEXT): self._append_text,
            (ParserState.HAS_RANGE, LineKind.INDEX): self._open_cue,
            (ParserState.HAS_RANGE, LineKind.TIME_RANGE): self._set_time_range,
            (ParserState.HAS_RANGE, LineKind.TEXT): self._append_text,
        }

    def Feed(self, line : str) -> None:
        line = line.strip()
        if not line:
            return

        kind, match = self._classify(line)
        transition = self._transitions[(self.state, kind)]
        self.state = transition(line, match)

    def Finish(self) -> list[SubtitleCue]:
        if self.state != ParserState.IDLE:
            self._finalize_cue()
            self.state = ParserState.IDLE
        return self.cues

    def _classify(self, line : str) -> tuple[LineKind, regex.Match|None]:
        if self._INDEX_PATTERN.match(line):
            return LineKind.INDEX, None

        match = self._TIME_RANGE_PATTERN.search(line)
        if match:
            return LineKind.TIME_RANGE, match

        return LineKind.TEXT, None

    def _open_cue(self, line : str, match : regex.Match|None) -> ParserState:
        if self.state != ParserState.IDLE:
            self._finalize_cue()

        # The numbering in the file is not trusted, cues are numbered by position
        self._index = len(self.cues) + 1
        self._start = None
        self._end = None
        self._start_micros = 0
        self._end_micros = 0
        self._text_lines = []
        return ParserState.HAS_INDEX

    def _set_time_range(self, line : str, match : regex.Match|None) -> ParserState:
        assert match is not None
        groups = [int(group) for group in match.groups()]
        self._start = f"{match.group(1)}:{match.group(2)}:{match.group(3)},{match.group(4)}"
        self._end = f"{match.group(5)}:{match.group(6)}:{match.group(7)},{match.group(8)}"
        self._start_micros = TimeComponentsToMicroseconds(*groups[:4])
        self._end_micros = TimeComponentsToMicroseconds(*groups[4:])
        return ParserState.HAS_RANGE

    def _append_text(self, line : str, match : regex.Match|None) -> ParserState:
        self._text_lines.append(line)
        return self.state

    def _drop_line(self, line : str, match : regex.Match|None) -> ParserState:
        self.dropped_lines += 1
        return self.state

    def _finalize_cue(self) -> None:
        self.cues.append(SubtitleCue(
            self._index,
            self._start,
            self._end,
            self._start_micros,
            self._end_micros,
            '\n'.join(self._text_lines)
        ))

class SrtFileHandler(SubtitleFileHandler):
    """
    Permissive SubRip parser. Unrecognised lines are skipped, parsing never fails on malformed content.
    Composing writes cue text exactly as it is, with cues numbered from 1.
    """
    SUPPORTED_EXTENSIONS = {'.srt': 10}

    def parse_file(self, file_obj: TextIO) -> SubtitleData:
        try:
            content = file_obj.read()
        except UnicodeDecodeError:
            raise  # Re-raise UnicodeDecodeError for fallback handling
        except OSError as e:
            raise SubtitleIOError(_("Failed to read subtitle file"), e)

        return self.parse_string(content)

    def parse_string(self, content: str) -> SubtitleData:
        scanner = SrtCueScanner()

        for line in content.lstrip('\ufeff').split('\n'):
            scanner.Feed(line)

        cues = scanner.Finish()

        if scanner.dropped_lines:
            logging.debug(_("Skipped {} lines outside of a subtitle block").format(scanner.dropped_lines))

        untimed = sum(1 for cue in cues if not cue.has_timing)
        if untimed:
            logging.warning(_("{} subtitles have no time range and will start at zero").format(untimed))

        return SubtitleData(cues=cues, metadata={'format': 'srt'}, detected_format='.srt')

    def compose(self, data: SubtitleData) -> str:
        blocks : list[str] = []

        for index, cue in enumerate(data.cues, start=1):
            start = MicrosecondsToSrtTime(cue.start_micros)
            end = MicrosecondsToSrtTime(cue.end_micros)
            blocks.append(f"{index}\n{start} --> {end}\n{cue.text}\n\n")

        return "".join(blocks)
