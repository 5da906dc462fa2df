from __future__ import annotations

import logging

from PySubDraft.Helpers.Localization import _
from PySubDraft.Helpers.Time import MICROSECONDS_PER_SECOND
from PySubDraft.SubtitleCue import SubtitleCue
from PySubDraft.SubtitleData import SubtitleData
from PySubDraft.Substitutions import Substitutions


class SubtitleEditor:
    """
    Applies timing and text changes to parsed cues.
    Cues are replaced rather than modified. Use as a context manager to scope a set of edits.
    """
    def __init__(self, data : SubtitleData) -> None:
        self.data = data

    def __enter__(self) -> SubtitleEditor:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        pass

    def InsertGaps(self, gap_seconds : float) -> int:
        """
        Push each cue later by a cumulative gap so that consecutive cues are separated by an extra interval.

        Cues with a negative duration are left as they are and do not add to the offset.
        Returns the number of cues that were retimed.
        """
        gap_micros = int(gap_seconds * MICROSECONDS_PER_SECOND)
        offset = 0
        retimed = 0
        cues : list[SubtitleCue] = []

        for cue in self.data.cues:
            duration = cue.duration
            if duration < 0:
                logging.warning(_("Subtitle {} has a negative duration, timing left unchanged").format(cue.index))
                cues.append(cue)
                continue

            start = max(0, cue.start_micros + offset)
            cues.append(cue.WithTiming(start, start + duration))
            offset += gap_micros
            retimed += 1

        self.data.cues = cues
        return retimed

    def ApplySubstitutions(self, substitutions : Substitutions) -> int:
        """
        Replace text in every cue. Returns the number of cues that changed.
        """
        if not substitutions:
            return 0

        changed = 0
        cues : list[SubtitleCue] = []
        for cue in self.data.cues:
            text = substitutions.Apply(cue.text)
            if text != cue.text:
                changed += 1
                cue = cue.WithText(text)
            cues.append(cue)

        self.data.cues = cues
        return changed
