from __future__ import annotations

from typing import Any

from PySubDraft.Helpers.Time import MICROSECONDS_PER_SECOND
from PySubDraft.Substitutions import Substitutions


class DraftEditor:
    """
    Edits an existing draft document in place.
    """
    def __init__(self, draft : dict[str, Any]) -> None:
        self.draft = draft

    def __enter__(self) -> DraftEditor:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        pass

    @property
    def text_tracks(self) -> list[dict[str, Any]]:
        return [track for track in self.draft.get('tracks') or [] if isinstance(track, dict) and track.get('type') == 'text']

    def InsertGaps(self, gap_seconds : float) -> int:
        """
        Move each text segment after the first later by gap * position, so segments are spread apart.
        Start times are clamped at zero, durations are unchanged. Returns the number of segments moved.
        """
        gap_micros = int(gap_seconds * MICROSECONDS_PER_SECOND)
        moved = 0

        for track in self.text_tracks:
            segments = track.get('segments') or []
            for i, segment in enumerate(segments):
                if i == 0:
                    continue

                timerange = segment.get('target_timerange') if isinstance(segment, dict) else None
                if not isinstance(timerange, dict) or not isinstance(timerange.get('start'), (int, float)):
                    continue

                timerange['start'] = max(0, int(timerange['start']) + gap_micros * i)
                moved += 1

        return moved

    def ApplySubstitutions(self, substitutions : Substitutions) -> None:
        """
        Replace text in every string value of the draft, including markup and paths. Keys are not changed.
        """
        if substitutions:
            _substitute_values(self.draft, substitutions)

def _substitute_values(container : dict[str, Any]|list[Any], substitutions : Substitutions) -> None:
    items = container.items() if isinstance(container, dict) else enumerate(container)
    for key, value in list(items):
        if isinstance(value, str):
            container[key] = substitutions.Apply(value)
        elif isinstance(value, (dict, list)):
            _substitute_values(value, substitutions)
