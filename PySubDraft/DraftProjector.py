import logging
from collections.abc import Iterable
from typing import Any

from PySubDraft.DraftEvents import DraftEvents
from PySubDraft.DraftTemplate import ANIMATION_POOL_SIZE, NewDraftSkeleton, NewSegment, NewTextMaterial
from PySubDraft.Helpers import GenerateId
from PySubDraft.Helpers.Localization import _
from PySubDraft.Helpers.Text import WrapDraftContent
from PySubDraft.Options import Options
from PySubDraft.SubtitleCue import SubtitleCue


def FindTrack(draft : dict[str, Any], track_type : str) -> dict[str, Any]|None:
    """
    Find the first track of the given type in a draft
    """
    return next((track for track in draft.get('tracks', []) if track.get('type') == track_type), None)

class DraftProjector:
    """
    Builds a draft document from a sequence of cues.

    Each cue becomes a text material and a segment on the text track that references it.
    Segments alternate between the two animation groups, and each later cue gets a lower render index.
    """
    def __init__(self, options : Options|None = None, events : DraftEvents|None = None):
        self.options : Options = options or Options()
        self.events : DraftEvents = events or DraftEvents()

    def Project(self, cues : Iterable[SubtitleCue]) -> dict[str, Any]:
        """
        Create a complete draft with one text material and one text segment per cue
        """
        draft = NewDraftSkeleton()

        text_track = FindTrack(draft, 'text')
        if text_track is None:
            raise ValueError(_("Draft template has no text track"))

        animation_pool : list[dict[str, Any]] = draft['materials']['material_animations']
        texts : list[dict[str, Any]] = draft['materials']['texts']
        render_index_base = self.options.render_index_base
        font_path = self.options.font_path

        count = 0
        for i, cue in enumerate(cues):
            material_id = GenerateId()
            animation_id = animation_pool[i % ANIMATION_POOL_SIZE]['id']

            content = WrapDraftContent(cue.text, font_path)
            texts.append(NewTextMaterial(material_id, content, font_path))

            segment = NewSegment(material_id, animation_id, cue.start_micros, cue.duration, render_index_base - i)
            text_track['segments'].append(segment)

            self.events.cue_projected.send(self, cue=cue, segment=segment)
            count += 1

        logging.debug(_("Projected {} subtitles onto the text track").format(count))
        return draft
