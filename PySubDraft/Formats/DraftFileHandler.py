import json
import logging
from typing import Any, TextIO

from PySubDraft.DraftEvents import DraftEvents
from PySubDraft.DraftProjector import DraftProjector
from PySubDraft.Helpers.Localization import _
from PySubDraft.Helpers.Text import CleanDraftContent
from PySubDraft.Options import Options
from PySubDraft.SubtitleCue import SubtitleCue
from PySubDraft.SubtitleData import SubtitleData
from PySubDraft.SubtitleError import SubtitleIOError, SubtitleParseError
from PySubDraft.SubtitleFileHandler import SubtitleFileHandler


def SerialiseDraft(draft : dict[str, Any]) -> str:
    """
    Serialise a draft as compact JSON, the way the editing application writes it
    """
    return json.dumps(draft, ensure_ascii=False, separators=(',', ':'))

class DraftFileHandler(SubtitleFileHandler):
    """
    Reads and writes the editor's draft_content.json project document.

    Reading extracts the cues placed on text tracks, writing projects cues onto a new draft.
    """
    SUPPORTED_EXTENSIONS = {'.json': 10}

    def __init__(self, options : Options|None = None, events : DraftEvents|None = None):
        super().__init__(options)
        self.events : DraftEvents = events or DraftEvents()

    def parse_file(self, file_obj: TextIO) -> SubtitleData:
        try:
            content = file_obj.read()
        except UnicodeDecodeError:
            raise
        except OSError as e:
            raise SubtitleIOError(_("Failed to read draft file"), e)

        return self.parse_string(content)

    def parse_string(self, content: str) -> SubtitleData:
        try:
            draft = json.loads(content)
        except json.JSONDecodeError as e:
            raise SubtitleParseError(_("Invalid draft JSON: {}").format(str(e)), e)

        if not isinstance(draft, dict):
            raise SubtitleParseError(_("Draft content must be a JSON object"))

        return SubtitleData(cues=self.ExtractCues(draft), metadata={'format': 'draft', 'draft_id': draft.get('id')}, detected_format='.json')

    def compose(self, data: SubtitleData) -> str:
        projector = DraftProjector(self.options, self.events)
        draft = projector.Project(data.cues)
        return SerialiseDraft(draft)

    def ExtractCues(self, draft : dict[str, Any]) -> list[SubtitleCue]:
        """
        Build cues from the segments of every text track, in track order.
        Materials with word timings produce one cue per word.
        """
        try:
            return self._extract_cues(draft)
        except (TypeError, ValueError, AttributeError) as e:
            raise SubtitleParseError(_("Draft has an unexpected structure: {}").format(str(e)), e)

    def _extract_cues(self, draft : dict[str, Any]) -> list[SubtitleCue]:
        materials = draft.get('materials') or {}
        text_materials = { text.get('id') : text for text in materials.get('texts') or [] if isinstance(text, dict) }

        cues : list[SubtitleCue] = []
        missing = 0

        for track in draft.get('tracks') or []:
            if not isinstance(track, dict) or track.get('type') != 'text':
                continue

            for segment in track.get('segments') or []:
                material = text_materials.get(segment.get('material_id'))
                if material is None:
                    missing += 1
                    continue

                words = material.get('words')
                if isinstance(words, list) and words:
                    for word in words:
                        text = CleanDraftContent(word.get('text') or "")
                        cues.append(SubtitleCue.FromMicroseconds(len(cues) + 1, _micros(word.get('begin')), _micros(word.get('end')), text))
                else:
                    timerange = segment.get('target_timerange') or {}
                    start = _micros(timerange.get('start'))
                    duration = _micros(timerange.get('duration'))
                    text = CleanDraftContent(material.get('content') or "")
                    cues.append(SubtitleCue.FromMicroseconds(len(cues) + 1, start, start + duration, text))

        if missing:
            logging.warning(_("{} segments reference missing text materials and were skipped").format(missing))

        return cues

def _micros(value : Any) -> int:
    """Missing or null times count as zero"""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(_("Expected a time in microseconds, got {}").format(repr(value)))
    return int(value)
