"""
PySubDraft - Subtitle to Draft Conversion Library

Converts SubRip subtitles into the project document (draft_content.json) of a video editor,
placing each subtitle as a text segment on a dedicated text track.

Basic Usage
-----------
    from PySubDraft import parse_subtitles, build_draft, convert_file

    # Parse SRT content into cues
    cues = parse_subtitles("1\\n00:00:01,000 --> 00:00:03,500\\nHello world\\n")

    # Build a draft document from the cues
    draft = build_draft(cues)

    # Or convert a file in one step
    convert_file("subtitles.srt", "draft_content.json")
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from PySubDraft.DraftEditor import DraftEditor
from PySubDraft.DraftEvents import DraftEvents
from PySubDraft.DraftProject import DraftProject
from PySubDraft.DraftProjector import DraftProjector
from PySubDraft.Formats.DraftFileHandler import DraftFileHandler, SerialiseDraft
from PySubDraft.Formats.SrtFileHandler import SrtFileHandler
from PySubDraft.Helpers import GenerateId
from PySubDraft.Options import Options
from PySubDraft.SubtitleCue import SubtitleCue
from PySubDraft.SubtitleData import SubtitleData
from PySubDraft.SubtitleEditor import SubtitleEditor
from PySubDraft.SubtitleError import InputNotFoundError, SubtitleError, SubtitleIOError, SubtitleParseError
from PySubDraft.SubtitleFormatRegistry import SubtitleFormatRegistry
from PySubDraft.Substitutions import Substitutions
from PySubDraft.version import __version__


def init_options(**settings : Any) -> Options:
    """
    Create an :class:`Options` instance, e.g. init_options(font_path="C:/Fonts/arial.ttf", gap_seconds=2)
    """
    return Options(settings)

def parse_subtitles(content : str) -> list[SubtitleCue]:
    """
    Parse SRT content into an ordered list of cues. Malformed lines are skipped, this never raises for bad structure.
    """
    return SrtFileHandler().parse_string(content).cues

def build_draft(cues : Iterable[SubtitleCue], options : Options|None = None) -> dict[str, Any]:
    """
    Project cues onto a new draft document, returned as a JSON-compatible dict
    """
    return DraftProjector(options).Project(cues)

def convert_file(filepath : str, outputpath : str|None = None, options : Options|None = None) -> str:
    """
    Convert a subtitle file to a draft file and return the path written.

    Raises InputNotFoundError if the file does not exist and SubtitleIOError if it cannot be read or written.
    """
    project = DraftProject(options)
    return project.ConvertFile(filepath, outputpath)

def export_subtitles(draftpath : str, outputpath : str|None = None, options : Options|None = None) -> str:
    """
    Write the text track of a draft file as SRT and return the path written
    """
    project = DraftProject(options)
    return project.ExportSubtitles(draftpath, outputpath)

__all__ = [
    '__version__',
    'DraftEditor',
    'DraftEvents',
    'DraftFileHandler',
    'DraftProject',
    'DraftProjector',
    'GenerateId',
    'InputNotFoundError',
    'Options',
    'SerialiseDraft',
    'SrtFileHandler',
    'SubtitleCue',
    'SubtitleData',
    'SubtitleEditor',
    'SubtitleError',
    'SubtitleFormatRegistry',
    'SubtitleIOError',
    'SubtitleParseError',
    'Substitutions',
    'build_draft',
    'convert_file',
    'export_subtitles',
    'init_options',
    'parse_subtitles',
]
