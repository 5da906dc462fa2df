import json
import logging
import os
from typing import Any

from PySubDraft.DraftEditor import DraftEditor
from PySubDraft.DraftEvents import DraftEvents
from PySubDraft.DraftProjector import DraftProjector
from PySubDraft.Formats.DraftFileHandler import DraftFileHandler, SerialiseDraft
from PySubDraft.Formats.SrtFileHandler import SrtFileHandler
from PySubDraft.Helpers import GetInputPath, GetOutputPath
from PySubDraft.Helpers.Localization import _
from PySubDraft.Options import Options
from PySubDraft.SubtitleData import SubtitleData
from PySubDraft.SubtitleEditor import SubtitleEditor
from PySubDraft.SubtitleError import InputNotFoundError, SubtitleIOError, SubtitleParseError
from PySubDraft.SubtitleFileHandler import SubtitleFileHandler
from PySubDraft.SubtitleFormatRegistry import SubtitleFormatRegistry
from PySubDraft.Substitutions import Substitutions


class DraftProject:
    """
    Handles reading subtitle and draft files, converting between them and writing the results.

    Output files are only written once the complete document has been built,
    and are replaced atomically so a failed write never leaves a partial file.
    """
    def __init__(self, options : Options|None = None):
        self.options : Options = options or Options()
        self.events : DraftEvents = DraftEvents()
        self.sourcepath : str|None = None
        self.outputpath : str|None = None
        self.subtitles : SubtitleData|None = None
        self.draft : dict[str, Any]|None = None

    @property
    def substitutions(self) -> Substitutions:
        return Substitutions.Parse(self.options.get('substitutions'))

    @property
    def gap_seconds(self) -> float:
        return self.options.get_float('gap_seconds') or 0.0

    def LoadSubtitleFile(self, filepath : str) -> SubtitleData:
        """
        Load cues from a subtitle file, choosing the handler by extension (SRT if the extension is not recognised)
        """
        filepath = self._check_input(filepath)

        handler = self._create_handler(filepath)
        logging.info(_("Reading subtitles from {}").format(filepath))

        self.subtitles = handler.load_file(filepath)
        self.sourcepath = filepath

        logging.info(_("Loaded {} subtitles").format(len(self.subtitles.cues)))
        return self.subtitles

    def ApplyEdits(self) -> None:
        """
        Apply the configured gap and substitutions to the loaded cues
        """
        if self.subtitles is None:
            raise ValueError(_("No subtitles loaded"))

        with SubtitleEditor(self.subtitles) as editor:
            substitutions = self.substitutions
            if substitutions:
                changed = editor.ApplySubstitutions(substitutions)
                logging.info(_("Substitutions changed {} subtitles").format(changed))

            if self.gap_seconds:
                retimed = editor.InsertGaps(self.gap_seconds)
                logging.info(_("Inserted {} second gaps between {} subtitles").format(self.gap_seconds, retimed))

    def BuildDraft(self) -> dict[str, Any]:
        """
        Project the loaded cues onto a new draft document
        """
        if self.subtitles is None:
            raise ValueError(_("No subtitles loaded"))

        projector = DraftProjector(self.options, self.events)
        self.draft = projector.Project(self.subtitles.cues)
        return self.draft

    def SaveDraft(self, outputpath : str|None = None) -> str:
        """
        Serialise the draft and write it to the output path
        """
        if self.draft is None:
            raise ValueError(_("No draft to save"))

        outputpath = outputpath or self.outputpath or GetOutputPath(self.sourcepath, '.json')
        if not outputpath:
            raise ValueError(_("No output path provided"))

        self._write_file(outputpath, SerialiseDraft(self.draft))
        self.outputpath = outputpath
        self.events.draft_saved.send(self, path=outputpath)
        return outputpath

    def ConvertFile(self, filepath : str, outputpath : str|None = None) -> str:
        """
        One-stop shop: read a subtitle file, build the draft and write it. Returns the path written.
        """
        self.LoadSubtitleFile(filepath)
        self.ApplyEdits()
        self.BuildDraft()
        outputpath = self.SaveDraft(outputpath)

        logging.info(_("Successfully converted {} to {}").format(filepath, outputpath))
        return outputpath

    def ExportSubtitles(self, draftpath : str, outputpath : str|None = None) -> str:
        """
        Extract the text track of a draft and write it as SRT. Returns the path written.
        """
        draftpath = self._check_input(draftpath)

        logging.info(_("Reading draft from {}").format(draftpath))
        self.subtitles = DraftFileHandler(self.options, self.events).load_file(draftpath)
        self.sourcepath = draftpath
        self.ApplyEdits()

        outputpath = outputpath or GetOutputPath(draftpath, '.srt')
        if not outputpath:
            raise ValueError(_("No output path provided"))

        content = SrtFileHandler(self.options).compose(self.subtitles)
        self._write_file(outputpath, content)
        self.outputpath = outputpath

        logging.info(_("Exported {} subtitles to {}").format(len(self.subtitles.cues), outputpath))
        return outputpath

    def EditDraftFile(self, draftpath : str, outputpath : str|None = None) -> str:
        """
        Apply the configured substitutions and gap to an existing draft file, by default writing it back in place
        """
        draftpath = self._check_input(draftpath)
        self.draft = self._read_draft(draftpath)
        self.sourcepath = draftpath

        with DraftEditor(self.draft) as editor:
            substitutions = self.substitutions
            if substitutions:
                editor.ApplySubstitutions(substitutions)

            if self.gap_seconds:
                moved = editor.InsertGaps(self.gap_seconds)
                logging.info(_("Moved {} text segments").format(moved))

        return self.SaveDraft(outputpath or draftpath)

    def ReplaceInTextFile(self, filepath : str, outputpath : str|None = None) -> str:
        """
        Apply the configured substitutions to the raw text of a file
        """
        filepath = self._check_input(filepath)
        content = self._read_file(filepath)

        outputpath = outputpath or filepath
        self._write_file(outputpath, self.substitutions.Apply(content))
        return outputpath

    def _check_input(self, filepath : str) -> str:
        filepath = GetInputPath(filepath) or ""
        if not filepath or not os.path.exists(filepath):
            raise InputNotFoundError(filepath)
        return filepath

    def _create_handler(self, filepath : str) -> SubtitleFileHandler:
        try:
            return SubtitleFormatRegistry.create_handler(filename=filepath, options=self.options)
        except ValueError:
            logging.warning(_("Unrecognised extension for {}, reading it as SRT").format(filepath))
            return SrtFileHandler(self.options)

    def _read_file(self, filepath : str) -> str:
        try:
            with open(filepath, 'r', encoding=self.options.encoding) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SubtitleIOError(_("Unable to read {}").format(filepath), e)

    def _read_draft(self, filepath : str) -> dict[str, Any]:
        content = self._read_file(filepath)
        try:
            draft = json.loads(content)
        except json.JSONDecodeError as e:
            raise SubtitleParseError(_("Invalid draft JSON in {}: {}").format(filepath, str(e)), e)

        if not isinstance(draft, dict):
            raise SubtitleParseError(_("Draft content must be a JSON object"))
        return draft

    def _write_file(self, outputpath : str, content : str) -> None:
        outputpath = os.path.normpath(outputpath)
        temppath = f"{outputpath}.tmp"

        logging.debug(_("Writing {}").format(outputpath))
        try:
            with open(temppath, 'w', encoding=self.options.encoding, newline='') as f:
                f.write(content)
            os.replace(temppath, outputpath)

        except OSError as e:
            if os.path.exists(temppath):
                os.remove(temppath)
            raise SubtitleIOError(_("Unable to write {}").format(outputpath), e)
