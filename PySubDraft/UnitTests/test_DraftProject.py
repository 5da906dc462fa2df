import json
import os
import shutil
import tempfile
import unittest

from PySubDraft import convert_file, export_subtitles, init_options, parse_subtitles, build_draft
from PySubDraft.DraftProject import DraftProject
from PySubDraft.DraftProjector import FindTrack
from PySubDraft.Options import Options
from PySubDraft.SubtitleError import InputNotFoundError, SubtitleParseError
from PySubDraft.Helpers.Tests import (
    log_input_expected_error,
    log_input_expected_result,
    log_test_name,
    skip_if_debugger_attached,
)

SAMPLE_SRT = """1
00:00:01,000 --> 00:00:02,000
Hello world

2
00:00:03,000 --> 00:00:04,500
Goodbye world
"""


class TestDraftProject(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.temp_dir)

        self.srt_path = os.path.join(self.temp_dir, "sample.srt")
        with open(self.srt_path, 'w', encoding='utf-8') as f:
            f.write(SAMPLE_SRT)

    def _read_json(self, path : str) -> dict:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def test_ConvertFile(self):
        log_test_name("DraftProject.ConvertFile")

        project = DraftProject(Options(font_path="C:/Fonts/test.ttf"))
        outputpath = project.ConvertFile(self.srt_path)

        expected_path = os.path.join(self.temp_dir, "sample.json")
        log_input_expected_result("output path", expected_path, outputpath)
        self.assertEqual(outputpath, expected_path)
        self.assertTrue(os.path.exists(outputpath))
        self.assertFalse(os.path.exists(f"{outputpath}.tmp"))

        draft = self._read_json(outputpath)
        segments = FindTrack(draft, 'text')['segments']
        self.assertEqual(len(segments), 2)
        self.assertEqual(segments[1]['target_timerange'], {"duration": 1_500_000, "start": 3_000_000})
        self.assertIn("[Goodbye world]", draft['materials']['texts'][1]['content'])

    def test_ConvertFile_with_output_path(self):
        log_test_name("DraftProject.ConvertFile - explicit output")

        outputpath = os.path.join(self.temp_dir, "draft_content.json")
        result = convert_file(self.srt_path, outputpath)

        log_input_expected_result("output path", outputpath, result)
        self.assertEqual(result, outputpath)

        with open(outputpath, 'r', encoding='utf-8') as f:
            content = f.read()
        self.assertTrue(content.startswith('{"canvas_config":'))

    def test_ConvertFile_with_gap_and_substitutions(self):
        log_test_name("DraftProject.ConvertFile - gap and substitutions")

        options = init_options(gap_seconds=2, substitutions=["world::there"])
        outputpath = DraftProject(options).ConvertFile(self.srt_path)

        draft = self._read_json(outputpath)
        segments = FindTrack(draft, 'text')['segments']
        starts = [segment['target_timerange']['start'] for segment in segments]

        log_input_expected_result("starts", [1_000_000, 5_000_000], starts)
        self.assertEqual(starts, [1_000_000, 5_000_000])
        self.assertIn("[Hello there]", draft['materials']['texts'][0]['content'])

    def test_ConvertFile_unknown_extension_reads_srt(self):
        log_test_name("DraftProject.ConvertFile - unknown extension")

        txt_path = os.path.join(self.temp_dir, "subtitles.txt")
        shutil.copyfile(self.srt_path, txt_path)

        outputpath = DraftProject().ConvertFile(txt_path)

        draft = self._read_json(outputpath)
        log_input_expected_result("texts", 2, len(draft['materials']['texts']))
        self.assertEqual(len(draft['materials']['texts']), 2)

    def test_draft_saved_signal(self):
        log_test_name("DraftProject - draft_saved signal")

        project = DraftProject()
        saved = []

        def on_draft_saved(sender, path=None):
            saved.append(path)

        project.events.draft_saved.connect(on_draft_saved)
        outputpath = project.ConvertFile(self.srt_path)

        log_input_expected_result("saved", [outputpath], saved)
        self.assertEqual(saved, [outputpath])

    def test_missing_input(self):
        if skip_if_debugger_attached("DraftProject.ConvertFile - missing input"):
            return

        log_test_name("DraftProject.ConvertFile - missing input")

        missing = os.path.join(self.temp_dir, "missing.srt")
        with self.assertRaises(InputNotFoundError) as e:
            DraftProject().ConvertFile(missing)

        log_input_expected_error(missing, InputNotFoundError, e.exception)
        self.assertEqual(e.exception.path, missing)
        self.assertFalse(os.path.exists(os.path.join(self.temp_dir, "missing.json")))

    def test_ExportSubtitles(self):
        log_test_name("DraftProject.ExportSubtitles")

        draftpath = convert_file(self.srt_path, os.path.join(self.temp_dir, "draft.json"))
        outputpath = export_subtitles(draftpath)

        expected_path = os.path.join(self.temp_dir, "draft.srt")
        log_input_expected_result("output path", expected_path, outputpath)
        self.assertEqual(outputpath, expected_path)

        with open(outputpath, 'r', encoding='utf-8') as f:
            content = f.read()

        self.assertEqual(parse_subtitles(content), parse_subtitles(SAMPLE_SRT))

    def test_ExportSubtitles_invalid_draft(self):
        if skip_if_debugger_attached("DraftProject.ExportSubtitles - invalid draft"):
            return

        log_test_name("DraftProject.ExportSubtitles - invalid draft")

        draftpath = os.path.join(self.temp_dir, "broken.json")
        with open(draftpath, 'w', encoding='utf-8') as f:
            f.write("{broken")

        with self.assertRaises(SubtitleParseError) as e:
            DraftProject().ExportSubtitles(draftpath)

        log_input_expected_error(draftpath, SubtitleParseError, e.exception)
        self.assertFalse(os.path.exists(os.path.join(self.temp_dir, "broken.srt")))

    def test_EditDraftFile(self):
        log_test_name("DraftProject.EditDraftFile")

        draftpath = os.path.join(self.temp_dir, "draft.json")
        with open(draftpath, 'w', encoding='utf-8') as f:
            f.write(json.dumps(build_draft(parse_subtitles(SAMPLE_SRT))))

        options = Options(gap_seconds=1, substitutions={"world": "moon"})
        result = DraftProject(options).EditDraftFile(draftpath)

        log_input_expected_result("output path", draftpath, result)
        self.assertEqual(result, draftpath)

        draft = self._read_json(draftpath)
        starts = [segment['target_timerange']['start'] for segment in FindTrack(draft, 'text')['segments']]
        self.assertEqual(starts, [1_000_000, 4_000_000])
        self.assertIn("[Hello moon]", draft['materials']['texts'][0]['content'])

    def test_ReplaceInTextFile(self):
        log_test_name("DraftProject.ReplaceInTextFile")

        outputpath = os.path.join(self.temp_dir, "replaced.srt")
        options = Options(substitutions="Hello::Hi\nGoodbye::Bye")
        result = DraftProject(options).ReplaceInTextFile(self.srt_path, outputpath)

        with open(result, 'r', encoding='utf-8') as f:
            content = f.read()

        texts = [cue.text for cue in parse_subtitles(content)]
        log_input_expected_result("texts", ["Hi world", "Bye world"], texts)
        self.assertEqual(texts, ["Hi world", "Bye world"])


if __name__ == '__main__':
    unittest.main()
