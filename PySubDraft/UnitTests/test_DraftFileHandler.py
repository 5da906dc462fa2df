import json
import unittest

from PySubDraft.DraftProjector import FindTrack
from PySubDraft.Formats.DraftFileHandler import DraftFileHandler, SerialiseDraft
from PySubDraft.Options import Options
from PySubDraft.SubtitleCue import SubtitleCue
from PySubDraft.SubtitleData import SubtitleData
from PySubDraft.SubtitleError import SubtitleParseError
from PySubDraft.Helpers.Tests import (
    log_input_expected_error,
    log_input_expected_result,
    log_test_name,
    skip_if_debugger_attached,
)


class TestDraftFileHandler(unittest.TestCase):
    def setUp(self):
        self.handler = DraftFileHandler(Options(font_path="C:/Fonts/test.ttf"))

        self.cues = [
            SubtitleCue.FromMicroseconds(1, 1_000_000, 3_500_000, "Hello world"),
            SubtitleCue.FromMicroseconds(2, 4_000_000, 6_000_000, "Second subtitle"),
        ]

    def test_get_file_extensions(self):
        log_test_name("DraftFileHandler.get_file_extensions")
        result = self.handler.get_file_extensions()
        log_input_expected_result("", ['.json'], result)
        self.assertEqual(result, ['.json'])

    def test_compose_is_compact(self):
        log_test_name("DraftFileHandler.compose - compact JSON")

        content = self.handler.compose(SubtitleData(cues=self.cues))

        expected_prefix = '{"canvas_config":{"height":1080,"ratio":"original","width":1920},"color_space":0,'
        log_input_expected_result("prefix", expected_prefix, content[:len(expected_prefix)])
        self.assertTrue(content.startswith(expected_prefix))
        self.assertNotIn('\n', content)
        self.assertNotIn(', ', content.replace('(1.000000, 1.000000, 1.000000, 1.000000)', ''))

        draft = json.loads(content)
        self.assertEqual(len(draft['materials']['texts']), 2)

    def test_serialise_does_not_escape_unicode(self):
        log_test_name("SerialiseDraft - unicode")

        result = SerialiseDraft({"name": "Café ✓"})
        log_input_expected_result("serialised", '{"name":"Café ✓"}', result)
        self.assertEqual(result, '{"name":"Café ✓"}')

    def test_round_trip(self):
        log_test_name("DraftFileHandler - compose then parse")

        content = self.handler.compose(SubtitleData(cues=self.cues))
        data = self.handler.parse_string(content)

        log_input_expected_result("cues", self.cues, data.cues)
        self.assertEqual(data.cues, self.cues)
        self.assertEqual(data.detected_format, '.json')
        self.assertEqual(data.metadata['format'], 'draft')
        self.assertEqual(data.metadata['draft_id'], json.loads(content)['id'])

    def test_parse_word_timings(self):
        log_test_name("DraftFileHandler.parse_string - word timings")

        draft = {
            "materials": {
                "texts": [
                    {
                        "id": "m1",
                        "content": "[Hello world]",
                        "words": [
                            {"begin": 1_000_000, "end": 1_500_000, "text": "Hello"},
                            {"begin": 1_500_000, "end": 2_000_000, "text": "world"},
                        ]
                    }
                ]
            },
            "tracks": [
                {"type": "text", "segments": [{"material_id": "m1", "target_timerange": {"start": 1_000_000, "duration": 1_000_000}}]}
            ]
        }

        data = self.handler.parse_string(json.dumps(draft))
        expected = [
            SubtitleCue.FromMicroseconds(1, 1_000_000, 1_500_000, "Hello"),
            SubtitleCue.FromMicroseconds(2, 1_500_000, 2_000_000, "world"),
        ]

        log_input_expected_result("cues", expected, data.cues)
        self.assertEqual(data.cues, expected)

    def test_parse_cleans_markup(self):
        log_test_name("DraftFileHandler.parse_string - markup")

        draft = {
            "materials": {"texts": [{"id": "m1", "content": '<font id="" path="x.ttf"><size=5.000000>[a &lt;b&gt; c]</size></font>'}]},
            "tracks": [
                {"type": "video", "segments": [{"material_id": "v1"}]},
                {"type": "text", "segments": [{"material_id": "m1", "target_timerange": {"start": 2_000_000, "duration": 500_000}}]},
            ]
        }

        data = self.handler.parse_string(json.dumps(draft))

        log_input_expected_result("text", "a <b> c", data.cues[0].text)
        self.assertEqual(len(data.cues), 1)
        self.assertEqual(data.cues[0].text, "a <b> c")
        self.assertEqual(data.cues[0].start_micros, 2_000_000)
        self.assertEqual(data.cues[0].end_micros, 2_500_000)

    def test_missing_material_is_skipped(self):
        log_test_name("DraftFileHandler.parse_string - missing material")

        draft = {
            "materials": {"texts": [{"id": "m1", "content": "[kept]"}]},
            "tracks": [
                {"type": "text", "segments": [
                    {"material_id": "missing", "target_timerange": {"start": 0, "duration": 1}},
                    {"material_id": "m1", "target_timerange": {"start": 0, "duration": 1_000_000}},
                ]}
            ]
        }

        data = self.handler.parse_string(json.dumps(draft))

        log_input_expected_result("texts", ["kept"], [cue.text for cue in data.cues])
        self.assertEqual([cue.text for cue in data.cues], ["kept"])
        self.assertEqual(data.cues[0].index, 1)

    def test_parse_invalid_json(self):
        if skip_if_debugger_attached("DraftFileHandler.parse_string - invalid JSON"):
            return

        log_test_name("DraftFileHandler.parse_string - invalid JSON")

        for content in ["{not json", "[1, 2, 3]", "\"text\""]:
            with self.subTest(content=content):
                with self.assertRaises(SubtitleParseError) as e:
                    self.handler.parse_string(content)
                log_input_expected_error(content, SubtitleParseError, e.exception)

    def test_parse_word_text_is_cleaned(self):
        log_test_name("DraftFileHandler.parse_string - word markup")

        draft = {
            "materials": {"texts": [{"id": "m1", "words": [{"begin": 0, "end": 500_000, "text": "<b>[Hi]</b> &lt;3"}]}]},
            "tracks": [{"type": "text", "segments": [{"material_id": "m1"}]}]
        }

        data = self.handler.parse_string(json.dumps(draft))

        log_input_expected_result("text", "Hi <3", data.cues[0].text)
        self.assertEqual(data.cues[0].text, "Hi <3")

    def test_parse_null_times_count_as_zero(self):
        log_test_name("DraftFileHandler.parse_string - null times")

        draft = {
            "materials": {"texts": [{"id": "m1", "content": "[x]"}]},
            "tracks": [{"type": "text", "segments": [{"material_id": "m1", "target_timerange": {"start": None, "duration": 5}}]}]
        }

        data = self.handler.parse_string(json.dumps(draft))

        log_input_expected_result("timing", (0, 5), (data.cues[0].start_micros, data.cues[0].end_micros))
        self.assertEqual(data.cues[0].start_micros, 0)
        self.assertEqual(data.cues[0].end_micros, 5)

    def test_parse_unexpected_structure(self):
        if skip_if_debugger_attached("DraftFileHandler.parse_string - unexpected structure"):
            return

        log_test_name("DraftFileHandler.parse_string - unexpected structure")

        material = {"id": "m1", "content": "[x]"}
        test_cases = [
            {"materials": {"texts": [material]}, "tracks": [{"type": "text", "segments": ["not a segment"]}]},
            {"materials": {"texts": [{"id": "m1", "words": ["not a word"]}]}, "tracks": [{"type": "text", "segments": [{"material_id": "m1"}]}]},
            {"materials": {"texts": [material]}, "tracks": [{"type": "text", "segments": [{"material_id": "m1", "target_timerange": {"start": "soon"}}]}]},
            {"materials": ["not", "a", "map"], "tracks": []},
        ]

        for draft in test_cases:
            with self.subTest(draft=draft):
                with self.assertRaises(SubtitleParseError) as e:
                    self.handler.parse_string(json.dumps(draft))
                log_input_expected_error(draft, SubtitleParseError, e.exception)

    def test_compose_uses_font_option(self):
        log_test_name("DraftFileHandler.compose - font option")

        draft = json.loads(self.handler.compose(SubtitleData(cues=self.cues)))

        font_paths = [text['font_path'] for text in draft['materials']['texts']]
        log_input_expected_result("font paths", ["C:/Fonts/test.ttf"] * 2, font_paths)
        self.assertEqual(font_paths, ["C:/Fonts/test.ttf"] * 2)
        self.assertEqual(len(FindTrack(draft, 'text')['segments']), 2)


if __name__ == '__main__':
    unittest.main()
