"""Unit tests for ASS to WebVTT conversion."""

import pytest

from subvtt.core.timecode import FormatError
from subvtt.formats.ass import ass_to_vtt


class TestAssToVtt:
    """Test cases for ass_to_vtt."""

    def test_convert_sample(self, sample_ass_content):
        result = ass_to_vtt(sample_ass_content)

        assert result == (
            "WEBVTT\n\n"
            "00:00:01.000 --> 00:00:02.500\n"
            "<i>Hello</i>, world\n\n"
            "00:00:05.000 --> 00:00:06.000\n"
            "<b>Top</b>\nSecond line\n"
        )

    def test_comment_events_are_skipped(self, sample_ass_content):
        assert "hidden" not in ass_to_vtt(sample_ass_content)

    def test_custom_format_order(self):
        content = (
            "[Events]\n"
            "Format: Start, End, Text\n"
            "Dialogue: 0:00:01.00,0:00:02.00,One, two, three\n"
        )

        result = ass_to_vtt(content)

        assert result == "WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nOne, two, three\n"

    def test_default_format_when_missing(self):
        content = "[Events]\nDialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,Hi\n"

        assert "00:00:01.000 --> 00:00:02.000\nHi" in ass_to_vtt(content)

    def test_style_tags(self):
        content = (
            "[Events]\n"
            "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,"
            r"{\b700\u1}a{\u}{\b0}{\blur3\i1}b{\i}"
            "\n"
        )

        assert "<b><u>a</u></b><i>b</i>" in ass_to_vtt(content)

    def test_unsupported_overrides_dropped(self):
        content = (
            "[Events]\n"
            "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,"
            r"{\pos(10,20)\c&H00FFFF&}left\hright\nnext"
            "\n"
        )

        assert "00:00:01.000 --> 00:00:02.000\nleft right\nnext\n" in ass_to_vtt(content)

    def test_empty_text_events_are_skipped(self):
        content = (
            "[Events]\n"
            r"Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,{\an8}"
            "\n"
        )

        assert ass_to_vtt(content) == "WEBVTT\n"

    def test_events_keep_file_order(self):
        content = (
            "[Events]\n"
            "Dialogue: 0,0:00:05.00,0:00:06.00,Default,,0,0,0,,late\n"
            "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,early\n"
        )

        result = ass_to_vtt(content)

        assert result.index("late") < result.index("early")

    def test_crlf_and_bom(self):
        content = (
            "\ufeff[Script Info]\r\nTitle: x\r\n\r\n[Events]\r\n"
            "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,Hi\r\n"
        )

        assert ass_to_vtt(content) == "WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nHi\n"

    def test_missing_events_section_raises_error(self):
        with pytest.raises(FormatError, match=r"No \[Events\] section"):
            ass_to_vtt("[Script Info]\nTitle: x\n")

    def test_invalid_time_raises_error(self):
        content = "[Events]\nDialogue: 0,soon,0:00:02.00,Default,,0,0,0,,Hi\n"

        with pytest.raises(FormatError, match="Line 2: Invalid timecode 'soon'"):
            ass_to_vtt(content)
