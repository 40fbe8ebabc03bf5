"""Tests for deriving altitude columns from the FT header."""

import pytest

from windsaloft.decoder.altitudes import parse_altitude_header
from windsaloft.decoder.errors import FormatError
from windsaloft.models.product import AltitudeColumn

FD_HEADER = "FT  3000    6000    9000   12000   18000   24000  30000  34000  39000"


class TestParseAltitudeHeader:
    def test_standard_header(self):
        columns = parse_altitude_header(FD_HEADER)
        assert [c.altitude for c in columns] == [
            3000, 6000, 9000, 12000, 18000, 24000, 30000, 34000, 39000,
        ]
        assert columns[0] == AltitudeColumn(altitude=3000, start_offset=4, end_offset=8)
        assert columns[1] == AltitudeColumn(altitude=6000, start_offset=9, end_offset=16)
        assert columns[5] == AltitudeColumn(altitude=24000, start_offset=41, end_offset=48)
        assert columns[6] == AltitudeColumn(altitude=30000, start_offset=49, end_offset=55)
        assert columns[-1] == AltitudeColumn(altitude=39000, start_offset=63, end_offset=69)

    def test_columns_do_not_overlap(self):
        columns = parse_altitude_header(FD_HEADER)
        for left, right in zip(columns, columns[1:]):
            assert left.start_offset < left.end_offset
            assert left.end_offset <= right.start_offset

    def test_narrow_header(self):
        columns = parse_altitude_header("FT  3000 6000 9000")
        assert columns == [
            AltitudeColumn(altitude=3000, start_offset=4, end_offset=8),
            AltitudeColumn(altitude=6000, start_offset=9, end_offset=13),
            AltitudeColumn(altitude=9000, start_offset=14, end_offset=18),
        ]

    def test_single_character_tokens_skipped(self):
        columns = parse_altitude_header("FT  3000  6000 X  9000")
        assert [c.altitude for c in columns] == [3000, 6000, 9000]

    def test_label_repeated_inside_later_label(self):
        # "3000" also appears inside "30000"; the later column must still follow
        columns = parse_altitude_header("FT  3000  30000")
        assert columns[1] == AltitudeColumn(altitude=30000, start_offset=9, end_offset=15)

    def test_header_order_preserved(self):
        columns = parse_altitude_header("FT  9000    6000")
        assert [c.altitude for c in columns] == [9000, 6000]

    def test_no_altitudes(self):
        assert parse_altitude_header("FT") == []

    def test_non_numeric_label_raises(self):
        with pytest.raises(FormatError):
            parse_altitude_header("FT  3000  FL060")
