"""
Unit tests for contact_saver/csv_codec/

Coverage plan
─────────────
serialize  → empty input, header, quoting, optional defaults, row order
split_row  → quoted / unquoted / mixed / short rows
parse      → header skipped, blank lines, invalid rows dropped, CRLF,
             round trip through serialize
"""

import pytest


HEADER = "Name,Location,Mobile,Email,Address,Description"


def _rec(name, location, **extra):
    from contact_saver.store.models import ContactRecord
    return ContactRecord(id=name, created_at="t", name=name, location=location, **extra)


# ─────────────────────────────────────────────────────────────────────────────
# 1. serialize()
# ─────────────────────────────────────────────────────────────────────────────

class TestSerialize:

    def test_empty_sequence_returns_none(self):
        from contact_saver.csv_codec import serialize
        assert serialize([]) is None

    def test_first_line_is_fixed_header(self):
        from contact_saver.csv_codec import serialize
        assert serialize([_rec("A", "B")]).split("\n")[0] == HEADER

    def test_fields_are_quoted_in_column_order(self):
        from contact_saver.csv_codec import serialize
        text = serialize([_rec("A", "B", mobile="1", email="e", address="ad", description="d")])
        assert text.split("\n")[1] == '"A","B","1","e","ad","d"'

    def test_image_uri_and_identity_not_exported(self):
        from contact_saver.csv_codec import serialize
        text = serialize([_rec("A", "B", image_uri="file:///img.jpg")])
        assert "img.jpg" not in text
        assert "\"t\"" not in text

    def test_rows_keep_input_order(self):
        from contact_saver.csv_codec import serialize
        lines = serialize([_rec("Z", "1"), _rec("A", "2"), _rec("M", "3")]).split("\n")
        assert [line.split(",")[0] for line in lines[1:]] == ['"Z"', '"A"', '"M"']

    def test_embedded_quotes_are_not_escaped(self):
        from contact_saver.csv_codec import serialize
        text = serialize([_rec('Say "hi"', "B")])
        assert text.split("\n")[1].startswith('"Say "hi"",')

    def test_no_trailing_newline(self):
        from contact_saver.csv_codec import serialize
        assert not serialize([_rec("A", "B")]).endswith("\n")


# ─────────────────────────────────────────────────────────────────────────────
# 2. split_row()
# ─────────────────────────────────────────────────────────────────────────────

class TestSplitRow:

    @pytest.mark.parametrize("line,expected", [
        ('"A","B","","","",""',        ["A", "B", "", "", "", ""]),
        ("A,B,C,D,E,F",                ["A", "B", "C", "D", "E", "F"]),
        ('"A",B,"c,d"',                ["A", "B", "c,d", "", "", ""]),
        ("A",                          ["A", "", "", "", "", ""]),
        ("A,B,C,D,E,F,G,H",            ["A", "B", "C", "D", "E", "F"]),
        (",B",                         ["", "B", "", "", "", ""]),
        ('"unterminated',              ["unterminated", "", "", "", "", ""]),
    ])
    def test_tokenizes(self, line, expected):
        from contact_saver.csv_codec import split_row
        assert split_row(line) == expected

    def test_always_returns_six_values(self):
        from contact_saver.csv_codec import split_row
        assert len(split_row("")) == 6


# ─────────────────────────────────────────────────────────────────────────────
# 3. parse()
# ─────────────────────────────────────────────────────────────────────────────

class TestParse:

    def test_single_quoted_row(self):
        from contact_saver.csv_codec import parse
        from contact_saver.store.models import ContactFields
        rows = parse(HEADER + '\n"A","B","","","",""')
        assert rows == [ContactFields(name="A", location="B")]

    def test_header_is_discarded_whatever_it_contains(self):
        from contact_saver.csv_codec import parse
        rows = parse('"Real","Row"\n"A","B"')
        assert [r.name for r in rows] == ["A"]

    def test_row_without_location_is_dropped(self):
        from contact_saver.csv_codec import parse
        text = HEADER + '\n"A","","","","",""\n"B","x","","","",""'
        rows = parse(text)
        assert len(rows) == 1
        assert rows[0].name == "B"

    def test_row_without_name_is_dropped(self):
        from contact_saver.csv_codec import parse
        assert parse(HEADER + '\n"","loc"') == []

    def test_blank_lines_are_skipped(self):
        from contact_saver.csv_codec import parse
        rows = parse(HEADER + '\n\n   \n"A","B"\n\n')
        assert len(rows) == 1

    def test_crlf_line_endings(self):
        from contact_saver.csv_codec import parse
        rows = parse(HEADER + '\r\n"A","B","1","","",""\r\n"C","D"\r\n')
        assert [(r.name, r.location, r.mobile) for r in rows] == [("A", "B", "1"), ("C", "D", "")]

    def test_image_uri_is_empty(self):
        from contact_saver.csv_codec import parse
        assert parse(HEADER + '\n"A","B"')[0].image_uri == ""

    @pytest.mark.parametrize("text", ["", HEADER, "\n\n\n", "garbage without newline"])
    def test_structurally_empty_input_yields_empty_list(self, text):
        from contact_saver.csv_codec import parse
        assert parse(text) == []

    def test_round_trip_preserves_csv_fields_and_order(self):
        from contact_saver.csv_codec import parse, serialize
        records = [
            _rec("Alice", "https://maps.google.com/?q=1.5,2.5", mobile="555", email="a@x.y"),
            _rec("Bob", "Office, 3rd floor", address="1 Main St", description="met at expo"),
        ]
        rows = parse(serialize(records))
        cols = ("name", "location", "mobile", "email", "address", "description")
        assert [[getattr(r, c) for c in cols] for r in rows] == \
               [[getattr(r, c) for c in cols] for r in records]
