# FILE: tests/test_io.py
import logging

import pytest

from archery_teams.io import (
    format_team_line,
    load_roster,
    parse_roster_bytes,
    parse_roster_lines,
    report_lines,
    save_teams_csv_bytes,
    teams_dataframe,
    write_report,
)
from archery_teams.models import Competitor, TeamSlot
from archery_teams.validation import RosterInputError


def _team(n, c, r, b):
    return TeamSlot(team=n, members={
        "Compound": Competitor(name=c[0], score=c[1]),
        "Recurve": Competitor(name=r[0], score=r[1]),
        "Barebow": Competitor(name=b[0], score=b[1]),
    })


def test_zero_score_is_skipped_not_fatal(caplog):
    caplog.set_level(logging.WARNING)
    r = parse_roster_lines(["  Jane Doe , 0\n", "Ann, 12\n"], "Compound")
    assert "Jane Doe" not in r
    assert r.entries == {"Ann": 12}
    assert "Skip athlete: Jane Doe" in caplog.text


def test_unparseable_score_is_fatal():
    with pytest.raises(RosterInputError, match="recurve.txt:2"):
        parse_roster_lines(["Ann, 12", "Bob, abc"], "Recurve", source="recurve.txt")


@pytest.mark.parametrize("line", ["Bob 12", ", 12", "Bob, -5", "Bob, 1.5", "Bob,"])
def test_malformed_lines_are_fatal(line):
    with pytest.raises(RosterInputError):
        parse_roster_lines([line], "Barebow")


def test_name_split_on_last_comma_and_trimmed():
    r = parse_roster_lines(["\t Doe, Jane ,  250 \r\n", "", "   \n", "O'Neil,7"], "Compound")
    assert r.entries == {"Doe, Jane": 250, "O'Neil": 7}


def test_duplicate_name_keeps_last(caplog):
    caplog.set_level(logging.WARNING)
    r = parse_roster_lines(["Ann, 12", "Ann, 15"], "Compound")
    assert r.entries == {"Ann": 15}
    assert "Duplicate athlete Ann" in caplog.text


def test_load_roster_from_file(tmp_path):
    p = tmp_path / "compound_archers.txt"
    p.write_text("Ann, 12\nBen, 0\nCal, 9\n", encoding="utf-8")
    r = load_roster(str(p), "Compound")
    assert r.category == "Compound"
    assert r.items() == [("Ann", 12), ("Cal", 9)]


def test_missing_roster_file_is_fatal(tmp_path):
    with pytest.raises(RosterInputError, match="Cannot read Barebow roster"):
        load_roster(str(tmp_path / "nope.txt"), "Barebow")


def test_report_line_format_has_no_padding():
    t = _team(1, ("A Very Long Compound Archer Name", 600), ("Rita", 550), ("Bo", 480))
    assert format_team_line(t) == (
        "Team 1: A Very Long Compound Archer Name (C) | Rita (R) | Bo (B) | Total qualifier = 1630"
    )


def test_write_report_one_line_per_team(tmp_path):
    teams = [_team(1, ("A", 1), ("B", 2), ("C", 3)), _team(2, ("D", 3), ("E", 2), ("F", 1))]
    out = tmp_path / "generated_teams.txt"
    write_report(str(out), teams)
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines == report_lines(teams)
    assert len(lines) == 2
    assert lines[1].endswith("Total qualifier = 6")


def test_teams_dataframe_and_csv():
    teams = [_team(1, ("A", 1), ("B", 2), ("C", 3))]
    df = teams_dataframe(teams)
    assert list(df.columns) == [
        "Team", "Compound", "Compound score", "Recurve", "Recurve score",
        "Barebow", "Barebow score", "Total",
    ]
    assert df.loc[0, "Total"] == 6
    csv_text = save_teams_csv_bytes(teams).decode("utf-8")
    assert csv_text.splitlines()[1] == "1,A,1,B,2,C,3,6"


def test_non_utf8_roster_file_is_an_input_error(tmp_path):
    p = tmp_path / "recurve_archers.txt"
    p.write_bytes(b"Jos\xe9, 600\n")
    with pytest.raises(RosterInputError, match="recurve_archers.txt"):
        load_roster(str(p), "Recurve")


def test_parse_roster_bytes():
    r = parse_roster_bytes("Zoë, 600\nAnn, 0\n".encode("utf-8"), "Barebow", source="upload")
    assert r.entries == {"Zoë": 600}
    with pytest.raises(RosterInputError, match="Cannot read Barebow roster upload"):
        parse_roster_bytes(b"Jos\xe9, 600\n", "Barebow", source="upload")
