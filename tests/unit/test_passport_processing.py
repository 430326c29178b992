"""
Tests for Passport Processing - field presence and value validation.

Tests cover:
- Parsing blank-line-separated passports
- Required field presence (part 1)
- Per-field value rules (part 2)
"""

import pytest

from src.core.errors import PuzzleInputError
from src.puzzles.passport_processing import (
    has_required_fields,
    has_valid_fields,
    invalid_fields,
    is_valid_field,
    parse_passport,
    parse_passports,
    solve_part1,
    solve_part2,
)


def load(fixtures_path, name: str) -> list:
    return parse_passports((fixtures_path / name).read_text(encoding="utf-8"))


@pytest.fixture
def sample_passports(fixtures_path) -> list:
    return load(fixtures_path, "day04_sample.txt")


@pytest.fixture
def complete_passport() -> dict:
    return {
        "byr": "1980",
        "iyr": "2012",
        "eyr": "2030",
        "hgt": "74in",
        "hcl": "#623a2f",
        "ecl": "grn",
        "pid": "087499704",
    }


class TestParsing:
    """Test passport parsing."""

    def test_fields_across_lines(self) -> None:
        passport = parse_passport(["ecl:gry pid:860033327", "hgt:183cm"])

        assert passport == {"ecl": "gry", "pid": "860033327", "hgt": "183cm"}

    def test_sample_count(self, sample_passports) -> None:
        assert len(sample_passports) == 4
        assert sample_passports[0]["hcl"] == "#fffffd"

    def test_extra_blank_lines_ignored(self) -> None:
        passports = parse_passports("a:1\n\n\n\nb:2\n\n")

        assert passports == [{"a": "1"}, {"b": "2"}]

    def test_token_without_colon_rejected(self) -> None:
        with pytest.raises(PuzzleInputError):
            parse_passport(["byr1937"])


class TestRequiredFields:
    """Part 1: field presence."""

    def test_sample(self, sample_passports) -> None:
        assert [has_required_fields(p) for p in sample_passports] == [True, False, True, False]

    def test_cid_is_optional(self, complete_passport) -> None:
        assert has_required_fields(complete_passport)

    def test_missing_field(self, complete_passport) -> None:
        del complete_passport["byr"]

        assert not has_required_fields(complete_passport)


class TestFieldRules:
    """Part 2: value validation rule table."""

    @pytest.mark.parametrize("name,value,expected", [
        ("byr", "2002", True),
        ("byr", "2003", False),
        ("byr", "1920", True),
        ("byr", "02002", False),
        ("iyr", "2010", True),
        ("iyr", "2021", False),
        ("eyr", "2030", True),
        ("eyr", "2019", False),
        ("hgt", "60in", True),
        ("hgt", "190cm", True),
        ("hgt", "190in", False),
        ("hgt", "190", False),
        ("hgt", "149cm", False),
        ("hgt", "76in", True),
        ("hcl", "#123abc", True),
        ("hcl", "#123abz", False),
        ("hcl", "123abc", False),
        ("hcl", "#123ABC", False),
        ("ecl", "brn", True),
        ("ecl", "wat", False),
        ("pid", "000000001", True),
        ("pid", "0123456789", False),
        ("pid", "01234567a", False),
        ("pid", "\u0660" * 9, False),
        ("byr", "\u0661\u0669\u0668\u0660", False),
        ("hgt", "\u0661\u0666\u0660cm", False),
        ("cid", "anything", True),
        ("xyz", "unknown fields pass", True),
    ])
    def test_rule(self, name, value, expected) -> None:
        assert is_valid_field(name, value) is expected

    def test_invalid_fields_lists_missing_and_bad(self, complete_passport) -> None:
        del complete_passport["pid"]
        complete_passport["ecl"] = "zzz"

        assert invalid_fields(complete_passport) == ["ecl", "pid"]

    def test_complete_passport_is_valid(self, complete_passport) -> None:
        assert invalid_fields(complete_passport) == []
        assert has_valid_fields(complete_passport)


class TestSolve:
    def test_part1_sample(self, sample_passports) -> None:
        assert solve_part1(sample_passports) == 2

    def test_part2_invalid_sample(self, fixtures_path) -> None:
        passports = load(fixtures_path, "day04_invalid.txt")

        assert solve_part1(passports) == 4
        assert solve_part2(passports) == 0

    def test_part2_valid_sample(self, fixtures_path) -> None:
        assert solve_part2(load(fixtures_path, "day04_valid.txt")) == 4
