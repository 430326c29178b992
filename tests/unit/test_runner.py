"""
Tests for PuzzleRunner - running registered solutions against inputs.
"""

import pytest

from src.core.config import SolverConfig
from src.core.errors import InvalidTileError, UnknownPuzzleError
from src.solving.runner import SOLUTIONS, DayResult, PuzzleRunner, get_solution

SAMPLE_ANSWERS = {
    1: (514579, 241861950),
    2: (2, 1),
    3: (7, 336),
    4: (2, 2),
}


@pytest.fixture
def sample_input_dir(tmp_path, fixtures_path):
    """Input directory laid out as dayNN.txt."""
    for day in SAMPLE_ANSWERS:
        sample = fixtures_path / f"day{day:02d}_sample.txt"
        (tmp_path / f"day{day:02d}.txt").write_text(sample.read_text())
    return tmp_path


@pytest.fixture
def runner(sample_input_dir) -> PuzzleRunner:
    return PuzzleRunner(SolverConfig(input_dir=str(sample_input_dir)))


class TestRegistry:
    def test_days_registered(self) -> None:
        assert sorted(SOLUTIONS) == [1, 2, 3, 4]

    def test_unknown_day(self) -> None:
        with pytest.raises(UnknownPuzzleError):
            get_solution(25)

    def test_invalid_part(self) -> None:
        with pytest.raises(ValueError):
            get_solution(1).solve(3, [1, 2], SolverConfig())


class TestRunDay:
    @pytest.mark.parametrize("day", sorted(SAMPLE_ANSWERS))
    def test_sample_answers(self, runner, day) -> None:
        result = runner.run_day(day)

        assert isinstance(result, DayResult)
        assert (result.answer(1), result.answer(2)) == SAMPLE_ANSWERS[day]

    def test_explicit_input_path(self, fixtures_path) -> None:
        result = PuzzleRunner().run_day(4, str(fixtures_path / "day04_valid.txt"), parts=(2,))

        assert result.answer(2) == 4
        assert [p.part for p in result.parts] == [2]
        with pytest.raises(KeyError):
            result.answer(1)

    def test_uses_config_parameters(self, sample_input_dir) -> None:
        config = SolverConfig(input_dir=str(sample_input_dir), expense_target=1345)
        result = PuzzleRunner(config).run_day(1, parts=(1,))

        assert result.answer(1) == 979 * 366

    def test_missing_input(self, tmp_path) -> None:
        runner = PuzzleRunner(SolverConfig(input_dir=str(tmp_path)))

        with pytest.raises(FileNotFoundError):
            runner.run_day(1)

    def test_bad_map_propagates(self, tmp_path) -> None:
        (tmp_path / "day03.txt").write_text("..#\n.?.\n")
        runner = PuzzleRunner(SolverConfig(input_dir=str(tmp_path)))

        with pytest.raises(InvalidTileError):
            runner.run_day(3)


class TestRunAll:
    def test_all_days(self, runner) -> None:
        report = runner.run_all()

        assert [d.day for d in report.days] == [1, 2, 3, 4]
        assert report.total_elapsed_ms >= 0

    def test_selected_days_sorted(self, runner) -> None:
        report = runner.run_all([3, 1], parts=(1,))

        assert [d.day for d in report.days] == [1, 3]
        assert report.days[1].answer(1) == 7

    def test_to_dict(self, runner) -> None:
        data = runner.run_all([2]).to_dict()

        assert data["days"][0]["title"] == "Password Philosophy"
        assert [p["answer"] for p in data["days"][0]["parts"]] == [2, 1]
        assert "timestamp" in data
