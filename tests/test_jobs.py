import logging
import shutil
from pathlib import Path

import pytest

from puzzlebox.jobs import cli, day1, day4
from puzzlebox.models.errors import ParseError


@pytest.fixture
def day4_input(tmp_path: Path, fixtures_dir: Path) -> Path:
    path = tmp_path / "day4.txt"
    shutil.copy(fixtures_dir / "day4_example.txt", path)
    return path


class TestDay4:
    def test_solve(self, sample_scratchcards: str) -> None:
        assert day4.solve(sample_scratchcards.splitlines()) == (13, 30)

    def test_run_day(self, day4_input: Path) -> None:
        answer = day4.run_day(day4_input)

        assert answer.day == 4
        assert answer.part1 == 13
        assert answer.part2 == 30
        assert answer.runtime_ms >= 0
        assert answer.data_size_kb is not None
        assert answer.data_size_kb > 0

    def test_verbose_logs_each_card(
        self, sample_scratchcards: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="puzzlebox.jobs.day4")
        day4.solve(sample_scratchcards.splitlines(), verbose=True)

        assert "points: 8" in caplog.text
        assert "Card 5: 14" in caplog.text

    def test_quiet_by_default(
        self, sample_scratchcards: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="puzzlebox.jobs.day4")
        day4.solve(sample_scratchcards.splitlines())

        assert "points:" not in caplog.text

    def test_main_prints_report(self, day4_input: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = day4.main(["--input", str(day4_input)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Part-1: 13" in out
        assert "Part-2: 30" in out

    def test_main_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = day4.main(["--input", str(tmp_path / "missing.txt")])

        assert exit_code == 1
        assert "Part-1" not in capsys.readouterr().out

    def test_main_malformed_input(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("Card 1: 1 2 3\n")

        assert day4.main(["--input", str(path)]) == 1

    def test_main_empty_input(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_text("\n")

        assert day4.main(["--input", str(path)]) == 1


class TestBuildParser:
    def test_verbose_defaults_to_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(cli.settings, "verbose_logging", True)
        args = cli.build_parser(4, "Day 4").parse_args([])
        assert args.verbose is True

    def test_no_verbose_overrides_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(cli.settings, "verbose_logging", True)
        args = cli.build_parser(4, "Day 4").parse_args(["--no-verbose"])
        assert args.verbose is False

    def test_verbose_flag(self) -> None:
        args = cli.build_parser(4, "Day 4").parse_args(["--verbose"])
        assert args.verbose is True


class TestDay1:
    def test_solve(self, fixtures_dir: Path) -> None:
        lines = (fixtures_dir / "day1_part1.txt").read_text().splitlines()
        assert day1.solve(lines) == (142, 142)

    def test_part1_needs_digits(self, fixtures_dir: Path) -> None:
        """The part 2 example has lines with only spelled-out digits."""
        lines = (fixtures_dir / "day1_part2.txt").read_text().splitlines()
        with pytest.raises(ParseError):
            day1.solve(lines)

    def test_run_day(self, tmp_path: Path) -> None:
        path = tmp_path / "day1.txt"
        path.write_text("two1nine\n4nineeightseven2\n")
        answer = day1.run_day(path)

        assert answer.day == 1
        assert answer.part1 == 11 + 42
        assert answer.part2 == 29 + 42

    def test_verbose_logs_highlighted_lines(
        self, fixtures_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="puzzlebox.jobs.day1")
        lines = (fixtures_dir / "day1_part1.txt").read_text().splitlines()
        day1.solve(lines, verbose=True)

        assert "treb[7]uchet 77" in caplog.text

    def test_main(self, fixtures_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = day1.main(["--input", str(fixtures_dir / "day1_part1.txt")])

        assert exit_code == 0
        assert "Part-1: 142" in capsys.readouterr().out
