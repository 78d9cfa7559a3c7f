import pytest

from aockit.answer import NO_ANSWER, Answer
from aockit.collection import (
    SolutionCollection,
    display_answer,
    format_duration,
    print_timed,
    timed,
)
from aockit.fetcher import DATA_DIR_NAME
from aockit.solution import PuzzleSolution, aoc_puzzle


@aoc_puzzle(day=1, year=2025)
class Summer(PuzzleSolution):
    def part1(self, puzzle):
        return sum(int(line) for line in puzzle.lines())

    def part2(self, puzzle):
        return None


@aoc_puzzle(year=2025)
class Reader02(PuzzleSolution):
    def part1(self, puzzle):
        return puzzle.lines()[0]

    def part2(self, puzzle):
        return "done"


@pytest.fixture
def collection(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for day, text in ((1, "7\n"), (2, "first\nsecond\n")):
        day_dir = tmp_path / DATA_DIR_NAME / "2025" / str(day)
        day_dir.mkdir(parents=True)
        (day_dir / "input").write_text(text, encoding="utf-8")
    result = SolutionCollection()
    result.register(Reader02)
    result.register(Summer)
    return result


def test_timed_returns_result():
    result, elapsed = timed(lambda a, b: a + b, 2, 3)
    assert result == 5
    assert elapsed >= 0


def test_print_timed(capsys):
    assert print_timed("work", str.upper, "abc") == "ABC"
    assert capsys.readouterr().out.startswith("work: ")


def test_format_duration():
    assert format_duration(1.5) == "1.50s"
    assert format_duration(0.0025) == "2.50ms"
    assert format_duration(0) == "0.00ns"


def test_display_answer():
    assert display_answer(Answer(value="x")) == "x"
    assert display_answer(Answer(error=NO_ANSWER)) == NO_ANSWER


def test_get_days_sorted(collection):
    assert collection.get_days() == [1, 2]


def test_run_day_prints_parts(collection, capsys):
    elapsed = collection.run_day(1)
    out = capsys.readouterr().out.splitlines()
    assert elapsed >= 0
    assert out[0] == "Day 1"
    assert out[1] == "Part 1: 7"
    assert out[2] == f"Part 2: {NO_ANSWER}"
    assert out[3].startswith("time: ")


def test_run_all_days_in_order(collection, capsys):
    collection.run()
    out = capsys.readouterr().out
    assert out.index("Day 1") < out.index("Day 2")
    assert "Part 1: first" in out
    assert out.splitlines()[-1].startswith("total_time: ")


def test_run_single_day(collection, capsys):
    collection.run(2)
    out = capsys.readouterr().out
    assert "Day 2" in out
    assert "Day 1" not in out
    assert "total_time" not in out


def test_missing_day(collection):
    with pytest.raises(KeyError, match="Day 9 was not yet created"):
        collection.run_day(9)
    with pytest.raises(KeyError):
        collection.run_day_part1(9)


def test_run_single_parts(collection):
    answer1, time1 = collection.run_day_part1(2)
    answer2, time2 = collection.run_day_part2(2)
    assert answer1 == Answer(value="first")
    assert answer2 == Answer(value="done")
    assert time1 >= 0 and time2 >= 0


def test_prepare_bench(collection):
    part1, part2 = collection.prepare_bench(1)
    assert part1() == Answer(value="7")
    assert part1() == part1()
    assert not part2().ok


def test_register_returns_class(collection):
    assert collection.register(Summer) is Summer
    assert collection.get_days() == [1, 2]