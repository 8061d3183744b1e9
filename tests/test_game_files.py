import pytest

from liquidsort.container import Constraint
from liquidsort.errors import PuzzleError
from liquidsort.game_files import ColorPalette, ParsedPuzzle, analyzePuzzle, readPuzzle, readPuzzleFile, readPuzzleText
from liquidsort.puzzle_state import validatePuzzle

SWAPPED_PAIR = """
# Two containers, tops listed first
capacity 2
g r
r g
"""


def names(parsed, content):
  return [parsed.palette.colorName(color) for color in content]


def test_palette_assigns_ids_in_first_seen_order():
  palette = ColorPalette()
  assert palette.colorId("red") == 1
  assert palette.colorId("Blue") == 2
  assert palette.colorId("RED") == 1
  assert palette.colorName(2) == "BLUE"
  assert palette.colorName(9) == "9"
  assert palette.names() == ["RED", "BLUE"]
  assert len(palette) == 2


def test_reads_containers_bottom_first():
  parsed = readPuzzleText(SWAPPED_PAIR)

  assert parsed.capacity == 2
  assert [names(parsed, content) for content in parsed.contents] == [["R", "G"], ["G", "R"]]
  assert parsed.constraints == [Constraint.NONE, Constraint.NONE]


def test_builds_initial_state_with_scratch_containers():
  state = readPuzzleText(SWAPPED_PAIR).toState()
  assert state.numContainers() == 4
  assert state.capacity == 2
  assert not state.isSolved()


def test_markers_and_placeholders():
  parsed = readPuzzleText("""
capacity 3
* r r r
! - b b b
.
g g g
""")

  assert parsed.constraints == [Constraint.MUST_FILL, Constraint.MUST_EMPTY, Constraint.NONE, Constraint.NONE]
  assert names(parsed, parsed.contents[1]) == ["B", "B", "B"]
  assert parsed.contents[2] == []


def test_default_capacity_and_override():
  text = "r r r r\nb b b b"
  assert readPuzzleText(text).capacity == 4
  with pytest.raises(PuzzleError):
    readPuzzleText(text, capacity=2)
  assert readPuzzleText("capacity 4\nr r\nb b", capacity=2).capacity == 2


def test_conflicting_markers_are_reported():
  with pytest.raises(PuzzleError) as excinfo:
    readPuzzleText("capacity 2\n* ! r r")
  assert any("both full and empty" in error for error in excinfo.value.errors)


def test_every_problem_is_reported_at_once():
  with pytest.raises(PuzzleError) as excinfo:
    readPuzzleText("capacity 2\nr r r\nb\n! g g\n! y y\n! p p")

  errors = excinfo.value.errors
  assert any("more than the capacity" in error for error in errors)
  assert any("Color R appears too many times (3 instead of 2)" in error for error in errors)
  assert any("Color B appears too few times (1 instead of 2)" in error for error in errors)
  assert any("end empty" in error for error in errors)


def test_malformed_capacity_is_reported():
  with pytest.raises(PuzzleError) as excinfo:
    readPuzzleText("capacity two\nr r r r")
  assert any("Malformed capacity" in error for error in excinfo.value.errors)

  with pytest.raises(PuzzleError):
    readPuzzleText("capacity 0\n.")


def test_empty_puzzle_is_reported():
  with pytest.raises(PuzzleError) as excinfo:
    readPuzzleText("# nothing here\n")
  assert "The puzzle has no containers" in excinfo.value.errors


def test_interactive_input_ends_at_blank_line(capsys):
  lines = iter(["r r", "", "b b"])
  parsed = readPuzzle(lambda: next(lines, None), capacity=2, userInteraction=True)

  assert len(parsed.contents) == 1
  assert "Container 1" in capsys.readouterr().out


def test_reads_puzzle_file(tmp_path):
  puzzleFile = tmp_path / "level.txt"
  puzzleFile.write_text(SWAPPED_PAIR)

  parsed = readPuzzleFile(str(puzzleFile))
  assert len(parsed.contents) == 2


def test_constrained_empty_container():
  parsed = readPuzzleText("capacity 2\ng r\nr g\n* .")
  assert parsed.contents[2] == []
  assert parsed.constraints[2] == Constraint.MUST_FILL


@pytest.mark.parametrize("header", ["capacity ²", "capacity ½", "capacity -2", "capacity 2 3"])
def test_capacity_must_be_plain_digits(header):
  with pytest.raises(PuzzleError) as excinfo:
    readPuzzleText(header + "\ng r\nr g\n")
  assert any("Malformed capacity" in error for error in excinfo.value.errors)


def test_repeated_capacity_must_agree():
  assert readPuzzleText("capacity 2\ncapacity 2\nr r").capacity == 2
  with pytest.raises(PuzzleError) as excinfo:
    readPuzzleText("capacity 2\ncapacity 3\nr r")
  assert "Capacity declared twice (2 and 3)" in excinfo.value.errors


def test_reader_reports_the_same_rules_as_the_state():
  parsed = ParsedPuzzle([[1, 1, 1], [2]], [Constraint.NONE, Constraint.NONE], 2, ColorPalette())
  parsed.palette.colorId("r")
  parsed.palette.colorId("b")

  countColors, errors = analyzePuzzle(parsed)
  assert countColors == {"R": 3, "B": 1}
  assert [e.replace("Color R", "Color 1").replace("Color B", "Color 2") for e in errors] == validatePuzzle(parsed.contents, 2, parsed.constraints)
  with pytest.raises(PuzzleError) as excinfo:
    parsed.toState()
  assert len(excinfo.value.errors) == len(errors)
