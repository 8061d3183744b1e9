from collections import defaultdict
from typing import Callable

from colorama import Fore

from liquidsort.constant import CAPACITY_KEYWORD, COMMENT_MARKER, EMPTY_LINE_MARKER, EMPTY_MARKER, MUST_EMPTY_MARKER, MUST_FILL_MARKER, NUM_SPACES_PER_VIAL
from liquidsort.container import Color, Constraint
from liquidsort.errors import PuzzleError
from liquidsort.helper import parseCount
from liquidsort.puzzle_state import PuzzleState, validatePuzzle


class ColorPalette:
  """Maps color names to the positive ids the solver works with, in first-seen order."""
  _ids: dict[str, Color]
  _names: dict[Color, str]

  def __init__(self) -> None:
    self._ids = dict()
    self._names = dict()

  def colorId(self, name: str) -> Color:
    name = name.upper()
    if name not in self._ids:
      color = len(self._ids) + 1
      self._ids[name] = color
      self._names[color] = name
    return self._ids[name]
  def colorName(self, color: Color) -> str:
    return self._names.get(color, str(color))
  def names(self) -> list[str]:
    return list(self._ids.keys())

  def __len__(self) -> int:
    return len(self._ids)

class ParsedPuzzle:
  contents: list[list[Color]] # Bottom first
  constraints: list[Constraint]
  capacity: int
  palette: ColorPalette

  def __init__(self, contents: list[list[Color]], constraints: list[Constraint], capacity: int, palette: ColorPalette):
    self.contents = contents
    self.constraints = constraints
    self.capacity = capacity
    self.palette = palette

  def toState(self) -> PuzzleState:
    return PuzzleState.Create(self.contents, self.capacity, self.constraints)


# Read puzzle methods
def readPuzzleText(text: str, capacity: int = None) -> ParsedPuzzle:
  lines = iter(text.splitlines())
  return readPuzzle(lambda: next(lines, None), capacity=capacity)
def readPuzzleFile(puzzleFileName: str, capacity: int = None) -> ParsedPuzzle:
  with open(puzzleFileName, "r", encoding="utf-8") as puzzleFile:
    text = puzzleFile.read()
  return readPuzzleText(text, capacity=capacity)
def readPuzzleInput(capacity: int = None) -> ParsedPuzzle:
  printPuzzleEntryIntro()
  def nextLine() -> str | None:
    try:
      return input()
    except EOFError:
      return None
  return readPuzzle(nextLine, capacity=capacity, userInteraction=True)

def readPuzzle(nextLine: Callable[[], str | None], capacity: int = None, userInteraction = False) -> ParsedPuzzle:
  """
  Reads the puzzle one line at a time by invoking a configurable `nextLine()` method,
  which returns None at the end of input.

  Each line is a container with its colors listed from top to bottom.
  Users end their input with a blank line. Files may contain blank lines and comments.

  Raises `PuzzleError` with every problem found.
  """
  palette = ColorPalette()
  contents: list[list[Color]] = []
  constraints: list[Constraint] = []
  errors: list[str] = []
  declaredCapacity: int = None

  while True:
    if userInteraction: print(f"Container {len(contents) + 1}: ")
    line = nextLine()
    if line is None:
      break
    line = line.strip()
    if not line:
      if userInteraction:
        break
      continue
    if line.startswith(COMMENT_MARKER):
      continue

    words = line.split()
    if words[0].lower() == CAPACITY_KEYWORD:
      value = parseCount(words[1]) if len(words) == 2 else None
      if value is None:
        errors.append(f"Malformed capacity line: '{line}'")
      elif declaredCapacity is not None and value != declaredCapacity:
        errors.append(f"Capacity declared twice ({declaredCapacity} and {value})")
      else:
        declaredCapacity = value
      continue

    lineNum = len(contents) + 1
    if line == EMPTY_LINE_MARKER:
      contents.append([])
      constraints.append(Constraint.NONE)
      continue

    mustFill = MUST_FILL_MARKER in words
    mustEmpty = MUST_EMPTY_MARKER in words
    constraint = Constraint.NONE
    if mustFill and mustEmpty:
      errors.append(f"Container {lineNum} can't be required to end both full and empty")
    elif mustFill:
      constraint = Constraint.MUST_FILL
    elif mustEmpty:
      constraint = Constraint.MUST_EMPTY

    colorWords = [w for w in words if w not in (MUST_FILL_MARKER, MUST_EMPTY_MARKER, EMPTY_MARKER, EMPTY_LINE_MARKER)]
    # Listed top first, stored bottom first
    contents.append([palette.colorId(w) for w in reversed(colorWords)])
    constraints.append(constraint)

  if capacity is None:
    capacity = declaredCapacity if declaredCapacity is not None else NUM_SPACES_PER_VIAL

  parsed = ParsedPuzzle(contents, constraints, capacity, palette)
  errors.extend(analyzePuzzle(parsed)[1])
  if errors:
    raise PuzzleError(errors)
  return parsed

def analyzePuzzle(parsed: ParsedPuzzle) -> tuple[dict[str, int], list[str]]: # (dict[color, occurrences], list[error strings])
  countColors = defaultdict(int)
  for content in parsed.contents:
    for color in content:
      countColors[parsed.palette.colorName(color)] += 1

  errors = validatePuzzle(parsed.contents, parsed.capacity, parsed.constraints, colorName=parsed.palette.colorName)
  return (countColors, errors)

def printPuzzleEntryIntro() -> None:
  print(Fore.CYAN +
    "On the next lines, type the colors in each container from top to bottom.\n" +
   f"  Add {MUST_FILL_MARKER} to a line if the container must end full, or {MUST_EMPTY_MARKER} if it must end empty.\n" +
   f"  Type {EMPTY_LINE_MARKER} (period) for a container that starts empty.\n" +
    "  Type a blank line when all containers have been entered.\n" + Fore.RESET)
