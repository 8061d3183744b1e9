from collections import defaultdict
from enum import Enum, auto
from typing import Callable, Iterator
import itertools

from liquidsort.constant import MAX_MUST_EMPTY, NUM_SCRATCH_CONTAINERS
from liquidsort.container import Color, Constraint, Container
from liquidsort.errors import IllegalPourError, PuzzleError
from liquidsort.scored_state import Score
from liquidsort.transition import Transition


class SolveMode(Enum):
  OPTIMAL = auto() # Best-first on moves taken + unsorted containers
  FAST = auto()    # Greedy on sorted containers
  DEFAULT = OPTIMAL

  @classmethod
  def Interpret(cls, name: "str | SolveMode") -> "SolveMode":
    if isinstance(name, SolveMode):
      return name
    return SolveMode[name.strip().upper()]

  @classmethod
  def hasKey(cls, key: str) -> bool:
    return key.strip().upper() in cls.__members__

  @classmethod
  def getKeys(cls) -> list[str]:
    return [key.lower() for key, mode in cls.__members__.items() if mode.name == key]

class MoveInfo:
  """What a single move did, as reported to the user."""
  transition: Transition
  color: Color
  numMoved: int
  isComplete: bool
  vacatedVial: bool
  startedVial: bool

  def __init__(self, transition: Transition, color: Color, numMoved: int, isComplete: bool, vacatedVial: bool, startedVial: bool):
    self.transition = transition
    self.color = color
    self.numMoved = numMoved
    self.isComplete = isComplete
    self.vacatedVial = vacatedVial
    self.startedVial = startedVial

def validatePuzzle(contents: list[list[Color]], capacity: int, constraints: list[Constraint] = None, colorName: Callable[[Color], str] = str) -> list[str]:
  """Collects every structural problem with a puzzle definition. Contents are listed bottom first."""
  errors = list()

  if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
    errors.append(f"Capacity must be a positive whole number (got {capacity!r})")
    return errors
  if not contents:
    errors.append("The puzzle has no containers")
  if constraints is not None and len(constraints) != len(contents):
    errors.append(f"Got {len(constraints)} constraints for {len(contents)} containers")
    constraints = None

  countColors = defaultdict(int)
  for index, content in enumerate(contents):
    if len(content) > capacity:
      errors.append(f"Container {index + 1} holds {len(content)} units, more than the capacity ({capacity})")
    for color in content:
      if not isinstance(color, int) or isinstance(color, bool) or color < 1:
        errors.append(f"Container {index + 1} holds an invalid color id ({color!r})")
        continue
      countColors[color] += 1

  for color, count in sorted(countColors.items()):
    if count != capacity:
      amount = "too many" if count > capacity else "too few"
      errors.append(f"Color {colorName(color)} appears {amount} times ({count} instead of {capacity})")

  numMustEmpty = sum(1 for constraint in (constraints or []) if constraint == Constraint.MUST_EMPTY)
  if numMustEmpty > MAX_MUST_EMPTY:
    errors.append(f"At most {MAX_MUST_EMPTY} containers may be required to end empty (got {numMustEmpty})")

  return errors

class PuzzleState:
  """
  All containers, plus the transitions that produced them from the initial configuration.

  A state is never mutated once it exists: `apply()` builds a new state and
  only mutates fresh copies of the two containers involved in the pour.
  """
  containers: tuple[Container, ...]
  history: tuple[Transition, ...]
  root: "PuzzleState"

  @staticmethod
  def Create(contents: list[list[Color]], capacity: int, constraints: list[Constraint] = None) -> "PuzzleState":
    """
    Builds the initial state. Contents are listed bottom first.
    Raises `PuzzleError` with every problem found.
    """
    errors = validatePuzzle(contents, capacity, constraints)
    if errors:
      raise PuzzleError(errors)

    if constraints is None:
      constraints = [Constraint.NONE] * len(contents)
    containers = [Container(content, capacity, constraint) for content, constraint in zip(contents, constraints)]
    containers.extend(Container([], capacity) for _ in range(NUM_SCRATCH_CONTAINERS))
    return PuzzleState(tuple(containers), ())

  def __init__(self, containers: tuple[Container, ...], history: tuple[Transition, ...], root: "PuzzleState" = None):
    self.containers = containers
    self.history = history
    self.root = self if root is None else root

  @property
  def transitions(self) -> tuple[Transition, ...]:
    return self.history
  @property
  def capacity(self) -> int:
    return self.containers[0].capacity

  def numContainers(self) -> int:
    return len(self.containers)
  def numMoves(self) -> int:
    return len(self.history)
  def sortedCount(self) -> int:
    return sum(1 for c in self.containers if c.isSorted())
  def emptyCount(self) -> int:
    return sum(1 for c in self.containers if c.isEmpty())
  def unsortedCount(self) -> int:
    """Containers that still hold a mix, or an unfinished run."""
    return sum(1 for c in self.containers if not c.isEmpty() and not c.isSorted())
  def mustFillSatisfiedCount(self) -> int:
    return sum(1 for c in self.containers if c.mustFill() and c.isSorted())
  def mustEmptySatisfiedCount(self) -> int:
    return sum(1 for c in self.containers if c.mustEmpty() and c.isEmpty())

  def isSolved(self) -> bool:
    allSorted = self.emptyCount() + self.sortedCount() == len(self.containers)
    gotFills = not any(c.mustFill() and c.isEmpty() for c in self.containers)
    gotEmpties = not any(c.mustEmpty() and not c.isEmpty() for c in self.containers)
    return allSorted and gotFills and gotEmpties

  def score(self, mode: SolveMode = SolveMode.DEFAULT) -> Score:
    """The frontier ordering key. Compared lexicographically, higher is popped first."""
    estimate = -(self.numMoves() + self.unsortedCount())
    tieBreakers = (self.mustEmptySatisfiedCount(), self.mustFillSatisfiedCount())
    if mode == SolveMode.FAST:
      return (self.sortedCount(), estimate) + tieBreakers
    return (estimate,) + tieBreakers

  def enumerateMoves(self) -> list[Transition]:
    moves = list()
    numContainers = len(self.containers)
    for start, end in itertools.product(range(numContainers), range(numContainers)):
      if start == end:
        continue
      if self.containers[start].canPourInto(self.containers[end]):
        moves.append(Transition(start, end))
    return moves

  def apply(self, transition: Transition) -> "PuzzleState":
    start, end = transition.source(), transition.destination()
    if start == end:
      raise IllegalPourError(f"Transition {transition} pours a container into itself")
    if not (0 <= start < len(self.containers) and 0 <= end < len(self.containers)):
      raise IllegalPourError(f"Transition {transition} is outside of the {len(self.containers)} containers")

    # Only the two copies are mutated, the rest are shared with the parent
    containers = list(self.containers)
    source = containers[start].copy()
    destination = containers[end].copy()
    source.pourInto(destination)
    containers[start] = source
    containers[end] = destination

    return PuzzleState(tuple(containers), self.history + (transition,), self.root)

  def generateNextStates(self) -> list["PuzzleState"]:
    return [self.apply(move) for move in self.enumerateMoves()]

  def canonicalKey(self) -> tuple:
    """Container encodings in a fixed order, so the position of a container doesn't matter."""
    return tuple(sorted(container.encode() for container in self.containers))
  def canonicalHash(self) -> int:
    return hash(self.canonicalKey())

  def replay(self) -> Iterator[MoveInfo]:
    """Replays the history from the initial state, describing each move."""
    current = self.root
    for transition in self.history:
      start, end = transition.source(), transition.destination()
      source = current.containers[start]
      color = source.topColor()
      following = current.apply(transition)
      numMoved = len(following.containers[end]) - len(current.containers[end])

      isComplete = following.containers[end].isSorted()
      vacatedVial = following.containers[start].isEmpty()
      startedVial = current.containers[end].isEmpty()
      yield MoveInfo(transition, color, numMoved, isComplete, vacatedVial, startedVial)
      current = following

  def __eq__(self, other: object) -> bool:
    """Equal when the containers hold the same things, wherever they are."""
    if isinstance(other, PuzzleState):
      return self.canonicalKey() == other.canonicalKey()
    return False
  def __hash__(self) -> int:
    return self.canonicalHash()

  def __str__(self) -> str:
    out = list()
    for container in self.containers:
      out.append("[" + " ".join(map(str, container.content)) + "]")
    return " ".join(out)
  def __repr__(self) -> str:
    return f"PuzzleState({self}, moves={self.numMoves()})"
