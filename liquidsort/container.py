from enum import Enum, auto

from liquidsort.errors import IllegalPourError


Color = int

class Constraint(Enum):
  NONE = auto()
  MUST_FILL = auto()  # Must end non-empty (and therefore sorted)
  MUST_EMPTY = auto() # Must end with nothing in it

class Container:
  """
  One stack of colored units. The top of the stack is the end of `content`.

  Containers held by a `PuzzleState` are never mutated. `pourInto` is only
  ever invoked on fresh copies made while building a successor state.
  """
  capacity: int
  constraint: Constraint
  _content: list[Color]

  def __init__(self, content: list[Color], capacity: int, constraint: Constraint = Constraint.NONE):
    self._content = list(content)
    self.capacity = capacity
    self.constraint = constraint

  def copy(self) -> "Container":
    return Container(self._content, self.capacity, self.constraint)

  @property
  def content(self) -> tuple[Color, ...]:
    return tuple(self._content)

  def __len__(self) -> int:
    return len(self._content)

  def topColor(self) -> Color | None:
    return self._content[-1] if self._content else None
  def topRunLength(self) -> int:
    """The number of units of the top color sitting contiguously on top."""
    if not self._content:
      return 0
    top = self._content[-1]
    count = 0
    for color in reversed(self._content):
      if color != top:
        break
      count += 1
    return count
  def freeSpaces(self) -> int:
    return self.capacity - len(self._content)

  def isEmpty(self) -> bool:
    return not self._content
  def isFull(self) -> bool:
    return len(self._content) == self.capacity
  def isSameColor(self) -> bool:
    # Only meaningful for a non-empty container
    first = self._content[0]
    return all(color == first for color in self._content)
  def isSorted(self) -> bool:
    return self.isFull() and not self.isEmpty() and self.isSameColor()

  def mustFill(self) -> bool:
    return self.constraint == Constraint.MUST_FILL
  def mustEmpty(self) -> bool:
    return self.constraint == Constraint.MUST_EMPTY

  def canPourInto(self, other: "Container") -> bool:
    if self.isEmpty():
      return False
    if self.isSorted():
      return False # Pouring out of a finished container only undoes progress
    if other.isFull():
      return False
    if other.isEmpty():
      return True
    return self.topColor() == other.topColor()

  def pourInto(self, other: "Container") -> int:
    """
    Moves the whole top run of one color into `other`, as much as it has room for.
    Returns the number of units moved.
    """
    if other is self:
      raise IllegalPourError(f"Cannot pour {self} into itself")
    if not self.canPourInto(other):
      raise IllegalPourError(f"Cannot pour from {self} into {other}")

    moved = 0
    while self.canPourInto(other):
      other._content.append(self._content.pop())
      moved += 1
    return moved

  def encode(self) -> tuple[int, tuple[Color, ...]]:
    """The value the canonical state hash is built from."""
    return (self.constraint.value, tuple(self._content))

  def __eq__(self, other: object) -> bool:
    if isinstance(other, Container):
      return self.capacity == other.capacity and self.encode() == other.encode()
    return False
  def __hash__(self) -> int:
    return hash((self.capacity, self.encode()))

  def __str__(self) -> str:
    marker = ""
    if self.mustFill():
      marker = " must fill"
    elif self.mustEmpty():
      marker = " must empty"
    return f"Container({list(self._content)}/{self.capacity}{marker})"
  __repr__ = __str__
