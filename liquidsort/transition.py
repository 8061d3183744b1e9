
class Transition:
  """A single pour between two positions of the state it was generated from. Never mutated."""
  _source: int
  _destination: int

  def __init__(self, source: int, destination: int):
    self._source = source
    self._destination = destination

  def source(self) -> int:
    return self._source
  def destination(self) -> int:
    return self._destination

  def asMove(self, oneBased = True) -> tuple[int, int]:
    offset = 1 if oneBased else 0
    return (self._source + offset, self._destination + offset)

  def __eq__(self, other: object) -> bool:
    if isinstance(other, Transition):
      return self._source == other._source and self._destination == other._destination
    return False
  def __hash__(self) -> int:
    return hash((self._source, self._destination))

  def __str__(self) -> str:
    return f"({self._source + 1:02}) -> ({self._destination + 1:02})"
  def __repr__(self) -> str:
    return f"Transition({self._source}, {self._destination})"
