from typing import TYPE_CHECKING

if TYPE_CHECKING:
  from liquidsort.puzzle_state import PuzzleState


Score = tuple[int, ...]

class ScoredState:
  """
  A state paired with its precomputed ordering key, for use in a `heapq` frontier.

  Higher scores pop first. Equal scores pop in insertion order, so two different
  states with the same score are never treated as interchangeable.
  """
  state: "PuzzleState"
  score: Score
  order: int

  def __init__(self, state: "PuzzleState", score: Score, order: int):
    self.state = state
    self.score = score
    self.order = order

  def __lt__(self, other: "ScoredState") -> bool:
    # heapq pops the smallest item, so "less than" means "better"
    if self.score != other.score:
      return self.score > other.score
    return self.order < other.order

  def __repr__(self) -> str:
    return f"ScoredState(score={self.score}, order={self.order}, moves={self.state.numMoves()})"
