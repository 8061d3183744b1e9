import heapq

from liquidsort.scored_state import ScoredState
from liquidsort.transition import Transition


def test_accessors_are_zero_based():
  transition = Transition(0, 2)
  assert transition.source() == 0
  assert transition.destination() == 2
  assert transition.asMove() == (1, 3)
  assert transition.asMove(oneBased=False) == (0, 2)


def test_display_is_one_based_and_padded():
  assert str(Transition(0, 2)) == "(01) -> (03)"
  assert str(Transition(9, 11)) == "(10) -> (12)"


def test_equality_and_hash():
  assert Transition(1, 2) == Transition(1, 2)
  assert Transition(1, 2) != Transition(2, 1)
  assert len({Transition(1, 2), Transition(1, 2), Transition(2, 1)}) == 2


def test_scored_states_pop_highest_score_first():
  frontier = []
  heapq.heappush(frontier, ScoredState("low", (-5, 0, 0), 0))
  heapq.heappush(frontier, ScoredState("high", (-2, 0, 0), 1))
  heapq.heappush(frontier, ScoredState("tie-break", (-2, 1, 0), 2))

  popped = [heapq.heappop(frontier).state for _ in range(3)]
  assert popped == ["tie-break", "high", "low"]


def test_equal_scores_pop_in_insertion_order():
  frontier = []
  for order, name in enumerate(["first", "second", "third"]):
    heapq.heappush(frontier, ScoredState(name, (-3, 0, 0), order))

  popped = [heapq.heappop(frontier).state for _ in range(3)]
  assert popped == ["first", "second", "third"]
