from time import time
from typing import TypedDict
import heapq

from colorama import Fore, Style

from liquidsort.constant import MAX_ITERATIONS, REPORT_ITERATION_FREQ
from liquidsort.errors import SearchLimitReached
from liquidsort.helper import fPercent, getTimeRunning
from liquidsort.puzzle_state import PuzzleState, SolveMode
from liquidsort.scored_state import ScoredState
from liquidsort.vial_color import formatMoves


class SolutionStats(TypedDict):
  startTime: float
  endTime: float
  solveMode: SolveMode
  solution: PuzzleState | None

  numIterations: int
  numStatesGenerated: int
  numDuplicateStates: int
  maxFrontierLength: int
  frontierLength: int
  numVisited: int

class Solver:
  """
  Best-first search over puzzle states.

  Each call to `solve()` owns its frontier and visited set; nothing is shared
  between calls. The loop ends when a solved state is popped (returned), the
  frontier runs dry (`None`), or the iteration ceiling is hit (`SearchLimitReached`).
  """

  # Solver config
  silent: bool
  maxIterations: int
  reportIterationFreq: int

  # Solving data
  lastSolutionStats: SolutionStats = None
  _frontier: list[ScoredState]
  _visited: set[tuple]
  _pushCount: int

  def __init__(self, silent = False, maxIterations = MAX_ITERATIONS, reportIterationFreq = REPORT_ITERATION_FREQ) -> None:
    self.silent = silent
    self.maxIterations = maxIterations
    self.reportIterationFreq = reportIterationFreq

  def getStats(self) -> SolutionStats:
    return self.lastSolutionStats

  # Solve method hooks for major events
  def onStartSolve(self, state: PuzzleState) -> None:
    pass
  def onNextIteration(self, current: PuzzleState, numIterations: int) -> None:
    if self.silent or numIterations % self.reportIterationFreq != 0:
      return
    print(f"Checked {numIterations} iterations. \t mvs: {current.numMoves()} \t queued: {len(self._frontier)}")
  def onEndSolve(self) -> None:
    pass

  def solve(self, initial: PuzzleState, mode: "SolveMode | str" = SolveMode.DEFAULT) -> PuzzleState | None:
    """Returns the first solved state reached, or None when no solution exists."""
    mode = SolveMode.Interpret(mode)

    st = self.lastSolutionStats = SolutionStats(
      startTime = time(),
      endTime = None,
      solveMode = mode,
      solution = None,

      numIterations = 0,
      numStatesGenerated = 0,
      numDuplicateStates = 0,
      maxFrontierLength = 1, # Because we added an initial
      frontierLength = 0,
      numVisited = 0,
    )

    self._frontier = list()
    self._visited = set()
    self._pushCount = 0
    self._push(initial, mode)
    self._visited.add(initial.canonicalKey())

    self.onStartSolve(initial)
    try:
      while self._frontier:
        current = heapq.heappop(self._frontier).state

        st["numIterations"] += 1
        self.onNextIteration(current, st["numIterations"])

        if current.isSolved():
          st["solution"] = current
          return current

        if self.maxIterations and st["numIterations"] >= self.maxIterations:
          self._finishStats()
          raise SearchLimitReached(self.maxIterations, dict(st))

        for nextState in current.generateNextStates():
          st["numStatesGenerated"] += 1

          key = nextState.canonicalKey()
          if key in self._visited:
            st["numDuplicateStates"] += 1
            continue
          self._visited.add(key)
          self._push(nextState, mode)

        st["maxFrontierLength"] = max(st["maxFrontierLength"], len(self._frontier))

      return None # Exhausted
    finally:
      self._finishStats()
      self.onEndSolve()

  def _push(self, state: PuzzleState, mode: SolveMode) -> None:
    heapq.heappush(self._frontier, ScoredState(state, state.score(mode), self._pushCount))
    self._pushCount += 1
  def _finishStats(self) -> None:
    st = self.lastSolutionStats
    st["endTime"] = time()
    st["frontierLength"] = len(self._frontier)
    st["numVisited"] = len(self._visited)

  def printSolveStats(self) -> None:
    st = self.getStats()
    if not st:
      print("No search has been run.")
      return

    secsSearching, minsSearching = getTimeRunning(st["startTime"], st["endTime"])
    solution = st["solution"]

    print(f"""
          Finished search algorithm:

            {st['solveMode'].name.lower()   }\t   Solving mode
            {solution.numMoves() if solution else "--"}\t   Solution moves
            {secsSearching                  }\t   Seconds searching
            {minsSearching                  }\t   Minutes searching
            {st['numIterations']            }\t   Num iterations
            {st['frontierLength']           }\t   Ending queue length
            {st['maxFrontierLength']        }\t   Max queue length
            {st['numStatesGenerated']       }\t   States generated
            {st['numDuplicateStates']       }\t   Num duplicate states
            {fPercent(st['numDuplicateStates'], st['numStatesGenerated'])}\t   Percent duplicate states
            {st['numVisited']               }\t   Num states visited
          """)
  def printSolutionReport(self, solution: PuzzleState | None, palette = None) -> None:
    if solution is None:
      print(Fore.YELLOW + "No solution!" + Style.RESET_ALL)
      return
    if not solution.history:
      print("state is already solved!")
      return

    print(f"Found solution in {solution.numMoves()} steps:")
    print(formatMoves(solution, palette))
