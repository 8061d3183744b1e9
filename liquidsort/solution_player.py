from colorama import Style
from readchar import key, readkey

from liquidsort.constant import USE_READCHAR
from liquidsort.puzzle_state import MoveInfo, PuzzleState
from liquidsort.vial_color import formatMoveInfo, formatVialColor, getColorName


class SolutionPlayer:
  """Steps through a solution one move at a time."""
  solution: PuzzleState
  palette: object
  _steps: list[MoveInfo]
  _currentStep: int

  @staticmethod
  def Play(solution: PuzzleState, palette = None) -> None:
    player = SolutionPlayer(solution, palette)
    player.start()

  def __init__(self, solution: PuzzleState, palette = None) -> None:
    self.solution = solution
    self.palette = palette
    self._steps = list(solution.replay())
    self._currentStep = 0

  def start(self) -> None:
    if not self._steps:
      print("No steps to display.")
      return

    print("""
          Step through the solution:
          Space/Enter/→   next move
          p/←             previous move
          q               quit
          """)
    self.displayCurrent()

    while True:
      k = readkey() if USE_READCHAR else input()

      if k == "q" or k == "Q":
        break
      elif k == " " or k == "n" or k == "":
        if not self.next(): break
      elif USE_READCHAR and k in (key.ENTER, key.RIGHT, key.DOWN):
        if not self.next(): break
      elif k == "p" or k == "b":
        self.previous()
      elif USE_READCHAR and k in (key.LEFT, key.UP):
        self.previous()
      else:
        print(f"Unrecognized key ({k})")

    print("Goodbye.")

  def next(self) -> bool:
    """Advances one move. Returns False once the last move has been passed."""
    if self._currentStep >= len(self._steps) - 1:
      print(Style.BRIGHT + "DONE" + Style.NORMAL)
      return False
    self._currentStep += 1
    self.displayCurrent()
    return True
  def previous(self) -> None:
    if self._currentStep == 0:
      print("Already at the first step.")
      return
    self._currentStep -= 1
    self.displayCurrent()

  def currentLine(self) -> str:
    info = self._steps[self._currentStep]
    colorName = getColorName(info.color, self.palette)
    start, end = info.transition.asMove()
    move = formatVialColor(colorName, f"{start}→{end}", ljust=8)
    return f"Step {self._currentStep + 1} of {len(self._steps)}: {move} {formatMoveInfo(info, self.palette)}"
  def displayCurrent(self) -> None:
    print(self.currentLine())
