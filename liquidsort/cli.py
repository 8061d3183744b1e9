import signal
import sys

from colorama import Fore, Style, just_fix_windows_console

from liquidsort import constant
from liquidsort.errors import PuzzleError, SearchLimitReached
from liquidsort.game_files import ParsedPuzzle, readPuzzleFile, readPuzzleInput
from liquidsort.helper import parseCount
from liquidsort.puzzle_state import SolveMode
from liquidsort.solution_player import SolutionPlayer
from liquidsort.solver import Solver
from liquidsort.vial_color import formatError


USAGE = f"""
        Usage: liquidsort [PUZZLE_FILE|-] [{'|'.join(SolveMode.getKeys())}] [options]

          PUZZLE_FILE     one container per line, colors from top to bottom (default: stdin)
          -c NUM          capacity of every container (default: {constant.NUM_SPACES_PER_VIAL})
          -i NUM          give up after this many iterations, 0 for no limit (default: {constant.MAX_ITERATIONS})
          -b              step through the moves one at a time
          -s              silent, no progress or search stats
          -h              show this help
        """

GLOBAL_SOLVER_IN_PROGRESS: Solver | None = None
def signalHandler(signum, frame):
  print(f" Emergency quitting for signal ({signal.strsignal(signum)})")
  if GLOBAL_SOLVER_IN_PROGRESS and GLOBAL_SOLVER_IN_PROGRESS.getStats():
    GLOBAL_SOLVER_IN_PROGRESS.printSolveStats()
  sys.exit(130)

def printErrors(errors: list[str]) -> None:
  print(formatError("Found following errors in input:"))
  for error in errors:
    print("  " + error)

def main(argv: list[str] = None) -> int:
  global GLOBAL_SOLVER_IN_PROGRESS

  args = list(sys.argv[1:] if argv is None else argv)
  puzzleFileName: str = None
  solveMode = SolveMode.Interpret(constant.DEFAULT_SOLVE_MODE)
  capacity: int = None
  maxIterations = constant.MAX_ITERATIONS
  stepThrough = False
  silent = False

  # Command line
  while args:
    arg = args.pop(0)
    if arg == "-h" or arg == "-help":
      print(USAGE)
      return 0
    elif arg == "-b":
      stepThrough = True
    elif arg == "-s":
      silent = True
    elif arg == "-c" or arg == "-i":
      value = parseCount(args.pop(0)) if args else None
      if value is None:
        print(formatError(f"Option {arg} requires a number."))
        print(USAGE)
        return 1
      if arg == "-c":
        capacity = value
      else:
        maxIterations = value
    elif SolveMode.hasKey(arg):
      solveMode = SolveMode.Interpret(arg)
    elif arg == "-" or not arg.startswith("-"):
      if puzzleFileName:
        print(formatError(f"Only one puzzle can be solved at a time (got {puzzleFileName} and {arg})."))
        return 1
      puzzleFileName = arg
    else:
      print(formatError("Unrecognized option: " + arg))
      print(USAGE)
      return 1

  # Read initial state
  parsed: ParsedPuzzle
  try:
    if puzzleFileName and puzzleFileName != "-":
      parsed = readPuzzleFile(puzzleFileName, capacity=capacity)
    else:
      parsed = readPuzzleInput(capacity=capacity)
    state = parsed.toState()
  except FileNotFoundError:
    print(formatError(f"No puzzle file exists at {puzzleFileName}"))
    return 1
  except (OSError, UnicodeDecodeError) as e:
    print(formatError(f"Unable to read puzzle file {puzzleFileName} ({e})"))
    return 1
  except PuzzleError as e:
    printErrors(e.errors)
    return 1

  if state.isSolved():
    print("state is already solved!")
    return 0

  # Solve
  solver = GLOBAL_SOLVER_IN_PROGRESS = Solver(silent=silent, maxIterations=maxIterations)
  try:
    solution = solver.solve(state, solveMode)
  except SearchLimitReached as e:
    if not silent: solver.printSolveStats()
    print(Fore.YELLOW + f"Gave up: {e}" + Style.RESET_ALL)
    return 2
  finally:
    GLOBAL_SOLVER_IN_PROGRESS = None

  if not silent: solver.printSolveStats()
  solver.printSolutionReport(solution, parsed.palette)

  if solution and stepThrough:
    SolutionPlayer.Play(solution, parsed.palette)
  return 0

def run() -> None:
  just_fix_windows_console()
  signal.signal(signal.SIGINT, signalHandler)
  sys.exit(main())

if __name__ == "__main__":
  run()
