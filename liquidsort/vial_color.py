from collections import defaultdict
from typing import TYPE_CHECKING

from colorama import Back, Fore, Style

if TYPE_CHECKING:
  from liquidsort.game_files import ColorPalette
  from liquidsort.puzzle_state import MoveInfo, PuzzleState


COLOR_CODES = defaultdict(str, {
  "M": Back.CYAN,                                 # Mint
  "G": Back.LIGHTBLACK_EX + Fore.WHITE,           # Gray
  "O": Back.YELLOW + Fore.RED,                    # Orange
  "Y": Back.YELLOW + Fore.BLACK,                  # Yellow
  "R": Back.RED + Fore.WHITE,                     # Red
  "P": Back.BLACK  + Fore.MAGENTA,                # Purple
  "PK": Back.GREEN + Fore.BLACK,                  # Puke
  "PN": Back.MAGENTA,                             # Pink
  "BR": Back.WHITE + Fore.MAGENTA,                # Brown
  "LB": Fore.CYAN + Back.WHITE,                   # Light Blue
  "GN": Back.BLACK + Fore.GREEN,                  # Dark Green
  "B": Back.BLUE + Fore.WHITE,                    # Blue
  "ER": Fore.RED + Style.BRIGHT,                  # Errors
})
COLOR_CODES.update({
  "MINT": COLOR_CODES["M"],
  "GRAY": COLOR_CODES["G"],
  "ORANGE": COLOR_CODES["O"],
  "YELLOW": COLOR_CODES["Y"],
  "RED": COLOR_CODES["R"],
  "PURPLE": COLOR_CODES["P"],
  "PINK": COLOR_CODES["PN"],
  "BROWN": COLOR_CODES["BR"],
  "GREEN": COLOR_CODES["GN"],
  "BLUE": COLOR_CODES["B"],
})

_COMPLETE_TERM = "complete"
_VACATED_TERM = "vacated"
_STARTED_TERM = "occupied"
COMPLETE_STR = Style.BRIGHT + _COMPLETE_TERM + Style.NORMAL
VACATED_STR = Style.DIM + _VACATED_TERM + Style.NORMAL
STARTED_STR = Style.DIM + _STARTED_TERM + Style.NORMAL
MOVE_WIDTH = 14 # len("(01) -> (02)") plus padding


def formatVialColor(color: str, text: str = "", ljust=0) -> str:
  """Formats a color for printing. If text is provided, it will autoreset the style afterwards as well."""
  out = COLOR_CODES[color.upper()] if color else ""
  if text:
    out += text + Style.RESET_ALL
    out += " " * (ljust - len(text))
  return out

def formatError(text: str) -> str:
  return formatVialColor("er", text)

def getColorName(color: int, palette: "ColorPalette" = None) -> str:
  if palette is None:
    return str(color)
  return palette.colorName(color)

def formatMoveInfo(info: "MoveInfo", palette: "ColorPalette" = None) -> str:
  colorName = getColorName(info.color, palette)

  extraStr = ""
  if info.isComplete:
    extraStr = COMPLETE_STR
  elif info.vacatedVial:
    extraStr = VACATED_STR
  elif info.startedVial:
    extraStr = STARTED_STR

  numStr = Style.BRIGHT + str(info.numMoved) + Style.NORMAL if info.numMoved > 1 else str(info.numMoved)
  if extraStr: extraStr = " " + extraStr
  return f"({numStr} {formatVialColor(colorName, colorName)}{extraStr})"

def formatMoves(solution: "PuzzleState", palette: "ColorPalette" = None) -> str:
  """One line per move: the 1-based transition, then what it poured."""
  lines = list()
  for info in solution.replay():
    colorName = getColorName(info.color, palette)
    moveString = "- " + formatVialColor(colorName, str(info.transition), ljust=MOVE_WIDTH)
    lines.append(moveString + formatMoveInfo(info, palette))
  return "\n".join(lines)
