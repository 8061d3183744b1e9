from time import time


def parseCount(text: str) -> int | None:
  """A non-negative whole number written in ASCII digits, or None when the text is anything else."""
  if not text.isascii() or not text.isdecimal():
    return None
  return int(text)

def fPercent(part: int, whole: int, roundDigits=1) -> str:
  if not whole: return "--%"
  return f"{round(part / whole * 100, roundDigits)}%"

def getTimeRunning(startTime: float, endTime: float = None) -> tuple[float, float]:
  '''(seconds, minutes) since startTime, up to now if the run hasn't ended'''
  elapsed = (endTime or time()) - startTime
  return (round(elapsed, 1), round(elapsed / 60, 1))
