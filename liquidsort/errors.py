
class PuzzleError(ValueError):
  """A puzzle definition that can't be searched. Holds every problem found, not just the first."""
  errors: list[str]

  def __init__(self, errors: list[str]):
    self.errors = list(errors)
    super().__init__("Invalid puzzle:\n  " + "\n  ".join(self.errors))

class IllegalPourError(RuntimeError):
  """A pour was requested that the rules don't allow. Indicates a bug in move generation."""

class SearchLimitReached(RuntimeError):
  """The search hit its iteration ceiling before finding a solution or exhausting the states."""
  stats: dict

  def __init__(self, limit: int, stats: dict):
    self.limit = limit
    self.stats = stats
    super().__init__(f"Search abandoned after {limit} iterations ({stats.get('frontierLength', 0)} states still queued)")
