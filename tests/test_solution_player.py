from liquidsort import solution_player
from liquidsort.puzzle_state import PuzzleState
from liquidsort.solution_player import SolutionPlayer
from liquidsort.transition import Transition


def make_solution() -> PuzzleState:
  state = PuzzleState.Create([[1, 2], [2, 1]], 2)
  return state.apply(Transition(0, 2)).apply(Transition(1, 0)).apply(Transition(1, 2))


def test_steps_forward_and_back(capsys):
  player = SolutionPlayer(make_solution())

  assert "Step 1 of 3" in player.currentLine()
  assert "1→3" in player.currentLine()
  assert player.next()
  assert player.next()
  assert "Step 3 of 3" in player.currentLine()
  assert not player.next()

  player.previous()
  assert "Step 2 of 3" in player.currentLine()
  player.previous()
  player.previous()
  assert "Already at the first step." in capsys.readouterr().out


def test_play_reads_keys_until_done(monkeypatch, capsys):
  keys = iter([" ", "x", " ", " "])
  monkeypatch.setattr(solution_player, "readkey", lambda: next(keys))

  SolutionPlayer.Play(make_solution())
  out = capsys.readouterr().out
  assert "Step 3 of 3" in out
  assert "Unrecognized key (x)" in out
  assert "DONE" in out


def test_play_quits_on_q(monkeypatch, capsys):
  keys = iter(["q"])
  monkeypatch.setattr(solution_player, "readkey", lambda: next(keys))

  SolutionPlayer.Play(make_solution())
  out = capsys.readouterr().out
  assert "Step 1 of 3" in out
  assert "Step 2 of 3" not in out


def test_nothing_to_play(capsys):
  SolutionPlayer.Play(PuzzleState.Create([[1, 1]], 2))
  assert "No steps to display." in capsys.readouterr().out
