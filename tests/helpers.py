from blockfall_layout import COLS


class ScriptedRandom:
    """Returns queued indices in order, then repeats the last one."""

    def __init__(self, *values: int) -> None:
        self.values = list(values)
        self.last = values[-1] if values else 0
        self.calls = []

    def index(self, n: int) -> int:
        if self.values:
            self.last = self.values.pop(0)
        self.calls.append(n)
        return self.last % n


def fill_row(board, row: int, kind: int = 1, skip=()):
    for c in range(COLS):
        if c not in skip:
            board[row][c] = kind
