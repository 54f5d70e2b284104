def assert_solved(board):
    digits = list(range(1, 10))
    for r in range(9):
        assert sorted(board[r]) == digits
    for c in range(9):
        assert sorted(board[r][c] for r in range(9)) == digits
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = [board[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)]
            assert sorted(box) == digits


def assert_symmetric(puzzle):
    for r in range(9):
        for c in range(9):
            assert (puzzle[r][c] == 0) == (puzzle[8 - r][8 - c] == 0)
