import pytest

from algodrills.queens import solve_n_queens, total_n_queens


def _check_board(board, n):
    assert len(board) == n
    for row in board:
        assert len(row) == n
        assert row.count("Q") == 1
        assert set(row) <= {"Q", "."}
    cols = [row.index("Q") for row in board]
    assert len(set(cols)) == n
    assert len({r - c for r, c in enumerate(cols)}) == n
    assert len({r + c for r, c in enumerate(cols)}) == n


def test_four_queens_solutions():
    assert solve_n_queens(4) == [
        [".Q..", "...Q", "Q...", "..Q."],
        ["..Q.", "Q...", "...Q", ".Q.."],
    ]


@pytest.mark.parametrize("n", range(1, 8))
def test_every_solution_is_valid(n):
    for board in solve_n_queens(n):
        _check_board(board, n)


@pytest.mark.parametrize("n", range(1, 8))
def test_solutions_distinct_and_ordered(n):
    boards = solve_n_queens(n)
    assert len({tuple(b) for b in boards}) == len(boards)
    # Earlier columns are tried first, and "Q" sorts after ".".
    assert boards == sorted(boards, reverse=True)


@pytest.mark.parametrize("n", range(1, 8))
def test_solutions_closed_under_mirroring(n):
    boards = {tuple(b) for b in solve_n_queens(n)}
    mirrored = {tuple(row[::-1] for row in b) for b in boards}
    assert mirrored == boards


@pytest.mark.parametrize("n", range(0, 8))
def test_total_matches_solution_count(n):
    assert total_n_queens(n) == len(solve_n_queens(n))


def test_eight_queens_total():
    assert total_n_queens(8) == 92


@pytest.mark.parametrize("n", [2, 3])
def test_unsolvable_boards(n):
    assert total_n_queens(n) == 0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        solve_n_queens(-1)
    with pytest.raises(ValueError):
        total_n_queens(-2)