from sudoku_solver.csp.propagation import NakedSingleStrategy, promote_naked_singles


def test_promotes_single_candidate(load_puzzle):
    grid, coordinator = load_puzzle(["12345678."] + ["........."] * 8)
    strategy = NakedSingleStrategy()

    assert strategy.process(grid, coordinator) is True
    assert strategy.promoted == 1
    assert grid[0][8].value == 9
    assert grid[0][8].is_fixed()
    assert grid[0][8].candidates == frozenset()


def test_single_pass_does_not_eliminate(load_puzzle):
    grid, _ = load_puzzle(["12345678."] + ["........."] * 8)
    promote_naked_singles(grid)
    # the promoted 9 is not pushed to peers
    assert 9 in grid[1][8].candidates
    assert 9 in grid[8][8].candidates


def test_nothing_to_promote(load_puzzle):
    grid, coordinator = load_puzzle(["........."] * 9)
    assert NakedSingleStrategy().process(grid, coordinator) is False
    assert all(cell.is_unset() for row in grid for cell in row)


def test_clue_cells_are_untouched(load_puzzle, classic_rows):
    grid, _ = load_puzzle(classic_rows)
    before = [[cell.value for cell in row] for row in grid]
    promote_naked_singles(grid)
    for r in range(9):
        for c in range(9):
            if before[r][c]:
                assert grid[r][c].value == before[r][c]
