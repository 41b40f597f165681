from hypothesis import given, settings, strategies as st

from noughts.board import GameResult, Mark, empty_cells, evaluate, is_valid_state
from noughts.search import best_move_for_o, minimax, move_scores

from boards import O, X, board_from_moves

# at least two plies so each search stays small
move_sequences = st.permutations(list(range(9))).flatmap(
    lambda perm: st.integers(min_value=2, max_value=9).map(lambda n: perm[:n])
)


@given(move_sequences)
def test_played_boards_are_valid(moves):
    b = board_from_moves(moves)
    assert is_valid_state(b)
    result = evaluate(b)
    if result is GameResult.DRAW:
        assert not empty_cells(b)
    if not result.is_terminal:
        assert empty_cells(b)


@settings(deadline=None, max_examples=60)
@given(move_sequences)
def test_minimax_restores_board(moves):
    b = board_from_moves(moves)
    before = list(b)
    score = minimax(b, 0, b.count(X) == b.count(O))
    assert b == before
    assert -10 <= score <= 10


@settings(deadline=None, max_examples=60)
@given(move_sequences)
def test_best_move_adds_one_o_on_lowest_scoring_cell(moves):
    b = board_from_moves(moves)
    if evaluate(b).is_terminal:
        return
    before = list(b)
    scores = move_scores(b)
    idx = best_move_for_o(b)
    assert before[idx] is Mark.EMPTY
    assert b[idx] is O
    assert [c for i, c in enumerate(b) if i != idx] == [c for i, c in enumerate(before) if i != idx]
    valid = [s for s in scores if s is not None]
    assert scores[idx] == min(valid)
    assert all(s is None or s > scores[idx] for s in scores[:idx])
