import pytest

from guessgame.engine.game_engine import (
    GAME_OVER_CLUE,
    HIGHER_CLUE,
    LOWER_CLUE,
    WON_CLUE,
    GameEngine,
    RoundState,
    draw_secret,
    round_state,
)
from guessgame.models.player import U64_MAX, Player

NOW = 1_700_000_000_123_456_789
SECRET = NOW % 101


def _player(**overrides) -> Player:
    fields = {"id": 3, "name": "Ana", "created_at": 1}
    fields.update(overrides)
    return Player(**fields)


@pytest.fixture
def engine():
    return GameEngine(clock=lambda: NOW)


def test_round_state_from_fields():
    assert round_state(_player(secret_number=0)) is RoundState.UNINITIALIZED
    assert round_state(_player(secret_number=42, attempts_left=3)) is RoundState.IN_ROUND
    assert round_state(_player(secret_number=42, attempts_left=0)) is RoundState.EXHAUSTED


@pytest.mark.parametrize("now", [0, 100, 101, 202, NOW, 2**64 - 1])
def test_draw_secret_stays_in_range(now):
    assert 0 <= draw_secret(now) <= 100


def test_first_guess_initializes_round_then_evaluates(engine):
    player = _player(secret_number=0, attempts_left=2)
    wrong = SECRET + 1

    outcome = engine.apply_guess(player, wrong)

    assert outcome.player.secret_number == SECRET
    assert outcome.player.attempts_left == 6
    assert outcome.clue == LOWER_CLUE
    assert outcome.game_over is False


def test_first_guess_can_win_against_fresh_secret(engine):
    outcome = engine.apply_guess(_player(secret_number=0), SECRET)

    assert outcome.clue == WON_CLUE
    assert outcome.player.score == 10
    assert outcome.player.attempts_left == 7
    assert outcome.player.updated_at == NOW


def test_lower_guess_gives_higher_hint(engine):
    outcome = engine.apply_guess(_player(secret_number=60, attempts_left=5), 10)

    assert outcome.clue == HIGHER_CLUE
    assert outcome.player.attempts_left == 4
    assert outcome.player.secret_number == 60
    assert outcome.player.updated_at is None


def test_higher_guess_gives_lower_hint(engine):
    outcome = engine.apply_guess(_player(secret_number=60, attempts_left=5), 99)

    assert outcome.clue == LOWER_CLUE
    assert outcome.player.attempts_left == 4


def test_win_adds_points_and_restarts_round(engine):
    player = _player(secret_number=60, attempts_left=2, score=30)

    outcome = engine.apply_guess(player, 60)

    assert outcome.player.score == 40
    assert outcome.player.attempts_left == 7
    assert outcome.player.secret_number == SECRET
    assert outcome.clue == WON_CLUE


def test_exhausted_round_reports_game_over_and_resets(engine):
    player = _player(secret_number=60, attempts_left=0, score=20)

    outcome = engine.apply_guess(player, 60)

    assert outcome.game_over is True
    assert outcome.clue == GAME_OVER_CLUE.format(id=3)
    assert outcome.player.attempts_left == 7
    assert outcome.player.secret_number == SECRET
    assert outcome.player.score == 20  # the guess is not evaluated
    assert outcome.player.updated_at == NOW


def test_attempts_strictly_decrease_until_exhausted(engine):
    player = _player(secret_number=60)
    seen = []
    for _ in range(7):
        outcome = engine.apply_guess(player, 1)
        player = outcome.player
        seen.append(player.attempts_left)

    assert seen == [6, 5, 4, 3, 2, 1, 0]
    assert engine.apply_guess(player, 1).game_over is True


def test_apply_guess_does_not_mutate_input(engine):
    player = _player(secret_number=60, attempts_left=5)
    engine.apply_guess(player, 10)
    assert player.attempts_left == 5


def test_set_score_overwrites_and_stamps(engine):
    updated = engine.set_score(_player(score=50), 5)
    assert updated.score == 5
    assert updated.updated_at == NOW


def test_win_at_max_score_saturates(engine):
    player = _player(secret_number=60, score=U64_MAX)

    outcome = engine.apply_guess(player, 60)

    assert outcome.player.score == U64_MAX
    assert outcome.clue == WON_CLUE


def test_drawn_zero_secret_is_redrawn_on_next_guess(engine):
    zero_now = 101 * 10**16
    won = engine.apply_guess(_player(secret_number=60, attempts_left=3), 60, now=zero_now).player
    assert won.secret_number == 0
    assert round_state(won) is RoundState.UNINITIALIZED

    # 0 is not a playable secret: the next guess draws a fresh one first
    outcome = engine.apply_guess(won, 0)

    assert outcome.player.secret_number == SECRET
    assert outcome.clue == HIGHER_CLUE
    assert outcome.player.attempts_left == 6
    assert outcome.player.score == 10
