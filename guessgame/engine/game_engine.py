"""
Number-guessing round engine.
Pure transition logic over one player's round fields (secret_number, attempts_left,
score). The engine never touches storage: it returns an updated copy of the player
plus the clue to show, and the caller persists the result.

Round states are derived from the fields, not stored:
- UNINITIALIZED: secret_number == 0 (lazily initialized by the next guess)
- EXHAUSTED:     attempts_left == 0 (next guess reports game over and resets)
- IN_ROUND:      anything else
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from guessgame.config.settings import settings
from guessgame.models.player import U64_MAX, Player

WON_CLUE = "Congratulations! You've guessed the number! A new game has started."
HIGHER_CLUE = "The secret number is higher than your guess."
LOWER_CLUE = "The secret number is lower than your guess."
GAME_OVER_CLUE = "Game over! Player id={id} has no more attempts."


class RoundState(str, Enum):
    UNINITIALIZED = "uninitialized"
    IN_ROUND = "in_round"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class GuessOutcome:
    player: Player
    clue: str
    game_over: bool = False


def round_state(player: Player) -> RoundState:
    if player.secret_number == 0:
        return RoundState.UNINITIALIZED
    if player.attempts_left == 0:
        return RoundState.EXHAUSTED
    return RoundState.IN_ROUND


def draw_secret(now: int, modulus: int = settings.SECRET_MODULUS) -> int:
    """Secret in [0, modulus - 1] taken from the clock; not meant to be unpredictable."""
    return now % modulus


class GameEngine:
    """
    Applies guesses to a player's round.
    - `clock` returns integer nanoseconds; tests inject a fixed one.
    """

    def __init__(
        self,
        *,
        max_attempts: int = settings.MAX_ATTEMPTS,
        win_points: int = settings.WIN_POINTS,
        secret_modulus: int = settings.SECRET_MODULUS,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self.max_attempts = max_attempts
        self.win_points = win_points
        self.secret_modulus = secret_modulus
        self.clock = clock or time.time_ns

    def now(self) -> int:
        return self.clock()

    def _new_round(self, player: Player, now: int) -> Player:
        return player.model_copy(
            update={
                "secret_number": draw_secret(now, self.secret_modulus),
                "attempts_left": self.max_attempts,
            }
        )

    def apply_guess(self, player: Player, guess: int, now: Optional[int] = None) -> GuessOutcome:
        """
        Evaluate `guess` for `player` and return the updated copy with its clue.

        1) uninitialized → draw a secret, full attempts, then keep evaluating this guess
        2) exhausted → reset the round and report game over, the guess is ignored
        3) equal → +win_points (saturating at U64_MAX), new round; otherwise one attempt
           less and a direction hint
        """
        now = self.now() if now is None else now
        current = player

        if round_state(current) is RoundState.UNINITIALIZED:
            current = self._new_round(current, now)

        if round_state(current) is RoundState.EXHAUSTED:
            reset = self._new_round(current, now).model_copy(update={"updated_at": now})
            return GuessOutcome(player=reset, clue=GAME_OVER_CLUE.format(id=player.id), game_over=True)

        if guess == current.secret_number:
            won = self._new_round(current, now).model_copy(
                update={"score": min(current.score + self.win_points, U64_MAX), "updated_at": now}
            )
            return GuessOutcome(player=won, clue=WON_CLUE)

        missed = current.model_copy(update={"attempts_left": current.attempts_left - 1})
        clue = HIGHER_CLUE if guess < current.secret_number else LOWER_CLUE
        return GuessOutcome(player=missed, clue=clue)

    def set_score(self, player: Player, score: int, now: Optional[int] = None) -> Player:
        """Unconditional score overwrite (outside of the guessing flow)."""
        now = self.now() if now is None else now
        return player.model_copy(update={"score": score, "updated_at": now})
