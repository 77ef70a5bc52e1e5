import pytest

from guessgame.engine.game_engine import HIGHER_CLUE, LOWER_CLUE, WON_CLUE, GameEngine
from guessgame.services.errors import GameOverError, NotFoundError
from guessgame.services.player_service import PlayerService
from guessgame.services.player_store import PlayerStore
from guessgame.services.views import project

NOW = 1_700_000_000_000_000_042
SECRET = NOW % 101


@pytest.fixture
def service(tmp_path):
    return PlayerService(PlayerStore.open(tmp_path), GameEngine(clock=lambda: NOW))


def _wrong(secret: int) -> int:
    return secret + 1 if secret < 100 else 0


def test_create_player_hides_secret(service):
    view = service.create_player("Ana")

    assert view.score == 0
    assert view.attempts_left == 7
    assert view.clue == ""
    assert "secret_number" not in view.model_dump()


def test_get_player_is_idempotent(service):
    created = service.create_player("Ana")
    before = service.store.get(created.id)

    first = service.get_player(created.id)
    second = service.get_player(created.id)

    assert first == second
    assert service.store.get(created.id) == before


def test_get_missing_player(service):
    with pytest.raises(NotFoundError) as exc:
        service.get_player(9)
    assert exc.value.msg == "A player with id=9 not found"


def test_set_score_overwrites(service):
    created = service.create_player("Ana")

    view = service.set_score(created.id, 55)

    assert view.score == 55
    assert view.clue == ""
    assert service.store.get(created.id).updated_at == NOW


def test_set_score_missing_player(service):
    with pytest.raises(NotFoundError):
        service.set_score(4, 10)


def test_delete_returns_full_record_then_not_found(service):
    created = service.create_player("Ana")
    service.guess(created.id, _wrong(SECRET))

    removed = service.delete_player(created.id)

    assert removed.secret_number == SECRET
    with pytest.raises(NotFoundError):
        service.get_player(created.id)
    with pytest.raises(NotFoundError):
        service.delete_player(created.id)


def test_delete_never_created_id(service):
    with pytest.raises(NotFoundError):
        service.delete_player(0)


def test_guess_on_missing_player_creates_nothing(service):
    with pytest.raises(NotFoundError):
        service.guess(7, 50)
    assert service.store.count() == 0


def test_first_guess_initializes_and_persists(service):
    created = service.create_player("Ana")

    view = service.guess(created.id, _wrong(SECRET))

    assert view.clue in (HIGHER_CLUE, LOWER_CLUE)
    assert view.attempts_left == 6
    stored = service.store.get(created.id)
    assert stored.secret_number == SECRET
    assert stored.attempts_left == 6


def test_winning_guess_adds_ten(service):
    created = service.create_player("Ana")
    service.set_score(created.id, 20)

    view = service.guess(created.id, SECRET)

    assert view.clue == WON_CLUE
    assert view.score == 30
    assert view.attempts_left == 7


def test_exhausted_round_raises_game_over_and_resets(service):
    created = service.create_player("Ana")
    wrong = _wrong(SECRET)

    attempts = [service.guess(created.id, wrong).attempts_left for _ in range(7)]
    assert attempts == [6, 5, 4, 3, 2, 1, 0]

    with pytest.raises(GameOverError) as exc:
        service.guess(created.id, wrong)

    assert exc.value.msg == f"Game over! Player id={created.id} has no more attempts."
    assert exc.value.player.attempts_left == 7
    assert service.get_player(created.id).attempts_left == 7


def test_projection_drops_private_fields(service):
    created = service.create_player("Ana")
    player = service.store.get(created.id)

    view = project(player, "hint")

    assert view.model_dump() == {
        "id": player.id,
        "name": "Ana",
        "score": 0,
        "attempts_left": 7,
        "clue": "hint",
    }
