import threading
import time

import pytest

from conftest import FakeDictionaryClient
from glowdle.models.game import PuzzleConfig
from glowdle.services.game_service import GameService, NOT_A_WORD_MESSAGE, UNVERIFIED_MESSAGE
from glowdle.services.dictionary_service import DictionaryService
from glowdle.services.puzzle_codec import encode_puzzle
from glowdle.services.word_cache import WordCache


def token_for(word, **options):
    return encode_puzzle(PuzzleConfig(word, **options))


@pytest.fixture
def game_service(services):
    return services.game


class TestCustomGames:

    def test_create_from_token(self, game_service):
        game_id = game_service.create_custom_game(token_for("CRANE", hint="Birds"))
        state = game_service.get_game_state(game_id)
        assert state.game_type == "custom"
        assert state.word_length == 5
        assert state.max_guesses == 6
        assert state.hint == "Birds"
        assert state.answer is None
        assert state.guesses == []

    @pytest.mark.parametrize("token", ["", "H3LLO", None])
    def test_invalid_token(self, game_service, token):
        assert game_service.create_custom_game(token) is None
        assert game_service.games == {}

    def test_win(self, game_service):
        game_id = game_service.create_custom_game(token_for("CRANE"))
        state = game_service.make_guess(game_id, "slate")
        assert state.guesses == ["SLATE"]
        assert [cell["status"] for cell in state.guess_results[0]] == [
            "absent", "absent", "correct", "absent", "correct"
        ]
        assert state.letter_status["S"] == "absent"
        assert state.letter_status["A"] == "correct"
        assert not state.game_over

        state = game_service.make_guess(game_id, "CRANE")
        assert state.won
        assert state.game_over
        assert state.answer == "CRANE"

    def test_loss_after_max_guesses(self, game_service):
        game_id = game_service.create_custom_game(token_for("CRANE", max_guesses=2))
        game_service.make_guess(game_id, "SLATE")
        state = game_service.make_guess(game_id, "APPLE")
        assert state.game_over
        assert not state.won
        assert state.answer == "CRANE"

        assert game_service.is_valid_guess(game_id, "CRANE") == (False, "Game is already over")
        assert game_service.make_guess(game_id, "CRANE") is None

    def test_unbounded_game_never_runs_out(self, game_service):
        game_id = game_service.create_custom_game(token_for("CRANE", max_guesses=None))
        for _ in range(20):
            state = game_service.make_guess(game_id, "SLATE")
        assert not state.game_over
        assert state.max_guesses is None
        assert len(state.guesses) == 20

    def test_state_is_a_copy(self, game_service):
        game_id = game_service.create_custom_game(token_for("CRANE"))
        state = game_service.get_game_state(game_id)
        state.guesses.append("HACKS")
        state.letter_status["Q"] = "correct"
        fresh = game_service.get_game_state(game_id)
        assert fresh.guesses == []
        assert fresh.letter_status["Q"] == "unused"

    def test_unknown_game(self, game_service):
        assert game_service.get_game_state("missing") is None
        assert game_service.is_valid_guess("missing", "CRANE") == (False, "Game not found")
        assert game_service.make_guess("missing", "CRANE") is None

    def test_delete(self, game_service):
        game_id = game_service.create_custom_game(token_for("CRANE"))
        assert game_service.delete_game(game_id)
        assert not game_service.delete_game(game_id)
        assert game_service.get_game_state(game_id) is None


class TestGuessValidation:

    @pytest.fixture
    def game_id(self, game_service):
        return game_service.create_custom_game(token_for("CRANE"))

    @pytest.mark.parametrize("guess,message", [
        ("", "Guess must be a valid string"),
        (12345, "Guess must be a valid string"),
        ("CRAN", "Word must be 5 letters long"),
        ("CRANES", "Word must be 5 letters long"),
        ("CR4NE", "Please enter a valid word with only letters"),
        ("CR NE", "Please enter a valid word with only letters"),
    ])
    def test_rejects(self, game_service, game_id, guess, message):
        assert game_service.is_valid_guess(game_id, guess) == (False, message)

    def test_any_letters_accepted_without_real_words_only(self, game_service, game_id):
        assert game_service.is_valid_guess(game_id, "zzzzz") == (True, "")

    def test_surrounding_whitespace_is_ignored(self, game_service, game_id):
        assert game_service.make_guess(game_id, "  slate ").guesses == ["SLATE"]


class TestRealWordsOnly:

    def test_unknown_word_rejected(self, game_service):
        game_id = game_service.create_custom_game(token_for("CRANE", real_words_only=True))
        assert game_service.is_valid_guess(game_id, "ZZZZZ") == (False, NOT_A_WORD_MESSAGE)
        assert game_service.is_valid_guess(game_id, "SLATE") == (True, "")

    def test_unverifiable_word_rejected(self):
        dictionary = DictionaryService(FakeDictionaryClient(["SLATE"], unavailable=True), WordCache())
        game_service = GameService(dictionary)
        game_id = game_service.create_custom_game(token_for("CRANE", real_words_only=True))
        assert game_service.is_valid_guess(game_id, "SLATE") == (False, UNVERIFIED_MESSAGE)

    def test_without_dictionary_words_cannot_be_verified(self):
        game_service = GameService()
        game_id = game_service.create_custom_game(token_for("CRANE", real_words_only=True))
        assert game_service.is_valid_guess(game_id, "SLATE") == (False, UNVERIFIED_MESSAGE)


class TestHardModeGames:

    def test_hard_mode_rules_apply(self, game_service):
        game_id = game_service.create_custom_game(token_for("CRANE", hard_mode=True))
        game_service.make_guess(game_id, "CRASH")
        assert game_service.is_valid_guess(game_id, "CRONE") == (False, "Hard Mode: Must use A in position 3")
        assert game_service.is_valid_guess(game_id, "CRAZY") == (True, "")

    def test_dictionary_checked_before_hard_mode(self, game_service):
        game_id = game_service.create_custom_game(token_for("CRANE", hard_mode=True, real_words_only=True))
        game_service.make_guess(game_id, "CRASH")
        assert game_service.is_valid_guess(game_id, "QQQQQ") == (False, NOT_A_WORD_MESSAGE)


class TestDailyGames:

    def test_daily_game_settings(self, services):
        game_id = services.game.create_daily_game("2026-10-19")
        state = services.game.get_game_state(game_id)
        assert state.game_type == "daily"
        assert state.daily_date == "2026-10-19"
        assert state.word_length == 5
        assert state.max_guesses == 6
        assert state.real_words_only
        assert not state.hard_mode

    def test_daily_word_matches_selector(self, services):
        word = services.daily.daily_word("2026-10-19")
        game_id = services.game.create_daily_game("2026-10-19")
        state = services.game.make_guess(game_id, word)
        assert state.won
        assert state.answer == word

    def test_requires_selector(self):
        with pytest.raises(RuntimeError):
            GameService().create_daily_game()


class TestShareAndDefinition:

    def test_share_text_only_when_over(self, game_service):
        game_id = game_service.create_custom_game(token_for("APPLE"))
        assert game_service.get_share_text(game_id, "https://glowdle.test") is None

        game_service.make_guess(game_id, "CRANE")
        game_service.make_guess(game_id, "APPLE")
        assert game_service.get_share_text(game_id, "https://glowdle.test") == (
            "Glowdle 2/6\n\n⬜⬜🟨⬜🟩\n🟩🟩🟩🟩🟩\n\nhttps://glowdle.test/play?w=WDGOP"
        )

    def test_share_text_for_lost_hard_game(self, game_service):
        game_id = game_service.create_custom_game(token_for("APPLE", max_guesses=1, hard_mode=True))
        game_service.make_guess(game_id, "APPLY")
        text = game_service.get_share_text(game_id, "https://glowdle.test")
        assert text.startswith("Glowdle X/1 *\n\n🟩🟩🟩🟩⬜\n")
        assert text.endswith("/play?w=WDGOP_1_h")

    def test_daily_share_text(self, services):
        word = services.daily.daily_word("2026-10-19")
        game_id = services.game.create_daily_game("2026-10-19")
        services.game.make_guess(game_id, word)
        text = services.game.get_share_text(game_id, "https://glowdle.test")
        assert text == "Glowdle Daily 2026-10-19 1/6\n\n🟩🟩🟩🟩🟩\n\nhttps://glowdle.test/daily"

    def test_unknown_game_has_no_share_text(self, game_service):
        assert game_service.get_share_text("missing") is None

    def test_definition_after_game_over(self, game_service):
        game_id = game_service.create_custom_game(token_for("CRANE"))
        assert game_service.get_definition(game_id) is None
        game_service.make_guess(game_id, "CRANE")
        assert game_service.get_definition(game_id).definition == "Definition of crane"


class TestConcurrentGuesses:

    def test_last_guess_is_recorded_once(self):
        class SlowDictionaryClient(FakeDictionaryClient):
            def lookup(self, word):
                time.sleep(0.05)
                return super().lookup(word)

        dictionary = DictionaryService(SlowDictionaryClient(["SLATE", "CRASH", "APPLE", "BLAST"]), WordCache())
        game_service = GameService(dictionary)
        game_id = game_service.create_custom_game(token_for("CRANE", max_guesses=1, real_words_only=True))

        barrier = threading.Barrier(4)
        results = []

        def submit(word):
            barrier.wait()
            results.append(game_service.make_guess(game_id, word))

        threads = [threading.Thread(target=submit, args=(word,)) for word in ("SLATE", "CRASH", "APPLE", "BLAST")]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        state = game_service.get_game_state(game_id)
        assert len(state.guesses) == 1
        assert state.game_over
        assert sum(result is not None for result in results) == 1
