"""Tests for the functional entry points."""

import json

import pytest

import setgame
from setgame.config import AnalysisConfig, Config, GameConfig, load_config
from setgame.errors import DeckExhaustedError, NotASetError
from setgame.game.engine import ClassicGame
from setgame.game.projective import ProjectiveGame


class TestNewGame:
    """Tests for new_game."""

    def test_default_variant(self):
        """Test the classic game is the default."""
        game = setgame.new_game()
        assert isinstance(game, ClassicGame)
        assert setgame.score(game) == 0
        assert len(setgame.cards_in_play(game)) == 12
        assert setgame.remaining_cards(game) == 69

    def test_variant_by_name(self):
        """Test selecting the projective game."""
        game = setgame.new_game("projective")
        assert isinstance(game, ProjectiveGame)
        assert len(setgame.cards_in_play(game)) == 7

    def test_variant_from_config(self):
        """Test the configured variant is used when none is given."""
        config = Config(game=GameConfig(variant="projective"))
        assert isinstance(setgame.new_game(config=config), ProjectiveGame)

    def test_seed_from_config(self):
        """Test a configured seed fixes the deal."""
        config = Config(game=GameConfig(seed=17))
        game1 = setgame.new_game(config=config)
        game2 = setgame.new_game(config=config)
        assert setgame.cards_in_play(game1) == setgame.cards_in_play(game2)

    def test_unknown_variant(self):
        """Test unknown variant names are rejected."""
        with pytest.raises(ValueError):
            setgame.new_game("hexagonal")

    def test_game_log_from_config(self, tmp_path):
        """Test an enabled game_log section records the session as JSONL."""
        log_path = tmp_path / "games.jsonl"
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "game:\n"
            "  seed: 4\n"
            "game_log:\n"
            "  enabled: true\n"
            f'  output_path: "{log_path}"\n'
        )
        game = setgame.new_game(config=load_config(config_path))
        assert game.game_logger is not None
        setgame.draw_three(game)
        game.game_logger.close()

        events = [json.loads(line) for line in log_path.read_text().splitlines()]
        assert [e["type"] for e in events] == ["game_start", "draw"]
        assert events[0]["game"] == str(game.game_id)
        assert events[1]["score"] == -1

    def test_game_log_disabled_by_default(self):
        """Test no logger is attached without a game_log section."""
        assert setgame.new_game().game_logger is None


class TestFunctionalMoves:
    """Tests for attempt_move and draw_three."""

    def test_attempt_move_returns_game(self, planted):
        """Test an accepted move returns the same game."""
        layout, deck = planted
        game = ClassicGame.from_cards(layout, deck)
        assert setgame.find_sets(game) == [(2, 5, 9)]
        assert setgame.attempt_move(game, (2, 5, 9)) is game
        assert setgame.score(game) == 1

    def test_error_carries_game(self, planted):
        """Test failures hand back the game."""
        layout, deck = planted
        game = ClassicGame.from_cards(layout, deck)
        with pytest.raises(NotASetError) as exc_info:
            setgame.attempt_move(game, (0, 1, 2))
        assert exc_info.value.game is game
        assert setgame.score(exc_info.value.game) == -1

    def test_draw_three(self, planted):
        """Test a forced deal returns the same game."""
        layout, deck = planted
        game = ClassicGame.from_cards(layout, deck)
        assert setgame.draw_three(game) is game
        assert len(setgame.cards_in_play(game)) == 15

    def test_draw_three_short(self, layout_factory):
        """Test a short deck refuses to draw."""
        layout, deck = layout_factory(12, (2, 5, 9), deck_size=1)
        game = ClassicGame.from_cards(layout, deck)
        with pytest.raises(DeckExhaustedError) as exc_info:
            setgame.draw_three(game)
        assert exc_info.value.game is game


class TestRunAnalysis:
    """Tests for the analysis entry point."""

    def test_histogram(self):
        """Test the histogram counts every trial."""
        config = Config(analysis=AnalysisConfig(seed=3))
        histogram = setgame.run_analysis(24, 4, config=config)
        assert sum(histogram.values()) == 24

    def test_config_counts(self):
        """Test counts come from the config when omitted."""
        config = Config(analysis=AnalysisConfig(trial_count=12, thread_count=2))
        assert sum(setgame.run_analysis(config=config).values()) == 12
