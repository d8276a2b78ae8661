"""
Unit tests for the command line interface.
"""
import pytest
from minefield import cli
from minefield.game import PlayMode


def parse(*argv: str):
    return cli.build_parser().parse_args(list(argv))


# ============================================================================
# Config Building Tests
# ============================================================================

class TestBuildConfig:
    """Test turning arguments into a GameConfig."""

    def test_defaults(self) -> None:
        """No options gives the default 10x10 random game."""
        config = cli.build_config(parse("play"))
        assert (config.rows, config.cols) == (10, 10)
        assert config.num_mines is None
        assert config.delay == 1.0

    def test_explicit_board(self) -> None:
        """Rows, cols, mines, delay and seed are taken as given."""
        config = cli.build_config(parse(
            "play", "--rows", "4", "--cols", "6", "--mines", "5",
            "--delay", "0", "--seed", "3",
        ))
        assert (config.rows, config.cols, config.num_mines) == (4, 6, 5)
        assert config.delay == 0
        assert config.seed == 3

    def test_preset(self) -> None:
        """A preset supplies size and mine count."""
        config = cli.build_config(parse("play", "--preset", "expert"))
        assert (config.rows, config.cols, config.num_mines) == (16, 30, 99)

    def test_density_replaces_preset_count(self) -> None:
        """Density switches a preset to a random mine count."""
        config = cli.build_config(
            parse("play", "--preset", "beginner", "--density", "0.3")
        )
        assert config.num_mines is None
        assert config.mine_density == 0.3

    def test_mines_and_density_are_exclusive(self) -> None:
        """Only one way of choosing mines is allowed."""
        with pytest.raises(SystemExit):
            parse("play", "--mines", "3", "--density", "0.5")


# ============================================================================
# Play Mode Prompt Tests
# ============================================================================

class TestAskPlayMode:
    """Test the auto/manual menu."""

    @pytest.mark.parametrize(
        "answer, mode", [("1", PlayMode.AUTO), (" 2 ", PlayMode.MANUAL)]
    )
    def test_valid_choice(self, answer: str, mode: PlayMode) -> None:
        """Menu numbers map to play modes."""
        assert cli.ask_play_mode(lambda prompt: answer) == mode

    def test_invalid_choice_raises(self) -> None:
        """Anything else is an error."""
        with pytest.raises(ValueError, match="Invalid input"):
            cli.ask_play_mode(lambda prompt: "3")


# ============================================================================
# Main Entry Point Tests
# ============================================================================

class TestMain:
    """Test running commands end to end."""

    def test_no_command_prints_help(self, capsys) -> None:
        """Without a command the help text is shown."""
        assert cli.main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_auto_game_on_all_mine_board_loses(self, capsys) -> None:
        """A lost game exits with status 1."""
        status = cli.main([
            "play", "--mode", "auto", "--rows", "2", "--cols", "2",
            "--mines", "4", "--delay", "0", "--seed", "1",
        ])
        assert status == 1
        assert "X" in capsys.readouterr().out

    def test_invalid_configuration_exits_with_two(self) -> None:
        """Configuration errors are reported, not raised."""
        status = cli.main([
            "play", "--mode", "auto", "--rows", "2", "--cols", "2",
            "--mines", "5",
        ])
        assert status == 2

    def test_evaluate_prints_results(self, capsys) -> None:
        """Evaluate prints the metrics."""
        status = cli.main([
            "evaluate", "--games", "3", "--rows", "3", "--cols", "3",
            "--mines", "2", "--seed", "0",
        ])
        assert status == 0
        out = capsys.readouterr().out
        assert "Win rate" in out
        assert "Avg revealed" in out
