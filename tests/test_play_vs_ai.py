import pytest

from mancala.core import GameResult, Side, new_game

from scripts.play_vs_ai import (
    PlayConfig,
    describe_winner,
    format_board,
    load_play_config,
    parse_selection,
    play_game,
)


def scripted_input(answers):
    answers = iter(answers)

    def _input(prompt: str) -> str:
        return next(answers)

    return _input


def test_load_play_config_merges_yaml_and_overrides(tmp_path):
    path = tmp_path / "play.yaml"
    path.write_text("mode: ai-vs-ai\ntrace_search: true\n")

    config = load_play_config(str(path), {"log_level": "INFO", "ai_side": None})

    assert config.mode == "ai-vs-ai"
    assert config.trace_search is True
    assert config.log_level == "INFO"
    assert config.ai_side == "B"
    assert config.ai_sides() == {Side.A, Side.B}


def test_load_play_config_rejects_bad_values(tmp_path):
    path = tmp_path / "play.yaml"
    path.write_text("difficulty: hard\n")
    with pytest.raises(ValueError):
        load_play_config(str(path), {})

    with pytest.raises(ValueError):
        load_play_config(None, {"mode": "online"})


def test_parse_selection_messages():
    state = new_game()

    assert parse_selection(state, " 3 ") == (3, None)
    assert parse_selection(state, "8")[1] == "That hole belongs to the other player."
    assert parse_selection(state, "abc")[1] == "Please enter a hole number."
    assert parse_selection(state, "-2")[1].startswith("Holes are numbered")


def test_format_board_shows_global_numbers():
    text = format_board(new_game())

    assert "[11]" in text and "[ 0]" in text
    assert text.count(" 6 ") >= 12


def test_describe_winner_names_ai_only_against_a_human():
    state = new_game()
    state.pits[:, :] = 0
    state.stores[:] = [30, 42]

    assert describe_winner(state, {Side.B}) == "AI wins!"
    assert describe_winner(state, set()) == "Player 2 wins!"
    assert describe_winner(state, {Side.A, Side.B}) == "Player 2 wins!"

    state.stores[:] = [36, 36]
    assert describe_winner(state, {Side.B}) == "The game was a tie!"


def test_ai_vs_ai_game_runs_to_completion():
    lines = []
    result = play_game(PlayConfig(mode="ai-vs-ai"), output=lines.append)

    assert result != GameResult.ONGOING
    assert lines[-1].endswith("wins!") or lines[-1] == "The game was a tie!"
    assert any(line.startswith("Final score:") for line in lines)


def test_human_input_is_validated_before_moving():
    lines = []
    answers = scripted_input(["7", "x", "0", "q"])

    result = play_game(PlayConfig(mode="human-vs-human"), input_fn=answers, output=lines.append)

    assert result == GameResult.ONGOING
    assert "That hole belongs to the other player." in lines
    assert "Please enter a hole number." in lines
    assert "Last stone in your store: go again." in lines
    assert lines[-1] == "Game abandoned."
