import pytest

from scripts.evaluate_search import load_evaluation_config


def test_load_evaluation_config_merges_yaml_and_overrides(tmp_path):
    path = tmp_path / "eval.yaml"
    path.write_text("episodes: 4\nsearch_side: B\n")

    config = load_evaluation_config(str(path), {"seed": 7, "temperature": None})

    assert config.episodes == 4
    assert config.search_side == "B"
    assert config.seed == 7
    assert config.temperature == 1.0


def test_load_evaluation_config_rejects_unknown_keys(tmp_path):
    path = tmp_path / "eval.yaml"
    path.write_text("episodes: 4\nopponent: minimax\n")

    with pytest.raises(ValueError, match="Unknown config keys"):
        load_evaluation_config(str(path), {})


def test_load_evaluation_config_rejects_bad_search_side(tmp_path):
    path = tmp_path / "eval.yaml"
    path.write_text("search_side: C\n")

    with pytest.raises(ValueError, match="search_side"):
        load_evaluation_config(str(path), {})

    with pytest.raises(ValueError, match="search_side"):
        load_evaluation_config(None, {"search_side": "a"})


def test_load_evaluation_config_rejects_non_positive_episodes():
    with pytest.raises(ValueError, match="episodes"):
        load_evaluation_config(None, {"episodes": 0})
