"""Tests for chart settings and YAML config loading."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from termpie.config import (
    ChartConfig,
    config_from_dict,
    load_config,
    parse_duration,
    round_half_away,
)


def test_duration_parsing():
    test_durations = [
        ("500ms", 0.5),
        ("0.5s", 0.5),
        ("2s", 2.0),
        ("1m", 60.0),
        ("0.25", 0.25),
        (0.75, 0.75),
        (1, 1.0),
        (None, 0.5),
    ]

    for duration, expected_seconds in test_durations:
        assert parse_duration(duration) == pytest.approx(expected_seconds)


@pytest.mark.parametrize("bad", ["fast", "msms", "1.2.3s"])
def test_invalid_duration(bad):
    with pytest.raises(ValueError):
        parse_duration(bad)


def test_round_half_away():
    assert round_half_away(2.5) == 3
    assert round_half_away(0.5) == 1
    assert round_half_away(-2.5) == -3
    assert round_half_away(2.4) == 2


def test_round_half_away_just_below_half():
    assert round_half_away(0.49999999999999994) == 0
    assert round_half_away(-0.49999999999999994) == 0
    assert round_half_away(2.4999999999999996) == 2


def test_defaults():
    config = ChartConfig(radius=5)

    assert config.aspect_ratio == 2.0
    assert config.show_legend is True
    assert config.with_animation is False
    assert config.animation_duration == 0.5
    assert config.value_prefix == ""
    assert config.center_x == 10


def test_center_x_rounds_halves_up():
    assert ChartConfig(radius=3, aspect_ratio=1.5).center_x == 5


@pytest.mark.parametrize("kwargs", [
    {"radius": -1},
    {"radius": 2.5},
    {"radius": 3, "aspect_ratio": 0},
    {"radius": 3, "aspect_ratio": -2},
    {"radius": 3, "animation_duration": 0},
    {"radius": 3, "animation_duration": "-5ms"},
])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        ChartConfig(**kwargs)


def test_duration_string_in_config():
    assert ChartConfig(radius=1, animation_duration="250ms").animation_duration == pytest.approx(0.25)


def test_load_config_missing_file(temp_dir):
    config = load_config(str(temp_dir / "missing.yaml"))

    assert config["pie_chart"]["radius"] == 8
    assert config["pie_chart"]["color_scheme"] == "distinct"


def test_load_config_from_yaml(mock_config_file):
    config = load_config(mock_config_file)
    chart_config = config_from_dict(config)

    assert chart_config.radius == 1
    assert chart_config.show_legend is False
    assert chart_config.value_prefix == "$"
    assert chart_config.animation_duration == pytest.approx(0.25)
    assert config["pie_chart"]["color_scheme"] == "pastel"


def test_empty_yaml_file(temp_dir):
    path = temp_dir / "empty.yaml"
    path.write_text("")

    assert config_from_dict(load_config(str(path))).radius == 8


def test_overrides_skip_none(mock_config_file):
    config = load_config(mock_config_file)
    chart_config = config_from_dict(config, radius=4, show_legend=None, value_prefix=None)

    assert chart_config.radius == 4
    assert chart_config.show_legend is False
    assert chart_config.value_prefix == "$"


def test_yaml_data_section(temp_dir):
    path = temp_dir / "termpie.yaml"
    path.write_text(
        "pie_chart:\n"
        "  radius: 2\n"
        "  data:\n"
        "    - {name: Tea, value: 3, color: green}\n"
        "    - {name: Coffee, value: 5, color: '#6f4e37'}\n"
    )

    chart_config = config_from_dict(load_config(str(path)))
    assert [d["name"] for d in chart_config.data] == ["Tea", "Coffee"]
