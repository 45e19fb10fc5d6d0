#!/usr/bin/env python3
"""
Chart configuration: the settings object plus YAML loading.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

DEFAULT_ASPECT_RATIO = 2.0
DEFAULT_ANIMATION_DURATION = 0.5


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def parse_duration(duration: Union[str, int, float, None]) -> float:
    """Parse a duration to seconds (e.g., '500ms', '0.5s', '1m', 0.25)."""
    if duration is None or duration == "":
        return DEFAULT_ANIMATION_DURATION

    if isinstance(duration, (int, float)):
        return float(duration)

    text = duration.strip().lower()

    unit_multipliers = {
        'ms': 0.001,
        's': 1,
        'm': 60,
    }

    for unit in ('ms', 's', 'm'):
        if text.endswith(unit):
            try:
                return float(text[:-len(unit)]) * unit_multipliers[unit]
            except ValueError:
                raise ValueError(f"Invalid duration format: {duration}")

    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Invalid duration format: {duration}")


@dataclass
class ChartConfig:
    """Settings for a single pie chart.

    Args:
        radius: Half-height of the circle in character rows
        aspect_ratio: Horizontal stretch compensating for tall character cells
        show_legend: Whether to append the legend to the right of the circle
        with_animation: Whether the chart sweeps in on first display
        animation_duration: Length of the sweep in seconds
        value_prefix: Text placed before values in the legend (e.g., "$")
        data: Optional initial categories, applied with push_all
    """

    radius: int
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    show_legend: bool = True
    with_animation: bool = False
    animation_duration: float = DEFAULT_ANIMATION_DURATION
    value_prefix: str = ""
    data: Optional[List[Any]] = field(default=None, repr=False)

    def __post_init__(self):
        if int(self.radius) != self.radius or self.radius < 0:
            raise ValueError(f"Radius must be a non-negative integer, got {self.radius}")
        self.radius = int(self.radius)
        if self.aspect_ratio <= 0:
            raise ValueError(f"Aspect ratio must be positive, got {self.aspect_ratio}")
        self.animation_duration = parse_duration(self.animation_duration)
        if self.animation_duration <= 0:
            raise ValueError(f"Animation duration must be positive, got {self.animation_duration}")

    @property
    def center_x(self) -> int:
        """Column of the circle's center, before any legend."""
        return round_half_away(self.radius * self.aspect_ratio)


def load_config(config_path: str = "termpie.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file."""
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f) or {}
    else:
        config = {}

    config.setdefault("pie_chart", {})
    config["pie_chart"].setdefault("radius", 8)
    config["pie_chart"].setdefault("aspect_ratio", DEFAULT_ASPECT_RATIO)
    config["pie_chart"].setdefault("show_legend", True)
    config["pie_chart"].setdefault("with_animation", False)
    config["pie_chart"].setdefault("animation_duration", "500ms")
    config["pie_chart"].setdefault("value_prefix", "")
    config["pie_chart"].setdefault("color_scheme", "distinct")
    return config


def config_from_dict(config: Dict[str, Any], **overrides) -> ChartConfig:
    """Build a ChartConfig from a loaded config, applying non-None overrides."""
    settings = dict(config.get("pie_chart", {}))
    settings.update({key: value for key, value in overrides.items() if value is not None})

    return ChartConfig(
        radius=settings.get("radius", 8),
        aspect_ratio=float(settings.get("aspect_ratio", DEFAULT_ASPECT_RATIO)),
        show_legend=bool(settings.get("show_legend", True)),
        with_animation=bool(settings.get("with_animation", False)),
        animation_duration=settings.get("animation_duration", DEFAULT_ANIMATION_DURATION),
        value_prefix=str(settings.get("value_prefix") or ""),
        data=settings.get("data"),
    )
