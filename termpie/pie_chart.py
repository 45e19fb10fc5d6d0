#!/usr/bin/env python3
"""
Pie chart visualization using Unicode points and true color.
Draws a circle stretched into an ellipse so it looks round in a terminal,
with an optional legend and an optional sweep-in animation.
"""

from dataclasses import dataclass, replace
from typing import Any, Iterable, Iterator, List, Optional
import math
import time

from .colors import paint
from .config import ChartConfig, round_half_away
from .sweep import SweepAnimator

POINT_SYMBOL = "•"
LEGEND_PADDING = 3
PERCENT_WIDTH = 4


@dataclass
class PieValue:
    """One slice: its label, color token, weight and cumulative end angle."""

    name: str
    color: Any = None
    value: float = 0.0
    angle: float = 0.0


def as_pie_value(item: Any) -> PieValue:
    """Accept a PieValue or a mapping with name/color/value keys (as found in YAML)."""
    if isinstance(item, PieValue):
        return item
    return PieValue(
        name=str(item.get("name", "")),
        color=item.get("color"),
        value=float(item.get("value", 0) or 0),
    )


class PieData:
    """Ordered slices plus their running total."""

    def __init__(self, label: str = ""):
        self.label = label
        self.values: List[PieValue] = []
        self.sum = 0.0

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[PieValue]:
        return iter(self.values)

    def push(self, value: PieValue):
        """Append one slice, clamping negative values to zero."""
        value = replace(value, value=max(0.0, float(value.value)))
        self.values.append(value)
        self.sum += value.value

    def push_all(self, values: Iterable[PieValue]):
        """Append several slices, then sort all slices by value, largest first."""
        for v in values:
            self.push(v)
        self.sort()

    def sort(self):
        # sorted() is stable: equal values keep insertion order
        self.values = sorted(self.values, key=lambda v: v.value, reverse=True)

    def clear(self):
        self.values = []
        self.sum = 0.0


def allocate_angles(values: List[PieValue], total: float):
    """Give each slice its cumulative end angle in degrees.

    Slices are visited in order; each one's arc is value / total * 360.
    A zero total leaves nothing to divide, so every angle is set to 0 and
    the chart draws blank.
    """
    if total <= 0:
        for v in values:
            v.angle = 0.0
        return

    start_angle = 0.0
    for v in values:
        arc = v.value / total * 360
        v.angle = start_angle + arc
        start_angle += arc


def select_category(angle: float, visible: Iterable[PieValue]) -> Optional[PieValue]:
    """Find the slice drawn at a cell whose atan2(x, y) is `angle` degrees."""
    # atan2(x, y) is measured from the downward row axis; 180 - angle
    # rotates it onto the chart's zero at the top, running clockwise.
    for v in visible:
        if (180 - angle) <= v.angle:
            return v
    return None


def _format_value(value: float) -> str:
    return f"{value:.2f}"


class PieChart:
    """A pie chart rendered as rows of colored text.

    Args:
        config: Chart settings; `config.data`, when given, is loaded with push_all
        label: Informational label for the data set
        clock: Monotonic time source for the sweep animation
    """

    def __init__(self, config: ChartConfig, label: str = "", clock=time.monotonic):
        self.config = config
        self.data = PieData(label)
        self.animator = SweepAnimator(config.with_animation, config.animation_duration,
                                      config.aspect_ratio, clock=clock)

        if config.data:
            self.push_all(as_pie_value(v) for v in config.data)

    @property
    def sum(self) -> float:
        return self.data.sum

    @property
    def values(self) -> List[PieValue]:
        return self.data.values

    @property
    def sweep_angle(self) -> float:
        return self.animator.sweep_angle

    @property
    def is_complete(self) -> bool:
        return self.animator.is_complete

    def push(self, value: PieValue):
        self.data.push(value)

    def push_all(self, values: Iterable[PieValue]):
        self.data.push_all(values)

    def clear(self):
        self.data.clear()

    def update(self) -> float:
        """Advance the sweep animation; call once per frame."""
        return self.animator.update()

    def restart(self):
        self.animator.restart()

    def populate_angles(self):
        """Sort the slices and recompute their end angles."""
        self.data.sort()
        allocate_angles(self.data.values, self.data.sum)

    def visible_segments(self) -> List[PieValue]:
        if self.data.sum <= 0:
            return []
        return self.animator.visible_segments(self.data.values)

    def row_width(self, y: int) -> int:
        """Half-width, in cells, of the ellipse at row y."""
        radius = self.config.radius
        aspect_ratio = self.config.aspect_ratio
        width = round_half_away(math.sqrt(radius * radius - y * y) * aspect_ratio)
        if width == 0 and aspect_ratio != 1.0:
            width = round_half_away(radius / aspect_ratio)
        return width

    def legend_entries(self) -> List[str]:
        """Build one legend line per slice, columns aligned across slices."""
        values = self.data.values
        if not values:
            return []

        prefix = self.config.value_prefix
        name_width = max(len(v.name) for v in values)
        value_width = max(len(f"{prefix}{_format_value(v.value)}") for v in values)

        entries = []
        for v in values:
            percentage = v.value / self.data.sum * 100 if self.data.sum > 0 else 0.0
            name = f"{v.name:<{name_width}}"
            percent = f"{percentage:>{PERCENT_WIDTH - 1}.0f}%"
            value = f"[{prefix}{_format_value(v.value):>{value_width}}]"
            entries.append(paint(POINT_SYMBOL, v.color) + " " + name + " " + percent + " " + value)
        return entries

    def render(self) -> str:
        """Render the current frame as newline-joined rows."""
        self.populate_angles()

        radius = self.config.radius
        center_x = self.config.center_x
        visible = self.visible_segments()

        show_legend = self.config.show_legend
        legend = self.legend_entries() if show_legend else []
        legend_padding = math.ceil((radius * 2 + 1 - len(legend)) / 2.0)
        legend_start = -radius + legend_padding
        legend_end = legend_start + len(legend) - 1
        label_index = 0

        rows = []
        for y in range(-radius, radius + 1):
            width = self.row_width(y)
            row = [" " * abs(center_x - width)]

            for x in range(-width, width + 1):
                angle = math.degrees(math.atan2(x, y))
                item = select_category(angle, visible)
                if item is not None:
                    row.append(paint(POINT_SYMBOL, item.color))
                else:
                    row.append(" ")

            if show_legend and legend_start <= y <= legend_end and label_index < len(legend):
                row.append(" " * max(0, center_x - width + LEGEND_PADDING))
                row.append(legend[label_index])
                row.append(" " * LEGEND_PADDING)
                label_index += 1

            rows.append("".join(row))

        return "\n".join(rows)

    def __str__(self) -> str:
        return self.render()


def new_pie_chart(radius: int, **options) -> PieChart:
    """Create a chart from keyword options (see ChartConfig for the names)."""
    clock = options.pop("clock", time.monotonic)
    label = options.pop("label", "")
    return PieChart(ChartConfig(radius=radius, **options), label=label, clock=clock)
