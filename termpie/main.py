#!/usr/bin/env python3

import csv
import io
import json
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import click
from rich.console import Console
from rich.live import Live
from rich.text import Text

from . import __version__
from .colors import generate_colors
from .config import config_from_dict, load_config
from .pie_chart import PieChart, PieValue

LABEL_WORDS = ['name', 'label', 'category', 'type', 'group', 'x']
VALUE_WORDS = ['value', 'count', 'sum', 'total', 'amount', 'y']
COLOR_WORDS = ['color', 'colour']


def parse_rows(text: str, fmt: Optional[str] = None) -> List[Dict[str, Any]]:
    """Parse input text into a list of row dicts.

    Args:
        text: Raw JSON, CSV or TSV content
        fmt: "json", "csv" or "tsv"; None tries JSON first, then CSV
    """
    text = text.strip()
    if not text:
        return []

    if fmt in (None, "json"):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            if fmt == "json":
                raise ValueError(f"Invalid JSON input: {e}")
        else:
            # Single object - wrap in array
            if isinstance(data, dict):
                return [data]
            if isinstance(data, list) and all(isinstance(item, dict) for item in data):
                return data
            raise ValueError("JSON input must be an array of objects or a single object")

    delimiter = '\t' if fmt == "tsv" else ','
    reader = csv.DictReader(io.StringIO(text), delimiter=delimiter)
    if not reader.fieldnames:
        raise ValueError("CSV input has no header row")
    return [dict(row) for row in reader]


def read_input(source: Optional[str]) -> List[Dict[str, Any]]:
    """Read rows from a file path, or stdin when source is None or '-'."""
    if source is None or source == '-':
        if sys.stdin.isatty():
            return []
        return parse_rows(sys.stdin.read())

    path = Path(source)
    if not path.exists():
        raise ValueError(f"File not found: {source}")

    suffix = path.suffix.lower().lstrip('.')
    fmt = suffix if suffix in ("json", "csv", "tsv") else None
    with open(path, 'r', encoding='utf-8') as f:
        return parse_rows(f.read(), fmt)


def _find_column(keys: List[str], words: List[str], exclude: Tuple[Optional[str], ...] = ()) -> Optional[str]:
    for key in keys:
        if key in exclude:
            continue
        if any(word in key.lower() for word in words):
            return key
    return None


def extract_pie_data(results: List[Dict[str, Any]],
                     label_col: Optional[str] = None,
                     value_col: Optional[str] = None) -> Tuple[List[float], List[str], List[Any]]:
    """Extract values, labels and colors for a pie chart from row dicts."""
    if not results:
        return [], [], []

    keys = list(results[0].keys())

    if not label_col:
        label_col = _find_column(keys, LABEL_WORDS)
    if not value_col:
        value_col = _find_column(keys, VALUE_WORDS, exclude=(label_col,))
    color_col = _find_column(keys, COLOR_WORDS, exclude=(label_col, value_col))

    # Fallback to first two columns
    if not label_col and len(keys) >= 1:
        label_col = keys[0]
    if not value_col and len(keys) >= 2:
        value_col = keys[1] if keys[1] != label_col else keys[0]
    elif not value_col and len(keys) >= 1:
        value_col = keys[0]

    labels = []
    values = []
    colors = []

    for row in results:
        labels.append(str(row.get(label_col, "Unknown")))
        try:
            values.append(float(row.get(value_col, 0)))
        except (ValueError, TypeError):
            values.append(0)
        colors.append(row.get(color_col) if color_col else None)

    return values, labels, colors


def build_pie_values(values: List[float], labels: List[str], colors: List[Any],
                     color_scheme: str = "distinct") -> List[PieValue]:
    """Pair up extracted columns, filling missing colors from a palette."""
    palette = generate_colors(len(values), color_scheme)
    return [
        PieValue(name=label, color=color or palette[i], value=value)
        for i, (value, label, color) in enumerate(zip(values, labels, colors))
    ]


def play_animation(chart: PieChart, console: Console, fps: float):
    """Redraw the chart until its sweep completes."""
    frame_delay = 1.0 / fps
    chart.restart()
    with Live(Text.from_ansi(chart.render()), console=console,
              refresh_per_second=fps, auto_refresh=False) as live:
        while not chart.is_complete:
            chart.update()
            live.update(Text.from_ansi(chart.render()), refresh=True)
            time.sleep(frame_delay)
        chart.update()
        live.update(Text.from_ansi(chart.render()), refresh=True)


@click.command()
@click.argument('source', required=False)
@click.option('--radius', '-r', type=int, help='Circle radius in character rows')
@click.option('--aspect-ratio', '-a', type=float, help='Horizontal stretch for non-square cells (default 2.0)')
@click.option('--legend/--no-legend', default=None, help='Show or hide the legend')
@click.option('--animate/--no-animate', default=None, help='Sweep the slices in')
@click.option('--duration', help='Animation duration (e.g., "500ms", "1.5s")')
@click.option('--prefix', help='Prefix for legend values (e.g., "$")')
@click.option('--title', help='Chart title')
@click.option('--label-column', help='Column holding slice names')
@click.option('--value-column', help='Column holding slice values')
@click.option('--color-scheme', type=click.Choice(['distinct', 'gradient', 'pastel']), help='Palette for rows without a color column')
@click.option('--fps', default=30.0, type=float, show_default=True, help='Frames per second while animating')
@click.option('--config', '-c', default='termpie.yaml', help='Config file path')
@click.version_option(__version__, prog_name='termpie')
def main(source: Optional[str], radius: Optional[int], aspect_ratio: Optional[float], legend: Optional[bool],
         animate: Optional[bool], duration: Optional[str], prefix: Optional[str], title: Optional[str],
         label_column: Optional[str], value_column: Optional[str], color_scheme: Optional[str],
         fps: float, config: str):
    """Render a pie chart in the terminal.

    SOURCE: JSON, CSV or TSV file with one row per slice (reads stdin if omitted or "-")

    \b
    Examples:
      echo '[{"name": "A", "value": 50}, {"name": "B", "value": 30}]' | termpie
      termpie sales.csv --radius 6 --prefix '$' --animate
    """
    try:
        config_data = load_config(config)
        chart_config = config_from_dict(
            config_data,
            radius=radius,
            aspect_ratio=aspect_ratio,
            show_legend=legend,
            with_animation=animate,
            animation_duration=duration,
            value_prefix=prefix,
        )

        rows = read_input(source)
        values, labels, colors = extract_pie_data(rows, label_column, value_column)
        if not values and not chart_config.data:
            print("No data to display")
            return

        scheme = color_scheme or config_data["pie_chart"].get("color_scheme", "distinct")
        chart = PieChart(chart_config, label=title or "")
        chart.push_all(build_pie_values(values, labels, colors, scheme))
        if values:
            print(f"✓ Loaded {len(values)} slices", file=sys.stderr)

        if title:
            print(f"\033[1m{title}\033[0m")
            print()

        if chart_config.with_animation:
            if fps <= 0:
                raise ValueError(f"FPS must be positive, got {fps}")
            play_animation(chart, Console(), fps)
        else:
            print(chart.render())
    except KeyboardInterrupt:
        print("\nExiting...")
    except (ValueError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
