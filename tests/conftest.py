"""Pytest configuration and shared fixtures for termpie tests."""

import pytest
import tempfile
import json
import csv
from pathlib import Path


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start=0.0):
        self.t = start

    def __call__(self):
        return self.t

    def advance(self, seconds):
        self.t += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def letter_paint(monkeypatch):
    """Make cells render as their color token so layouts can be compared as text."""
    monkeypatch.setattr("termpie.pie_chart.paint", lambda symbol, color: str(color))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_json_file(temp_dir):
    """Create a sample JSON file for testing."""
    json_path = temp_dir / "test_data.json"
    data = [
        {"name": "North", "value": 120, "color": "#1abc9c"},
        {"name": "South", "value": 98, "color": "#3498db"},
        {"name": "East", "value": 77, "color": "red"},
        {"name": "West", "value": 45, "color": "208"},
    ]
    with open(json_path, 'w') as f:
        json.dump(data, f)
    return str(json_path)


@pytest.fixture
def sample_csv_file(temp_dir):
    """Create a sample CSV file for testing."""
    csv_path = temp_dir / "test_data.csv"
    data = [
        ["category", "amount"],
        ["Rent", "1200"],
        ["Food", "450"],
        ["Travel", "300"],
    ]
    with open(csv_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerows(data)
    return str(csv_path)


@pytest.fixture
def sample_tsv_file(temp_dir):
    """Create a sample TSV file for testing."""
    tsv_path = temp_dir / "test_data.tsv"
    data = [
        ["product", "sales"],
        ["Widget", "1000"],
        ["Gadget", "1500"],
    ]
    with open(tsv_path, 'w', newline='') as f:
        writer = csv.writer(f, delimiter='\t')
        writer.writerows(data)
    return str(tsv_path)


@pytest.fixture
def mock_config_file(temp_dir):
    """Create a mock configuration file."""
    config_path = temp_dir / "termpie.yaml"
    config = {
        "pie_chart": {
            "radius": 1,
            "aspect_ratio": 2.0,
            "show_legend": False,
            "animation_duration": "250ms",
            "value_prefix": "$",
            "color_scheme": "pastel",
        }
    }

    import yaml
    with open(config_path, 'w') as f:
        yaml.dump(config, f)

    return str(config_path)


def strip_ansi_codes(text):
    """Remove ANSI escape codes from text for testing."""
    import re
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return ansi_escape.sub('', text)
