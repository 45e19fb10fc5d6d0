"""termpie - Terminal pie charts with legends and sweep-in animation"""

__version__ = "0.1.0"
__author__ = "termpie contributors"
__description__ = "Render pie charts as colored text for terminal interfaces"

from .config import ChartConfig, load_config
from .pie_chart import PieChart, PieData, PieValue, new_pie_chart
from .sweep import SweepAnimator, SweepPhase

__all__ = [
    'ChartConfig',
    'PieChart',
    'PieData',
    'PieValue',
    'SweepAnimator',
    'SweepPhase',
    'load_config',
    'new_pie_chart',
]
