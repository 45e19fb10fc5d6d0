#!/usr/bin/env python3
"""
Sweep-in reveal animation for pie charts.

The sweep advances at a uniform rate in "circle space" and is then mapped
through the aspect ratio, so on a stretched character grid the boundary
appears to move at a constant visual speed instead of racing through the
flattened top and bottom of the ellipse.
"""

import dataclasses
import enum
import math
import time
from typing import Callable, List, Sequence


class SweepPhase(enum.Enum):
    NOT_ANIMATING = "not_animating"
    SWEEPING = "sweeping"
    COMPLETE = "complete"


def corrected_sweep_angle(progress: float, aspect_ratio: float) -> float:
    """Map linear progress (0..1) to a sweep angle in degrees, in [0, 360)."""
    uniform_angle = progress * 2.0 * math.pi
    x = math.cos(uniform_angle) / aspect_ratio
    y = math.sin(uniform_angle)
    corrected = math.degrees(math.atan2(y, x))
    if corrected < 0:
        corrected += 360
    return corrected


class SweepAnimator:
    """Tracks how much of the pie is revealed.

    Call update() once per frame, then visible_segments() to get the
    categories to draw. A disabled animator always reports 360 degrees.
    """

    def __init__(self, enabled: bool, duration: float, aspect_ratio: float,
                 clock: Callable[[], float] = time.monotonic):
        self.duration = duration
        self.aspect_ratio = aspect_ratio
        self._clock = clock

        if enabled:
            self.phase = SweepPhase.SWEEPING
            self.sweep_angle = 0.0
            self.start_time = clock()
        else:
            self.phase = SweepPhase.NOT_ANIMATING
            self.sweep_angle = 360.0
            self.start_time = None

    @property
    def elapsed(self) -> float:
        if self.start_time is None:
            return 0.0
        return self._clock() - self.start_time

    @property
    def progress(self) -> float:
        """Fraction of the duration that has passed, clamped to 1."""
        if self.phase is not SweepPhase.SWEEPING:
            return 1.0
        return min(1.0, max(0.0, self.elapsed / self.duration))

    @property
    def is_complete(self) -> bool:
        if self.phase is SweepPhase.SWEEPING:
            return self.elapsed >= self.duration
        return True

    def update(self) -> float:
        """Advance the sweep to the current time and return the sweep angle."""
        if self.phase is not SweepPhase.SWEEPING:
            return self.sweep_angle

        progress = self.elapsed / self.duration
        if progress >= 1.0:
            self.phase = SweepPhase.COMPLETE
            self.sweep_angle = 360.0
        else:
            self.sweep_angle = corrected_sweep_angle(max(0.0, progress), self.aspect_ratio)
        return self.sweep_angle

    def restart(self):
        """Start the sweep over. Does nothing when animation is disabled."""
        if self.phase is SweepPhase.NOT_ANIMATING:
            return
        self.phase = SweepPhase.SWEEPING
        self.sweep_angle = 0.0
        self.start_time = self._clock()

    def visible_segments(self, values: Sequence) -> List:
        """Return the categories revealed so far.

        Categories ending at or before the sweep are returned as-is. The one
        the sweep is currently passing through is replaced by a partial copy
        ending at the sweep angle; everything after it is hidden.
        """
        if self.phase is not SweepPhase.SWEEPING:
            return list(values)

        visible = []
        for v in values:
            if v.angle <= self.sweep_angle:
                visible.append(v)
                continue

            prev_angle = visible[-1].angle if visible else 0.0
            if self.sweep_angle > prev_angle:
                fraction = (self.sweep_angle - prev_angle) / (v.angle - prev_angle)
                visible.append(dataclasses.replace(v, value=v.value * fraction, angle=self.sweep_angle))
            break

        return visible
