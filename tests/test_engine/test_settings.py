"""Tests for settings validation at the engine boundary."""

import math

import pytest
from pydantic import ValidationError

from inkgroup.models.settings import DEFAULT_IDLE_TIME, DEFAULT_THRESHOLD, GroupingSettings


def test_defaults():
    s = GroupingSettings()
    assert s.grouping_threshold == DEFAULT_THRESHOLD == 0.5
    assert s.idle_time == DEFAULT_IDLE_TIME == 1.5


@pytest.mark.parametrize("raw, expected", [(1.7, 1.0), (-0.3, 0.0), (0.25, 0.25), (math.nan, 0.5)])
def test_threshold_clamped(raw, expected):
    assert GroupingSettings(grouping_threshold=raw).grouping_threshold == expected


@pytest.mark.parametrize("raw", [0.0, -2.0, math.inf, math.nan])
def test_invalid_idle_time_replaced(raw):
    assert GroupingSettings(idle_time=raw).idle_time == DEFAULT_IDLE_TIME


def test_camel_case_aliases():
    s = GroupingSettings.model_validate({"groupingThreshold": 0.7, "idleTime": 3})
    assert s.grouping_threshold == 0.7
    assert s.idle_time == 3.0


def test_settings_are_frozen():
    s = GroupingSettings()
    with pytest.raises(ValidationError):
        s.grouping_threshold = 0.9
