# rein_planner/config/__init__.py
"""Configuration system for rein-planner."""

from .loader import get_config_path, load_config
from .schema import OutputConfig, ReinPlannerConfig, ScheduleConfig

__all__ = [
    "ReinPlannerConfig",
    "ScheduleConfig",
    "OutputConfig",
    "load_config",
    "get_config_path",
]
