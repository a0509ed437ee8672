"""Scenario — детерминированный демонстрационный прогон маркетплейса."""

from .demo import ScenarioOutcome, build_demo_marketplace, format_inventory, run

__all__ = [
    "ScenarioOutcome",
    "build_demo_marketplace",
    "format_inventory",
    "run",
]
