"""Scenarios for generating realistic HR datasets."""

from thoth_hr.scenarios.seed_dataset import SeedDatasetScenario

__all__ = ["SeedDatasetScenario"]
