"""Domain services package."""

from .device_info_folding import (
    ScalingSummary,
    collect_control_items,
    fold_scaling_rows,
)

__all__ = ["ScalingSummary", "collect_control_items", "fold_scaling_rows"]
