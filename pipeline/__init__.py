"""Pipeline module for batch labelling."""

from .labels import (
    add_time_unit_labels,
    label_durations,
    read_durations,
    write_durations,
)

__all__ = [
    "add_time_unit_labels",
    "label_durations",
    "read_durations",
    "write_durations",
]
