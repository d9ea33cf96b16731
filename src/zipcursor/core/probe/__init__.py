"""Probe functionality: structural detection of sequence features."""

from zipcursor.core.probe.models import HasCursors, HasSize, SequenceFeatures
from zipcursor.core.probe.operations import has_size, probe

__all__ = [
    # Models
    "HasSize",
    "HasCursors",
    "SequenceFeatures",
    # Operations
    "has_size",
    "probe",
]
