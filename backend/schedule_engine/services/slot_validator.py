"""
Availability time slot validation.

Slots are compared as zero-padded HH:MM strings, so lexicographic order is
chronological order.
"""

from typing import List, Sequence

from schedule_engine.schemas.availability import TimeSlot, ValidatedTimeSlot
from schedule_engine.utils.time_utils import is_valid_time

END_BEFORE_START = "End time cannot be before start time"
SLOTS_OVERLAP = "Time slots cannot overlap"
INVALID_FORMAT = "Invalid time format, expected HH:MM"


def _within(value: str, start: str, end: str) -> bool:
    """Closed-interval containment."""
    return start <= value <= end


def _overlaps(slot: TimeSlot, other: TimeSlot) -> bool:
    return (
        _within(slot.start, other.start, other.end)
        or _within(slot.end, other.start, other.end)
        or _within(other.start, slot.start, slot.end)
    )


def validate_time_slots(slots: Sequence[TimeSlot]) -> List[ValidatedTimeSlot]:
    """
    Annotate each slot with an error message, or None when it is valid.

    Touching slots (one ends when the other starts) count as overlapping.
    A zero-length slot is accepted. Never raises.
    """
    validated = []
    for index, slot in enumerate(slots):
        error = None
        if not (is_valid_time(slot.start) and is_valid_time(slot.end)):
            error = INVALID_FORMAT
        elif slot.end < slot.start:
            error = END_BEFORE_START
        elif any(
            _overlaps(slot, other)
            for other_index, other in enumerate(slots)
            if other_index != index and is_valid_time(other.start) and is_valid_time(other.end)
        ):
            error = SLOTS_OVERLAP
        validated.append(ValidatedTimeSlot(start=slot.start, end=slot.end, error=error))
    return validated


def has_slot_errors(slots: Sequence[ValidatedTimeSlot]) -> bool:
    """True when any slot blocks submission."""
    return any(slot.error for slot in slots)
