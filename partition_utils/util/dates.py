from datetime import datetime, timedelta

UNITS = {
    "microseconds": timedelta(microseconds=1),
    "milliseconds": timedelta(milliseconds=1),
    "seconds": timedelta(seconds=1),
    "minutes": timedelta(minutes=1),
    "hours": timedelta(hours=1),
    "half_days": timedelta(hours=12),
    "days": timedelta(days=1),
    "weeks": timedelta(weeks=1),
}


def units_between(start_time: datetime, end_time: datetime, unit: str) -> int:
    """Whole units elapsed from start_time to end_time, truncated toward zero."""
    step = UNITS[unit.lower()]
    delta = end_time - start_time
    elapsed = abs(delta) // step
    return -elapsed if delta < timedelta(0) else elapsed


def validate_time_interval(
    start_time: datetime, end_time: datetime, max_duration: int, unit: str
) -> None:
    """
    Raise ValueError unless the interval between start_time and end_time,
    measured in whole units, is at most max_duration.
    An end_time before start_time yields a negative span and always passes.
    Units are fixed-length, see UNITS; months and years raise ValueError.
    """
    if start_time is None:
        raise ValueError("start_time cannot be None.")
    if end_time is None:
        raise ValueError("end_time cannot be None.")
    if unit is None:
        raise ValueError("unit cannot be None.")
    if unit.lower() not in UNITS:
        raise ValueError(f"Unsupported unit '{unit}', expected one of {list(UNITS)}")
    if max_duration is None:
        raise ValueError("max_duration cannot be None.")
    if max_duration <= 0:
        raise ValueError("max_duration must be greater than 0.")

    duration = units_between(start_time, end_time, unit)
    if duration > max_duration:
        raise ValueError(
            f"The time interval cannot be greater than {max_duration} {unit.lower()}."
        )
