"""Free-form delivery time normalization."""

import re

# (start)(-|to end)?(am|pm)? e.g. "2:30", "2:30pm", "2:30-3:00pm", "2-3pm", "11to1pm"
TIME_RANGE_PATTERN = re.compile(r"^(\d{1,2}(?:[:.]\d{2})?)(?:(?:-|to)(\d{1,2}(?:[:.]\d{2})?))?([ap]m)?$")
TIME_FALLBACK_PATTERN = re.compile(r"(\d{1,2}(?:[:.]\d{2})?)([ap]m)?")


def _time_value(time_str: str) -> float:
    """Return "11:30" as 11.3 for ordering range ends."""
    return float(time_str.replace(":", "."))


def _format_hh_mm(time_str: str, suffix: str | None) -> str:
    """Format "2:30" plus an optional am/pm suffix as 24-hour "14:30"."""
    if not time_str:
        return ""
    hour_str, _, minute_str = time_str.replace(".", ":").partition(":")
    hour = int(hour_str)
    minute_str = minute_str or "00"

    if suffix == "pm" and hour < 12:
        hour += 12
    if suffix == "am" and hour == 12:
        hour = 0

    if hour > 23 or int(minute_str) > 59:
        return ""
    return f"{hour:02d}:{minute_str}"


def normalize_time(raw: str) -> str:
    """
    Normalize a delivery time expression to 24-hour ``HH:MM``.

    Ranges keep only their start. When only the end of a range carries a
    suffix, the start's suffix is inferred:
    - "2-3pm" -> 14:00
    - "11-1pm" -> 11:00 (range crosses noon, start is morning)
    - "9-11am" -> 09:00

    Args:
        raw: Time text as typed, e.g. "2 - 3 PM"

    Returns:
        "HH:MM", or "" if nothing time-like was found
    """
    if not raw:
        return ""

    clean = re.sub(r"\s+", "", raw.lower())

    match = TIME_RANGE_PATTERN.match(clean)
    if not match:
        fallback = TIME_FALLBACK_PATTERN.search(clean)
        if not fallback:
            return ""
        return _format_hh_mm(fallback.group(1), fallback.group(2))

    start_str, end_str, suffix = match.groups()

    start_suffix = suffix
    if end_str and suffix:
        if suffix == "pm":
            start_val = _time_value(start_str)
            if start_val < 12 and start_val > _time_value(end_str):
                start_suffix = "am"
            else:
                start_suffix = "pm"
        else:
            start_suffix = "am"

    return _format_hh_mm(start_str, start_suffix)
