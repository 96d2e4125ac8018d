from datetime import datetime

REFERENCE_DAY = '1970-01-01'


def calculate_sleep_duration(bedtime: str, wake_time: str) -> float:
    """
    Calculate sleep duration in hours between two clock times.

    Both times are placed on the same reference day; a negative difference
    means the night crossed midnight and 24 hours are added. Time strings are
    not validated here, malformed input raises ValueError from the parser.

    Args:
        bedtime: Bedtime as "HH:MM" (or "HH:MM:SS")
        wake_time: Wake time as "HH:MM" (or "HH:MM:SS")

    Returns:
        float: Hours slept, in [0, 24)
    """
    bed = datetime.fromisoformat(f"{REFERENCE_DAY}T{bedtime}")
    wake = datetime.fromisoformat(f"{REFERENCE_DAY}T{wake_time}")
    duration = (wake - bed).total_seconds() / 3600

    # Adjust for overnight sleep
    if duration < 0:
        duration += 24

    return duration
