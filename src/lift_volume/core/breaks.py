"""Training break detection over sorted daily volumes."""

from typing import Sequence

from .config import BREAK_THRESHOLD_DAYS
from .dates import days_between
from .models import DailyMuscleVolume


def identify_break_days(daily_volumes: Sequence[DailyMuscleVolume]) -> set[str]:
    """
    Date keys of training days that follow a break.

    A break is a gap of more than BREAK_THRESHOLD_DAYS calendar days between
    consecutive training days.  Only the first day back is flagged; later
    days are not, even while their rolling window still spans the break.

    Args:
        daily_volumes: Daily volumes sorted ascending by date

    Returns:
        Set of date keys (YYYY-MM-DD); empty for fewer than two days
    """
    break_keys: set[str] = set()

    if len(daily_volumes) < 2:
        return break_keys

    for i in range(1, len(daily_volumes)):
        gap_days = days_between(daily_volumes[i - 1].date, daily_volumes[i].date)
        if gap_days > BREAK_THRESHOLD_DAYS:
            break_keys.add(daily_volumes[i].date_key)

    return break_keys
