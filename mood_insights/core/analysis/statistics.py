"""
Shared statistics helpers for the mood analytics: means, population standard
deviation, z-scores, Pearson correlation and date alignment of series.
"""

import numpy as np
from scipy import stats


def mean(values):
    """Arithmetic mean; 0.0 for an empty sequence"""
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def population_std(values):
    """Population (not sample) standard deviation; 0.0 for an empty sequence"""
    if len(values) == 0:
        return 0.0
    return float(np.std(np.asarray(values, dtype=float)))


def z_score(value, center, spread):
    """How many standard deviations value lies from center. A zero spread counts as 1."""
    return (value - center) / (spread or 1)


def pearson_correlation(x, y):
    """
    Calculate the Pearson correlation coefficient between two aligned series.

    Args:
        x: First numeric series
        y: Second numeric series of the same length

    Returns:
        float: Coefficient in [-1, 1]; 0.0 when the lengths differ, the series
        are empty, or either series has zero variance
    """
    if len(x) != len(y) or len(x) == 0:
        return 0.0

    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    # A constant series can leave rounding residue after centering, so test it directly
    if np.ptp(x) == 0 or np.ptp(y) == 0:
        return 0.0

    x_centered = x - x.mean()
    y_centered = y - y.mean()

    denominator = np.sqrt(np.sum(x_centered ** 2) * np.sum(y_centered ** 2))
    if denominator == 0:
        return 0.0

    r = float(np.sum(x_centered * y_centered) / denominator)
    # Floating point can land a hair outside the valid range for exact fits
    return round(max(-1.0, min(1.0, r)), 10)


def correlation_p_value(r, sample_size):
    """Two-sided p-value for a Pearson coefficient, or None with fewer than 3 points"""
    if sample_size < 3:
        return None
    if abs(r) >= 1.0:
        return 0.0
    t_stat = r * np.sqrt((sample_size - 2) / (1 - r ** 2))
    return float(2 * stats.t.sf(abs(t_stat), sample_size - 2))


def align_by_date(mood_history, sleep_data, activity_data):
    """
    Align mood, sleep and activity records on calendar date.

    Only dates present in all three series are kept. When several mood
    observations share a date the last one in input order wins; the same
    applies to sleep and activity records.

    Returns:
        list: Dicts with date, mood, sleep and activity keys, sorted by date
    """
    mood_by_date = {m.timestamp.date().isoformat(): m.intensity for m in mood_history}
    sleep_by_date = {s.date: s.duration_minutes for s in sleep_data}
    activity_by_date = {a.date: a.active_minutes for a in activity_data}

    shared_dates = set(mood_by_date) & set(sleep_by_date) & set(activity_by_date)

    return [
        {
            'date': date,
            'mood': mood_by_date[date],
            'sleep': sleep_by_date[date],
            'activity': activity_by_date[date],
        }
        for date in sorted(shared_dates)
    ]


def date_span_days(dates):
    """Number of calendar days covered by a list of ISO date strings (inclusive)"""
    if not dates:
        return 0
    parsed = sorted(np.datetime64(d, 'D') for d in dates)
    return int((parsed[-1] - parsed[0]).astype(int)) + 1
