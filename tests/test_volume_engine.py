"""
Unit tests for the muscle volume engine.

Covers contribution extraction, daily aggregation, break detection, the
rolling 7-day window, period averaging and chart series assembly.
Expected values are hand-computed from the weighting rules
(primary 1.0, secondary 0.5, full body 1.0 per target).
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from lift_volume.catalog.base import MuscleCatalogEntry
from lift_volume.core.ascii_plot import (
    create_latest_volume_chart,
    create_series_chart,
    create_simple_bar_chart,
)
from lift_volume.core.breaks import identify_break_days
from lift_volume.core.config import (
    FULL_BODY_GROUPS,
    FULL_BODY_TARGET_MUSCLES,
    GROUP_TO_BODY_MAP_IDS,
)
from lift_volume.core.contributions import contributions_for_set, extract_contributions
from lift_volume.core.daily import compute_daily_muscle_volumes
from lift_volume.core.models import RollingWeeklyVolume, WorkoutSet
from lift_volume.core.muscles import body_map_ids, normalize_muscle_name
from lift_volume.core.periods import compute_period_averages
from lift_volume.core.rolling import compute_rolling_weekly_volumes
from lift_volume.core.timeseries import (
    assemble_rolling_series,
    bucket_series_to_months,
    bucket_series_to_weeks,
    build_calendar_series,
    build_daily_series,
)
from lift_volume.core.volume import (
    get_latest_composition,
    get_latest_rolling_volume,
    get_muscle_volume_series,
    get_period_average_series,
    get_rolling_weekly_series,
    latest_rolling_volume,
    run_pipeline,
)

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


class _DictResolver:
    """Exact-name resolver backed by a dict."""

    def __init__(self, *entries: MuscleCatalogEntry):
        self.entries = {e.name: e for e in entries}

    def resolve(self, raw_name: str) -> MuscleCatalogEntry | None:
        return self.entries.get(raw_name)


BENCH = MuscleCatalogEntry.from_fields("Bench Press", "Chest", "Triceps,Shoulders")
ROW = MuscleCatalogEntry.from_fields("Row", "Back")
SQUAT = MuscleCatalogEntry.from_fields("Squat", "Legs")
BURPEE = MuscleCatalogEntry.from_fields("Burpee", "Full Body")
RUN = MuscleCatalogEntry.from_fields("Running", "Cardio", "Legs")
CURL = MuscleCatalogEntry.from_fields("Curl", "Biceps", "Forearms")

RESOLVER = _DictResolver(BENCH, ROW, SQUAT, BURPEE, RUN, CURL)


def _set(name: str, day: date | datetime | None, **kwargs) -> WorkoutSet:
    return WorkoutSet(exercise_name=name, date=day, **kwargs)


def _ts(day: date) -> int:
    return int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp() * 1000)


def _mixed_history() -> list[WorkoutSet]:
    """Irregular history across two months with a break in the middle."""
    start = date(2024, 1, 1)
    offsets = [0, 0, 2, 3, 5, 9, 10, 12, 25, 26, 28, 33, 34]
    names = ["Bench Press", "Row", "Squat", "Curl", "Burpee", "Bench Press", "Row",
             "Squat", "Bench Press", "Curl", "Row", "Burpee", "Squat"]
    return [_set(n, start + timedelta(days=o)) for n, o in zip(names, offsets)]


# ---------------------------------------------------------------------------
# Contribution extraction
# ---------------------------------------------------------------------------


class TestContributions:
    """Weighting rules for a single set."""

    def test_primary_and_secondaries_weight_law(self):
        """1 primary + k secondaries sums to 1.0 + 0.5k."""
        contributions = extract_contributions(BENCH, "muscle")

        assert [(c.key, c.weight) for c in contributions] == [
            ("Chest", 1.0),
            ("Triceps", 0.5),
            ("Shoulders", 0.5),
        ]
        assert sum(c.weight for c in contributions) == 1.0 + 0.5 * 2

    def test_group_mode_normalizes_names(self):
        contributions = extract_contributions(BENCH, "group")

        assert [(c.key, c.weight) for c in contributions] == [
            ("Chest", 1.0),
            ("Arms", 0.5),
            ("Shoulders", 0.5),
        ]

    def test_cardio_primary_contributes_nothing(self):
        assert extract_contributions(RUN, "group") == []
        assert extract_contributions(RUN, "muscle") == []

    def test_invalid_secondaries_are_skipped(self):
        entry = MuscleCatalogEntry.from_fields("Pull Up", "Lats", "None, , Cardio, Full Body, Biceps")

        contributions = extract_contributions(entry, "muscle")

        assert [(c.key, c.weight) for c in contributions] == [("Lats", 1.0), ("Biceps", 0.5)]

    def test_full_body_hits_every_group(self):
        """A full-body set credits 1.0 to each major group, ignoring secondaries."""
        entry = MuscleCatalogEntry.from_fields("Burpee", "Full Body", "Chest")

        contributions = extract_contributions(entry, "group")

        assert [c.key for c in contributions] == list(FULL_BODY_GROUPS)
        assert all(c.weight == 1.0 for c in contributions)

    def test_full_body_muscle_mode_targets(self):
        contributions = extract_contributions(BURPEE, "muscle")

        assert [c.key for c in contributions] == list(FULL_BODY_TARGET_MUSCLES)
        assert len(contributions) == 15

    def test_full_body_body_map_ids_are_unique(self):
        contributions = extract_contributions(BURPEE, "body_map")
        keys = [c.key for c in contributions]

        expected = [i for g in FULL_BODY_GROUPS for i in GROUP_TO_BODY_MAP_IDS[g]]
        assert keys == expected
        assert len(set(keys)) == len(keys)

    def test_body_map_expands_muscle_to_ids(self):
        contributions = extract_contributions(MuscleCatalogEntry.from_fields("Fly", "Chest"), "body_map")

        assert sorted(c.key for c in contributions) == ["mid-lower-pectoralis", "upper-pectoralis"]
        assert all(c.weight == 1.0 for c in contributions)

    def test_group_names_kept_in_muscle_mode(self):
        assert normalize_muscle_name("Back") == "Back"
        assert normalize_muscle_name(" legs ") == "Legs"
        assert normalize_muscle_name("Sternocleidomastoid") == "Other"
        assert body_map_ids("Core") == GROUP_TO_BODY_MAP_IDS["Core"]
        assert [c.key for c in extract_contributions(SQUAT, "muscle")] == ["Legs"]

    def test_unknown_muscle_maps_to_other(self):
        entry = MuscleCatalogEntry.from_fields("Neck Curl", "Sternocleidomastoid")

        assert [c.key for c in extract_contributions(entry, "group")] == ["Other"]
        assert [c.key for c in extract_contributions(entry, "muscle")] == ["Other"]

    def test_anatomical_names_resolve_to_groups(self):
        assert extract_contributions(
            MuscleCatalogEntry.from_fields("Raise", "lateral deltoid"), "group"
        )[0].key == "Shoulders"
        assert extract_contributions(
            MuscleCatalogEntry.from_fields("Leg Curl", "biceps femoris"), "group"
        )[0].key == "Legs"

    def test_invalid_granularity_raises(self):
        with pytest.raises(ValueError):
            extract_contributions(BENCH, "region")  # type: ignore[arg-type]

    def test_warmups_do_not_contribute(self):
        day = date(2024, 3, 5)
        assert contributions_for_set(_set("Bench Press", day, is_warmup=True), RESOLVER) is None
        assert contributions_for_set(_set("Bench Press", day, set_type="warmup"), RESOLVER) is None

    def test_unresolved_or_unnamed_sets_do_not_contribute(self):
        day = date(2024, 3, 5)
        assert contributions_for_set(_set("Mystery Move", day), RESOLVER) is None
        assert contributions_for_set(_set("", day), RESOLVER) is None
        assert contributions_for_set(_set("Running", day), RESOLVER) is None


# ---------------------------------------------------------------------------
# Daily aggregation
# ---------------------------------------------------------------------------


class TestDailyVolumes:
    """Per-day sums."""

    def test_two_sets_same_day(self):
        """Two bench sets: Chest 2.0, Triceps 1.0, Shoulders 1.0."""
        day = date(2024, 3, 5)
        sets = [_set("Bench Press", day), _set("Bench Press", day)]

        daily = compute_daily_muscle_volumes(sets, RESOLVER, "muscle")

        assert len(daily) == 1
        assert daily[0].muscles == {"Chest": 2.0, "Triceps": 1.0, "Shoulders": 1.0}
        assert daily[0].date_key == "2024-03-05"

    def test_times_of_day_collapse_and_rows_sorted(self):
        sets = [
            _set("Row", datetime(2024, 3, 7, 18, 0)),
            _set("Row", datetime(2024, 3, 5, 7, 30)),
            _set("Row", datetime(2024, 3, 5, 21, 15)),
        ]

        daily = compute_daily_muscle_volumes(sets, RESOLVER)

        assert [d.date_key for d in daily] == ["2024-03-05", "2024-03-07"]
        assert daily[0].muscles == {"Back": 2.0}

    def test_dateless_and_warmup_only_days_are_absent(self):
        sets = [
            _set("Row", None),
            _set("Row", date(2024, 3, 6), set_type="warmup"),
            _set("Row", date(2024, 3, 7)),
        ]

        daily = compute_daily_muscle_volumes(sets, RESOLVER)

        assert [d.date_key for d in daily] == ["2024-03-07"]

    def test_empty_input(self):
        assert compute_daily_muscle_volumes([], RESOLVER) == []


# ---------------------------------------------------------------------------
# Break detection
# ---------------------------------------------------------------------------


class TestBreakDetection:
    """Gaps longer than seven days."""

    def test_gap_of_seven_days_is_not_a_break(self):
        daily = compute_daily_muscle_volumes(
            [_set("Row", date(2024, 3, 1)), _set("Row", date(2024, 3, 8))], RESOLVER
        )
        assert identify_break_days(daily) == set()

    def test_gap_of_eight_days_is_a_break(self):
        daily = compute_daily_muscle_volumes(
            [_set("Row", date(2024, 3, 1)), _set("Row", date(2024, 3, 9))], RESOLVER
        )
        assert identify_break_days(daily) == {"2024-03-09"}

    def test_only_first_day_back_is_flagged(self):
        days = [date(2024, 3, 1), date(2024, 3, 20), date(2024, 3, 21)]
        daily = compute_daily_muscle_volumes([_set("Row", d) for d in days], RESOLVER)
        assert identify_break_days(daily) == {"2024-03-20"}

    def test_fewer_than_two_days(self):
        assert identify_break_days([]) == set()
        daily = compute_daily_muscle_volumes([_set("Row", date(2024, 3, 1))], RESOLVER)
        assert identify_break_days(daily) == set()


# ---------------------------------------------------------------------------
# Rolling window
# ---------------------------------------------------------------------------


class TestRollingWindow:
    """Rolling 7-day sums over training days."""

    def test_fourteen_consecutive_days(self):
        """Partial sums 1..6, then a steady 7.0 once the window is full."""
        start = date(2024, 3, 1)
        sets = [_set("Squat", start + timedelta(days=i)) for i in range(14)]

        rolling = run_pipeline(sets, RESOLVER).rolling

        assert [rv.muscles["Legs"] for rv in rolling] == [
            1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 7.0, 7.0, 7.0, 7.0, 7.0, 7.0, 7.0,
        ]
        assert not any(rv.is_in_break for rv in rolling)

    def test_matches_brute_force_sums(self):
        """Each snapshot equals the sum of daily rows within [d - 6, d]."""
        pipeline = run_pipeline(_mixed_history(), RESOLVER, "muscle")

        for rv in pipeline.rolling:
            expected: dict[str, float] = {}
            for d in pipeline.daily:
                if rv.date - timedelta(days=6) <= d.date <= rv.date:
                    for k, v in d.muscles.items():
                        expected[k] = expected.get(k, 0.0) + v

            assert set(rv.muscles) == {k for k, v in expected.items() if v > 1e-9}
            for k, v in rv.muscles.items():
                assert v == pytest.approx(expected[k])
            assert rv.total_sets == pytest.approx(round(sum(expected.values()), 1))

    def test_evicted_muscles_disappear(self):
        sets = [
            _set("Bench Press", date(2024, 3, 1)),
            _set("Row", date(2024, 3, 1)),
            _set("Row", date(2024, 3, 5)),
            _set("Row", date(2024, 3, 9)),
        ]

        rolling = run_pipeline(sets, RESOLVER, "muscle").rolling

        assert rolling[-1].date_key == "2024-03-09"
        assert rolling[-1].muscles == {"Back": 2.0}

    def test_snapshots_are_independent_copies(self):
        start = date(2024, 3, 1)
        rolling = run_pipeline([_set("Row", start + timedelta(days=i)) for i in range(3)], RESOLVER).rolling

        assert rolling[0].muscles == {"Back": 1.0}
        assert rolling[1].muscles == {"Back": 2.0}
        assert rolling[0].muscles is not rolling[1].muscles

    def test_break_day_is_flagged_not_dropped(self):
        """Training on day 1 and day 40: two rows, the second flagged."""
        sets = [_set("Row", date(2024, 1, 1)), _set("Row", date(2024, 2, 9))]

        rolling = run_pipeline(sets, RESOLVER).rolling

        assert [(rv.muscles, rv.is_in_break) for rv in rolling] == [
            ({"Back": 1.0}, False),
            ({"Back": 1.0}, True),
        ]

    def test_total_sets_rounded(self):
        day = date(2024, 3, 1)
        sets = [_set("Curl", day) for _ in range(3)]

        rolling = run_pipeline(sets, RESOLVER, "muscle").rolling

        assert rolling[0].muscles == {"Biceps": 3.0, "Forearms": 1.5}
        assert rolling[0].total_sets == 4.5

    def test_non_negative_everywhere(self):
        pipeline = run_pipeline(_mixed_history(), RESOLVER, "body_map")
        for rv in pipeline.rolling:
            assert rv.total_sets >= 0
            assert all(v >= 0 for v in rv.muscles.values())

    def test_direct_call_with_empty_input(self):
        assert compute_rolling_weekly_volumes([], set()) == []


# ---------------------------------------------------------------------------
# Period averages
# ---------------------------------------------------------------------------


class TestPeriodAverages:
    """Average weekly volume per month/year."""

    def test_monthly_average_of_rolling_rows(self):
        sets = [_set("Row", date(2024, 1, 1)), _set("Row", date(2024, 1, 3))]

        averages = compute_period_averages(run_pipeline(sets, RESOLVER).rolling, "monthly")

        assert len(averages) == 1
        pa = averages[0]
        assert pa.period_key == "2024-01"
        assert pa.period_label == "Jan 24"
        assert pa.start_date == date(2024, 1, 1)
        assert pa.end_date == date(2024, 1, 3)
        assert pa.avg_weekly_sets == {"Back": 1.5}  # (1 + 2) / 2
        assert pa.total_avg_sets == 1.5
        assert pa.weeks_included == 2
        assert pa.training_days_count == 2

    def test_yearly_labels(self):
        sets = [_set("Row", date(2023, 12, 30)), _set("Row", date(2024, 1, 2))]

        averages = compute_period_averages(run_pipeline(sets, RESOLVER).rolling, "yearly")

        assert [(pa.period_key, pa.period_label) for pa in averages] == [("2023", "23"), ("2024", "24")]
        # The Jan 2 window still contains Dec 30
        assert averages[1].avg_weekly_sets == {"Back": 2.0}

    def test_break_row_only_month_is_not_emitted(self):
        """Day 40 is a break-return day and the only February row."""
        sets = [_set("Row", date(2024, 1, 1)), _set("Row", date(2024, 2, 9))]

        averages = compute_period_averages(run_pipeline(sets, RESOLVER).rolling, "monthly")

        assert [pa.period_key for pa in averages] == ["2024-01"]

    def test_break_row_excluded_from_weeks_included(self):
        sets = [
            _set("Row", date(2024, 1, 1)),
            _set("Row", date(2024, 2, 9)),
            _set("Row", date(2024, 2, 10)),
        ]

        averages = compute_period_averages(run_pipeline(sets, RESOLVER).rolling, "monthly")
        february = averages[1]

        assert february.period_key == "2024-02"
        assert february.weeks_included == 1
        assert february.avg_weekly_sets == {"Back": 2.0}
        assert february.end_date == date(2024, 2, 10)

    def test_average_never_exceeds_bucket_max(self):
        rolling = run_pipeline(_mixed_history(), RESOLVER, "muscle").rolling

        for period in ("monthly", "yearly"):
            for pa in compute_period_averages(rolling, period):
                retained = [
                    rv for rv in rolling
                    if not rv.is_in_break and pa.start_date <= rv.date <= pa.end_date
                ]
                for key, avg in pa.avg_weekly_sets.items():
                    assert avg >= 0
                    assert avg <= max(rv.muscles.get(key, 0.0) for rv in retained) + 1e-9

    def test_invalid_period_raises(self):
        with pytest.raises(ValueError):
            compute_period_averages([], "weekly")  # type: ignore[arg-type]

    def test_empty_input(self):
        assert compute_period_averages([], "monthly") == []


# ---------------------------------------------------------------------------
# Series assembly
# ---------------------------------------------------------------------------


class TestSeries:
    """Chart rows and bucketing."""

    def test_rolling_series_rows(self):
        series = get_rolling_weekly_series([_set("Bench Press", date(2024, 3, 5))], RESOLVER, "muscle")

        assert series.keys == ["Chest", "Triceps", "Shoulders"]
        assert series.data == [{
            "timestamp": 1709596800000,
            "date_formatted": "5 Mar",
            "Chest": 1.0,
            "Triceps": 0.5,
            "Shoulders": 0.5,
        }]

    def test_break_rows_left_out_of_series(self):
        sets = [_set("Row", date(2024, 1, 1)), _set("Row", date(2024, 2, 9))]

        series = get_rolling_weekly_series(sets, RESOLVER)

        assert [row["date_formatted"] for row in series.data] == ["1 Jan"]

    def test_explicit_keys_fill_missing_with_zero(self):
        series = get_rolling_weekly_series(
            [_set("Row", date(2024, 3, 5))], RESOLVER, keys=["Chest", "Back"]
        )

        assert series.keys == ["Chest", "Back"]
        assert series.data[0]["Chest"] == 0.0
        assert series.data[0]["Back"] == 1.0

    def test_keys_in_first_seen_order(self):
        sets = [_set("Squat", date(2024, 3, 1)), _set("Row", date(2024, 3, 2))]
        assert get_rolling_weekly_series(sets, RESOLVER).keys == ["Legs", "Back"]

    def test_period_series(self):
        sets = [_set("Row", date(2024, 1, 1)), _set("Row", date(2024, 1, 3))]

        series = get_period_average_series(sets, RESOLVER, "monthly")

        assert series.data == [{
            "timestamp": _ts(date(2024, 1, 1)),
            "date_formatted": "Jan 24",
            "Back": 1.5,
        }]

    def test_bucket_to_weeks_keeps_last_row(self):
        sets = [
            _set("Row", date(2024, 3, 5)),   # Tue
            _set("Row", date(2024, 3, 7)),   # Thu
            _set("Row", date(2024, 3, 11)),  # next Mon
        ]

        weekly = bucket_series_to_weeks(get_rolling_weekly_series(sets, RESOLVER))

        assert weekly.data == [
            {"timestamp": _ts(date(2024, 3, 4)), "date_formatted": "4 Mar", "Back": 2.0},
            {"timestamp": _ts(date(2024, 3, 11)), "date_formatted": "11 Mar", "Back": 3.0},
        ]

    def test_bucket_to_months(self):
        sets = [_set("Row", date(2024, 3, 30)), _set("Row", date(2024, 4, 2))]

        monthly = bucket_series_to_months(get_rolling_weekly_series(sets, RESOLVER))

        assert [(r["date_formatted"], r["Back"]) for r in monthly.data] == [("Mar 24", 1.0), ("Apr 24", 2.0)]

    def test_daily_series_is_not_rolling(self):
        sets = [_set("Curl", date(2024, 3, 1)), _set("Curl", date(2024, 3, 2))]

        series = build_daily_series(sets, RESOLVER, "muscle")

        assert [r["Biceps"] for r in series.data] == [1.0, 1.0]
        assert [r["Forearms"] for r in series.data] == [0.5, 0.5]

    def test_calendar_series_sums_per_month(self):
        sets = [_set("Row", date(2024, 1, 1)), _set("Row", date(2024, 1, 20))]

        series = build_calendar_series(sets, RESOLVER, "monthly")

        assert series.data == [{"timestamp": _ts(date(2024, 1, 1)), "date_formatted": "Jan 24", "Back": 2.0}]

    def test_dispatch_by_period(self):
        sets = _mixed_history()

        assert get_muscle_volume_series(sets, RESOLVER, "weekly") == get_rolling_weekly_series(sets, RESOLVER)
        assert get_muscle_volume_series(sets, RESOLVER, "daily") == build_daily_series(sets, RESOLVER)
        assert get_muscle_volume_series(sets, RESOLVER, "yearly") == get_period_average_series(
            sets, RESOLVER, "yearly"
        )

    def test_daily_series_with_explicit_keys(self):
        series = get_muscle_volume_series(
            [_set("Row", date(2024, 3, 1))], RESOLVER, "daily", keys=["Back", "Chest"]
        )
        assert series.keys == ["Back", "Chest"]
        assert series.data[0]["Chest"] == 0.0

    def test_drop_other(self):
        odd = MuscleCatalogEntry.from_fields("Neck Curl", "Sternocleidomastoid")
        resolver = _DictResolver(odd, ROW)
        sets = [_set("Neck Curl", date(2024, 3, 1)), _set("Row", date(2024, 3, 1))]

        assert get_muscle_volume_series(sets, resolver).keys == ["Other", "Back"]
        trimmed = get_muscle_volume_series(sets, resolver, drop_other=True)
        assert trimmed.keys == ["Back"]
        assert "Other" not in trimmed.data[0]

    def test_invalid_period_raises(self):
        with pytest.raises(ValueError):
            get_muscle_volume_series([], RESOLVER, "hourly")  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            build_calendar_series([], RESOLVER, "hourly")  # type: ignore[arg-type]

    def test_empty_input(self):
        series = assemble_rolling_series([])
        assert series.data == []
        assert series.keys == []
        assert bucket_series_to_weeks(series).data == []


# ---------------------------------------------------------------------------
# Latest snapshot and composition
# ---------------------------------------------------------------------------


class TestLatest:
    """Current status queries."""

    def test_no_history(self):
        assert get_latest_rolling_volume([], RESOLVER) is None
        composition = get_latest_composition([], RESOLVER)
        assert composition.entries == []
        assert composition.label == ""

    def test_skips_trailing_break_row(self):
        sets = [
            _set("Row", date(2024, 1, 1)),
            _set("Row", date(2024, 1, 2)),
            _set("Squat", date(2024, 2, 20)),
        ]

        latest = get_latest_rolling_volume(sets, RESOLVER)

        assert latest is not None
        assert latest.date_key == "2024-01-02"
        assert latest.muscles == {"Back": 2.0}

    def test_all_break_rows_fall_back_to_last(self):
        rows = [
            RollingWeeklyVolume(date(2024, 1, 1), "2024-01-01", {"Back": 1.0}, 1.0, True),
            RollingWeeklyVolume(date(2024, 2, 1), "2024-02-01", {"Legs": 2.0}, 2.0, True),
        ]

        latest = latest_rolling_volume(rows)

        assert latest is rows[-1]
        assert latest_rolling_volume([]) is None

    def test_composition_sorted_descending(self):
        day = date(2024, 3, 1)
        sets = [_set("Bench Press", day), _set("Bench Press", day), _set("Curl", day)]

        composition = get_latest_composition(sets, RESOLVER)

        assert composition.label == "Last 7 days"
        assert composition.entries == [
            ("Chest", 2.0),
            ("Biceps", 1.0),
            ("Shoulders", 1.0),
            ("Triceps", 1.0),
            ("Forearms", 0.5),
        ]


class TestDeterminism:
    """Same input, same output."""

    def test_pipeline_is_idempotent(self):
        sets = tuple(_mixed_history())

        first = run_pipeline(sets, RESOLVER, "muscle")
        second = run_pipeline(sets, RESOLVER, "muscle")

        assert first == second
        assert get_muscle_volume_series(sets, RESOLVER, "monthly") == get_muscle_volume_series(
            sets, RESOLVER, "monthly"
        )

    def test_input_order_does_not_matter(self):
        sets = _mixed_history()
        assert run_pipeline(sets, RESOLVER) == run_pipeline(list(reversed(sets)), RESOLVER)


class TestCharts:
    """ASCII bar charts."""

    def test_bar_lengths_scale_to_max(self):
        chart = create_simple_bar_chart(["Chest", "Back"], [4.0, 2.0], width=10)
        lines = chart.splitlines()

        assert lines[0] == "Chest │██████████ 4.0"
        assert lines[1] == " Back │█████ 2.0"

    def test_empty_inputs(self):
        assert create_simple_bar_chart([], []) == "No data to display."
        assert create_latest_volume_chart(None) == "No training history."
        assert create_series_chart(assemble_rolling_series([])) == "No training history."

    def test_latest_chart_sorted(self):
        latest = get_latest_rolling_volume(
            [_set("Bench Press", date(2024, 3, 5)), _set("Row", date(2024, 3, 5)), _set("Row", date(2024, 3, 5))],
            RESOLVER,
        )

        chart = create_latest_volume_chart(latest)

        assert chart.splitlines()[0] == "Weekly volume as of 2024-03-05 (4.0 sets)"
        assert chart.splitlines()[2].strip().startswith("Back")
