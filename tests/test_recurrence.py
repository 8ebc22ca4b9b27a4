# SPDX-License-Identifier: MIT

from copy import deepcopy

from conftest import local, make_event, make_rule

from chronoloop.model.recurrence_rule import RecurrenceKind
from chronoloop.service.recurrence import expand_occurrences


def days(occurrences):
    return [occurrence["start_time"].day for occurrence in occurrences]


def test_daily_every_other_day():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        end_time=local(2024, 1, 1, 10),
        recurrence=make_rule(RecurrenceKind.DAILY, interval=2),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 10).end_of("day")
    )

    assert days(occurrences) == [1, 3, 5, 7, 9]
    assert all(occurrence["start_time"].hour == 9 for occurrence in occurrences)


def test_weekly_monday_wednesday_friday_in_one_week():
    # 2024-01-01 is a Monday
    event = make_event(
        start_time=local(2024, 1, 1, 8, 30),
        end_time=local(2024, 1, 1, 9),
        recurrence=make_rule(RecurrenceKind.WEEKLY, days_of_week=[1, 3, 5]),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 7).end_of("day")
    )

    assert len(occurrences) == 3
    assert days(occurrences) == [1, 3, 5]
    assert [o["start_time"].isoweekday() for o in occurrences] == [1, 3, 5]


def test_weekly_interval_skips_whole_weeks():
    event = make_event(
        start_time=local(2024, 1, 3, 12),
        recurrence=make_rule(RecurrenceKind.WEEKLY, interval=2, days_of_week=[1, 3]),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 31).end_of("day")
    )

    # Monday the 1st precedes the anchor; weeks of the 7th and 21st are skipped
    assert days(occurrences) == [3, 15, 17, 29, 31]


def test_weekly_without_days_uses_anchor_weekday():
    event = make_event(
        start_time=local(2024, 1, 4, 18),
        recurrence=make_rule(RecurrenceKind.WEEKLY),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 31).end_of("day")
    )

    assert days(occurrences) == [4, 11, 18, 25]


def test_monthly_day_31_skips_short_months():
    event = make_event(
        start_time=local(2024, 1, 31, 9),
        recurrence=make_rule(RecurrenceKind.MONTHLY, day_of_month=31),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 5, 31).end_of("day")
    )

    months = [occurrence["start_time"].month for occurrence in occurrences]
    assert 2 not in months
    assert months == [1, 3, 5]
    assert all(occurrence["start_time"].day == 31 for occurrence in occurrences)


def test_yearly_leap_day_only_in_leap_years():
    event = make_event(
        start_time=local(2024, 2, 29, 7),
        recurrence=make_rule(RecurrenceKind.YEARLY),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2032, 12, 31).end_of("year")
    )

    assert [o["start_time"].year for o in occurrences] == [2024, 2028, 2032]


def test_non_recurring_event_passes_through_when_inside_window():
    inside = make_event("inside", start_time=local(2024, 1, 5, 9))
    outside = make_event("outside", start_time=local(2024, 2, 5, 9))

    occurrences = expand_occurrences(
        [inside, outside], local(2024, 1, 1), local(2024, 1, 31).end_of("day")
    )

    assert occurrences == [inside]


def test_unknown_and_custom_kinds_are_not_expanded():
    custom = make_event(
        "custom",
        start_time=local(2024, 1, 5, 9),
        recurrence=make_rule(RecurrenceKind.CUSTOM),
    )
    unknown = make_event(
        "unknown",
        start_time=local(2024, 1, 6, 9),
        recurrence=make_rule("fortnightly"),
    )

    occurrences = expand_occurrences(
        [custom, unknown], local(2024, 1, 1), local(2024, 1, 31).end_of("day")
    )

    assert [occurrence["id"] for occurrence in occurrences] == ["custom", "unknown"]


def test_exceptions_are_skipped():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(
            RecurrenceKind.DAILY,
            exceptions=["2024-01-02", local(2024, 1, 4).date()],
        ),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 5).end_of("day")
    )

    assert days(occurrences) == [1, 3, 5]


def test_exceptions_still_count_towards_max_occurrences():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(
            RecurrenceKind.DAILY, exceptions=["2024-01-02"], max_occurrences=3
        ),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 31).end_of("day")
    )

    assert days(occurrences) == [1, 3]


def test_max_occurrences_counts_from_anchor_not_window():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(RecurrenceKind.DAILY, max_occurrences=5),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 4), local(2024, 1, 31).end_of("day")
    )

    assert days(occurrences) == [4, 5]


def test_end_date_stops_on_or_after():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(RecurrenceKind.DAILY, end_date=local(2024, 1, 4, 9)),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 31).end_of("day")
    )

    assert days(occurrences) == [1, 2, 3]


def test_interval_zero_is_treated_as_one():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(RecurrenceKind.DAILY, interval=0),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 3).end_of("day")
    )

    assert days(occurrences) == [1, 2, 3]


def test_occurrence_ids_and_durations():
    event = make_event(
        "standup",
        start_time=local(2024, 1, 1, 9),
        end_time=local(2024, 1, 1, 9, 45),
        recurrence=make_rule(RecurrenceKind.DAILY),
    )
    window_start = local(2024, 1, 2)
    window_end = local(2024, 1, 6).end_of("day")

    occurrences = expand_occurrences([event], window_start, window_end)

    assert [o["id"] for o in occurrences] == [
        "standup-20240102",
        "standup-20240103",
        "standup-20240104",
        "standup-20240105",
        "standup-20240106",
    ]
    for occurrence in occurrences:
        assert occurrence["cloned_from_id"] == "standup"
        assert window_start <= occurrence["start_time"] <= window_end
        assert (
            occurrence["end_time"] - occurrence["start_time"]
        ).total_seconds() == 45 * 60


def test_occurrences_without_end_time_have_no_end():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        end_time=None,
        recurrence=make_rule(RecurrenceKind.DAILY),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 2).end_of("day")
    )

    assert [o["end_time"] for o in occurrences] == [None, None]


def test_source_events_are_not_mutated():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        end_time=local(2024, 1, 1, 10),
        recurrence=make_rule(RecurrenceKind.WEEKLY, days_of_week=[1, 2]),
    )
    before = deepcopy(event)

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 31).end_of("day")
    )
    occurrences[0]["title"] = "changed"

    assert event == before


def test_rule_that_never_matches_terminates():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(RecurrenceKind.MONTHLY, day_of_month=40),
    )

    assert (
        expand_occurrences([event], local(2024, 1, 1), local(2030, 1, 1)) == []
    )


def test_monthly_every_third_month():
    event = make_event(
        start_time=local(2024, 1, 15, 9),
        recurrence=make_rule(RecurrenceKind.MONTHLY, interval=3),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 12, 31).end_of("day")
    )

    assert [o["start_time"].month for o in occurrences] == [1, 4, 7, 10]
    assert days(occurrences) == [15, 15, 15, 15]


def test_yearly_rule_date_differs_from_anchor():
    event = make_event(
        start_time=local(2024, 1, 15, 9),
        recurrence=make_rule(RecurrenceKind.YEARLY, month_of_year=3, day_of_month=10),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2026, 12, 31).end_of("day")
    )

    assert [o["start_time"].to_date_string() for o in occurrences] == [
        "2024-03-10",
        "2025-03-10",
        "2026-03-10",
    ]
    assert all(o["start_time"].hour == 9 for o in occurrences)


def test_weekly_anchored_on_sunday_keeps_saturday_in_the_same_week():
    # 2024-01-07 is a Sunday
    event = make_event(
        start_time=local(2024, 1, 7, 10),
        recurrence=make_rule(RecurrenceKind.WEEKLY, interval=2, days_of_week=[0, 6]),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 31).end_of("day")
    )

    assert days(occurrences) == [7, 13, 21, 27]


def test_weekly_anchored_on_saturday_skips_the_sunday_before():
    # 2024-01-06 is a Saturday; Sunday the 31st opens its week
    event = make_event(
        start_time=local(2024, 1, 6, 10),
        recurrence=make_rule(RecurrenceKind.WEEKLY, interval=2, days_of_week=[0, 6]),
    )

    occurrences = expand_occurrences(
        [event], local(2023, 12, 25), local(2024, 1, 31).end_of("day")
    )

    assert [o["start_time"].to_date_string() for o in occurrences] == [
        "2024-01-06",
        "2024-01-14",
        "2024-01-20",
        "2024-01-28",
    ]


def test_end_date_before_window_gives_nothing():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(RecurrenceKind.DAILY, end_date=local(2024, 1, 5)),
    )

    assert (
        expand_occurrences([event], local(2024, 2, 1), local(2024, 2, 29).end_of("day"))
        == []
    )


def test_string_weekdays_are_read_as_numbers():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(RecurrenceKind.WEEKLY, days_of_week=["1", "3"]),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 7).end_of("day")
    )

    assert days(occurrences) == [1, 3]


def test_invalid_weekdays_fall_back_to_anchor_weekday():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(RecurrenceKind.WEEKLY, days_of_week=["x", 9, None]),
    )

    occurrences = expand_occurrences(
        [event], local(2024, 1, 1), local(2024, 1, 14).end_of("day")
    )

    assert days(occurrences) == [1, 8]


def test_non_numeric_max_occurrences_is_ignored():
    ignored = make_event(
        "ignored",
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(RecurrenceKind.DAILY, max_occurrences="three"),
    )
    numeric = make_event(
        "numeric",
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(RecurrenceKind.DAILY, max_occurrences="2"),
    )

    occurrences = expand_occurrences(
        [ignored, numeric], local(2024, 1, 1), local(2024, 1, 3).end_of("day")
    )

    assert [o["id"] for o in occurrences] == [
        "ignored-20240101",
        "ignored-20240102",
        "ignored-20240103",
        "numeric-20240101",
        "numeric-20240102",
    ]


def test_malformed_interval_and_exceptions_are_tolerated():
    event = make_event(
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(
            RecurrenceKind.DAILY, interval="often", exceptions=[42, "2024-01-02"]
        ),
    )
    every_other = make_event(
        "every-other",
        start_time=local(2024, 1, 1, 9),
        recurrence=make_rule(RecurrenceKind.DAILY, interval="2"),
    )

    occurrences = expand_occurrences(
        [event, every_other], local(2024, 1, 1), local(2024, 1, 4).end_of("day")
    )

    assert days(occurrences) == [1, 3, 4, 1, 3]
