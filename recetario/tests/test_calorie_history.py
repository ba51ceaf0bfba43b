# recetario/tests/test_calorie_history.py
from datetime import date, datetime, timedelta, timezone

import pytest

from recetario.services.calorie_history import (
    DailyCalories,
    DayRange,
    aggregate,
    consolidate,
    parse_timezone_offset,
    resolve_week_window,
)
from recetario.services import planner as planner_service
from recetario.utils.dates import utc_today
from recetario.utils.errors import ValidationError


def _midnight(day: date) -> datetime:
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


def test_consolidate_sums_plans_of_the_same_day():
    totals = consolidate([
        (_midnight(date(2024, 1, 1)), 300),
        (datetime(2024, 1, 1, 18, 30, tzinfo=timezone.utc), 200),
        (datetime(2024, 1, 2, 0, 0), 100),
    ])
    assert totals == {date(2024, 1, 1): 500, date(2024, 1, 2): 100}


def test_aggregate_fills_window_with_zeros():
    plans = [(_midnight(date(2024, 1, 1)), 1000), (_midnight(date(2024, 1, 3)), 500)]

    rows = aggregate(plans, DayRange(date(2024, 1, 1), date(2024, 1, 7)))

    assert rows == [
        DailyCalories(date(2024, 1, 1), 1000),
        DailyCalories(date(2024, 1, 2), 0),
        DailyCalories(date(2024, 1, 3), 500),
        DailyCalories(date(2024, 1, 4), 0),
        DailyCalories(date(2024, 1, 5), 0),
        DailyCalories(date(2024, 1, 6), 0),
        DailyCalories(date(2024, 1, 7), 0),
    ]


def test_aggregate_without_plans_is_empty():
    assert aggregate([], DayRange(date(2024, 1, 1), date(2024, 1, 7))) == []
    assert aggregate([], today=date(2024, 1, 7)) == []


def test_aggregate_with_plans_outside_window_reports_zeros():
    rows = aggregate([(_midnight(date(2023, 6, 1)), 900)], DayRange(date(2024, 1, 1), date(2024, 1, 7)))

    assert len(rows) == 7
    assert all(row.total_calories == 0 for row in rows)


def test_aggregate_full_history_runs_to_today():
    plans = [(_midnight(date(2024, 1, 2)), 400)]

    rows = aggregate(plans, today=date(2024, 1, 5))

    assert [row.day for row in rows] == [date(2024, 1, d) for d in range(2, 6)]
    assert [row.total_calories for row in rows] == [400, 0, 0, 0]


def test_aggregate_full_history_with_only_future_plans_is_empty():
    assert aggregate([(_midnight(date(2024, 2, 1)), 400)], today=date(2024, 1, 5)) == []


@pytest.mark.parametrize("raw, expected", [(None, 0), ("", 0), ("300", 300), ("-120", -120), (" 60 ", 60)])
def test_parse_timezone_offset(raw, expected):
    assert parse_timezone_offset(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "1.5", "1440", "-1440"])
def test_parse_timezone_offset_rejects_bad_values(raw):
    with pytest.raises(ValidationError):
        parse_timezone_offset(raw)


def test_resolve_week_window_utc():
    assert resolve_week_window("2024-01-01") == DayRange(date(2024, 1, 1), date(2024, 1, 7))


def test_resolve_week_window_behind_utc_keeps_day():
    # UTC-5: local midnight is 05:00 UTC the same day
    assert resolve_week_window("2024-01-01", "300") == DayRange(date(2024, 1, 1), date(2024, 1, 7))


def test_resolve_week_window_ahead_of_utc_starts_previous_day():
    # UTC+2: local midnight is 22:00 UTC the day before
    assert resolve_week_window("2024-01-01", "-120") == DayRange(date(2023, 12, 31), date(2024, 1, 6))


@pytest.mark.parametrize("start_date", [None, "", "2024-1-1", "01/01/2024", "2024-02-30", "hoy"])
def test_resolve_week_window_rejects_bad_dates(start_date):
    with pytest.raises(ValidationError):
        resolve_week_window(start_date, "0")


def test_planner_calorie_history_reads_database(db, user, make_recipe, make_plan):
    soup = make_recipe("Sopa", kcal=300)
    eggs = make_recipe("Huevos", kcal=220)
    make_plan(user, date(2024, 1, 1), [soup, eggs, eggs])
    make_plan(user, date(2024, 1, 3), [])

    rows = planner_service.calorie_history(db, user.id, DayRange(date(2024, 1, 1), date(2024, 1, 3)))

    assert [(row.day, row.total_calories) for row in rows] == [
        (date(2024, 1, 1), 740),
        (date(2024, 1, 2), 0),
        (date(2024, 1, 3), 0),
    ]


def test_calorie_history_endpoint(client, user, make_recipe, make_plan, headers_for):
    make_plan(user, date(2024, 1, 2), [make_recipe("Sopa", kcal=300)])

    response = client.get(
        "/api/users/me/calorie-history",
        params={"startDate": "2024-01-01", "timezoneOffset": "300"},
        headers=headers_for(user),
    )

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 7
    assert body[0] == {"date": "2024-01-01", "totalCalories": 0}
    assert body[1] == {"date": "2024-01-02", "totalCalories": 300}


def test_calorie_history_endpoint_without_plans(client, user, headers_for):
    response = client.get(
        "/api/users/me/calorie-history",
        params={"startDate": "2024-01-01"},
        headers=headers_for(user),
    )

    assert response.status_code == 200
    assert response.json() == []


def test_calorie_history_endpoint_requires_start_date(client, user, headers_for):
    response = client.get("/api/users/me/calorie-history", headers=headers_for(user))

    assert response.status_code == 400
    assert response.json() == {"message": "startDate is required"}


def test_full_calorie_history_endpoint(client, user, make_recipe, make_plan, headers_for):
    today = utc_today()
    make_plan(user, today - timedelta(days=2), [make_recipe("Sopa", kcal=300)])

    response = client.get("/api/users/me/full-calorie-history", headers=headers_for(user))

    assert response.status_code == 200
    body = response.json()
    assert [row["date"] for row in body] == [
        (today - timedelta(days=n)).isoformat() for n in (2, 1, 0)
    ]
    assert [row["totalCalories"] for row in body] == [300, 0, 0]


def test_aggregate_full_history_scenario():
    plans = [(_midnight(date(2024, 1, 1)), 300), (_midnight(date(2024, 1, 3)), 500)]

    rows = aggregate(plans, today=date(2024, 1, 3))

    assert rows == [
        DailyCalories(date(2024, 1, 1), 300),
        DailyCalories(date(2024, 1, 2), 0),
        DailyCalories(date(2024, 1, 3), 500),
    ]
