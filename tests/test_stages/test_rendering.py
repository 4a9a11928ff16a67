"""
Unit tests for the Report Renderer and summary table.
"""

from datetime import date, timedelta

import pytest

from menureport.models.menu_item import MenuItem
from menureport.models.rating import Rating
from menureport.models.stats import PersonStatistics
from menureport.stages.rendering import (
    ReportRenderer,
    format_number,
    format_percent,
    summary_frame,
)


@pytest.fixture
def renderer():
    return ReportRenderer(title="Year of the YYL", intro="Forty dishes.")


def dated_stats():
    return PersonStatistics(
        entries=2,
        has_date=True,
        max_per_week=1,
        longest=timedelta(days=9),
        longest_after="Fried Rice",
        weekdays=[0, 0, 0, 0, 1, 0, 1],
        weekday_ratios=[0.0, 0.0, 0.0, 0.0, 50.0, 0.0, 50.0],
        ratings=[0, 0, 1, 1],
        rating_ratios=[0.0, 0.0, 50.0, 50.0],
    )


def test_format_number():
    assert format_number(10.0) == "10"
    assert format_number(8.5) == "8.5"


def test_format_percent():
    assert format_percent(5.0) == " 5%"
    assert format_percent(100 / 3) == "33%"
    assert format_percent(100.0) == "100%"


def test_render_items_and_ratings(renderer):
    item = MenuItem(number=7, name="Mac & Cheese")
    item.rate("Steve", Rating(number=7, date=None, value=6.0, max=10.0))
    item.rate("Andrew", Rating(number=7, date=date(2015, 1, 1), value=8.5, max=10.0))

    html = renderer.render([item], {})

    assert "<h1>Year of the YYL</h1>" in html
    assert "#7: Mac &amp; Cheese" in html
    assert 'src="img/07.jpg"' in html
    assert "<li>Andrew: 8.5/10 on Thu Jan 1 2015</li>" in html
    assert "<li>Steve: 6/10</li>" in html
    # People listed in name order
    assert html.index("Andrew:") < html.index("Steve:")


def test_render_statistics_with_dates(renderer):
    html = renderer.render([], {"Bob": dated_stats()})

    assert "Most visits in a week: 1" in html
    assert "Longest time between visits: 9 days after Fried Rice" in html
    assert "Day of Week" in html
    assert html.count("<span>50%</span>") == 4
    assert html.count("<span> 0%</span>") == 7


def test_render_statistics_without_dates(renderer):
    stats = PersonStatistics(entries=1, ratings=[0, 1], rating_ratios=[0.0, 100.0])

    html = renderer.render([], {"Amy": stats})

    assert "<h3>Amy</h3>" in html
    assert "Day of Week" not in html
    assert "Most visits in a week" not in html
    assert "<span>100%</span>" in html


def test_summary_frame_one_row_per_person():
    narrow = PersonStatistics(entries=1, ratings=[0, 1], rating_ratios=[0.0, 100.0],
                              weekday_ratios=[0.0] * 7)

    df = summary_frame({"Steve": narrow, "Bob": dated_stats()})

    assert list(df["person"]) == ["Bob", "Steve"]
    assert list(df["longest_days"]) == [9, 0]
    assert df.loc[df["person"] == "Bob", "pct_thu"].iloc[0] == pytest.approx(50.0)
    # Steve rated on a narrower scale; missing buckets read as zero
    assert df.loc[df["person"] == "Steve", "pct_rating_3"].iloc[0] == 0.0


def test_summary_frame_empty():
    df = summary_frame({})
    assert df.empty
    assert "person" in df.columns
