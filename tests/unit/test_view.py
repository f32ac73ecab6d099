"""Tests for the contribution view."""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from contriview.heatmap.parser import MissingRequiredFieldError
from contriview.rollups.aggregator import WindowSums
from contriview.rollups.view import VIEW_FIELDS, ContributionView, build


def test_contribution_view_default():
    assert ContributionView() == ContributionView(
        today_contributions=0,
        week_contributions=0,
        month_contributions=0,
        year_contributions=0,
        sum_contributions=0,
        week_ave=0,
        month_ave=0,
        sum_ave=0,
    )


def test_build_sample_heatmap(sample_html, sample_date):
    view = build(sample_html, sample_date)

    assert view == ContributionView(
        today_contributions=3,
        week_contributions=51,
        month_contributions=260,
        year_contributions=260,
        sum_contributions=3532,
        week_ave=7,
        month_ave=10,
        sum_ave=9,
    )


def test_build_empty_document():
    assert build("<html></html>", date(2019, 1, 26)) == ContributionView()


def test_build_is_idempotent(sample_html, sample_date):
    assert build(sample_html, sample_date) == build(sample_html, sample_date)


def test_build_propagates_missing_count():
    html = '<svg><rect data-date="2019-01-26"/></svg>'

    with pytest.raises(MissingRequiredFieldError):
        build(html, date(2019, 1, 26))


def test_build_absent_today(sample_html):
    view = build(sample_html, date(2019, 1, 27))

    assert view.today_contributions == 0
    assert view.month_contributions == 260
    assert view.month_ave == 260 // 27


class TestAverages:
    """Averages use floor division."""

    def test_sum_ave_truncates(self):
        view = ContributionView.from_sums(WindowSums(all_time=364), date(2019, 1, 1))

        assert view.sum_ave == 0

    def test_sum_ave_uses_365_in_leap_years(self):
        view = ContributionView.from_sums(WindowSums(all_time=366), date(2020, 12, 31))

        assert view.sum_ave == 1

    def test_week_ave(self):
        assert ContributionView.from_sums(WindowSums(week=13), date(2019, 1, 1)).week_ave == 1

    def test_month_ave_divides_by_day_of_month(self):
        assert ContributionView.from_sums(WindowSums(month=30), date(2019, 1, 1)).month_ave == 30
        assert ContributionView.from_sums(WindowSums(month=30), date(2019, 1, 31)).month_ave == 0


def test_render_layout(sample_html, sample_date):
    rendered = build(sample_html, sample_date).render()

    assert rendered.splitlines() == [
        "today_contributions: 3",
        "week_contributions: 51",
        "month_contributions: 260",
        "year_contributions: 260",
        "sum_contributions: 3532",
        "week_ave: 7",
        "month_ave: 10",
        "sum_ave: 9",
    ]


def test_str_matches_render():
    view = ContributionView(today_contributions=1)

    assert str(view) == view.render()


def test_to_dict_follows_field_order():
    assert list(ContributionView().to_dict()) == list(VIEW_FIELDS)


def test_view_is_immutable():
    with pytest.raises(FrozenInstanceError):
        ContributionView().sum_ave = 1
