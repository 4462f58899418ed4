"""Tests for ExportOutlookCsvUseCase."""

import pytest
from conftest import build_estimates, build_sample
from willitrain.domain.entities.historical_sample import HistoricalSample
from willitrain.domain.exceptions import InsufficientDataError
from willitrain.domain.use_cases.export_outlook_csv import (
    ExportOutlookCsvUseCase,
    format_value,
)


@pytest.fixture
def use_case():
    return ExportOutlookCsvUseCase()


def test_export_layout(use_case):
    sample = build_sample(
        temperature=[70.0, 80.5],
        precipitation=[0.2, 0.0],
        wind_speed=[6.0, 7.0],
        snow_depth=[0.0, 0.0],
    )
    estimates = build_estimates(temperature=75.25, rain=7, snow=0, wind=5)

    csv_text = use_case.execute(sample, estimates)

    assert csv_text.splitlines() == [
        "date,temperature,precipitation,snow_depth,wind_speed",
        "20200704,70,0.2,0,6",
        "20210704,80.5,0,0,7",
        "Average,75.25,0.10,0.00,6.50",
        "Percentages,,7,0,5",
        "Parameters,F,in,in,mph",
    ]


def test_missing_values_are_blank(use_case):
    sample = build_sample(
        temperature=[70.0, None],
        precipitation=[0.2, 0.4],
        wind_speed=[6.0, 8.0],
        snow_depth=[0.0, 0.0],
    )
    estimates = build_estimates(temperature=70, rain=7)

    lines = use_case.execute(sample, estimates).splitlines()

    assert lines[2] == "20210704,,0.4,0,8"
    assert lines[3] == "Average,70.00,0.30,0.00,7.00"


def test_empty_sample_raises(use_case):
    with pytest.raises(InsufficientDataError):
        use_case.execute(HistoricalSample(month_day="0229"), build_estimates(60, 0))


@pytest.mark.parametrize(
    "value,expected",
    [(None, ""), (0.0, "0"), (12.0, "12"), (0.25, "0.25"), (-3.5, "-3.5")],
)
def test_format_value(value, expected):
    assert format_value(value) == expected
