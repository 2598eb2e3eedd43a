import logging

import numpy as np
import pandas as pd
import pytest

from chartstats.data_processing import (
    extract_metric_values,
    group_metric_values,
    load_metric_table,
)


def test_extract_from_records_coerces_and_drops(caplog):
    caplog.set_level(logging.WARNING)
    records = [
        {"state": "AL", "MHLTH_AdjPrev": 17.2},
        {"state": "AK", "MHLTH_AdjPrev": "14.9"},
        {"state": "AZ", "MHLTH_AdjPrev": None},
        {"state": "AR", "MHLTH_AdjPrev": "n/a"},
        {"state": "CA"},
        {"state": "CO", "MHLTH_AdjPrev": float("inf")},
        {"state": "CT", "MHLTH_AdjPrev": 13},
    ]

    values = extract_metric_values(records, "MHLTH_AdjPrev")

    assert values.tolist() == [17.2, 14.9, 13.0]
    assert any(
        "Dropped 4 of 7 values of 'MHLTH_AdjPrev'" in rec.message for rec in caplog.records
    )


def test_extract_from_dataframe_without_warning(caplog):
    caplog.set_level(logging.WARNING)
    df = pd.DataFrame({"value": [1.5, 2.5, 3.5]})
    values = extract_metric_values(df, "value")
    assert np.array_equal(values, [1.5, 2.5, 3.5])
    assert not caplog.records


def test_extract_missing_column_raises():
    with pytest.raises(KeyError, match="not found"):
        extract_metric_values(pd.DataFrame({"a": [1]}), "b")


def test_group_metric_values_keeps_first_appearance_order():
    df = pd.DataFrame(
        {
            "year": ["2021", "2019", "2021", "2020", "2019", None],
            "value": [1.0, 2.0, 3.0, "x", 4.0, 9.0],
        }
    )
    groups = group_metric_values(df, "value", "year")

    assert list(groups) == ["2021", "2019", "2020"]
    assert groups["2021"].tolist() == [1.0, 3.0]
    assert groups["2019"].tolist() == [2.0, 4.0]
    assert groups["2020"].size == 0


def test_load_metric_table_round_trip(tmp_path):
    path = tmp_path / "metric.csv"
    pd.DataFrame({"state": ["AL", "AK"], "value": [1.0, 2.0]}).to_csv(path, index=False)
    df = load_metric_table(str(path))
    assert list(df.columns) == ["state", "value"]
    assert len(df) == 2
