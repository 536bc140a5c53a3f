import pandas as pd
import pytest

from ownvsrent.adapters.storage import read_df, write_df
from ownvsrent.analysis.frames import monthly_frame, yearly_frame
from ownvsrent.services.scenario import calculate_scenario


def test_monthly_frame(base_params):
    result = calculate_scenario({**base_params, "time_horizon": 3})
    df = monthly_frame(result)

    assert len(df) == 37
    assert df["month"].tolist() == list(range(37))
    assert df["year"].iloc[12] == 1
    assert df["rent_monthly_investment"].iloc[0] == 0
    assert df["rent_monthly_investment"].iloc[1] == pytest.approx(1_500)
    assert df["own_net_worth"].iloc[-1] == result.own.net_worth[-1]


def test_yearly_frame(base_params):
    df = yearly_frame(calculate_scenario(base_params))
    assert len(df) == 31
    assert df["year"].tolist() == list(range(31))
    assert "rent_monthly_payment" in df.columns


@pytest.mark.parametrize("suffix", [".csv", ".json"])
def test_write_then_read(tmp_path, base_params, suffix):
    df = pd.DataFrame([base_params, {**base_params, "home_price": 650_000}])
    path = write_df(df, tmp_path / "nested" / f"params{suffix}")

    assert path.exists()
    back = read_df(path)
    assert back["home_price"].tolist() == [500_000, 650_000]
    assert list(back.columns) == list(df.columns)
