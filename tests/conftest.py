import numpy as np
import pandas as pd
import pytest
import xarray as xr


@pytest.fixture(scope="session")
def ts():
    return np.array([1.1, 1.9, 3.1, 3.91, 5.0, 6.02, 7.01, 7.7, 9.0, 10.0])


@pytest.fixture
def darr():
    np.random.seed(42)
    x = xr.DataArray(
        np.random.randint(1, 100, (10, 2, 2)).astype("float64"),
        dims=("time", "y", "x"),
        name="band",
        attrs={"nodata": -9999},
    )
    x["time"] = pd.date_range(start="2000-01-01", periods=10, freq="10D")

    return x
