"""Xarray accessor for the Whittaker-Eilers smoother."""
from typing import Union

from dask import is_dask_collection
import numpy as np
import pandas as pd
import xarray

from . import ops

__all__ = [
    "MissingDimensionError",
    "WhittakerEilers",
]


class MissingDimensionError(Exception):
    """Exception for missing smoothing dimension."""


class AccessorBase:
    """Base class for accessors."""

    def __init__(self, xarray_obj):
        self._obj = xarray_obj

    def _check_for_dim(self, dim):
        if dim not in self._obj.dims:
            return False
        return True


def _smooth_1d(y, spacing, lmda, order):
    return ops.smooth(y, lmda, order, spacing)


@xarray.register_dataset_accessor("whit")
@xarray.register_dataarray_accessor("whit")
class WhittakerEilers(AccessorBase):
    """Whittaker-Eilers smoother along a single dimension."""

    def smooth(
        self,
        lmda: Union[float, xarray.DataArray],
        order: int = 2,
        dim: str = "time",
        spacing: Union[None, str, np.ndarray, xarray.DataArray] = None,
    ):
        """
        Apply the Whittaker-Eilers smoother along ``dim``.

        Every 1d slice along ``dim`` is smoothed independently. The smoothed
        dimension is moved to the last position of the output.

        Args:
            lmda: smoothing parameter, either constant or a DataArray
                with one value per slice (without ``dim``)
            order: order of the differences
            dim: dimension to smooth along
            spacing: None for unit spacing, "coord" to derive the spacing
                from the coordinate of ``dim``, or an array with one value
                per sample along ``dim``

        Returns:
            float64 xarray object with smoothed data
        """
        if not self._check_for_dim(dim):
            raise MissingDimensionError(
                f"Whittaker smoother requires dimension '{dim}'!"
            )

        xx = self._obj
        n = xx.sizes[dim]

        if spacing is None:
            spacing = xarray.DataArray(np.ones(n), dims=[dim])
        elif isinstance(spacing, str):
            if spacing != "coord":
                raise ValueError(f"Unknown spacing '{spacing}', expected 'coord'")
            spacing = self.coord_spacing(dim)
        elif not isinstance(spacing, xarray.DataArray):
            spacing = xarray.DataArray(
                np.asarray(spacing, dtype="float64"), dims=[dim]
            )

        if spacing.sizes.get(dim) != n:
            raise ops.SpacingLengthError(
                f"spacing must have {n} values along '{dim}'"
            )

        if is_dask_collection(xx):
            xx = xx.chunk({dim: -1})

        xout = xarray.apply_ufunc(
            _smooth_1d,
            xx,
            spacing,
            lmda,
            kwargs={"order": order},
            input_core_dims=[[dim], [dim], []],
            output_core_dims=[[dim]],
            vectorize=True,
            dask="parallelized",
            output_dtypes=["float64"],
            keep_attrs=True,
        )

        if isinstance(xout, xarray.DataArray):
            xout.name = self._obj.name
        if np.ndim(lmda) == 0:
            xout.attrs["whit_lambda"] = float(lmda)
        xout.attrs["whit_order"] = int(order)

        return xout

    def coord_spacing(self, dim: str = "time") -> xarray.DataArray:
        """
        Derive the sample spacing from the coordinate of ``dim``.

        The spacing of a sample is the distance to its predecessor, the
        first sample gets the spacing of the second. Datetime coordinates
        are measured in days.

        Returns:
            xarray.DataArray with spacing along ``dim``
        """
        if not self._check_for_dim(dim):
            raise MissingDimensionError(f"Dimension '{dim}' doesn't exist!")

        tix = self._obj.get_index(dim)

        if isinstance(tix, pd.DatetimeIndex):
            x = ((tix - tix[0]) / pd.Timedelta(days=1)).to_numpy(dtype="float64")
        else:
            x = tix.to_numpy(dtype="float64")

        if x.size > 1:
            dx = np.diff(x)
            spacing = np.concatenate([dx[:1], dx])
        else:
            spacing = np.ones(x.size)

        coords = {dim: self._obj[dim]} if dim in self._obj.coords else None
        return xarray.DataArray(spacing, dims=[dim], coords=coords, name="spacing")
