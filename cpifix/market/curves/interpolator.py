##############################################################################

##############################################################################

from enum import Enum
from numba import njit
import numpy as np
from scipy.interpolate import PchipInterpolator
from scipy.interpolate import CubicSpline
from ...utils.error import LibError

###############################################################################


class InterpTypes(Enum):
    FLAT_RATES = 1
    LINEAR_RATES = 2
    NATCUBIC_RATES = 3
    PCHIP_RATES = 4

###############################################################################


@njit(fastmath=True, cache=True)
def _uinterpolate(t, times, rates, method):
    """ Return the interpolated rate at time t given a vector of pillar times
    and rates. The times must be monotonic and increasing. Beyond the first
    and last pillars the rate is held flat. Method 1 is backward flat (a
    pillar's rate holds back to the previous pillar), method 2 is linear. """

    num_points = times.size

    if t <= times[0]:
        return rates[0]

    if t >= times[num_points - 1]:
        return rates[num_points - 1]

    i = 1
    while times[i] < t:
        i = i + 1

    if method == 1:
        return rates[i]

    dt = times[i] - times[i - 1]
    return ((times[i] - t) * rates[i - 1] + (t - times[i - 1]) * rates[i]) / dt

###############################################################################


@njit(fastmath=True, cache=True)
def _vinterpolate(t_values, times, rates, method):
    """ Vectorised version of _uinterpolate. """

    n = t_values.size
    out = np.empty(n)
    for i in range(0, n):
        out[i] = _uinterpolate(t_values[i], times, rates, method)
    return out

###############################################################################


class Interpolator():
    """ Interpolates inflation rates between curve pillar times. """

    def __init__(self,
                 interpolator_type: InterpTypes):

        if not isinstance(interpolator_type, InterpTypes):
            raise LibError("Need to pass InterpTypes")

        self._interp_type = interpolator_type
        self._interp_fn = None
        self._times = None
        self._rates = None

    ###########################################################################

    def fit(self,
            times: np.ndarray,
            rates: np.ndarray):

        times = np.asarray(times, dtype=np.float64)
        rates = np.asarray(rates, dtype=np.float64)

        if times.size != rates.size:
            raise LibError("Times and rates must have the same size")

        if times.size == 0:
            raise LibError("Cannot fit an interpolator to no points")

        if np.any(np.diff(times) <= 0.0):
            raise LibError("Pillar times must be strictly increasing")

        self._times = times
        self._rates = rates
        self._interp_fn = None

        if times.size < 3:
            # too few points for a spline, fall back to linear
            return

        if self._interp_type == InterpTypes.PCHIP_RATES:

            self._interp_fn = PchipInterpolator(self._times, self._rates)

        elif self._interp_type == InterpTypes.NATCUBIC_RATES:

            """ Second derivatives are clamped to zero at end points """
            self._interp_fn = CubicSpline(self._times, self._rates,
                                          bc_type='natural')

    ###########################################################################

    def interpolate(self,
                    t: (float, np.ndarray)):
        """ Interpolated rate at time t, which can be an array. """

        if self._rates is None:
            raise LibError("Rates have not been set.")

        if isinstance(t, (float, int, np.floating)):
            tvec = np.array([float(t)])
        elif isinstance(t, np.ndarray):
            tvec = t.astype(np.float64)
        else:
            raise LibError("t is not a recognized type")

        if self._interp_fn is not None:
            clipped = np.clip(tvec, self._times[0], self._times[-1])
            out = np.asarray(self._interp_fn(clipped), dtype=np.float64)
        elif self._interp_type == InterpTypes.FLAT_RATES:
            out = _vinterpolate(tvec, self._times, self._rates, 1)
        else:
            out = _vinterpolate(tvec, self._times, self._rates, 2)

        if isinstance(t, np.ndarray):
            return out

        return float(out[0])
