from math import radians

import pytest

from nztm.tm import make_projection
from nztm.nztm import get_nztm_projection


@pytest.fixture()
def nztm_projection():
    """The NZTM 2000 projection."""
    return get_nztm_projection()


@pytest.fixture()
def mount_eden_projection():
    """NZGD2000 Mount Eden 2000 meridional circuit, a projection with a non-zero origin latitude."""
    return make_projection(6378137.0, 298.257222101,
                           radians(174.0 + 45.0 / 60.0 + 51.0 / 3600.0), 0.9999,
                           -radians(36.0 + 52.0 / 60.0 + 47.0 / 3600.0),
                           400000.0, 800000.0, 1.0)


@pytest.fixture()
def sphere_projection():
    """TM on a sphere (inverse flattening of 0) centred on Greenwich."""
    return make_projection(6371000.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
