"""
NGA grid tables, validators, the UTM projection and the MGRS grid mapper.
"""

from geocoord.core.grids.accuracy import (
    projection_error_meters,
    validate_projection_accuracy,
)
from geocoord.core.grids.grid_mapper import (
    grid_row_offset,
    to_mgrs_from_utm,
    to_utm_from_mgrs,
)
from geocoord.core.grids.projection import (
    compute_precision,
    to_utm_from_wgs,
    to_wgs_from_utm,
)

__all__ = [
    "compute_precision",
    "grid_row_offset",
    "projection_error_meters",
    "to_mgrs_from_utm",
    "to_utm_from_mgrs",
    "to_utm_from_wgs",
    "to_wgs_from_utm",
    "validate_projection_accuracy",
]
