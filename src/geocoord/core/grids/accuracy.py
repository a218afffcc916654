"""
Cross-check of the series projection against PROJ.

Used by tests and by callers that want to confirm the closed-form projection
is within tolerance for their area of interest.
"""

import logging
from typing import Dict, Iterable, List, Union

import numpy as np
from pyproj import Transformer

from geocoord.core.errors import ProjectionError
from geocoord.core.grids.projection import to_utm_from_wgs
from geocoord.models.tokens import TokensWGS
from geocoord.utils.logging import log_performance

logger = logging.getLogger(__name__)

WGS84_EPSG = 4326


def _reference_transformer(epsg: int) -> Transformer:
    try:
        return Transformer.from_crs(f"EPSG:{WGS84_EPSG}", f"EPSG:{epsg}", always_xy=True)
    except Exception as e:
        raise ProjectionError(
            f"Failed to create transformer: {e}",
            source_crs=f"EPSG:{WGS84_EPSG}",
            target_crs=f"EPSG:{epsg}",
        ) from e


@log_performance(log_level=logging.DEBUG)
def projection_error_meters(points: Iterable[TokensWGS]) -> np.ndarray:
    """
    Planar distance between the series projection and PROJ for each point.

    Points are grouped by UTM zone/hemisphere so each group is sent to pyproj
    as one batch.

    Args:
        points: WGS84 points inside the UTM latitude range

    Returns:
        Array of deviations in meters, in input order

    Raises:
        ProjectionError: If pyproj fails to build a transformer or transform
    """
    points = list(points)
    errors = np.zeros(len(points), dtype=float)
    if not points:
        return errors

    projected = [to_utm_from_wgs(point) for point in points]

    groups: Dict[int, List[int]] = {}
    for index, utm in enumerate(projected):
        groups.setdefault(utm.epsg, []).append(index)

    for epsg, indices in groups.items():
        transformer = _reference_transformer(epsg)
        lons = np.asarray([points[i].lon for i in indices])
        lats = np.asarray([points[i].lat for i in indices])
        try:
            ref_x, ref_y = transformer.transform(lons, lats)
        except Exception as e:
            raise ProjectionError(f"Transformation failed: {e}", target_crs=f"EPSG:{epsg}") from e

        series_x = np.asarray([projected[i].easting for i in indices])
        series_y = np.asarray([projected[i].northing for i in indices])
        errors[indices] = np.hypot(series_x - np.asarray(ref_x), series_y - np.asarray(ref_y))

    logger.debug(f"Projection cross-check: {len(points)} points, max error {errors.max():.6f} m")
    return errors


def validate_projection_accuracy(
    point: Union[TokensWGS, Iterable[TokensWGS]],
    max_error_meters: float = 0.01,
) -> bool:
    """
    Validate the series projection against PROJ.

    Args:
        point: A WGS84 point, or several
        max_error_meters: Maximum acceptable deviation in meters

    Returns:
        True if every deviation is within tolerance

    Raises:
        ProjectionError: If the reference transformation fails
    """
    points = [point] if isinstance(point, TokensWGS) else list(point)
    errors = projection_error_meters(points)
    return bool(np.all(errors <= max_error_meters))
