#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Catalogued Objects

Converts rows of the tracked-object catalog into validated orbital
elements. Rows arrive already parsed; each has the layout

    [id, name, mean_anomaly_deg, eccentricity, raan_deg,
     inclination_deg, argument_of_perigee_deg, perigee_altitude_km,
     sidereal_time_rad]
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Sequence

from .constants import EARTH_RADIUS_KM
from .elements import OrbitalElements
from .errors import PreconditionViolation

ROW_LENGTH = 9


@dataclass(frozen=True)
class CatalogEntry:
    """
    A catalogued object with its orbit.

    Attributes
    ----------
    object_id : str
        Catalog identifier
    name : str
        Display name
    elements : OrbitalElements
        Orbital elements at the catalog epoch
    sidereal_time : float
        Body rotation at the catalog epoch (radians)
    """
    object_id: str
    name: str
    elements: OrbitalElements
    sidereal_time: float = 0.0

    @classmethod
    def from_row(cls, row: Sequence[Any], body_radius: float = EARTH_RADIUS_KM) -> "CatalogEntry":
        """
        Build an entry from a catalog row.

        Parameters
        ----------
        row : sequence
            Catalog row
        body_radius : float
            Radius of the central body (km) the orbit must clear

        Raises
        ------
        PreconditionViolation
            If the row is too short, holds non-numeric orbital fields, or
            describes an orbit outside the model's domain.
        """
        if len(row) < ROW_LENGTH:
            raise PreconditionViolation(
                f"Catalog row needs {ROW_LENGTH} fields, got {len(row)}: {row!r}"
            )

        object_id, name = str(row[0]), str(row[1])
        try:
            mean_anomaly_deg, e, raan, inclination, aop, perigee_altitude, sidereal = (
                float(value) for value in row[2:ROW_LENGTH]
            )
        except (TypeError, ValueError) as err:
            raise PreconditionViolation(f"Catalog object {object_id}: {err}") from err

        if not math.isfinite(sidereal):
            raise PreconditionViolation(f"Catalog object {object_id}: sidereal time must be finite")

        try:
            elements = OrbitalElements(
                eccentricity=e,
                perigee_altitude=perigee_altitude,
                raan=raan,
                inclination=inclination,
                argument_of_perigee=aop,
                mean_anomaly=math.radians(mean_anomaly_deg),
            )
            elements.validate_for(body_radius)
        except PreconditionViolation as err:
            raise PreconditionViolation(f"Catalog object {object_id}: {err}") from err

        return cls(object_id=object_id, name=name, elements=elements, sidereal_time=sidereal)


def catalog_from_rows(
    rows: Iterable[Sequence[Any]], body_radius: float = EARTH_RADIUS_KM
) -> Dict[str, CatalogEntry]:
    """
    Build an id-indexed catalog from rows.

    Returns
    -------
    dict
        object_id -> CatalogEntry, in row order
    """
    catalog: Dict[str, CatalogEntry] = {}
    for row in rows:
        entry = CatalogEntry.from_row(row, body_radius)
        catalog[entry.object_id] = entry
    return catalog
