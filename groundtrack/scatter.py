#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Scatter View Model

Classifies tracked space objects for the scatter view: legend labels per
dimension, checkbox-style filters, colours and scene positions.
Each input row has the layout

    [utility, owner, altitude_class, x_km, y_km, z_km]

with positions in the inertial frame (z polar).
"""

import math
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Sequence, Set, Tuple

import numpy as np

from .constants import EARTH_RADIUS_KM
from .errors import PreconditionViolation


class Dimension(Enum):
    """Attribute an object is coloured by."""

    UTILITY = 0
    OWNER = 1
    ALTITUDE = 2


UTILITIES = ["PAY", "R/B", "DEB", "UNK"]
ALTITUDE_CLASSES = ["LEO", "MEO", "HEO/GEO"]
OTHERS_LABEL = "outros"
OTHERS_INDEX = 3
TOP_OWNERS = 3

COLORS = [
    "#00b6cb",  # light blue
    "#ffa800",  # yellow
    "#f10096",  # pink
    "#7cb342",  # green
    "#0072f0",  # dark blue
    "#f66d00",  # orange
]


@dataclass(frozen=True)
class ScatterObject:
    """A tracked object and its inertial position (km)."""

    utility: str
    owner: str
    altitude_class: str
    position: Tuple[float, float, float]

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "ScatterObject":
        if len(row) < 6:
            raise PreconditionViolation(f"Scatter row needs 6 fields, got {len(row)}: {row!r}")
        try:
            position = (float(row[3]), float(row[4]), float(row[5]))
        except (TypeError, ValueError) as err:
            raise PreconditionViolation(f"Scatter row {row!r}: {err}") from err
        if not all(math.isfinite(value) for value in position):
            raise PreconditionViolation(f"Scatter row {row!r}: position must be finite")
        return cls(str(row[0]), str(row[1]), str(row[2]), position)

    def value(self, dimension: Dimension) -> str:
        return (self.utility, self.owner, self.altitude_class)[dimension.value]


@dataclass(frozen=True, eq=False)
class ScatterPoint:
    """
    A point ready to draw.

    Attributes
    ----------
    position : np.ndarray
        Scene position (y polar) in body radii
    color : str
        Hex colour
    label : str
        Legend label the point is grouped under
    """

    position: np.ndarray
    color: str
    label: str


class ScatterCatalog:
    """
    Filterable collection of tracked objects.

    Parameters
    ----------
    objects : iterable of ScatterObject
        Objects to display
    body_radius : float
        Radius positions are normalized by (km)
    """

    def __init__(self, objects: Iterable[ScatterObject], body_radius: float = EARTH_RADIUS_KM):
        if body_radius <= 0:
            raise PreconditionViolation("Body radius must be positive")

        self.objects: List[ScatterObject] = list(objects)
        self.body_radius = body_radius

        counts = Counter(obj.owner for obj in self.objects)
        self.owners: List[str] = [owner for owner, _ in counts.most_common()]

        self.filters: Dict[Dimension, Set[str]] = {
            Dimension.UTILITY: set(UTILITIES),
            Dimension.OWNER: set(self.owners),
            Dimension.ALTITUDE: set(ALTITUDE_CLASSES),
        }

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]], body_radius: float = EARTH_RADIUS_KM) -> "ScatterCatalog":
        return cls((ScatterObject.from_row(row) for row in rows), body_radius)

    def set_filter(self, dimension: Dimension, selected: Iterable[str]) -> None:
        """Replace the selected values of one dimension."""
        self.filters[dimension] = set(selected)

    def labels(self, dimension: Dimension) -> List[str]:
        """
        Legend labels for a dimension.

        Owners show the three largest selected owners followed by a
        catch-all label.
        """
        if dimension == Dimension.UTILITY:
            return list(UTILITIES)
        if dimension == Dimension.ALTITUDE:
            return list(ALTITUDE_CLASSES)

        selected = [owner for owner in self.owners if owner in self.filters[Dimension.OWNER]]
        return selected[:TOP_OWNERS] + [OTHERS_LABEL]

    def legend(self, dimension: Dimension) -> List[Tuple[str, str]]:
        """(label, colour) pairs for a dimension."""
        return [(label, COLORS[i]) for i, label in enumerate(self.labels(dimension))]

    def visible(self) -> List[ScatterObject]:
        """Objects passing every dimension's filter."""
        return [
            obj for obj in self.objects
            if all(obj.value(dim) in selected for dim, selected in self.filters.items())
        ]

    def points(self, dimension: Dimension = Dimension.UTILITY) -> List[ScatterPoint]:
        """
        Visible objects as drawable points coloured by ``dimension``.

        Values missing from the legend fall into the catch-all colour.
        """
        labels = self.labels(dimension)
        points = []

        for obj in self.visible():
            value = obj.value(dimension)
            index = labels.index(value) if value in labels else OTHERS_INDEX
            label = labels[index] if index < len(labels) else OTHERS_LABEL

            # Scene frame keeps the polar axis second
            x, y, z = obj.position
            position = np.array([y, z, x]) / self.body_radius

            points.append(ScatterPoint(position=position, color=COLORS[index], label=label))

        return points

    def positions(self) -> np.ndarray:
        """Scene positions of visible objects as an (N, 3) array."""
        points = self.points()
        return np.array([p.position for p in points], dtype=float).reshape(-1, 3)
