#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Kepler's Equation Solver

Solves M = E - e * sin(E) for the eccentric anomaly E of a closed orbit
and converts it to the true anomaly.
"""

import math
from typing import Optional

TWO_PI = 2 * math.pi

# Newton-Raphson iterations per solve
DEFAULT_ITERATIONS = 200


class KeplerSolver:
    """
    Newton-Raphson solver for Kepler's equation.

    The solver runs a fixed number of iterations so every call has the
    same cost. Setting ``tolerance`` stops iterating once a Newton step
    is smaller than it.

    Parameters
    ----------
    iterations : int
        Maximum number of Newton-Raphson iterations
    tolerance : float, optional
        Step size below which iteration stops early (radians)
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS, tolerance: Optional[float] = None):
        self.iterations = iterations
        self.tolerance = tolerance

    def solve(self, mean_anomaly: float, eccentricity: float) -> float:
        """
        Calculate eccentric anomaly from mean anomaly.

        The mean anomaly may lie outside [0, 2π); the returned eccentric
        anomaly carries the same number of whole revolutions, so that
        ``E - e * sin(E) == M`` holds for the value passed in.

        Parameters
        ----------
        mean_anomaly : float
            Mean anomaly (radians)
        eccentricity : float
            Orbit eccentricity, in [0, 1)

        Returns
        -------
        float
            Eccentric anomaly (radians)
        """
        e = eccentricity
        if e == 0:
            return float(mean_anomaly)

        M = mean_anomaly % TWO_PI
        revolutions = mean_anomaly - M

        # Initial guess
        if M < math.pi:
            E = M + e / 2
        else:
            E = M - e / 2

        for _ in range(self.iterations):
            ratio = (E - e * math.sin(E) - M) / (1 - e * math.cos(E))
            E = E - ratio

            if self.tolerance is not None and abs(ratio) < self.tolerance:
                break

        return E + revolutions

    @staticmethod
    def true_anomaly(eccentric_anomaly: float, eccentricity: float) -> float:
        """
        Calculate true anomaly from eccentric anomaly.

        Parameters
        ----------
        eccentric_anomaly : float
            Eccentric anomaly (radians)
        eccentricity : float
            Orbit eccentricity, in [0, 1)

        Returns
        -------
        float
            True anomaly (radians), in [-π, π]
        """
        E = eccentric_anomaly
        e = eccentricity

        # tan(E/2) is singular at apoapsis
        if abs(E) == math.pi:
            return E

        return 2 * math.atan(math.sqrt((1 + e) / (1 - e)) * math.tan(E / 2))


_default_solver = KeplerSolver()


def solve_kepler(mean_anomaly: float, eccentricity: float) -> float:
    """Solve Kepler's equation with the default fixed-iteration solver."""
    return _default_solver.solve(mean_anomaly, eccentricity)


def true_anomaly_from_eccentric(eccentric_anomaly: float, eccentricity: float) -> float:
    """Calculate true anomaly from eccentric anomaly."""
    return KeplerSolver.true_anomaly(eccentric_anomaly, eccentricity)
