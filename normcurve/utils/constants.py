"""
Numerical constants and tolerances for normal-curve computations.

This module defines the tolerances used by the geometry primitives and
the empirically tuned constants that drive the Bezier approximation of
the density curve. The approximation constants are defaults only; the
curve approximator accepts overrides at construction.
"""

import math

# Normal distribution
SQRT_2_PI = math.sqrt(2.0 * math.pi)  # Normalizing factor of the density
DEFAULT_MEAN = 0.0
DEFAULT_STD = 1.0
HART_SWITCH = 7.07106781186547  # Rational form below, continued fraction above
HART_UNDERFLOW = 37.0  # Beyond this many std. deviations, the tail is zero
ACKLAM_P_LOW = 0.02425  # Tail/central region boundary of the quantile approximation

# Geometry tolerances
ZERO_TOL = 1e-7  # Default zero tolerance for squared lengths
CROSS_TOL = 1e-8  # Cross-product magnitude below which vectors are parallel
POINT_COMPARE_TOL = 0.001  # Relative tolerance for coincident points
SLOPE_COMPARE_TOL = 0.001  # Relative tolerance for equal slopes
TINY_MAGNITUDE = 1e-9  # Both values below this compare equal under a loose tolerance
ORIENTATION_TOL = 1e-4  # Determinant magnitude treated as "on the line"
POINT_ON_LINE_TOL = 0.001  # Determinant magnitude for point-on-line tests
CIRCLE_COINCIDENT_TOL = 0.001  # Center distance and radius difference for coincident circles
CIRCLE_TANGENT_TOL = 1e-9  # Relative center-distance slack for tangent circles
RAD_TO_DEG = 180.0 / math.pi

# Bezier approximation of the density curve
REFINEMENT_ERROR_TOLERANCE = 0.025  # Max |arc(t=0.5) - density| before a split
REFINEMENT_PASSES = 1  # One pass is sufficient for interactive graphing
NARROW_STD = 1.0  # At or below this std, every arc is split before refinement
TANGENT_STEP = 1.0  # Unit dx used to build tangent rays
MEAN_TANGENT_OFFSET = 1e-3  # Fraction of std used to offset the slope taken at the mean
