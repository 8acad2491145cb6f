"""
Numeric component - arithmetic, number theory, statistics, random numbers.
"""

from ._impl import (
    average,
    binomial,
    clamp,
    degrees_to_radians,
    distance,
    factorial,
    gcd,
    generate_primes,
    is_between,
    is_prime,
    lcm,
    lerp,
    map_range,
    median,
    mode,
    nth_root,
    percentage,
    radians_to_degrees,
    random_float,
    random_int,
    round_to,
    standard_deviation,
    sum_of,
    variance,
)

__all__ = [
    # Ranges
    "clamp",
    "is_between",
    "lerp",
    "map_range",
    "percentage",
    "round_to",
    # Number theory
    "binomial",
    "factorial",
    "gcd",
    "generate_primes",
    "is_prime",
    "lcm",
    # Statistics
    "average",
    "median",
    "mode",
    "standard_deviation",
    "sum_of",
    "variance",
    # Random
    "random_float",
    "random_int",
    # Geometry
    "degrees_to_radians",
    "distance",
    "nth_root",
    "radians_to_degrees",
]
