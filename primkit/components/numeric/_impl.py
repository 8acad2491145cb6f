"""
Numeric component - arithmetic, number theory, statistics and random numbers.

Key behaviors:
- Range helpers (clamp, is_between) reject non-numeric arguments with TypeError
  and inverted bounds with ValueError
- Statistical aggregates return 0 (or [] for mode) on empty input
- Integer routines (factorial, binomial, generate_primes) work on exact ints
- Random helpers accept an optional random.Random for reproducibility

Invariants:
- clamp(v, lo, hi) lies in [lo, hi] and clamp is idempotent
- median of an even-length input is the mean of its two middle values
- binomial(n, k) == 0 when k > n
- generate_primes(limit) is ascending and contains every prime <= limit
"""

from __future__ import annotations

import math
import random
from collections import Counter
from collections.abc import Iterable
from decimal import ROUND_FLOOR, Decimal, localcontext

Number = int | float

# --- Argument checks ---


def _is_number(value: object) -> bool:
    """bool is an int subclass but never a number here."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def _require_numbers(*values: object, message: str = "All arguments must be numbers") -> None:
    if not all(_is_number(v) for v in values):
        raise TypeError(message)


def _is_integral(value: Number) -> bool:
    if isinstance(value, int):
        return True
    return math.isfinite(value) and value.is_integer()


def _require_non_negative_int(name: str, value: Number) -> int:
    """Return value as int, or raise if it is not a non-negative integer."""
    if not _is_number(value):
        raise TypeError(f"{name} must be a number")
    if not _is_integral(value) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer")
    return int(value)


def _require_bounds(minimum: Number, maximum: Number) -> None:
    if minimum > maximum:
        raise ValueError("min cannot be greater than max")


# --- Ranges and interpolation ---


def clamp(value: Number, minimum: Number, maximum: Number) -> Number:
    """
    Constrain value to the inclusive range [minimum, maximum].

    Raises:
        TypeError: If any argument is not a number.
        ValueError: If minimum is greater than maximum.

    Example:
        clamp(10, 0, 5) -> 5
        clamp(-5, 0, 5) -> 0
    """
    _require_numbers(value, minimum, maximum)
    _require_bounds(minimum, maximum)
    return min(max(value, minimum), maximum)


def lerp(start: Number, end: Number, t: Number) -> float:
    """Linear interpolation between start and end."""
    _require_numbers(start, end, t)
    return start + (end - start) * t


def map_range(
    value: Number,
    in_min: Number,
    in_max: Number,
    out_min: Number,
    out_max: Number,
) -> float:
    """Map value from [in_min, in_max] onto [out_min, out_max]."""
    _require_numbers(value, in_min, in_max, out_min, out_max)
    if in_min == in_max:
        raise ValueError("Input range cannot be empty")
    return (value - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def is_between(value: Number, minimum: Number, maximum: Number) -> bool:
    """Check if value lies in [minimum, maximum] (inclusive)."""
    _require_numbers(value, minimum, maximum)
    _require_bounds(minimum, maximum)
    return minimum <= value <= maximum


def round_to(value: Number, decimals: int) -> Number:
    """
    Round half-up to a number of decimal places.

    Unlike the builtin round(), halves go up: round_to(2.5, 0) == 3.
    Rounding works on the decimal representation, so round_to(1.005, 2)
    is 1.01. Values with no more than decimals fractional digits (ints,
    infinities) are returned unchanged.

    Raises:
        TypeError: If value or decimals is not a number.
        ValueError: If decimals is not a non-negative integer.
    """
    _require_numbers(value, decimals)
    if not _is_integral(decimals) or decimals < 0:
        raise ValueError("Decimals must be a non-negative integer")
    decimals = int(decimals)
    if isinstance(value, int) or not math.isfinite(value):
        return value

    exact = Decimal(repr(value))
    if decimals >= -int(exact.as_tuple().exponent):
        return value

    with localcontext() as ctx:
        ctx.prec = len(exact.as_tuple().digits) + 2
        shifted = exact.scaleb(decimals) + Decimal("0.5")
        return float(shifted.to_integral_value(rounding=ROUND_FLOOR).scaleb(-decimals))


def percentage(value: Number, total: Number) -> float:
    """Percentage of value relative to total, 0 when total is 0."""
    _require_numbers(value, total)
    if total == 0:
        return 0
    return value / total * 100


# --- Number theory ---


def factorial(n: int) -> int:
    """Exact factorial of a non-negative integer."""
    n = _require_non_negative_int("n", n)
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def gcd(a: Number, b: Number) -> Number:
    """Greatest common divisor (Euclid), always non-negative."""
    _require_numbers(a, b)
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: Number, b: Number) -> Number:
    """Least common multiple, 0 if either argument is 0."""
    _require_numbers(a, b)
    if a == 0 or b == 0:
        return 0
    divisor = gcd(a, b)
    if isinstance(a, int) and isinstance(b, int):
        return abs(a * b) // int(divisor)
    return abs(a * b) / divisor


def is_prime(n: Number) -> bool:
    """Trial-division primality test."""
    _require_numbers(n, message="Expected a number")
    if n < 2 or not _is_integral(n):
        return False
    n = int(n)
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    limit = math.isqrt(n)
    for i in range(3, limit + 1, 2):
        if n % i == 0:
            return False
    return True


def generate_primes(limit: int) -> list[int]:
    """
    All primes <= limit, ascending (Sieve of Eratosthenes).

    Example:
        generate_primes(10) -> [2, 3, 5, 7]
    """
    limit = _require_non_negative_int("limit", limit)
    if limit < 2:
        return []

    sieve = [True] * (limit + 1)
    sieve[0] = sieve[1] = False
    for i in range(2, math.isqrt(limit) + 1):
        if sieve[i]:
            for j in range(i * i, limit + 1, i):
                sieve[j] = False

    return [i for i, prime in enumerate(sieve) if prime]


def binomial(n: int, k: int) -> int:
    """
    Binomial coefficient "n choose k".

    Uses the multiplicative formula over min(k, n - k) steps. Every
    intermediate product is divisible by its step, so the result is exact.

    Example:
        binomial(5, 2) -> 10
        binomial(5, 6) -> 0
    """
    _require_numbers(n, k)
    if not (_is_integral(n) and _is_integral(k)) or n < 0 or k < 0:
        raise ValueError("Arguments must be non-negative integers")
    n, k = int(n), int(k)

    if k > n:
        return 0
    if k == 0 or k == n:
        return 1

    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


# --- Statistics ---


def _as_numbers(numbers: Iterable[Number]) -> list[Number]:
    values = list(numbers)
    _require_numbers(*values, message="All values must be numbers")
    return values


def sum_of(numbers: Iterable[Number]) -> Number:
    """Sum of the numbers, 0 for empty input."""
    values = _as_numbers(numbers)
    return sum(values, 0)


def average(numbers: Iterable[Number]) -> float:
    """Arithmetic mean, 0 for empty input."""
    values = _as_numbers(numbers)
    if not values:
        return 0
    return sum_of(values) / len(values)


def median(numbers: Iterable[Number]) -> float:
    """
    Median value, 0 for empty input.

    Even-length input returns the mean of the two middle values:
    median([1, 2, 3, 4]) -> 2.5
    """
    ordered = sorted(_as_numbers(numbers))
    if not ordered:
        return 0

    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def mode(numbers: Iterable[Number]) -> list[Number]:
    """All most-frequent values in ascending order, [] for empty input."""
    values = _as_numbers(numbers)
    if not values:
        return []

    frequency = Counter(values)
    top = max(frequency.values())
    return sorted(value for value, count in frequency.items() if count == top)


def variance(numbers: Iterable[Number], *, sample: bool = False) -> float:
    """
    Population variance, or sample variance when sample=True.

    Returns 0 for empty input, and for a single value when sample=True.
    """
    values = _as_numbers(numbers)
    if not values:
        return 0
    if sample and len(values) < 2:
        return 0

    mean = average(values)
    squared = [(v - mean) ** 2 for v in values]
    if sample:
        return sum_of(squared) / (len(values) - 1)
    return average(squared)


def standard_deviation(numbers: Iterable[Number], *, sample: bool = False) -> float:
    """Square root of variance(), 0 for empty input."""
    return math.sqrt(variance(numbers, sample=sample))


# --- Random ---


def random_int(minimum: int, maximum: int, *, rng: random.Random | None = None) -> int:
    """
    Uniform random integer in [minimum, maximum].

    Raises:
        TypeError: If either bound is not a number.
        ValueError: If a bound is not an integer or minimum > maximum.
    """
    _require_numbers(minimum, maximum)
    if not (_is_integral(minimum) and _is_integral(maximum)):
        raise ValueError("Arguments must be integers")
    _require_bounds(minimum, maximum)
    source = rng or random
    return source.randint(int(minimum), int(maximum))


def random_float(minimum: Number, maximum: Number, *, rng: random.Random | None = None) -> float:
    """Uniform random float in [minimum, maximum)."""
    _require_numbers(minimum, maximum)
    if minimum >= maximum:
        raise ValueError("min must be less than max")
    source = rng or random
    return source.random() * (maximum - minimum) + minimum


# --- Geometry ---


def distance(x1: Number, y1: Number, x2: Number, y2: Number) -> float:
    """Euclidean distance between (x1, y1) and (x2, y2)."""
    _require_numbers(x1, y1, x2, y2)
    return math.hypot(x2 - x1, y2 - y1)


def degrees_to_radians(degrees: Number) -> float:
    _require_numbers(degrees, message="Expected a number")
    return degrees * (math.pi / 180)


def radians_to_degrees(radians: Number) -> float:
    _require_numbers(radians, message="Expected a number")
    return radians * (180 / math.pi)


def nth_root(value: Number, n: Number) -> float:
    """
    The n-th root of value.

    Negative values only have a real root for odd integer n. Zero has no
    root of negative degree (it would divide by zero).

    Example:
        nth_root(8, 3) -> 2.0
        nth_root(16, 4) -> 2.0
    """
    _require_numbers(value, n)
    if n == 0:
        raise ValueError("Root degree cannot be zero")
    if value == 0 and n < 0:
        raise ValueError("Negative root of zero is undefined")
    try:
        if value < 0:
            if _is_integral(n) and int(n) % 2 == 1:
                return -(abs(value) ** (1 / n))
            raise ValueError("Even or fractional root of a negative number is not real")
        return value ** (1 / n)
    except OverflowError as e:
        raise ValueError("Root is out of floating point range") from e

