"""Small Monte Carlo experiments: estimating pi and integrals with various densities."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from .onb import random_cosine_direction
from .vec3 import Vec3, random_double


def _require_positive(n: int, name: str = "n") -> None:
    if n <= 0:
        raise ValueError(f"{name} must be positive")


def _in_unit_circle(x: float, y: float) -> bool:
    return x * x + y * y < 1


def _mean(sample: Callable[[], float], n: int) -> float:
    _require_positive(n)
    return sum(sample() for _ in range(n)) / n


def estimate_pi(n: int = 1000) -> float:
    """Estimate pi from ``n`` uniform points in the square [-1, 1]^2."""
    _require_positive(n)
    inside = sum(
        1
        for _ in range(n)
        if _in_unit_circle(2 * random_double() - 1, 2 * random_double() - 1)
    )
    return 4 * inside / n


def running_pi_estimates(report_every: int = 100000) -> Iterator[float]:
    """Yield a pi estimate after every ``report_every`` further samples, forever."""
    _require_positive(report_every, "report_every")
    inside = 0
    runs = 0
    while True:
        runs += 1
        if _in_unit_circle(2 * random_double() - 1, 2 * random_double() - 1):
            inside += 1
        if runs % report_every == 0:
            yield 4 * inside / runs


def estimate_pi_stratified(sqrt_n: int = 10000) -> Tuple[float, float]:
    """Return (plain, stratified) pi estimates from sqrt_n * sqrt_n samples each."""
    _require_positive(sqrt_n, "sqrt_n")
    inside = 0
    inside_stratified = 0
    for i in range(sqrt_n):
        for j in range(sqrt_n):
            if _in_unit_circle(2 * random_double() - 1, 2 * random_double() - 1):
                inside += 1
            x = 2 * ((i + random_double()) / sqrt_n) - 1
            y = 2 * ((j + random_double()) / sqrt_n) - 1
            if _in_unit_circle(x, y):
                inside_stratified += 1
    total = sqrt_n * sqrt_n
    return 4 * inside / total, 4 * inside_stratified / total


def integrate_x_squared(n: int = 1000000) -> float:
    """Estimate the integral of x^2 over [0, 2] as 2 * the average of x^2."""
    def sample() -> float:
        x = 2 * random_double()
        return x * x

    return 2 * _mean(sample, n)


def _importance(draw: Callable[[], float], pdf: Callable[[float], float]) -> Callable[[], float]:
    def sample() -> float:
        x = draw()
        density = pdf(x)
        return x * x / density if density else 0.0

    return sample


def integrate_x_squared_linear_pdf(n: int = 1000000) -> float:
    """Integral of x^2 over [0, 2] sampling with density x / 2."""
    return _mean(
        _importance(lambda: math.sqrt(4 * random_double()), lambda x: 0.5 * x), n
    )


def integrate_x_squared_uniform_pdf(n: int = 1000000) -> float:
    """Integral of x^2 over [0, 2] sampling with the uniform density 1 / 2."""
    return _mean(_importance(lambda: 2 * random_double(), lambda x: 0.5), n)


def integrate_x_squared_perfect_pdf(n: int = 1) -> float:
    """Integral of x^2 over [0, 2] sampling with density 3x^2 / 8, exact per sample."""
    return _mean(
        _importance(lambda: (8 * random_double()) ** (1.0 / 3.0), lambda x: 3 * x * x / 8),
        n,
    )


def random_on_unit_sphere() -> Vec3:
    """Pick a uniformly distributed point on the unit sphere."""
    while True:
        p = 2.0 * Vec3(random_double(), random_double(), random_double()) - Vec3(1, 1, 1)
        if p.dot(p) < 1.0:
            return p.unit()


def integrate_cosine_squared(n: int = 1000000) -> float:
    """Integral of cos^2(theta) over the whole sphere of directions."""
    density = 1 / (4 * math.pi)

    def sample() -> float:
        d = random_on_unit_sphere()
        return d.z * d.z / density

    return _mean(sample, n)


def random_sphere_directions(count: int = 200) -> List[Vec3]:
    """Uniform unit directions built from two random numbers each."""
    directions = []
    for _ in range(count):
        r1 = random_double()
        r2 = random_double()
        s = 2 * math.sqrt(r2 * (1 - r2))
        directions.append(
            Vec3(math.cos(2 * math.pi * r1) * s, math.sin(2 * math.pi * r1) * s, 1 - 2 * r2)
        )
    return directions


def cosine_directions(count: int = 200) -> List[Vec3]:
    """Cosine-weighted unit directions about +z."""
    return [random_cosine_direction() for _ in range(count)]


def integrate_cosine_cubed_uniform(n: int = 1000000) -> float:
    """Integral of cos^3(theta) over the hemisphere with uniform sampling."""
    density = 1.0 / (2.0 * math.pi)

    def sample() -> float:
        random_double()
        z = 1 - random_double()
        return z * z * z / density

    return _mean(sample, n)


def integrate_cosine_cubed_cosine_pdf(n: int = 1000000) -> float:
    """Integral of cos^3(theta) over the hemisphere with cosine-weighted sampling."""
    def sample() -> float:
        v = random_cosine_direction()
        return v.z * v.z * v.z / (v.z / math.pi)

    return _mean(sample, n)


def _g(x: float) -> str:
    return f"{x:g}"


def _cosine_report(estimate: float) -> List[str]:
    return [f"PI/2 = {_g(math.pi / 2)}", f"Estimate = {_g(estimate)}"]


_EXPERIMENTS: Dict[str, Tuple[int, str, Callable[[int], List[str]]]] = {
    "pi": (1000, "estimate pi", lambda n: [f"Estimate of Pi = {_g(estimate_pi(n))}"]),
    "pi-stratified": (
        10000,
        "compare plain and stratified pi estimates (n is the grid side)",
        lambda n: (
            lambda pair: [
                f"Regular    Estimate of Pi = {_g(pair[0])}",
                f"Stratified Estimate of Pi = {_g(pair[1])}",
            ]
        )(estimate_pi_stratified(n)),
    ),
    "x-squared": (1000000, "integrate x^2 on [0, 2]",
                  lambda n: [f"I ={_g(integrate_x_squared(n))}"]),
    "x-squared-linear": (1000000, "x^2 with a linear density",
                         lambda n: [f"I ={_g(integrate_x_squared_linear_pdf(n))}"]),
    "x-squared-uniform": (1000000, "x^2 with a uniform density",
                          lambda n: [f"I ={_g(integrate_x_squared_uniform_pdf(n))}"]),
    "x-squared-perfect": (1, "x^2 with the ideal density",
                          lambda n: [f"I ={_g(integrate_x_squared_perfect_pdf(n))}"]),
    "cosine-squared": (1000000, "integrate cos^2 over the sphere",
                       lambda n: [f"I = {_g(integrate_cosine_squared(n))}"]),
    "sphere-points": (200, "print uniform sphere directions",
                      lambda n: [str(v) for v in random_sphere_directions(n)]),
    "cosine-points": (200, "print cosine-weighted directions",
                      lambda n: [str(v) for v in cosine_directions(n)]),
    "cosine-cubed-uniform": (1000000, "cos^3 over the hemisphere, uniform sampling",
                             lambda n: _cosine_report(integrate_cosine_cubed_uniform(n))),
    "cosine-cubed-cosine": (1000000, "cos^3 over the hemisphere, cosine sampling",
                            lambda n: _cosine_report(integrate_cosine_cubed_cosine_pdf(n))),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one Monte Carlo experiment and print its result."""
    parser = argparse.ArgumentParser(description="Monte Carlo sampling experiments.")
    sub = parser.add_subparsers(dest="experiment", required=True)
    for name, (default, help_text, _) in _EXPERIMENTS.items():
        p = sub.add_parser(name, help=help_text)
        p.add_argument("-n", type=int, default=default)
    running = sub.add_parser("pi-running", help="print an ever-improving pi estimate")
    running.add_argument("--every", type=int, default=100000)
    running.add_argument("--reports", type=int, default=None,
                         help="stop after this many estimates; run forever if absent")
    args = parser.parse_args(argv)

    if args.experiment == "pi-running":
        for count, estimate in enumerate(running_pi_estimates(args.every), start=1):
            sys.stdout.write(f"\rEstimate of Pi = {_g(estimate)} ")
            sys.stdout.flush()
            if args.reports is not None and count >= args.reports:
                break
        sys.stdout.write("\n")
        return 0

    _, _, run = _EXPERIMENTS[args.experiment]
    for line in run(args.n):
        print(line)
    return 0