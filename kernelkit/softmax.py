"""Softmax variants: naive, numerically safe, online, and fused dot products."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence

DEMO_DATA = (2.3, 5.6, 8.5, 1.2, 0.1)
DEMO_WEIGHTS = (1.1, 2.2, 3.3, 4.4, 5.5)


def naive_softmax(values: Iterable[float]) -> list[float]:
    """Softmax from two passes over the raw exponentials (may overflow)."""
    exps = [math.exp(v) for v in values]
    total = sum(exps)
    return [e / total for e in exps]


def safe_softmax(values: Iterable[float]) -> list[float]:
    """Softmax with the maximum subtracted first, so large inputs stay finite."""
    items = list(values)
    if not items:
        return []
    peak = max(items)
    exps = [math.exp(v - peak) for v in items]
    total = sum(exps)
    return [e / total for e in exps]


def _online_normalizer(values: Iterable[float]) -> tuple[float, float]:
    """Return the running maximum and the rescaled sum of exponentials in one pass."""
    peak = -math.inf
    total = 0.0
    for v in values:
        new_peak = max(peak, v)
        total = total * math.exp(peak - new_peak) + math.exp(v - new_peak)
        peak = new_peak
    return peak, total


def online_softmax(values: Iterable[float]) -> list[float]:
    """Softmax whose maximum and normaliser are found in a single pass."""
    items = list(values)
    if not items:
        return []
    peak, total = _online_normalizer(items)
    return [math.exp(v - peak) / total for v in items]


def _paired(values: Sequence[float], weights: Sequence[float]) -> list[tuple[float, float]]:
    items = list(values)
    coeffs = list(weights)
    if len(items) != len(coeffs):
        raise ValueError(
            f"values and weights differ in length: {len(items)} != {len(coeffs)}"
        )
    return list(zip(items, coeffs))


def online_softmax_dot(values: Sequence[float], weights: Sequence[float]) -> float:
    """Dot product of softmax(values) with weights: online normaliser, then a second pass."""
    pairs = _paired(values, weights)
    if not pairs:
        return 0.0
    peak, total = _online_normalizer(v for v, _ in pairs)
    return sum(math.exp(v - peak) / total * w for v, w in pairs)


def online_softmax_dot_fused(values: Sequence[float], weights: Sequence[float]) -> float:
    """Dot product of softmax(values) with weights computed in a single pass."""
    peak = -math.inf
    total = 0.0
    result = 0.0
    for v, w in _paired(values, weights):
        new_peak = max(peak, v)
        scale = math.exp(peak - new_peak)
        new_total = total * scale + math.exp(v - new_peak)
        result = (
            result * total * scale / new_total
            + math.exp(v - new_peak) / new_total * w
        )
        peak = new_peak
        total = new_total
    return result


def format_vector(values: Iterable[float]) -> str:
    """Render values separated by spaces, with six significant digits."""
    return " ".join(f"{v:g}" for v in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Print every softmax variant for a small demonstration vector."""
    parser = argparse.ArgumentParser(
        prog="kernelkit-softmax",
        description="Compare softmax variants on a demonstration vector.",
    )
    parser.parse_args(argv)

    data = list(DEMO_DATA)
    weights = list(DEMO_WEIGHTS)
    print(format_vector(data))
    for variant in (naive_softmax, safe_softmax, online_softmax):
        print(format_vector(variant(data)))
    print(f"default dot product: {online_softmax_dot(data, weights):g}")
    print(f"optimal dot product: {online_softmax_dot_fused(data, weights):g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())