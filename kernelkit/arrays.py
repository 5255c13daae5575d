"""Element-wise vector and matrix addition, block reduction and result checks."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence

SEPARATOR = "-------------------------"
DEFAULT_TOLERANCE = 0.005
DEFAULT_BLOCK_SIZE = 256
DEFAULT_REDUCE_SIZE = 32 * 1024 * 1024
DEFAULT_MATRIX_DIM = 1024


def _add(first: Iterable[float], second: Iterable[float]) -> list[float]:
    try:
        return [a + b for a, b in zip(first, second, strict=True)]
    except ValueError as exc:
        raise ValueError("operands differ in length") from exc


def vector_add(first: Iterable[float], second: Iterable[float]) -> list[float]:
    """Return the element-wise sum of two equally long vectors."""
    return _add(first, second)


def init_matrix(nx: int, ny: int) -> list[float]:
    """Return an nx-by-ny matrix of ones, stored row-major in a flat list."""
    if nx < 0 or ny < 0:
        raise ValueError(f"matrix dimensions must be non-negative: {nx}x{ny}")
    return [1.0] * (nx * ny)


def matrix_add(first: Sequence[float], second: Sequence[float]) -> list[float]:
    """Return the element-wise sum of two flat matrices of the same shape."""
    return _add(first, second)


def format_matrix(matrix: Sequence[float], nx: int, ny: int) -> str:
    """Render a flat row-major matrix, each row framed by separator lines."""
    if nx < 0 or ny < 0:
        raise ValueError(f"matrix dimensions must be non-negative: {nx}x{ny}")
    if len(matrix) != nx * ny:
        raise ValueError(
            f"matrix holds {len(matrix)} elements, expected {nx * ny}"
        )
    parts = []
    for start in range(0, nx * ny, ny) if ny else ():
        row = "".join(f"{v:g} " for v in matrix[start:start + ny])
        parts.append(f"{SEPARATOR}\n{row}\n{SEPARATOR}\n")
    if ny == 0:
        parts = [f"{SEPARATOR}\n\n{SEPARATOR}\n"] * nx
    return "".join(parts)


def block_sums(values: Sequence[float], block_size: int = DEFAULT_BLOCK_SIZE) -> list[float]:
    """Sum consecutive blocks of block_size values; a short last block is summed as is."""
    if block_size <= 0:
        raise ValueError(f"block size must be positive: {block_size}")
    return [sum(values[start:start + block_size]) for start in range(0, len(values), block_size)]


def check(
    expected: Iterable[float],
    actual: Iterable[float],
    tolerance: float = DEFAULT_TOLERANCE,
) -> bool:
    """True unless some expected value exceeds its actual counterpart by more than tolerance."""
    try:
        return all(e - a <= tolerance for e, a in zip(expected, actual, strict=True))
    except ValueError as exc:
        raise ValueError("expected and actual differ in length") from exc


def _run_matrix(nx: int, ny: int) -> int:
    first = init_matrix(nx, ny)
    print("Matrix initialized")
    second = init_matrix(nx, ny)
    print("Matrix initialized")
    print(format_matrix(matrix_add(first, second), nx, ny), end="")
    return 0


def _run_reduce(size: int, block_size: int) -> int:
    data = [1.0] * size
    reference = block_sums(data, block_size)
    result = [math.fsum(data[start:start + block_size]) for start in range(0, size, block_size)]
    if check(reference, result):
        print("Reduction result is correct!")
        return 0
    print("Reduction result is wrong!")
    print("".join(f"{v:f} " for v in result))
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the matrix addition or block reduction demonstration."""
    parser = argparse.ArgumentParser(
        prog="kernelkit-arrays",
        description="Element-wise matrix addition and block reduction.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    matrix = commands.add_parser("matrix", help="add two matrices of ones and print the result")
    matrix.add_argument("--nx", type=int, default=DEFAULT_MATRIX_DIM)
    matrix.add_argument("--ny", type=int, default=DEFAULT_MATRIX_DIM)

    reduce_ = commands.add_parser("reduce", help="sum blocks of ones and verify them")
    reduce_.add_argument("--size", type=int, default=DEFAULT_REDUCE_SIZE)
    reduce_.add_argument("--block-size", type=int, default=DEFAULT_BLOCK_SIZE)

    args = parser.parse_args(argv)
    try:
        if args.command == "matrix":
            return _run_matrix(args.nx, args.ny)
        return _run_reduce(args.size, args.block_size)
    except ValueError as exc:
        parser.error(str(exc))
    return 2


if __name__ == "__main__":
    raise SystemExit(main())