"""
Timing harness for the square-root operations.

The workload walks every operand between consecutive squares, ``r**2 <= m < (r + 1)**2``
for ``1 <= r < limit``, and accumulates the operands the operation accepts.
"""
import argparse
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.table import Table

from int_sqrt.squareroot import (
    FLOAT_EXACT_MAX_BYTE_LENGTH,
    exact_squareroot,
    float_squareroot,
    integer_squareroot,
    is_perfect_square,
)
from int_sqrt.utils.uint_typing import UINT_TYPES, max_value, uint

DEFAULT_LIMIT = 100
DEFAULT_REPEAT = 5


def _accept_floor_root(fn):
    def accept(m: uint, r: int) -> bool:
        return fn(m) == r

    return accept


def _accept_square(m: uint, r: int) -> bool:
    return is_perfect_square(m)


def _accept_exact_root(m: uint, r: int) -> bool:
    return exact_squareroot(m) is not None


OPERATIONS: dict[str, Callable[[uint, int], bool]] = {
    "integer_squareroot": _accept_floor_root(integer_squareroot),
    "is_perfect_square": _accept_square,
    "exact_squareroot": _accept_exact_root,
    "float_squareroot": _accept_floor_root(float_squareroot),
}


@dataclass(frozen=True)
class BenchResult:
    width: str
    operation: str
    operand_count: int
    accepted_sum: int
    best_seconds: float

    @property
    def nanos_per_operand(self) -> float:
        return self.best_seconds * 1e9 / self.operand_count


def bench_workload(typ: type[uint], limit: int) -> list[tuple[uint, int]]:
    """Operands paired with their expected floor root, clipped to the width."""
    top = max_value(typ)
    workload = []
    for r in range(1, limit):
        upper = min((r + 1) * (r + 1), top + 1)
        workload.extend((typ(m), r) for m in range(r * r, upper))
        if upper == top + 1:
            break
    return workload


def supports(operation: str, typ: type[uint]) -> bool:
    if operation == "float_squareroot":
        return typ.type_byte_length() <= FLOAT_EXACT_MAX_BYTE_LENGTH
    return True


def run_operation(accept: Callable[[uint, int], bool], workload: Sequence[tuple[uint, int]]) -> int:
    total = 0
    for m, r in workload:
        if accept(m, r):
            total += int(m)
    return total


def time_operation(
    accept: Callable[[uint, int], bool], workload: Sequence[tuple[uint, int]], repeat: int
) -> tuple[int, float]:
    best = None
    total = 0
    for _ in range(repeat):
        start = time.perf_counter()
        total = run_operation(accept, workload)
        elapsed = time.perf_counter() - start
        if best is None or elapsed < best:
            best = elapsed
    return total, best


def run_benchmarks(
    types: Sequence[type[uint]] = UINT_TYPES,
    operations: Sequence[str] = tuple(OPERATIONS),
    limit: int = DEFAULT_LIMIT,
    repeat: int = DEFAULT_REPEAT,
) -> list[BenchResult]:
    results = []
    for typ in types:
        workload = bench_workload(typ, limit)
        for operation in operations:
            if not supports(operation, typ):
                continue
            total, best = time_operation(OPERATIONS[operation], workload, repeat)
            results.append(
                BenchResult(
                    width=typ.type_repr(),
                    operation=operation,
                    operand_count=len(workload),
                    accepted_sum=total,
                    best_seconds=best,
                )
            )
    return results


def display_results(console: Console, results: Sequence[BenchResult]) -> None:
    table = Table(title="Integer Square Root Benchmarks", box=box.ROUNDED, title_style="bold blue")
    table.add_column("Width", style="cyan", justify="left")
    table.add_column("Operation", style="cyan", justify="left")
    table.add_column("Operands", style="green", justify="right")
    table.add_column("Accepted sum", style="green", justify="right")
    table.add_column("Best", style="yellow", justify="right")
    table.add_column("ns/operand", style="magenta", justify="right")
    for result in results:
        table.add_row(
            result.width,
            result.operation,
            str(result.operand_count),
            str(result.accepted_sum),
            f"{result.best_seconds * 1000:.2f}ms",
            f"{result.nanos_per_operand:.0f}",
        )
    console.print()
    console.print(table)
    console.print()


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        prog="bench",
        description="Time the integer square-root operations over every unsigned width.",
    )
    parser.add_argument(
        "--widths",
        dest="widths",
        nargs="*",
        type=str,
        default=[],
        help="Specify unsigned widths to run with. Allows all if no width names are specified.",
    )
    parser.add_argument(
        "--operations",
        dest="operations",
        nargs="*",
        type=str,
        default=[],
        choices=list(OPERATIONS),
        help="Specify operations to time. Allows all if no operation names are specified.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_LIMIT,
        help="Walk the operands below limit**2.",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=DEFAULT_REPEAT,
        help="Time each operation N times and keep the best run.",
    )
    args = parser.parse_args(argv)
    # An empty workload has no per-operand time.
    if args.limit < 2:
        parser.error(f"--limit must be at least 2, got {args.limit}")
    if args.repeat < 1:
        parser.error(f"--repeat must be at least 1, got {args.repeat}")
    return args


def main(argv=None, console: Console = None) -> list[BenchResult]:
    args = parse_arguments(argv)
    types = [typ for typ in UINT_TYPES if len(args.widths) == 0 or typ.type_repr() in args.widths]
    if len(types) == 0:
        raise ValueError(f"no known width in {args.widths}")
    operations = args.operations or list(OPERATIONS)
    results = run_benchmarks(types, operations, args.limit, args.repeat)
    display_results(console or Console(), results)
    return results
