#!/usr/bin/env python
"""Benchmark utf8gate throughput on synthetic text.

Timings use ``time.perf_counter()`` only.  Run standalone for human-readable
output, or with ``--json-only`` for machine-readable JSON.
"""

from __future__ import annotations

import argparse
import json
import statistics
import time

import utf8gate

_SAMPLES: dict[str, bytes] = {
    "ascii": b"PRIVMSG #channel :hello there, how is everyone today?\r\n",
    "utf-8": "PRIVMSG #kanal :Grüße aus Köln, ça va? 日本語 🌍\r\n".encode(),
    "latin-1": "PRIVMSG #kanal :Grüße aus Köln, ça va?\r\n".encode("latin-1"),
}


def _time_call(func, data: bytes, rounds: int) -> list[float]:
    timings = []
    for _ in range(rounds):
        start = time.perf_counter()
        func(data)
        timings.append(time.perf_counter() - start)
    return timings


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark utf8gate validation and upgrading.",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=1000,
        help="Times each sample line is repeated to build the input (default: 1000)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=20,
        help="Timed calls per operation and sample (default: 20)",
    )
    parser.add_argument(
        "--json-only",
        action="store_true",
        default=False,
        help="Print only JSON output (for consumption by other scripts)",
    )
    args = parser.parse_args()

    operations = {
        "is_valid_utf8": utf8gate.is_valid_utf8,
        "latin1_to_utf8": utf8gate.latin1_to_utf8,
        "coerce_to_utf8": lambda d: utf8gate.coerce_to_utf8(d, len(d) * 2),
    }

    results: dict[str, dict[str, float]] = {}
    for sample_name, line in _SAMPLES.items():
        data = line * args.repeat
        for op_name, func in operations.items():
            timings = _time_call(func, data, args.rounds)
            median = statistics.median(timings)
            results[f"{op_name}/{sample_name}"] = {
                "bytes": len(data),
                "median_s": median,
                "mb_per_s": len(data) / median / 1e6 if median else 0.0,
            }

    if args.json_only:
        print(json.dumps(results))
        return

    for key, stats in results.items():
        print(
            f"{key:<30} {stats['bytes']:>10,} bytes  "
            f"{stats['median_s'] * 1000:8.3f} ms  {stats['mb_per_s']:8.1f} MB/s"
        )


if __name__ == "__main__":
    main()
