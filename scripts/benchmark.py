"""Micro-benchmarks for parsing and formatting sample messages."""

from __future__ import annotations

import time

from fedwire.codec.fields import FormatOptions
from fedwire.reader import parse_message
from fedwire.sample import sample_messages


def benchmark_roundtrip(messages: int = 1000, runs: int = 3, variable: bool = False) -> dict:
    options = FormatOptions(variable_length_fields=variable, newline=True)
    text = "".join(m.format(options) for m in sample_messages(count=messages))
    total_bytes = len(text)
    best = None
    for _ in range(runs):
        start = time.perf_counter()
        for chunk in text.split("{1500}")[1:]:
            parse_message("{1500}" + chunk).format(options)
        elapsed = time.perf_counter() - start
        best = elapsed if best is None or elapsed < best else best
    mbps = (total_bytes / 1_000_000) / best if best else 0.0
    return {
        "messages": messages,
        "bytes": total_bytes,
        "variable": variable,
        "best_seconds": best or 0.0,
        "mbps": mbps,
    }


if __name__ == "__main__":
    print(benchmark_roundtrip())
    print(benchmark_roundtrip(variable=True))
