#!/usr/bin/env python3
"""
Stable benchmark runner for latinym with median-based gating.

Each run is a fresh subprocess (fixed hash seed, cold caches) that builds a
transliterator, warms it on part of a deterministic mixed-script corpus, then
times ``transliterate_sync`` over the whole corpus. The parent reports
mean/median/CV across runs and can fail when the median falls below a gate.
"""

from __future__ import annotations

import argparse
import gc
import json
import os
import random
import statistics
import subprocess
import sys
import time

from latinym import NameRequest, NameTransliterator, TransliterationConfig

# Seed names per country; the corpus is built by recombining them
SEED_NAMES: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "EG": (("محمد", "أحمد", "زهير", "مُحَمَّد", "عبد الله"), ("علي", "حسن", "الشامي", "أبو حسن")),
    "IR": (("پرویز", "رضا"), ("رضایی", "کریمی")),
    "JP": (("太郎", "はなこ", "翔平", "さくら"), ("山田", "大谷", "すずき", "佐々木")),
    "KR": (("민수", "서연", "하은", "지훈"), ("김", "박", "최", "남궁")),
    "CN": (("小明", "泽东", "志明"), ("王", "单", "尉迟", "陈")),
    "RU": (("Иван", "Олена", "Юрий"), ("Петров", "Шевченко", "Гагарин")),
    "GR": (("Νίκος", "Μαρία"), ("Παπαδόπουλος", "Γεωργίου")),
    "TH": (("สมชาย", "มานี"), ("ใจดี",)),
    "IN": (("राहुल", "कृष्ण"), ("शर्मा",)),
    "ES": (("José", "María"), ("García", "Núñez")),
    "US": (("John", "Zoë"), ("Smith", "McDonald", "")),
    "IL": (("דוד",), ("כהן",)),
}


def build_corpus(count: int, seed: int = 7) -> list[NameRequest]:
    """Deterministic mixed-script requests, cycling countries in a fixed order."""
    rng = random.Random(seed)
    countries = sorted(SEED_NAMES)
    corpus = []
    for i in range(count):
        country = countries[i % len(countries)]
        firsts, lasts = SEED_NAMES[country]
        corpus.append(NameRequest(rng.choice(firsts), rng.choice(lasts), country))
    return corpus


def _run_worker(names_count: int, warmup_count: int, offline: bool) -> dict[str, float | int]:
    """Run one isolated benchmark measurement in-process."""
    config = TransliterationConfig.without_libraries() if offline else TransliterationConfig.create_default()
    transliterator = NameTransliterator(config)
    requests = build_corpus(names_count)

    for request in requests[: min(warmup_count, len(requests))]:
        transliterator.transliterate_sync(request)

    gc.collect()
    gc_enabled = gc.isenabled()
    if gc_enabled:
        gc.disable()

    try:
        start = time.perf_counter()
        for request in requests:
            transliterator.transliterate_sync(request)
        end = time.perf_counter()
    finally:
        if gc_enabled:
            gc.enable()

    elapsed = end - start
    return {
        "elapsed_seconds": elapsed,
        "names_per_second": len(requests) / elapsed if elapsed > 0 else 0.0,
        "name_count": len(requests),
    }


def _run_subprocess_worker(args: argparse.Namespace, run_idx: int) -> dict[str, float | int]:
    env = os.environ.copy()
    env["PYTHONHASHSEED"] = str(args.hash_seed)
    env["PYTHONIOENCODING"] = "utf-8"

    cmd = [sys.executable, __file__, "--worker", "--names", str(args.names), "--warmup", str(args.warmup)]
    if args.offline:
        cmd.append("--offline")
    result = subprocess.run(  # noqa: S603
        cmd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=False,
        env=env,
    )
    if result.returncode != 0:
        message = (
            f"Worker {run_idx} failed with code {result.returncode}.\n"
            f"STDOUT:\n{result.stdout}\nSTDERR:\n{result.stderr}"
        )
        raise RuntimeError(message)

    # Library start-up may print; the payload is the last JSON line
    for raw_line in reversed(result.stdout.splitlines()):
        candidate = raw_line.strip()
        if candidate.startswith("{") and candidate.endswith("}"):
            return json.loads(candidate)

    message = f"Worker {run_idx} did not emit JSON output.\nSTDOUT:\n{result.stdout}"
    raise RuntimeError(message)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Stable latinym benchmark with a median gate.")
    parser.add_argument("--runs", type=int, default=5, help="Number of isolated runs.")
    parser.add_argument("--names", type=int, default=3000, help="Number of deterministic requests.")
    parser.add_argument("--warmup", type=int, default=500, help="Requests to run before timing in each run.")
    parser.add_argument("--hash-seed", type=int, default=42, help="PYTHONHASHSEED used for each worker subprocess.")
    parser.add_argument("--offline", action="store_true", help="Benchmark with every external library disabled.")
    parser.add_argument(
        "--min-median-names-per-sec",
        type=float,
        default=0.0,
        help="Optional gate: fail (exit 1) when median names/sec is below this value.",
    )
    parser.add_argument("--worker", action="store_true", help=argparse.SUPPRESS)
    return parser


def main() -> int:
    args = _build_arg_parser().parse_args()

    if args.worker:
        print(json.dumps(_run_worker(args.names, args.warmup, args.offline)))
        return 0

    if args.runs < 1:
        message = "--runs must be >= 1"
        raise ValueError(message)

    print("=" * 72)
    print("LATINYM STABLE BENCHMARK" + (" (offline)" if args.offline else ""))
    print("=" * 72)
    print(f"runs={args.runs} names={args.names} warmup={args.warmup} hash_seed={args.hash_seed}")
    print()

    rates: list[float] = []
    elapsed: list[float] = []
    for run_idx in range(1, args.runs + 1):
        payload = _run_subprocess_worker(args, run_idx)
        rates.append(float(payload["names_per_second"]))
        elapsed.append(float(payload["elapsed_seconds"]))
        print(f"run {run_idx}: {elapsed[-1]:.6f}s | {rates[-1]:.0f} names/sec")

    median_rate = statistics.median(rates)
    mean_rate = statistics.mean(rates)
    stdev_rate = statistics.stdev(rates) if len(rates) > 1 else 0.0
    cv_rate = (stdev_rate / mean_rate * 100.0) if mean_rate else 0.0

    print()
    print("Summary")
    print("-" * 72)
    print(f"rate_mean_names_per_second={mean_rate:.2f}")
    print(f"rate_median_names_per_second={median_rate:.2f}")
    print(f"rate_cv_percent={cv_rate:.2f}")
    print(f"elapsed_median_seconds={statistics.median(elapsed):.6f}")
    print()
    print(f"MEDIAN_NAMES_PER_SECOND={median_rate:.2f}")

    if args.min_median_names_per_sec > 0 and median_rate < args.min_median_names_per_sec:
        print(f"GATE=FAIL (median {median_rate:.2f} < required {args.min_median_names_per_sec:.2f})")
        return 1

    print("GATE=PASS")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
