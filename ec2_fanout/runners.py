#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Two ways to run the same profile x region workload.

run_sequential  - one pair at a time, nested order (profiles, then regions).
run_parallel    - every pair at once on its own thread, joined by one barrier.
                  No worker cap, no rate limiting, no cancellation: the
                  parallel pass is meant to show raw fan-out.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterator, List, Sequence, TextIO, Tuple

from ec2_fanout.common.errors import TaskError
from ec2_fanout.config import RunConfig
from ec2_fanout.ec2_running_count import TaskResult

logger = logging.getLogger(__name__)


def iter_tasks(profiles: Sequence[str], regions: Sequence[str]) -> Iterator[Tuple[str, str]]:
    for profile in profiles:
        for region in regions:
            yield (profile, region)


def run_task(config: RunConfig, profile: str, region: str) -> TaskResult:
    try:
        return config.counter(profile, region)
    except Exception as e:
        # a counter that raises instead of returning an error still only fails its own pair
        logger.exception("[%s/%s] counter raised", profile, region)
        return TaskResult(profile, region, error=TaskError(profile, region, e))


def report(result: TaskResult, config: RunConfig) -> None:
    if result.ok:
        print(f"[{result.profile}/{result.region}] Running instances: {result.count}",
              file=config.stdout, flush=True)
    else:
        print(result.error, file=config.stderr, flush=True)


def run_sequential(profiles: Sequence[str], config: RunConfig) -> None:
    for profile, region in iter_tasks(profiles, config.regions):
        report(run_task(config, profile, region), config)


def run_parallel(profiles: Sequence[str], config: RunConfig) -> None:
    tasks: List[Tuple[str, str]] = list(iter_tasks(profiles, config.regions))
    if not tasks:
        return

    logger.debug("launching %d tasks", len(tasks))
    # one thread per task; profile/region go in as call arguments, bound at submit time
    with ThreadPoolExecutor(max_workers=len(tasks), thread_name_prefix="ec2-fanout") as executor:
        futures = [executor.submit(run_task, config, profile, region) for profile, region in tasks]
        for future in as_completed(futures):
            report(future.result(), config)


def _unit(value_ns: int, unit_ns: int, suffix: str) -> str:
    whole, frac = divmod(value_ns, unit_ns)
    digits = str(frac).rjust(len(str(unit_ns)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}{suffix}" if digits else f"{whole}{suffix}"


def format_duration(seconds: float) -> str:
    """Shortest unit-suffixed duration text: 250µs, 12.5ms, 1.5s, 1m2.25s, 1h0m0s."""
    ns = int(round(seconds * 1e9))
    if ns == 0:
        return "0s"
    if ns < 1_000:
        return f"{ns}ns"
    if ns < 1_000_000:
        return _unit(ns, 1_000, "µs")
    if ns < 1_000_000_000:
        return _unit(ns, 1_000_000, "ms")

    hours, rest = divmod(ns, 3600 * 1_000_000_000)
    minutes, rest = divmod(rest, 60 * 1_000_000_000)
    text = _unit(rest, 1_000_000_000, "s")
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return text


def timed(fn: Callable[[], None], out: TextIO) -> float:
    """Run fn, print the blank line + 'Done in <duration>' summary to out, return elapsed seconds."""
    start = time.perf_counter()
    fn()
    elapsed = time.perf_counter() - start
    print(f"\nDone in {format_duration(elapsed)}", file=out, flush=True)
    return elapsed
