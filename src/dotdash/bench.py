"""Timing comparison of the decode strategies."""

from __future__ import annotations

import time
from itertools import cycle, islice

from .codec.decoder import STRATEGIES, get_decoder
from .codec.table import CODES
from .utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_SIZE = 1000


def benchmark_strategies(
    iterations: int = 100, sample_size: int = SAMPLE_SIZE
) -> dict[str, float]:
    """Time every decode strategy over the same workload.

    The workload is the code table cycled to sample_size codes, decoded
    iterations times per strategy.

    Args:
        iterations: Number of passes over the workload (>= 1)
        sample_size: Number of codes per pass (>= 1)

    Returns:
        Dictionary mapping strategy name to elapsed seconds

    Raises:
        ValueError: If iterations or sample_size is less than 1
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")
    if sample_size < 1:
        raise ValueError(f"sample_size must be >= 1, got {sample_size}")

    codes = list(islice(cycle(CODES), sample_size))
    results: dict[str, float] = {}

    for strategy in STRATEGIES:
        decode = get_decoder(strategy).decode
        start = time.perf_counter()
        for _ in range(iterations):
            for code in codes:
                decode(code)
        results[strategy] = time.perf_counter() - start
        logger.info(
            "%s: %.6f s for %d x %d codes", strategy, results[strategy], iterations, sample_size
        )

    return results
