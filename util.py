import time
import tracemalloc

import psutil


BYTE_UNITS = ("B", "KB", "MB", "GB")


def human_bytes(n_bytes: int) -> str:
    """Byte count scaled to the largest unit that keeps it below 1024 (GB at most)."""
    if n_bytes < 1024:
        return f"{n_bytes} B"
    size = float(n_bytes)
    for unit in BYTE_UNITS[1:]:
        size /= 1024.0
        if size < 1024 or unit == BYTE_UNITS[-1]:
            return f"{size:.2f} {unit}"


def execute_with_metrics(run_fn, *args):
    """Run a search function and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at the end of the run
    """
    tracemalloc.start()
    t0 = time.perf_counter()
    try:
        result = run_fn(*args)
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    rss_after = psutil.Process().memory_info().rss
    return result, dt, peak, rss_after


def metrics_line(method, result, runtime_s, peak_bytes, rss_after):
    """Single-line metrics summary for a finished run."""
    return (
        f"Metrics: method={method} nodes_expanded={result.visited_count} "
        f"path_length={result.path_length} "
        f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={human_bytes(peak_bytes)} "
        f"rss_now={human_bytes(rss_after)}"
    )
