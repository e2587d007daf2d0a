"""
Batch validation performance benchmark.

Compares sequential and parallel batch_validate() across worker counts. The
batch is built from the bundled sample documents: each family's sample plus
copies with a line of noise appended, so some rules fail and report lines.

Usage (from the project root):
    python tests/bench_batch.py

    # Override worker counts, batch size or family:
    BENCH_WORKERS=1,2,4,8 BENCH_DOCS=400 BENCH_FAMILY=go python tests/bench_batch.py
"""

import os
import sys
import time
import statistics

from nsl_validation import ValidationService

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

FAMILY = os.environ.get("BENCH_FAMILY", "entity")
N_DOCS = int(os.environ.get("BENCH_DOCS", "200"))
N_WARMUP = 1
N_RUNS = 3

_env_workers = os.environ.get("BENCH_WORKERS")
if _env_workers:
    WORKER_COUNTS = [int(w) for w in _env_workers.split(",")]
else:
    WORKER_COUNTS = [2, 4, 8]


def build_documents(service: ValidationService, count: int) -> list:
    """count documents derived from the family sample; every third one is damaged."""
    sample = service.sample_document(FAMILY)
    documents = []
    for i in range(count):
        document = dict(sample)
        document["id"] = f"DOC-{i:05d}"
        if i % 3 == 0:
            document["output"] = sample["output"] + "\nbroken entity has Bad Attribute\n"
        documents.append(document)
    return documents


# ---------------------------------------------------------------------------
# Benchmark runner
# ---------------------------------------------------------------------------


def run_config(label: str, documents: list, n_workers=None) -> dict:
    """
    Benchmark one configuration.

    Args:
        label: Display label.
        documents: Batch to validate.
        n_workers: None = sequential (no pool). int = parallel with that many workers.

    Returns:
        Dict with label, mean_ms, min_ms, max_ms, throughput, speedup (added later).
    """
    svc = ValidationService()

    if n_workers is not None:
        # Patch local_config so different worker counts can be tried without
        # editing the bundled YAML between runs.
        svc.config_loader.local_config["batch_parallelism"] = True
        svc.config_loader.local_config["batch_max_workers"] = n_workers
        svc._create_pool()

    try:
        times_ms = []
        for i in range(N_WARMUP + N_RUNS):
            t0 = time.perf_counter()
            results = svc.batch_validate(documents, FAMILY)
            elapsed_ms = (time.perf_counter() - t0) * 1000
            tag = f"warmup {i + 1}" if i < N_WARMUP else f"run {i - N_WARMUP + 1}/{N_RUNS}"
            print(f"    [{tag}] {elapsed_ms:,.0f} ms", flush=True)
            if i >= N_WARMUP:
                times_ms.append(elapsed_ms)

        assert len(results) == len(documents), (
            f"Expected {len(documents)} results, got {len(results)}"
        )

    finally:
        svc.close()

    mean_ms = statistics.mean(times_ms)
    return {
        "label": label,
        "mean_ms": mean_ms,
        "min_ms": min(times_ms),
        "max_ms": max(times_ms),
        "throughput": len(documents) / (mean_ms / 1000),
        "speedup": None,  # filled in after all configs complete
    }


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    cpu = os.cpu_count()
    seed_service = ValidationService()
    documents = build_documents(seed_service, N_DOCS)
    seed_service.close()

    print(
        f"\nPython {sys.version.split()[0]}  |  cpus={cpu}  |  documents={N_DOCS}"
        f"  |  family={FAMILY}  |  runs={N_RUNS} timed + {N_WARMUP} warmup"
    )
    print("=" * 68)

    configs = [("Sequential (no pool)", None)] + [
        (f"Parallel, {n} worker{'s' if n != 1 else ''}", n)
        for n in WORKER_COUNTS
        if n <= cpu
    ]

    rows = []
    for label, n_workers in configs:
        print(f"\n{label}:")
        row = run_config(label, documents, n_workers)
        rows.append(row)
        print(f"  → mean {row['mean_ms']:,.0f} ms  |  {row['throughput']:,.1f} docs/sec")

    seq_mean = rows[0]["mean_ms"]
    for row in rows:
        row["speedup"] = seq_mean / row["mean_ms"]

    print(f"\n\n{'=' * 68}")
    print(f"  {N_DOCS} documents  |  {FAMILY} family  |  {N_RUNS} timed runs + {N_WARMUP} warmup")
    print(f"{'=' * 68}")
    print(
        f"  {'Config':<26} {'Mean ms':>8} {'Min ms':>8} {'Max ms':>8}"
        f" {'Docs/sec':>9} {'Speedup':>8}"
    )
    print(f"  {'-' * 66}")
    for row in rows:
        print(
            f"  {row['label']:<26} "
            f"{row['mean_ms']:>8,.0f} "
            f"{row['min_ms']:>8,.0f} "
            f"{row['max_ms']:>8,.0f} "
            f"{row['throughput']:>9,.1f} "
            f"{row['speedup']:>8.2f}x"
        )
    print(f"{'=' * 68}")

    best = max(rows, key=lambda r: r["throughput"])
    print(
        f"\n  Optimal: {best['label']}"
        f"  ({best['throughput']:,.1f} docs/sec, {best['speedup']:.2f}x sequential)\n"
    )
