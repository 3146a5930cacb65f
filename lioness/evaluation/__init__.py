"""
Evaluation and benchmarking tools for LIONESS.
"""

from .benchmark import (
    AvalancheResult,
    BenchmarkResult,
    PerformanceBenchmark,
    analyze_avalanche,
    run_comprehensive_benchmark,
)
