"""
Benchmark and diffusion analysis for LIONESS cipher suites.

Measures encryption/decryption throughput and memory usage per suite and
message size, and estimates avalanche behaviour by flipping single input
bits and counting changed output bits.
"""

import gc
import logging
import statistics
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

import psutil

from ..crypto.suites import available_suites, get_suite
from ..crypto.utils import generate_random_bytes, hamming_distance


logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Container for benchmark results."""
    name: str
    suite: str
    operation: str
    message_size: int
    iterations: int
    total_time: float
    avg_time: float
    throughput_mbps: float
    memory_usage: Optional[Dict[str, float]] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AvalancheResult:
    """Bit-flip diffusion statistics for one suite and message size."""
    suite: str
    message_size: int
    trials: int
    avg_bits_changed: float
    min_bits_changed: int
    avalanche_percent: float
    min_bytes_changed: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def time_operation(func, data: bytes, iterations: int) -> float:
    """Run func(data) `iterations` times and return the elapsed seconds."""
    start_time = time.perf_counter()
    for _ in range(iterations):
        func(data)
    return time.perf_counter() - start_time


class PerformanceBenchmark:
    """
    Throughput and memory benchmarking for LIONESS suites.
    """

    def __init__(self):
        """Initialize benchmark suite."""
        self.results: List[BenchmarkResult] = []

    def measure_memory_usage(self) -> Dict[str, float]:
        """
        Measure current memory usage.

        Returns:
            Dictionary with memory statistics in MB
        """
        process = psutil.Process()
        memory_info = process.memory_info()

        return {
            'rss': memory_info.rss / 1024 / 1024,  # MB
            'vms': memory_info.vms / 1024 / 1024,  # MB
            'percent': process.memory_percent()
        }

    def benchmark_suite(self, suite_name: str, message_sizes: List[int],
                        iterations: int = 1000) -> List[BenchmarkResult]:
        """
        Benchmark encryption and decryption of one suite.

        Args:
            suite_name: Registered suite name
            message_sizes: Message sizes in bytes; each must exceed the digest size
            iterations: Operations per size and direction

        Returns:
            One result per (size, operation)

        Raises:
            ValueError: If iterations is below 1
        """
        if iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {iterations}")

        suite = get_suite(suite_name)
        cipher = suite.create(suite.generate_key())
        results = []

        for size in message_sizes:
            message = generate_random_bytes(size)
            ciphertext = cipher.encrypt(message)

            for operation, func, data in (('encrypt', cipher.encrypt, message),
                                          ('decrypt', cipher.decrypt, ciphertext)):
                # Force garbage collection before benchmark
                gc.collect()
                memory_before = self.measure_memory_usage()

                total_time = time_operation(func, data, iterations)

                memory_after = self.measure_memory_usage()
                memory_delta = {
                    'rss_delta': memory_after['rss'] - memory_before['rss'],
                    'vms_delta': memory_after['vms'] - memory_before['vms']
                }

                result = BenchmarkResult(
                    name=f"{operation}-{suite.name}-{size}B",
                    suite=suite.name,
                    operation=operation,
                    message_size=size,
                    iterations=iterations,
                    total_time=total_time,
                    avg_time=total_time / iterations,
                    throughput_mbps=(size * iterations) / total_time / 1024 / 1024,
                    memory_usage=memory_delta,
                )
                logger.info("%s: %.2f MB/s", result.name, result.throughput_mbps)

                results.append(result)
                self.results.append(result)

        return results

    def compare_suites(self, message_sizes: List[int], iterations: int = 1000,
                       suites: Optional[List[str]] = None) -> Dict[str, List[BenchmarkResult]]:
        """
        Benchmark several suites over the same message sizes.

        Args:
            message_sizes: Message sizes in bytes
            iterations: Operations per size and direction
            suites: Suite names; defaults to every registered suite

        Returns:
            Results keyed by suite name
        """
        return {
            name: self.benchmark_suite(name, message_sizes, iterations)
            for name in (suites or available_suites())
        }

    def get_summary_report(self) -> Dict[str, Any]:
        """
        Generate summary report of all benchmark results.

        Returns:
            Summary grouped by suite
        """
        if not self.results:
            return {'error': 'No benchmark results available'}

        by_suite: Dict[str, List[BenchmarkResult]] = {}
        for result in self.results:
            by_suite.setdefault(result.suite, []).append(result)

        summary = {
            'total_benchmarks': len(self.results),
            'suites_tested': list(by_suite.keys()),
            'by_suite': {}
        }

        for suite, results in by_suite.items():
            throughputs = [r.throughput_mbps for r in results]
            latencies = [r.avg_time for r in results]

            summary['by_suite'][suite] = {
                'benchmark_count': len(results),
                'avg_throughput_mbps': statistics.mean(throughputs),
                'max_throughput_mbps': max(throughputs),
                'avg_latency_ms': statistics.mean(latencies) * 1000,
                'min_latency_ms': min(latencies) * 1000,
                'message_sizes_tested': sorted(set(r.message_size for r in results))
            }

        return summary


def analyze_avalanche(suite_name: Optional[str] = None, message_size: int = 256,
                      trials: int = 32, master_key: Optional[bytes] = None) -> AvalancheResult:
    """
    Estimate diffusion by flipping one random input bit per trial.

    Args:
        suite_name: Registered suite name; None for the default suite
        message_size: Message length in bytes
        trials: Number of single-bit flips
        master_key: Fixed key; random when omitted

    Returns:
        AvalancheResult with changed-bit statistics

    Raises:
        ValueError: If trials is below 1
    """
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")

    suite = get_suite(suite_name)
    cipher = suite.create(master_key or suite.generate_key())

    message = generate_random_bytes(message_size)
    baseline = cipher.encrypt(message)
    total_bits = message_size * 8

    bit_changes = []
    byte_changes = []
    positions = generate_random_bytes(4 * trials)

    for i in range(trials):
        bit_pos = int.from_bytes(positions[4 * i:4 * i + 4], 'big') % total_bits
        modified = bytearray(message)
        modified[bit_pos // 8] ^= 1 << (bit_pos % 8)

        output = cipher.encrypt(bytes(modified))
        bit_changes.append(hamming_distance(baseline, output))
        byte_changes.append(sum(1 for a, b in zip(baseline, output) if a != b))

    avg_bits = statistics.mean(bit_changes)
    return AvalancheResult(
        suite=suite.name,
        message_size=message_size,
        trials=trials,
        avg_bits_changed=avg_bits,
        min_bits_changed=min(bit_changes),
        avalanche_percent=avg_bits / total_bits * 100,
        min_bytes_changed=min(byte_changes),
    )


def run_comprehensive_benchmark(quick: bool = False) -> Dict[str, Any]:
    """
    Benchmark every registered suite.

    Args:
        quick: If True, run reduced test set for faster execution

    Returns:
        Summary, per-suite results and avalanche statistics
    """
    benchmark = PerformanceBenchmark()

    if quick:
        message_sizes = [64, 512, 1024]
        iterations = 100
    else:
        message_sizes = [64, 256, 1024, 4096, 16384]
        iterations = 1000

    logger.info("Running LIONESS benchmark over %d suites", len(available_suites()))
    suite_results = benchmark.compare_suites(message_sizes, iterations)

    avalanche = {
        name: analyze_avalanche(name, message_size=256, trials=16 if quick else 64)
        for name in available_suites()
    }

    return {
        'summary': benchmark.get_summary_report(),
        'suite_comparison': suite_results,
        'avalanche': avalanche,
    }
