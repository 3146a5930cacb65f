#!/usr/bin/env python3
"""
Command-line runner for LIONESS.

Usage:
    python -m lioness.evaluation.runner keygen [--output PATH]
    python -m lioness.evaluation.runner encrypt --key-file PATH INPUT OUTPUT
    python -m lioness.evaluation.runner decrypt --key-file PATH INPUT OUTPUT
    python -m lioness.evaluation.runner benchmark [--sizes 64,1024] [--iterations N] [--json]
    python -m lioness.evaluation.runner avalanche [--size N] [--trials N]
    python -m lioness.evaluation.runner suites
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ..config import LionessConfig
from ..crypto.errors import LionessError
from ..crypto.kdf import save_master_key
from ..crypto.suites import available_suites, get_suite
from .benchmark import PerformanceBenchmark, analyze_avalanche


logger = logging.getLogger(__name__)


def parse_sizes(value: str) -> List[int]:
    """Parse a comma-separated list of sizes."""
    try:
        return [int(x.strip()) for x in value.split(',') if x.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid size list: {value}")


def positive_int(value: str) -> int:
    """Parse a count that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"Must be at least 1: {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(prog='lioness', description='LIONESS wide-block cipher')
    subparsers = parser.add_subparsers(dest='command', help='Sub-commands')

    # Global options
    parser.add_argument('--suite', type=str, default=None,
                        help='Cipher suite (default: from config or chacha20-blake2b)')
    parser.add_argument('--config-dir', type=str, default=None,
                        help='Configuration directory (default: ~/.lioness)')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (default: WARNING)')

    keygen_parser = subparsers.add_parser('keygen', help='Generate a master key')
    keygen_parser.add_argument('--output', type=str, default=None,
                               help='Write the hex key to this file instead of stdout')
    keygen_parser.add_argument('--store', action='store_true',
                               help='Store the key in the configuration directory')

    for command in ('encrypt', 'decrypt'):
        sub = subparsers.add_parser(command, help=f'{command.capitalize()} a file')
        sub.add_argument('--key-file', type=str, default=None,
                         help='Master key file (default: key in the configuration directory)')
        sub.add_argument('input', type=str, help="Input file ('-' for stdin)")
        sub.add_argument('output', type=str, help="Output file ('-' for stdout)")

    bench_parser = subparsers.add_parser('benchmark', help='Measure throughput')
    bench_parser.add_argument('--sizes', type=parse_sizes, default=[64, 256, 1024, 4096],
                              help='Comma-separated message sizes (default: 64,256,1024,4096)')
    bench_parser.add_argument('--iterations', type=positive_int, default=1000,
                              help='Iterations per size (default: 1000)')
    bench_parser.add_argument('--all-suites', action='store_true',
                              help='Benchmark every registered suite')
    bench_parser.add_argument('--json', action='store_true', help='Print results as JSON')

    avalanche_parser = subparsers.add_parser('avalanche', help='Measure bit-flip diffusion')
    avalanche_parser.add_argument('--size', type=positive_int, default=256,
                                  help='Message size in bytes (default: 256)')
    avalanche_parser.add_argument('--trials', type=positive_int, default=64,
                                  help='Number of single-bit flips (default: 64)')

    subparsers.add_parser('suites', help='List cipher suites')

    return parser


def _read_input(path: str) -> bytes:
    if path == '-':
        return sys.stdin.buffer.read()
    with open(path, 'rb') as f:
        return f.read()


def _write_output(path: str, data: bytes) -> None:
    if path == '-':
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, 'wb') as f:
        f.write(data)


def cmd_keygen(config: LionessConfig, args) -> int:
    if args.store:
        config.create_new_master_key()
        print(f"Master key saved to: {config.key_file_path}")
        return 0

    key = config.suite.generate_key()
    if args.output:
        save_master_key(args.output, key)
        print(f"Master key saved to: {args.output}")
    else:
        print(key.hex())
    return 0


def cmd_transform(config: LionessConfig, args) -> int:
    cipher = config.create_cipher(args.key_file)
    data = _read_input(args.input)

    if args.command == 'encrypt':
        result = cipher.encrypt(data)
    else:
        result = cipher.decrypt(data)

    _write_output(args.output, result)
    logger.info("%s: %d bytes with %s", args.command, len(data), cipher.algorithm_name)
    return 0


def cmd_benchmark(config: LionessConfig, args) -> int:
    benchmark = PerformanceBenchmark()
    suites = available_suites() if args.all_suites else [config.suite.name]
    results = benchmark.compare_suites(args.sizes, args.iterations, suites)

    if args.json:
        payload = {name: [r.to_dict() for r in rs] for name, rs in results.items()}
        print(json.dumps(payload, indent=2))
        return 0

    print(f"{'suite':<24} {'op':<8} {'size':>8} {'avg (us)':>10} {'MB/s':>10}")
    for rs in results.values():
        for r in rs:
            print(f"{r.suite:<24} {r.operation:<8} {r.message_size:>8} "
                  f"{r.avg_time * 1e6:>10.2f} {r.throughput_mbps:>10.2f}")
    return 0


def cmd_avalanche(config: LionessConfig, args) -> int:
    result = analyze_avalanche(config.suite.name, args.size, args.trials)
    print(f"Suite: {result.suite}")
    print(f"Message size: {result.message_size} bytes, trials: {result.trials}")
    print(f"Average bits changed: {result.avg_bits_changed:.1f} "
          f"({result.avalanche_percent:.1f}%)")
    print(f"Minimum bits changed: {result.min_bits_changed}")
    print(f"Minimum bytes changed: {result.min_bytes_changed}")
    return 0


def cmd_suites(config: LionessConfig, args) -> int:
    for name in available_suites():
        suite = get_suite(name)
        marker = '*' if name == config.suite_name else ' '
        print(f"{marker} {name:<24} H={suite.digest_size:<3} key={suite.key_size:<4} {suite.description}")
    return 0


COMMANDS = {
    'keygen': cmd_keygen,
    'encrypt': cmd_transform,
    'decrypt': cmd_transform,
    'benchmark': cmd_benchmark,
    'avalanche': cmd_avalanche,
    'suites': cmd_suites,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the runner."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = LionessConfig(config_dir=args.config_dir, suite=args.suite,
                           log_level=args.log_level)

    try:
        config.configure_logging()
        return COMMANDS[args.command](config, args)
    except (LionessError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
