#!/usr/bin/env python3
"""
Determinism check for c-style
Runs the tool repeatedly with the same arguments to detect run-to-run differences in its output
"""

import argparse
import statistics
import subprocess
import sys
import time
from collections import Counter
from pathlib import Path

import numpy as np

# --- Configuration ---
DEFAULT_RUNS = 10
ARGUMENT_SETS = [
    [],
    ['-s', '0', '-e', '48'],
    ['-s', '20', '-e', '30'],
    ['-s', '47', '-e', '48'],
    ['-s', '48', '-e', '48'],
]

def run_tool(tool_args, cwd=None):
    """Run the tool once and return (success, stdout, stderr, elapsed seconds)"""
    cmd = [sys.executable, '-m', 'cstyle'] + list(tool_args)
    start_time = time.perf_counter()
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=cwd,
            timeout=60
        )
    except subprocess.TimeoutExpired:
        return False, "", "Command timed out", time.perf_counter() - start_time
    elapsed = time.perf_counter() - start_time
    return result.returncode == 0, result.stdout.strip(), result.stderr.strip(), elapsed

def check_arguments(tool_args, num_runs=DEFAULT_RUNS):
    """Run the tool num_runs times and analyze whether every run agreed"""
    project_root = Path(__file__).parent
    label = ' '.join(tool_args) or '(defaults)'
    results = []
    times = []

    print(f"\n🔄 Running c-style {label} {num_runs} times...")
    print("=" * 60)

    for i in range(num_runs):
        success, stdout, stderr, elapsed = run_tool(tool_args, cwd=project_root)
        if not success:
            print(f"❌ Execution failed on run {i+1}: {stderr}")
            return False

        output_lines = [line.strip() for line in stdout.split('\n') if line.strip()]
        results.append(tuple(output_lines))
        times.append(elapsed)
        print(f"  Run {i+1:2d}: {len(output_lines)} lines in {elapsed:.4f}s")

    print(f"\n⏱️  Median {statistics.median(times):.4f}s, "
          f"p90 {np.percentile(times, 90):.4f}s, max {max(times):.4f}s")

    result_counts = Counter(results)

    if len(result_counts) == 1:
        print(f"✅ CONSISTENT: All {num_runs} runs produced the same result")
        return True

    print(f"❌ NON-DETERMINISTIC: {len(result_counts)} different results detected!")
    for i, (result, count) in enumerate(result_counts.most_common(), 1):
        percentage = (count / num_runs) * 100
        print(f"   Result {i} (appeared {count}/{num_runs} times, {percentage:.1f}%): {list(result)}")

    print("\n🔍 Run-by-run breakdown:")
    distinct = list(result_counts.keys())
    for i, result in enumerate(results, 1):
        print(f"   Run {i:2d}: Result {distinct.index(result) + 1}")

    return False

def main():
    parser = argparse.ArgumentParser(description='c-style determinism check')
    parser.add_argument('--runs', type=int, default=DEFAULT_RUNS, help='Runs per argument set')
    # Anything not recognized here is passed through to c-style
    args, tool_args = parser.parse_known_args()

    if args.runs < 1:
        parser.error("--runs must be at least 1")

    argument_sets = [tool_args] if tool_args else ARGUMENT_SETS

    print("🧪 C-STYLE DETERMINISM CHECK")
    print("=" * 60)

    consistent = []
    inconsistent = []
    for tool_args in argument_sets:
        if check_arguments(tool_args, args.runs):
            consistent.append(tool_args)
        else:
            inconsistent.append(tool_args)

    # Summary
    print("\n" + "=" * 60)
    print(f"📊 Overall: {len(consistent)}/{len(argument_sets)} argument sets are consistent")

    if inconsistent:
        for tool_args in inconsistent:
            print(f"   - {' '.join(tool_args) or '(defaults)'}")
        return 1

    print("🎉 Every run produced identical output!")
    return 0

if __name__ == "__main__":
    sys.exit(main())
