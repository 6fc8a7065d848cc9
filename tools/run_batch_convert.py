#!/usr/bin/env python3
"""Batch client for the /kana API."""

from __future__ import annotations

import argparse
import csv
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path

import requests
from tqdm import tqdm

DEFAULT_RESULTS_CSV = Path("artifacts/kana_results.csv")
DEFAULT_BATCH_SIZE = 200


@dataclass
class BatchResult:
    words: list[str]
    status_code: int
    latency_ms: float
    rows: list[dict]
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.status_code == 200 and self.error is None


def read_words(path: Path) -> list[str]:
    if not path.exists():
        raise FileNotFoundError(f"Word list does not exist: {path}")
    with path.open("r", encoding="utf-8") as fh:
        words = [line.strip() for line in fh]
    return [word for word in words if word]


def chunked(words: list[str], size: int) -> list[list[str]]:
    return [words[idx : idx + size] for idx in range(0, len(words), size)]


def send_batch(base_url: str, words: list[str], timeout: float) -> BatchResult:
    url = base_url.rstrip("/") + "/kana"
    start = time.perf_counter()
    with requests.Session() as session:
        try:
            response = session.post(url, json={"words": words}, timeout=timeout)
        except requests.RequestException as exc:
            latency_ms = (time.perf_counter() - start) * 1000
            return BatchResult(words, 0, latency_ms, [], error=str(exc))
    latency_ms = (time.perf_counter() - start) * 1000

    try:
        data = response.json()
    except ValueError:
        return BatchResult(words, response.status_code, latency_ms, [], error="Non-JSON response")

    if response.status_code != 200:
        detail = data.get("detail") if isinstance(data, dict) else None
        return BatchResult(words, response.status_code, latency_ms, [], error=str(detail))
    return BatchResult(words, response.status_code, latency_ms, data.get("results") or [])


def run_batch(
    batches: list[list[str]],
    base_url: str,
    timeout: float,
    max_workers: int,
) -> list[BatchResult]:
    results: list[BatchResult] = []
    if max_workers <= 1:
        for batch in tqdm(batches, desc="Converting", unit="batch"):
            results.append(send_batch(base_url, batch, timeout))
        return results

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(send_batch, base_url, batch, timeout) for batch in batches]
        for future in tqdm(as_completed(futures), total=len(futures), desc="Converting", unit="batch"):
            results.append(future.result())
    return results


def write_csv(results: list[BatchResult], output_csv: Path) -> None:
    output_csv.parent.mkdir(parents=True, exist_ok=True)
    with output_csv.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(["word", "kana", "source", "phonemes", "error"])
        for result in results:
            if not result.passed:
                for word in result.words:
                    writer.writerow([word, "", "", "", result.error or result.status_code])
                continue
            for row in result.rows:
                phonemes = row.get("phonemes")
                writer.writerow(
                    [
                        row.get("word", ""),
                        row.get("kana", ""),
                        row.get("source", ""),
                        " ".join(phonemes) if phonemes else "",
                        "",
                    ]
                )


def summarize(results: list[BatchResult]) -> None:
    rows = [row for result in results for row in result.rows]
    failed_words = sum(len(result.words) for result in results if not result.passed)
    hits = sum(1 for row in rows if row.get("source") == "dictionary")
    latency = sum(result.latency_ms for result in results)

    print("\n=== Summary ===")
    print(f"Words     : {len(rows) + failed_words}")
    print(f"Dictionary: {hits}")
    print(f"Fallback  : {len(rows) - hits}")
    print(f"Failed    : {failed_words}")
    print(f"Total latency: {latency:.1f}ms")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Batch client for /kana API")
    parser.add_argument("words", help="Text file with one word per line")
    parser.add_argument(
        "--base",
        dest="base",
        default=os.environ.get("KANA_BASE_URL", "http://localhost:8000"),
        help="Base URL of the API (default: env KANA_BASE_URL or http://localhost:8000)",
    )
    parser.add_argument(
        "--batch-size",
        dest="batch_size",
        type=int,
        default=DEFAULT_BATCH_SIZE,
        help=f"Words per request (default: {DEFAULT_BATCH_SIZE})",
    )
    parser.add_argument(
        "--timeout",
        dest="timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )
    parser.add_argument(
        "--results",
        dest="results",
        default=str(DEFAULT_RESULTS_CSV),
        help=f"Path to CSV output (default: {DEFAULT_RESULTS_CSV})",
    )
    parser.add_argument(
        "--max-workers",
        dest="max_workers",
        type=int,
        default=1,
        help="Number of concurrent workers",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    try:
        words = read_words(Path(args.words).expanduser())
    except FileNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1

    if not words:
        print("No words to convert.")
        return 1

    results = run_batch(
        batches=chunked(words, max(1, args.batch_size)),
        base_url=args.base,
        timeout=args.timeout,
        max_workers=max(1, args.max_workers),
    )

    results_csv = Path(args.results).expanduser().resolve()
    write_csv(results, results_csv)
    summarize(results)
    print(f"CSV written to {results_csv}")

    return 0 if all(result.passed for result in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
