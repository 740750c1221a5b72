#!/usr/bin/env python3
"""
main.py : measure text density and speed of base2048 against base85 and base64

Base2048  11 bits per character, drawn from printable letters across scripts
Base85    6.4 bits per character, ASCII only
Base64    6 bits per character, ASCII only

The script feeds every file in ./data/ to each coder, captures the encoded
length in characters, the CPU time and peak RAM for encoding (and optionally
decoding), and outputs a CSV. With --pairs it checks a directory of
NAME.bin / NAME.txt fixtures against the base2048 coder instead.

Usage:
    python main.py                     #Runs on ./data/ with no decoding
    python main.py --verify            #Also verifies round-trip integrity
    python main.py --pairs tests/pairs #Checks fixture pairs, exits 1 on failure
"""

import argparse
import csv
import mimetypes
import time
import tracemalloc
from pathlib import Path
from statistics import median

from coders.base2048 import Base2048Coder
from coders.baselines import Base64Coder, Base85Coder
from coders.pairs import check_pair, load_pair, pair_names

#
#Utility helpers
#

def file_kind(path: Path) -> str:
    mime, _ = mimetypes.guess_type(path)
    return(mime or "binary/unknown").split("/")[0]

def measure(coder, data: bytes, verify: bool):
    """Encode (and optionally decode) data with coder.

    We track time via time.perf_counter and peak memory via
    tracemalloc so the numbers are unaffected by other processes

    Parameters
    ----------
    coder   : instance with .encode/.decode
    data    : raw bytes to feed in
    verify  : if True, we also decode and check round-trip integrity

    Returns a dict whose keys land directly in the CSV.
    """
    #Encoding pass
    tracemalloc.start()
    t0 = time.perf_counter()
    encoded = coder.encode(data)
    t1 = time.perf_counter()
    _, peak_enc = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    out ={
        "encoded_chars": len(encoded),
        "encoded_utf8_bytes": len(encoded.encode("utf-8")),
        "bits_per_char": round(len(data)*8/len(encoded), 3) if encoded else None,
        "encoding_time_ms": round((t1-t0)*1000, 3),
        "encoding_mem_kb": round(peak_enc/1024, 2),
    }

    #Optional decoding pass
    if verify:
        tracemalloc.start()
        t2 = time.perf_counter()
        decoded = coder.decode(encoded)
        t3 = time.perf_counter()
        _, peak_dec = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        #None or a single byte mismatch means the coder failed.
        if decoded != data:
            raise ValueError(f"{coder.name}: round-trip failed(data corrupted)")

        out["decoded_size"] = len(decoded)

        out.update(
            decoding_time_ms=round((t3-t2)*1000, 3),
            decoding_mem_kb=round(peak_dec/1024, 2),
        )

    return out


def check_pairs(directory: Path) -> int:
    """Check every fixture pair in directory, returning the failure count."""
    names = pair_names(directory)
    if not names:
        raise SystemExit(f"No .bin/.txt pairs in {directory} to check.")

    coder = Base2048Coder()
    failures = 0
    for name in names:
        text, data = load_pair(directory, name)
        problems = check_pair(coder, text, data)
        if problems:
            failures += 1
            for problem in problems:
                print(f"[fail] {name}: {problem}")
        else:
            print(f"[ok]   {name} ({len(data)} bytes, {len(text)} chars)")

    print(f"\n{len(names)-failures}/{len(names)} pairs passed.")
    return failures


#
#Main driver
#

def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark base2048 vs base85 and base64.")
    parser.add_argument(
        "--verify", action="store_true",
        help="additionally decodes and confirms that output = input for algorithm integrity"
    )
    parser.add_argument(
        "--data", type=Path, default=Path("data"),
        help="directory of input files (default: ./data)"
    )
    parser.add_argument(
        "--results", type=Path, default=Path("results"),
        help="directory for results.csv (default: ./results)"
    )
    parser.add_argument(
        "--pairs", type=Path, metavar="DIR",
        help="check NAME.bin/NAME.txt fixture pairs in DIR instead of benchmarking"
    )
    args = parser.parse_args(argv)

    if args.pairs is not None:
        if check_pairs(args.pairs):
            raise SystemExit(1)
        return

    #Discover inputs
    files = sorted(args.data.iterdir()) if args.data.is_dir() else []
    if not files:
        raise SystemExit(f"No files in {args.data} to test against.")

    #Prep outputs
    args.results.mkdir(parents=True, exist_ok=True)
    coders = [Base2048Coder(), Base85Coder(), Base64Coder()]

    header = [
        "file", "type", "algorithm", "original_size", "encoded_chars",
        "encoded_utf8_bytes", "bits_per_char", "encoding_time_ms", "encoding_mem_kb",
    ]
    if args.verify:
        header += ["decoded_size", "decoding_time_ms", "decoding_mem_kb"]
    else:
        print("[info] Decoding skipped, use --verify for full round-trip test.")

    #Collect per-file character savings to show resulting median value.
    vs85: list[int] = []
    vs64: list[int] = []

    #Main loop
    with open(args.results / "results.csv", "w", newline="") as fp:
        writer = csv.DictWriter(fp, fieldnames=header)
        writer.writeheader()

        for path in files:
            if not path.is_file() or path.name.lower() == "desktop.ini":
                continue

            data = path.read_bytes()
            kind = file_kind(path)
            per_file: dict[str, dict] ={}

            for coder in coders:
                try:
                    metrics = measure(coder, data, verify=args.verify)
                except Exception as exc:
                    #If file fails, skips and continues to next file
                    print(f"[warn] {coder.name} failed on {path.name}:{exc}")
                    continue

                row ={
                    "file": path.name,
                    "type": kind,
                    "algorithm": coder.name,
                    "original_size": len(data),
                    **metrics,
                }
                writer.writerow(row)
                per_file[coder.name] = row

            #File summary
            if{"Base2048", "Base85", "Base64"} <= per_file.keys():
                b2k, b85, b64 = per_file["Base2048"], per_file["Base85"], per_file["Base64"]
                d85 = b85["encoded_chars"]-b2k["encoded_chars"]
                d64 = b64["encoded_chars"]-b2k["encoded_chars"]
                vs85.append(d85)
                vs64.append(d64)

                print(f"\n{path.name}")
                for row in (b2k, b85, b64):
                    print(f"  {row['algorithm']:<9}{row['encoded_chars']:>9} chars"
                          f" | {row['bits_per_char']} bits/char | time {row['encoding_time_ms']} ms")
                print(f"  Saves {d85:+} chars vs Base85, {d64:+} chars vs Base64")

    #Aggregate summary
    if vs85:
        print("\nMedian characters saved by Base2048 across all test files:")
        print(f"  {median(vs85):+.0f} vs Base85")
        print(f"  {median(vs64):+.0f} vs Base64")

    print(f"\nDone.  Results saved to {args.results / 'results.csv'}")


if __name__ == "__main__":
    main()
