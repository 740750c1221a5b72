from __future__ import annotations

"""
Paired fixtures: NAME.bin holds raw bytes, NAME.txt holds their expected
encoding as UTF-8 text. A pair is good when encoding the .bin gives exactly the
.txt and decoding the .txt gives exactly the .bin.
"""

from pathlib import Path
from typing import List, Tuple


def pair_names(directory: Path) -> List[str]:
    #Names with both halves present, sorted
    directory = Path(directory)
    bins ={p.stem for p in directory.glob("*.bin") if p.is_file()}
    txts ={p.stem for p in directory.glob("*.txt") if p.is_file()}
    return sorted(bins & txts)


def load_pair(directory: Path, name: str) -> Tuple[str, bytes]:
    """Read one fixture pair, returning (text, data).

    Raises FileNotFoundError naming whichever half is missing.
    """
    path = Path(directory) / name
    bin_path, txt_path = path.with_suffix(".bin"), path.with_suffix(".txt")
    if not bin_path.is_file():
        raise FileNotFoundError(f"Failed to read binary data from {bin_path}")
    if not txt_path.is_file():
        raise FileNotFoundError(f"Failed to read encoded data from {txt_path}")

    #newline="" keeps the text exactly as written
    with open(txt_path, encoding="utf-8", newline="") as fp:
        text = fp.read()
    return text, bin_path.read_bytes()


def write_pair(directory: Path, name: str, data: bytes, coder) -> Path:
    """Encode data with coder and store both halves; returns the .bin path."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    bin_path = directory / f"{name}.bin"
    bin_path.write_bytes(bytes(data))
    with open(directory / f"{name}.txt", "w", encoding="utf-8", newline="") as fp:
        fp.write(coder.encode(data))
    return bin_path


def check_pair(coder, text: str, data: bytes) -> List[str]:
    """Compare coder output against a fixture pair.

    Returns a list of problems, empty when the pair round-trips exactly.
    """
    problems: List[str] = []

    enc = coder.encode(data)
    if enc != text:
        problems.append(
            f"encoded wrongly: expected last char {text[-1:]!r}, found {enc[-1:]!r}"
            f" (lengths {len(text)} vs {len(enc)})"
        )

    dec = coder.decode(text)
    if dec is None:
        problems.append("failed to decode")
    elif dec != data:
        #Leftover bits after the last full group, the usual culprit
        tail_bits = len(data)*8 % 11
        exp = data[-1] if data else 0
        got = dec[-1] if dec else 0
        problems.append(
            f"decoded wrongly: expected last byte {exp:3} / {exp:#010b}, "
            f"found {got:3} / {got:#010b} (leftover/tail bits: {tail_bits})"
        )

    return problems
