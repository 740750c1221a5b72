import csv

import pytest

import main
from coders.base2048 import Base2048Coder
from coders.pairs import write_pair


class _CorruptingCoder:
    name = "Corrupt"

    def encode(self, data):
        return data.hex()

    def decode(self, text):
        return bytes.fromhex(text)[:-1]


def test_measure_reports_density():
    data = bytes(110)
    metrics = main.measure(Base2048Coder(), data, verify=True)
    assert metrics["encoded_chars"] == 80
    assert metrics["bits_per_char"] == 11.0
    assert metrics["decoded_size"] == 110
    assert metrics["encoding_time_ms"] >= 0
    assert "decoding_mem_kb" in metrics


def test_measure_without_verify_skips_decoding():
    metrics = main.measure(Base2048Coder(), b"abc", verify=False)
    assert "decoded_size" not in metrics


def test_measure_catches_corruption():
    with pytest.raises(ValueError, match="round-trip failed"):
        main.measure(_CorruptingCoder(), b"abc", verify=True)


def test_benchmark_writes_csv(tmp_path, capsys):
    data_dir = tmp_path/"data"
    data_dir.mkdir()
    (data_dir/"blob.bin").write_bytes(bytes(range(256))*8)
    (data_dir/"empty.bin").write_bytes(b"")
    results = tmp_path/"results"

    main.main(["--verify", "--data", str(data_dir), "--results", str(results)])

    with open(results/"results.csv", newline="") as fp:
        rows = list(csv.DictReader(fp))
    assert len(rows) == 6
    assert {r["algorithm"] for r in rows} == {"Base2048", "Base85", "Base64"}
    blob = {r["algorithm"]: int(r["encoded_chars"]) for r in rows if r["file"] == "blob.bin"}
    assert blob["Base2048"] < blob["Base85"] < blob["Base64"]
    assert "Median characters saved" in capsys.readouterr().out


def test_benchmark_without_data_exits(tmp_path):
    with pytest.raises(SystemExit, match="No files"):
        main.main(["--data", str(tmp_path/"missing"), "--results", str(tmp_path/"r")])


def test_pairs_mode_passes(tmp_path, capsys):
    write_pair(tmp_path, "abc", b"abc", Base2048Coder())
    main.main(["--pairs", str(tmp_path)])
    assert "1/1 pairs passed" in capsys.readouterr().out


def test_pairs_mode_fails(tmp_path, capsys):
    (tmp_path/"bad.bin").write_bytes(b"\x00")
    (tmp_path/"bad.txt").write_text("0", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main.main(["--pairs", str(tmp_path)])
    assert exc.value.code == 1
    assert "[fail] bad" in capsys.readouterr().out
