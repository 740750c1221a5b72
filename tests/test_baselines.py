import pytest

from coders.base2048 import Base2048Coder
from coders.baselines import Base64Coder, Base85Coder

DATA = bytes(range(256))*4


@pytest.mark.parametrize("coder", [Base64Coder(), Base85Coder(), Base2048Coder()])
def test_roundtrip(coder):
    assert coder.decode(coder.encode(DATA)) == DATA
    assert coder.decode(coder.encode(b"")) == b""


def test_invalid_input_gives_none():
    assert Base64Coder().decode("not base64!") is None
    assert Base64Coder().decode("ÀÀÀÀ") is None
    assert Base85Coder().decode("ab cd") is None


def test_base2048_is_densest():
    chars = {c.name: len(c.encode(DATA)) for c in (Base64Coder(), Base85Coder(), Base2048Coder())}
    assert chars["Base2048"] == -(-8*len(DATA) // 11)
    assert chars["Base2048"] < chars["Base85"] < chars["Base64"]
