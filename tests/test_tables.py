from coders.tables import (
    BITS_PER_CHAR, DEC_TABLE, ENC_TABLE, TAIL, TAIL_BITS, lookup, tail_index,
)


def test_primary_alphabet_has_one_symbol_per_group():
    assert len(ENC_TABLE) == 1 << BITS_PER_CHAR
    assert len(set(ENC_TABLE)) == len(ENC_TABLE)


def test_forward_and_reverse_tables_are_inverses():
    assert len(DEC_TABLE) == len(ENC_TABLE)
    for i, ch in enumerate(ENC_TABLE):
        assert DEC_TABLE[ch] == i
        assert lookup(ch) == i


def test_tail_alphabet_is_disjoint_from_primary():
    assert len(TAIL) == 1 << TAIL_BITS
    assert len(set(TAIL)) == len(TAIL)
    assert not set(TAIL) & set(ENC_TABLE)


def test_primary_symbols_are_printable_non_ascii():
    for ch in ENC_TABLE:
        assert ch.isprintable()
        assert ord(ch) > 0x7F


def test_lookup_rejects_non_members():
    for ch in TAIL + "AZaz!= \n":
        assert lookup(ch) is None
    assert lookup("") is None


def test_tail_index():
    for i, ch in enumerate(TAIL):
        assert tail_index(ch) == i
    assert tail_index("8") is None
    assert tail_index(ENC_TABLE[0]) is None
    assert tail_index("") is None
    assert tail_index("01") is None
