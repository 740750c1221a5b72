"""
Static alphabet data for the base2048 coder.

ENC_TABLE holds the 2048 primary symbols, one per 11-bit group value. The
symbols are letters that Unicode 3.0 already assigned, taken in code point
order from U+00C0 with modifier letters and the Hangul Jamo block left out, so
each one renders as a single printable character on any reasonable font.

TAIL holds the 8 symbols that may only close a string, carrying up to
TAIL_BITS leftover bits.
"""

from typing import Dict, Optional

#Bits carried by one primary symbol
BITS_PER_CHAR = 11

#Maximum number of bits carried by a tail symbol
TAIL_BITS = 3

#Inclusive code point ranges, in table order
_RANGES = (
    (0x00C0, 0x00D6), (0x00D8, 0x00F6), (0x00F8, 0x021F), (0x0222, 0x0233), (0x0250, 0x02AD),
    (0x0386, 0x0386), (0x0388, 0x038A), (0x038C, 0x038C), (0x038E, 0x03A1), (0x03A3, 0x03CE),
    (0x03D0, 0x03D7), (0x03DA, 0x03F3), (0x0400, 0x0481), (0x048C, 0x04C4), (0x04C7, 0x04C8),
    (0x04CB, 0x04CC), (0x04D0, 0x04F5), (0x04F8, 0x04F9), (0x0531, 0x0556), (0x0561, 0x0587),
    (0x05D0, 0x05EA), (0x05F0, 0x05F2), (0x0621, 0x063A), (0x0641, 0x064A), (0x0671, 0x06D3),
    (0x06D5, 0x06D5), (0x06FA, 0x06FC), (0x0710, 0x0710), (0x0712, 0x072C), (0x0780, 0x07A5),
    (0x0905, 0x0939), (0x093D, 0x093D), (0x0950, 0x0950), (0x0958, 0x0961), (0x0985, 0x098C),
    (0x098F, 0x0990), (0x0993, 0x09A8), (0x09AA, 0x09B0), (0x09B2, 0x09B2), (0x09B6, 0x09B9),
    (0x09DC, 0x09DD), (0x09DF, 0x09E1), (0x09F0, 0x09F1), (0x0A05, 0x0A0A), (0x0A0F, 0x0A10),
    (0x0A13, 0x0A28), (0x0A2A, 0x0A30), (0x0A32, 0x0A33), (0x0A35, 0x0A36), (0x0A38, 0x0A39),
    (0x0A59, 0x0A5C), (0x0A5E, 0x0A5E), (0x0A72, 0x0A74), (0x0A85, 0x0A8B), (0x0A8D, 0x0A8D),
    (0x0A8F, 0x0A91), (0x0A93, 0x0AA8), (0x0AAA, 0x0AB0), (0x0AB2, 0x0AB3), (0x0AB5, 0x0AB9),
    (0x0ABD, 0x0ABD), (0x0AD0, 0x0AD0), (0x0AE0, 0x0AE0), (0x0B05, 0x0B0C), (0x0B0F, 0x0B10),
    (0x0B13, 0x0B28), (0x0B2A, 0x0B30), (0x0B32, 0x0B33), (0x0B36, 0x0B39), (0x0B3D, 0x0B3D),
    (0x0B5C, 0x0B5D), (0x0B5F, 0x0B61), (0x0B83, 0x0B83), (0x0B85, 0x0B8A), (0x0B8E, 0x0B90),
    (0x0B92, 0x0B95), (0x0B99, 0x0B9A), (0x0B9C, 0x0B9C), (0x0B9E, 0x0B9F), (0x0BA3, 0x0BA4),
    (0x0BA8, 0x0BAA), (0x0BAE, 0x0BB5), (0x0BB7, 0x0BB9), (0x0C05, 0x0C0C), (0x0C0E, 0x0C10),
    (0x0C12, 0x0C28), (0x0C2A, 0x0C33), (0x0C35, 0x0C39), (0x0C60, 0x0C61), (0x0C85, 0x0C8C),
    (0x0C8E, 0x0C90), (0x0C92, 0x0CA8), (0x0CAA, 0x0CB3), (0x0CB5, 0x0CB9), (0x0CDE, 0x0CDE),
    (0x0CE0, 0x0CE1), (0x0D05, 0x0D0C), (0x0D0E, 0x0D10), (0x0D12, 0x0D28), (0x0D2A, 0x0D39),
    (0x0D60, 0x0D61), (0x0D85, 0x0D96), (0x0D9A, 0x0DB1), (0x0DB3, 0x0DBB), (0x0DBD, 0x0DBD),
    (0x0DC0, 0x0DC6), (0x0E01, 0x0E30), (0x0E32, 0x0E33), (0x0E40, 0x0E45), (0x0E81, 0x0E82),
    (0x0E84, 0x0E84), (0x0E87, 0x0E88), (0x0E8A, 0x0E8A), (0x0E8D, 0x0E8D), (0x0E94, 0x0E97),
    (0x0E99, 0x0E9F), (0x0EA1, 0x0EA3), (0x0EA5, 0x0EA5), (0x0EA7, 0x0EA7), (0x0EAA, 0x0EAB),
    (0x0EAD, 0x0EB0), (0x0EB2, 0x0EB3), (0x0EBD, 0x0EBD), (0x0EC0, 0x0EC4), (0x0EDC, 0x0EDD),
    (0x0F00, 0x0F00), (0x0F40, 0x0F47), (0x0F49, 0x0F6A), (0x0F88, 0x0F8B), (0x1000, 0x1021),
    (0x1023, 0x1027), (0x1029, 0x102A), (0x1050, 0x1055), (0x10A0, 0x10C5), (0x10D0, 0x10F6),
    (0x1200, 0x1206), (0x1208, 0x1246), (0x1248, 0x1248), (0x124A, 0x124D), (0x1250, 0x1256),
    (0x1258, 0x1258), (0x125A, 0x125D), (0x1260, 0x1286), (0x1288, 0x1288), (0x128A, 0x128D),
    (0x1290, 0x12A9),
)

ENC_TABLE: str = "".join(chr(c) for lo, hi in _RANGES for c in range(lo, hi+1))

DEC_TABLE: Dict[str, int] ={ch: i for i, ch in enumerate(ENC_TABLE)}

TAIL = "01234567"


def lookup(ch: str) -> Optional[int]:
    """Group index of a primary symbol, None for anything else."""
    return DEC_TABLE.get(ch)


def tail_index(ch: str) -> Optional[int]:
    """Residual value of a tail symbol, None for anything else."""
    if len(ch) != 1:
        return None
    i = TAIL.find(ch)
    return i if i >= 0 else None
