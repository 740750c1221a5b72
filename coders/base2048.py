from __future__ import annotations

"""
Base2048Coder

Packs bytes into 11-bit groups, one printable symbol per group, which beats
base64 and base85 on characters per byte. A string that ends short of a full
group closes with either a primary symbol (more than TAIL_BITS leftover bits)
or a tail symbol (TAIL_BITS or fewer), with the unused low bits padded with 1s
so the decoder can tell the two cases apart.

Decoding never raises on bad input; it returns None instead.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional

from coders.tables import BITS_PER_CHAR, ENC_TABLE, TAIL, TAIL_BITS, lookup, tail_index

logger = logging.getLogger(__name__)


class DecodeFailure(Enum):
    #Reasons a string is rejected; callers only ever see None.

    PREMATURE_TAIL = "non-primary symbol before the end of the string"
    UNKNOWN_SYMBOL = "final symbol is in neither alphabet"
    BAD_TAIL_PADDING = "tail symbol padding bits are not all ones"


def _ones(n: int) -> int:
    return (1 << n)-1


#
#Encoding
#

def encode(data: Iterable[int]) -> str:
    """Encode a bytes-like object as a base2048 string.

    Parameters
    ----------
    data : bytes, bytearray, memoryview or any iterable of ints in 0..255

    The result holds ceil(8*len(data)/11) symbols.
    """
    out: List[str] = []
    stage = remaining = 0

    for byte in data:
        #How many more bits complete the next symbol?
        need = BITS_PER_CHAR-remaining
        if need <= 8:
            remaining = 8-need
            out.append(ENC_TABLE[(stage << need) | (byte >> remaining)])
            stage = byte & _ones(remaining)
        else:
            stage = (stage << 8) | byte
            remaining += 8

    #Leftover bits when 8*len(data) is not a multiple of 11
    if remaining:
        if remaining <= TAIL_BITS:
            pad = TAIL_BITS-remaining
            out.append(TAIL[(stage << pad) | _ones(pad)])
        else:
            pad = BITS_PER_CHAR-remaining
            out.append(ENC_TABLE[(stage << pad) | _ones(pad)])

    return "".join(out)


#
#Decoding
#

def _reject(reason: DecodeFailure, pos: int, ch: str) -> None:
    logger.debug("rejecting base2048 input at %d (%r): %s", pos, ch, reason.value)
    return None


def decode(text: str) -> Optional[bytes]:
    """Decode a base2048 string, or return None if it is malformed."""
    out = bytearray()
    stage = remaining = 0
    #Misalignment between the 11-bit and 8-bit boundaries after each symbol
    residue = 0
    last = len(text)-1

    for pos, ch in enumerate(text):
        residue = (residue+BITS_PER_CHAR) % 8
        group = lookup(ch)

        if group is None:
            if pos != last:
                return _reject(DecodeFailure.PREMATURE_TAIL, pos, ch)
            index = tail_index(ch)
            if index is None:
                return _reject(DecodeFailure.UNKNOWN_SYMBOL, pos, ch)

            #A tail only ever finishes the current byte
            need = 8-remaining
            padding = TAIL_BITS-need
            if padding < 0 or index & _ones(padding) != _ones(padding):
                return _reject(DecodeFailure.BAD_TAIL_PADDING, pos, ch)
            n_bits, bits = need, index >> padding
        elif pos == last:
            #The low `residue` bits are padding
            n_bits, bits = BITS_PER_CHAR-residue, group >> residue
        else:
            n_bits, bits = BITS_PER_CHAR, group

        stage = (stage << n_bits) | bits
        remaining += n_bits
        while remaining >= 8:
            #Runs at most twice
            remaining -= 8
            out.append(stage >> remaining)
            stage &= _ones(remaining)

    #Every accepted string ends on a byte boundary, so nothing is left in stage
    return bytes(out)


#
#Coder interface
#

class Base2048Coder:
    #Whole-buffer base2048 coder, same interface as the baseline coders.

    name = "Base2048"

    def encode(self, data: bytes) -> str:
        return encode(data)

    def decode(self, text: str) -> Optional[bytes]:
        return decode(text)
