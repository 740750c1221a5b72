"""
Reference text encodings to compare base2048 against.

Both wrap the standard library and follow the Base2048Coder interface:
encode() returns str, decode() returns bytes or None on bad input.
"""

import base64
from typing import Optional


class Base64Coder:
    #RFC 4648 base64 with padding, 6 bits per character.

    name = "Base64"

    def encode(self, data: bytes) -> str:
        return base64.b64encode(bytes(data)).decode("ascii")

    def decode(self, text: str) -> Optional[bytes]:
        try:
            return base64.b64decode(text, validate=True)
        except ValueError:  #binascii.Error included
            return None


class Base85Coder:
    #Git-style base85, 6.4 bits per character.

    name = "Base85"

    def encode(self, data: bytes) -> str:
        return base64.b85encode(bytes(data)).decode("ascii")

    def decode(self, text: str) -> Optional[bytes]:
        try:
            return base64.b85decode(text)
        except ValueError:
            return None
