import hmac
import struct
from hkdf import Hkdf

def hkdf_key(hash_f, input_key_material, salt, info, length):
    """HKDF (RFC 5869) extract-then-expand. An empty salt means hash-length
    zeros. Raises ValueError if 'length' is more than HKDF can produce."""
    hash_len = hash_f().digest_size
    if not 0 < length <= 255 * hash_len:
        raise ValueError("HKDF cannot produce %d bytes with a %d-byte hash"
                         % (length, hash_len))
    h = Hkdf(salt=salt, input_key_material=input_key_material, hash=hash_f)
    return h.expand(info, length)

def hmac_new(hash_f, key):
    # returns the unfinished MAC object, callers update() and digest()
    return hmac.new(key, digestmod=hash_f)

def length_prefixed(*pieces):
    # each piece is preceded by its length as an 8-byte little-endian number,
    # so no two different lists of pieces produce the same bytes
    out = []
    for p in pieces:
        if not isinstance(p, bytes):
            raise TypeError("transcript pieces must be bytes")
        out.append(struct.pack("<Q", len(p)))
        out.append(p)
    return b"".join(out)

def constant_time_equal(a, b):
    return hmac.compare_digest(a, b)
