from binascii import unhexlify
from .errors import DecodingError, ConfigurationError

# M and N are defined as "randomly chosen elements of the group". It is
# important that nobody knows their discrete log (if your
# parameter-provider picked a secret 'haha' and told you to use
# M=haha*G, you couldn't tell that M wasn't randomly chosen, but
# they could then mount an active attack against your PAKE session).
#
# These are the edwards25519 values from RFC 9382, made by hashing a public
# seed string to a curve point. A uses M to blind its message, B uses N.
M_HEX = b"d048032c6ea0b6d697ddc2e86bda85a33adac920f1bf18e1b0c6d166a5cecdaf"
N_HEX = b"d3bfb518f44f3430f29d0c92af503865a1ed3281dc69b35dd868ba85f886c4ab"


class CipherSuite:
    """Everything both sides must agree upon before running SPAKE2.

    group: the prime-order group (see groups.py)
    hash: hash constructor (like hashlib.sha256) for the transcript
    password_hash: hash constructor applied to the password before it is
        reduced to a scalar. This may be a slower, memory-hard function.
    kdf: kdf(hash, ikm, salt, info, length) -> bytes, like util.hkdf_key
    mac: mac(hash, key) -> object with update()/digest(), like util.hmac_new

    A CipherSuite is read-only once built and may be shared by any number of
    concurrent sessions.
    """

    def __init__(self, group, hash, password_hash, kdf, mac):
        self.group = group
        self.hash = hash
        self.password_hash = password_hash
        self.kdf = kdf
        self.mac = mac
        try:
            self.M = group.bytes_to_element(unhexlify(M_HEX))
            self.N = group.bytes_to_element(unhexlify(N_HEX))
        except DecodingError as e:
            raise ConfigurationError("group cannot decode M/N: %s" % e)
        self.P = group.Base
        self._frozen = True

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise AttributeError("CipherSuite is read-only")
        object.__setattr__(self, name, value)
