import hmac
from binascii import unhexlify
from nacl import bindings
from .groups import Scalar, Element, Group
from .errors import DecodingError

# edwards25519 arithmetic comes from libsodium. The "noclamp" scalarmult
# functions use the scalar as given (no bit-twiddling), which is what a
# group API needs, but they refuse to produce or consume the identity, so
# those cases are handled here.

L = 2**252 + 27742317777372353535851937790883648493 # order of the subgroup

SCALAR_SIZE = bindings.crypto_core_ed25519_SCALARBYTES # 32
ELEMENT_SIZE = bindings.crypto_core_ed25519_BYTES # 32
UNIFORM_SIZE = bindings.crypto_core_ed25519_NONREDUCEDSCALARBYTES # 64

ZERO_SCALAR = b"\x00" * SCALAR_SIZE
IDENTITY = unhexlify(b"01" + b"00" * 31)
BASE = unhexlify(b"58" + b"66" * 31)


class Ed25519Scalar(Scalar):
    def __init__(self, s):
        assert isinstance(s, bytes) and len(s) == SCALAR_SIZE
        self._s = s

    def _check(self, other):
        if not isinstance(other, Ed25519Scalar):
            raise TypeError("scalar arithmetic requires another scalar")
        return other._s

    def add(self, other):
        o = self._check(other)
        return Ed25519Scalar(bindings.crypto_core_ed25519_scalar_add(self._s, o))
    def subtract(self, other):
        o = self._check(other)
        return Ed25519Scalar(bindings.crypto_core_ed25519_scalar_sub(self._s, o))
    def multiply(self, other):
        o = self._check(other)
        return Ed25519Scalar(bindings.crypto_core_ed25519_scalar_mul(self._s, o))
    def negate(self):
        return Ed25519Scalar(bindings.crypto_core_ed25519_scalar_negate(self._s))
    def invert(self):
        if self.is_zero():
            raise ZeroDivisionError("zero has no inverse")
        return Ed25519Scalar(bindings.crypto_core_ed25519_scalar_invert(self._s))

    def to_bytes(self):
        return self._s

    def __repr__(self):
        return "<Ed25519Scalar>" # don't leak secrets into tracebacks


class Ed25519Element(Element):
    def __init__(self, e):
        assert isinstance(e, bytes) and len(e) == ELEMENT_SIZE
        self._e = e

    def _check(self, other):
        if not isinstance(other, Ed25519Element):
            raise TypeError("E+X requires X be another element")
        return other._e

    def _is_identity(self):
        return hmac.compare_digest(self._e, IDENTITY)

    def add(self, other):
        o = self._check(other)
        return Ed25519Element(bindings.crypto_core_ed25519_add(self._e, o))
    def subtract(self, other):
        o = self._check(other)
        return Ed25519Element(bindings.crypto_core_ed25519_sub(self._e, o))

    def scalarmult(self, s):
        if not isinstance(s, Ed25519Scalar):
            raise TypeError("E*N requires N be a scalar")
        if s.is_zero() or self._is_identity():
            return Ed25519Group.Zero
        return Ed25519Element(
            bindings.crypto_scalarmult_ed25519_noclamp(s.to_bytes(), self._e))

    def mult_by_cofactor(self):
        # h=8: three doublings
        e = self
        for i in range(3):
            e = e.add(e)
        return e

    def to_bytes(self):
        return self._e

    def __repr__(self):
        return "<Ed25519Element %s>" % self._e.hex()


class _Ed25519Group(Group):
    scalar_size_bytes = SCALAR_SIZE
    element_size_bytes = ELEMENT_SIZE
    cofactor = 8

    def order(self):
        return L

    def new_scalar(self):
        return Ed25519Scalar(ZERO_SCALAR)

    def scalar_base_mult(self, s):
        if not isinstance(s, Ed25519Scalar):
            raise TypeError("G*N requires N be a scalar")
        if s.is_zero():
            return self.Zero
        return Ed25519Element(
            bindings.crypto_scalarmult_ed25519_base_noclamp(s.to_bytes()))

    def bytes_to_element(self, b):
        # for receiving from the other side: test subgroup membership here
        if not isinstance(b, bytes) or len(b) != ELEMENT_SIZE:
            raise DecodingError("element must be %d bytes" % ELEMENT_SIZE)
        # rejects non-canonical and off-curve encodings, small-order points,
        # and points outside the prime-order subgroup
        if not bindings.crypto_core_ed25519_is_valid_point(b):
            raise DecodingError("element is not in the prime-order subgroup")
        return Ed25519Element(b)

    def bytes_to_scalar(self, b):
        if not isinstance(b, bytes) or len(b) != SCALAR_SIZE:
            raise DecodingError("scalar must be %d bytes" % SCALAR_SIZE)
        if int.from_bytes(b, "little") >= L:
            raise DecodingError("scalar is not reduced")
        return Ed25519Scalar(b)

    def uniform_bytes_to_scalar(self, b):
        # libsodium reduces exactly 64 bytes. That is twice the size of L,
        # so the bias in the result is negligible.
        if not isinstance(b, bytes):
            raise DecodingError("uniform scalar input must be bytes")
        if len(b) != UNIFORM_SIZE:
            raise DecodingError("uniform scalar input must be %d bytes, not %d"
                                % (UNIFORM_SIZE, len(b)))
        return Ed25519Scalar(bindings.crypto_core_ed25519_scalar_reduce(b))

Ed25519Group = _Ed25519Group()
Ed25519Group.Base = Ed25519Element(BASE)
Ed25519Group.Zero = Ed25519Element(IDENTITY)
