import hmac

"""Interface specification for a Group.

A cyclic abelian group, in the mathematical sense, is a collection of
'elements' and a (binary) operation that takes two elements and produces a
third. It has the following additional properties:

* there is an 'identity' element named 0, and X+0=X
* there is a distinguished 'generator' element G
* adding G to 0 'n' times is called scalar multiplication: Y=n*G
* this addition loops around after 'q' times, called the 'order'
* so (n+k*q)*X = n*X
* scalar multiplication is associative, n*(X+Y) = n*X+n*Y

Elliptic curves used for SPAKE2 are usually not prime-order themselves: the
full curve has order h*q, where 'h' is the small 'cofactor' (8 for
edwards25519). All protocol values live in the prime-order subgroup, and
multiplying any curve point by h pushes it into that subgroup ('cofactor
clearing'). Elements received from the other side must be checked for
subgroup membership when they are decoded.

A 'scalar' is an integer in [0,q-1]. Scalars can be added, subtracted,
multiplied, negated and inverted (modulo q), and converted to bytes. A
scalar can also be produced from a wide, uniformly random bytestring: the
reduction of such a string is (almost) uniform in [0,q-1], which is how
both random scalars and password scalars are made.

Elements can be added together, subtracted, multiplied by a scalar, and
converted to bytes and back. Equality comparisons of both elements and
scalars run in constant time.

    g = Ed25519Group

    s = g.new_scalar()                 # zero
    s = g.uniform_bytes_to_scalar(wide_bytes)
    s = g.bytes_to_scalar(bytes)
    bytes = s.to_bytes()
    s3 = s1.add(s2) / s1.subtract(s2) / s1.multiply(s2)
    s2 = s1.negate() / s1.invert()

    e = g.bytes_to_element(bytes)      # raises DecodingError
    e = g.Base # the generator, an Element too
    e = g.Zero # the identity
    e = g.scalar_base_mult(s)

    e3 = e1.add(e2) / e1.subtract(e2)
    e3 = e1.scalarmult(s)
    e2 = e1.mult_by_cofactor()
    bytes = e.to_bytes()
    # equality tests work: e1 == e2, e1 != e2
"""


class Scalar(object):
    def add(self, other):
        raise NotImplementedError
    def subtract(self, other):
        raise NotImplementedError
    def multiply(self, other):
        raise NotImplementedError
    def negate(self):
        raise NotImplementedError
    def invert(self):
        raise NotImplementedError
    def to_bytes(self):
        raise NotImplementedError

    def is_zero(self):
        return hmac.compare_digest(self.to_bytes(),
                                   b"\x00" * len(self.to_bytes()))

    def equal(self, other):
        if not isinstance(other, Scalar):
            return False
        return hmac.compare_digest(self.to_bytes(), other.to_bytes())

    def __eq__(self, other):
        return self.equal(other)
    def __ne__(self, other):
        return not self.equal(other)
    __hash__ = None


class Element(object):
    def add(self, other):
        raise NotImplementedError
    def subtract(self, other):
        raise NotImplementedError
    def scalarmult(self, s):
        raise NotImplementedError
    def mult_by_cofactor(self):
        raise NotImplementedError
    def to_bytes(self):
        raise NotImplementedError

    def equal(self, other):
        # encodings are canonical, so comparing them compares the elements
        if not isinstance(other, Element):
            return False
        return hmac.compare_digest(self.to_bytes(), other.to_bytes())

    def __eq__(self, other):
        return self.equal(other)
    def __ne__(self, other):
        return not self.equal(other)
    __hash__ = None


class Group(object):
    Base = None
    Zero = None
    scalar_size_bytes = None
    element_size_bytes = None
    cofactor = None

    def order(self):
        raise NotImplementedError

    def new_scalar(self):
        raise NotImplementedError
    def new_element(self):
        return self.Zero

    def scalar_base_mult(self, s):
        return self.Base.scalarmult(s)

    def bytes_to_element(self, b):
        raise NotImplementedError
    def bytes_to_scalar(self, b):
        raise NotImplementedError
    def uniform_bytes_to_scalar(self, b):
        raise NotImplementedError
