from .util import length_prefixed

# w = H_pw(pw) reduced to a scalar
# x = random scalar
# pA = w*M + x*P
#  y = random scalar
#  pB = w*N + y*P
# KA = h*x*(pB - w*N)
#  KB = h*y*(pA - w*M)
# TT = len(A)||A || len(B)||B || len(pA)||pA || len(pB)||pB || len(K)||K
#      || len(w)||w
# Ke || Ka = H(TT)
# KcA || KcB = KDF(Ka, salt="", info="ConfirmationKeys", 32)
# cA = MAC(KcA), cB = MAC(KcB)
#
# The confirmation MACs cover an empty message: KcA/KcB are already bound to
# the whole transcript through Ka.

CONFIRMATION_INFO = b"ConfirmationKeys"
CONFIRMATION_KEYS_LENGTH = 32

def password_to_scalar(suite, pw):
    """Hash the password with the suite's password_hash and reduce the digest
    to a scalar. The same password always gives the same scalar. Raises
    DecodingError if the group cannot reduce a digest of that size."""
    assert isinstance(pw, bytes)
    h = suite.password_hash()
    h.update(pw)
    return suite.group.uniform_bytes_to_scalar(h.digest())

def random_scalar(suite, entropy_f):
    # twice the scalar size (64 bytes for edwards25519), so the reduction is
    # close to uniform
    g = suite.group
    return g.uniform_bytes_to_scalar(entropy_f(2 * g.scalar_size_bytes))

def compute_public_share(suite, w, xy_scalar, blinding):
    # w*blinding + xy*P
    pw_blinding = blinding.scalarmult(w)
    return pw_blinding.add(suite.group.scalar_base_mult(xy_scalar))

def compute_shared_element(suite, inbound_elem, w, xy_scalar, unblinding):
    # h * xy * (inbound - w*unblinding)
    pw_unblinding = unblinding.scalarmult(w)
    K_elem = inbound_elem.subtract(pw_unblinding).scalarmult(xy_scalar)
    return K_elem.mult_by_cofactor()

def derive_secrets(suite, idA, idB, pA_msg, pB_msg, K_bytes, w_bytes):
    """Return (Ke, cA, cB): the session key, the confirmation message that A
    sends, and the confirmation message that B sends."""
    transcript = length_prefixed(idA, idB, pA_msg, pB_msg, K_bytes, w_bytes)
    h = suite.hash()
    h.update(transcript)
    K_parts = h.digest()
    half = len(K_parts) // 2
    Ke, Ka = K_parts[:half], K_parts[half:]

    Kc = suite.kdf(suite.hash, Ka, b"", CONFIRMATION_INFO,
                   CONFIRMATION_KEYS_LENGTH)
    KcA = Kc[:CONFIRMATION_KEYS_LENGTH // 2]
    KcB = Kc[CONFIRMATION_KEYS_LENGTH // 2:]

    cA = suite.mac(suite.hash, KcA).digest()
    cB = suite.mac(suite.hash, KcB).digest()
    return Ke, cA, cB
