import hashlib
from ..params import CipherSuite
from ..ed25519_group import Ed25519Group
from ..util import hkdf_key, hmac_new

# SuiteEd25519 is roughly as secure as a 128-bit symmetric key. The password
# is hashed with SHA-512 because the group wants 64 bytes to reduce into a
# scalar. SHA-512 is fast, not memory-hard: applications that worry about
# offline guessing after a compromise should build their own CipherSuite with
# a slower password_hash.
SuiteEd25519 = CipherSuite(Ed25519Group,
                           hash=hashlib.sha256,
                           password_hash=hashlib.sha512,
                           kdf=hkdf_key,
                           mac=hmac_new)
