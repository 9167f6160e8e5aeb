class SPAKEError(Exception):
    pass

class StateError(SPAKEError):
    """A SPAKE2 instance moves from start() to finish() to verify(), and
    each step may only happen once. Something was called out of order."""
class AlreadyStarted(StateError):
    """start() may only be called once. Re-using a SPAKE2 instance is likely
    to reveal the password or the derived key."""
class NotStarted(StateError):
    """finish() was called before start()."""
class AlreadyFinished(StateError):
    """finish() may only be called once. Re-using a SPAKE2 instance is likely
    to reveal the password or the derived key."""
class NotFinished(StateError):
    """verify() was called before finish()."""

class DecodingError(SPAKEError, ValueError):
    """Some bytes could not be turned into a group element or scalar. When
    they came from the other side, the exchange must be abandoned."""

class VerificationError(SPAKEError):
    pass
class VerificationFailed(VerificationError):
    """The other side's confirmation message was wrong: they used a different
    password (or identities), or someone tampered with the messages. Throw
    away the key."""

class ConfigurationError(SPAKEError):
    """The CipherSuite cannot be used, usually because the group could not
    decode the protocol's M and N constants."""
