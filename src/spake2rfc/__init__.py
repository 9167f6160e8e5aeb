
from .spake2 import SPAKE2_A, SPAKE2_B, SideA, SideB, DefaultSuite
from .errors import (SPAKEError, StateError, AlreadyStarted, NotStarted,
                     AlreadyFinished, NotFinished, DecodingError,
                     VerificationError, VerificationFailed,
                     ConfigurationError)
from .params import CipherSuite
from .parameters.ed25519 import SuiteEd25519
_hush_pyflakes = [SPAKE2_A, SPAKE2_B, SideA, SideB, DefaultSuite,
                  SPAKEError, StateError, AlreadyStarted, NotStarted,
                  AlreadyFinished, NotFinished, DecodingError,
                  VerificationError, VerificationFailed, ConfigurationError,
                  CipherSuite, SuiteEd25519]
del _hush_pyflakes

__version__ = "0.1.0"
