import os
import logging
from . import protocol
from .errors import (AlreadyStarted, NotStarted, AlreadyFinished, NotFinished,
                     VerificationFailed)
from .params import CipherSuite
from .parameters.ed25519 import SuiteEd25519
from .util import constant_time_equal

logger = logging.getLogger(__name__)

DefaultSuite = SuiteEd25519

SideA = b"A"
SideB = b"B"

class _SPAKE2_Base:
    """This class manages one side of a SPAKE2 key negotiation.

    Each instance is good for exactly one exchange:

        s = SPAKE2_A(password, idA=b"alice", idB=b"bob")
        msg_out = s.start()           # send to B
        key, confirm_out = s.finish(msg_in)
        # send confirm_out to B, receive B's confirmation
        s.verify(confirm_in)          # raises VerificationFailed

    Don't use 'key' until verify() has succeeded: before that, nothing says
    the other side derived the same one.
    """

    side = None # set by the subclass

    def __init__(self, password, idA=b"", idB=b"",
                 suite=DefaultSuite, entropy_f=os.urandom):
        assert self.side in (SideA, SideB), self.side
        assert isinstance(password, bytes)
        assert isinstance(idA, bytes), repr(idA)
        assert isinstance(idB, bytes), repr(idB)
        assert isinstance(suite, CipherSuite), repr(suite)
        self.idA = idA
        self.idB = idB
        self.suite = suite
        self.entropy_f = entropy_f
        # raises DecodingError if the group can't use the password hash
        self.pw_scalar = protocol.password_to_scalar(suite, password)

        self._started = False
        self._finished = False
        self.xy_scalar = None
        self.outbound_message = None
        self.inbound_message = None
        self.key = None
        self._expected_confirmation = None

    # A blinds its message with M and removes N from B's message. B does the
    # opposite. Getting this backwards gives each side a different K.
    def my_blinding(self):
        return self.suite.M if self.side == SideA else self.suite.N
    def my_unblinding(self):
        return self.suite.N if self.side == SideA else self.suite.M

    def pA_msg(self):
        if self.side == SideA:
            return self.outbound_message
        return self.inbound_message
    def pB_msg(self):
        if self.side == SideA:
            return self.inbound_message
        return self.outbound_message

    def start(self):
        if self._started:
            raise AlreadyStarted("start() can only be called once")

        self.xy_scalar = protocol.random_scalar(self.suite, self.entropy_f)
        message_elem = protocol.compute_public_share(
            self.suite, self.pw_scalar, self.xy_scalar, self.my_blinding())
        self.outbound_message = message_elem.to_bytes()
        self._started = True
        logger.debug("SPAKE2 side %s started", self.side.decode("ascii"))
        return self.outbound_message

    def finish(self, inbound_message):
        if self._finished:
            raise AlreadyFinished("finish() can only be called once")
        if not self._started:
            raise NotStarted("call start() before finish()")

        g = self.suite.group
        # a bad message raises DecodingError and leaves us started
        inbound_elem = g.bytes_to_element(inbound_message)
        K_elem = protocol.compute_shared_element(
            self.suite, inbound_elem, self.pw_scalar, self.xy_scalar,
            self.my_unblinding())

        self.inbound_message = inbound_elem.to_bytes()
        key, cA, cB = protocol.derive_secrets(self.suite,
                                              self.idA, self.idB,
                                              self.pA_msg(), self.pB_msg(),
                                              K_elem.to_bytes(),
                                              self.pw_scalar.to_bytes())
        if self.side == SideA:
            outbound_confirmation, self._expected_confirmation = cA, cB
        else:
            outbound_confirmation, self._expected_confirmation = cB, cA
        self.key = key
        self._finished = True
        logger.debug("SPAKE2 side %s finished", self.side.decode("ascii"))
        return key, outbound_confirmation

    def verify(self, inbound_confirmation):
        if not self._finished:
            raise NotFinished("call finish() before verify()")
        if not isinstance(inbound_confirmation, bytes):
            raise VerificationFailed("confirmation message must be bytes")
        if not constant_time_equal(self._expected_confirmation,
                                   inbound_confirmation):
            logger.debug("SPAKE2 side %s: confirmation mismatch",
                         self.side.decode("ascii"))
            raise VerificationFailed("confirmation message did not match")

# applications should use SPAKE2_A and SPAKE2_B, not raw _SPAKE2_Base()

class SPAKE2_A(_SPAKE2_Base):
    side = SideA

class SPAKE2_B(_SPAKE2_Base):
    side = SideB
