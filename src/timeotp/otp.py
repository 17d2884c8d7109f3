import base64
import binascii
import hashlib
import hmac

from .exceptions import InvalidCounterError, InvalidSecretError

DIGITS = 6

# counters are serialized as unsigned 64-bit integers
MAX_COUNTER = 2**64 - 1


class OTP(object):
    """
    Base class for OTP handlers.
    """

    digits = DIGITS

    def __init__(self, s: str) -> None:
        """
        :param s: secret in base32 format, without padding
        """
        self.secret = s

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually the integer computed from the Unix timestamp
        """
        # Implements RFC 4226
        if input < 0 or input > MAX_COUNTER:
            raise InvalidCounterError("input must be an unsigned 64-bit integer")
        hasher = hmac.new(self.byte_secret(), self.int_to_bytestring(input), hashlib.sha1)
        hmac_hash = bytearray(hasher.digest())
        offset = hmac_hash[-1] & 0xF
        code = (
            (hmac_hash[offset] & 0x7F) << 24
            | (hmac_hash[offset + 1] & 0xFF) << 16
            | (hmac_hash[offset + 2] & 0xFF) << 8
            | (hmac_hash[offset + 3] & 0xFF)
        )
        # keeps leading zeros
        str_code = str(10_000_000_000 + (code % 10**self.digits))
        return str_code[-self.digits :]

    def byte_secret(self) -> bytes:
        secret = self.secret
        if not secret:
            raise InvalidSecretError("secret must not be empty")
        missing_padding = len(secret) % 8
        if missing_padding != 0:
            secret += "=" * (8 - missing_padding)
        try:
            return base64.b32decode(secret, casefold=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidSecretError("invalid base32 secret: {}".format(exc)) from exc

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        return i.to_bytes(padding, "big")
