import base64
import os

from .exceptions import InvalidCounterError as InvalidCounterError
from .exceptions import InvalidDurationError as InvalidDurationError
from .exceptions import InvalidSecretError as InvalidSecretError
from .exceptions import OTPError as OTPError
from .exceptions import RandomnessError as RandomnessError
from .otp import DIGITS as DIGITS
from .otp import OTP as OTP
from .totp import DEFAULT_INTERVAL as DEFAULT_INTERVAL
from .totp import TOTP as TOTP
from .totp import derive_code as derive_code
from .totp import totp as totp
from .totp import validate as validate

SECRET_BYTES = 10


def generate_secret(num_bytes: int = SECRET_BYTES) -> str:
    """
    Returns a new random secret as upper-case base32 text without padding.

    :param num_bytes: amount of random key material, 10 to 20 bytes
    :raises RandomnessError: if the OS cannot supply secure random bytes
    """
    if not 10 <= num_bytes <= 20:
        raise ValueError("Secrets should be 10 to 20 bytes long")

    try:
        key = os.urandom(num_bytes)
    except (OSError, NotImplementedError) as exc:
        raise RandomnessError("secure random source unavailable: {}".format(exc)) from exc

    return base64.b32encode(key).decode("ascii").rstrip("=")
