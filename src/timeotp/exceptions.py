class OTPError(Exception):
    """
    Base class for errors raised by timeotp.
    """


class RandomnessError(OTPError):
    """
    The operating system could not supply secure random bytes.
    """


class InvalidSecretError(OTPError, ValueError):
    """
    The secret text is not valid unpadded base32.
    """


class InvalidDurationError(OTPError, ValueError):
    """
    The time step is not a positive whole number of seconds.
    """


class InvalidCounterError(OTPError, ValueError):
    """
    The time counter does not fit in an unsigned 64-bit integer.
    """
