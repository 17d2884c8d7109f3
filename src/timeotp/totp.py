import calendar
import datetime
import logging
import time
from typing import Callable, Optional, Union

from . import utils
from .exceptions import InvalidDurationError
from .otp import OTP

DEFAULT_INTERVAL = 30

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(self, s: str, interval: int = DEFAULT_INTERVAL, clock: Clock = time.time) -> None:
        """
        :param s: secret in base32 format
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param clock: callable returning the current Unix time in seconds
        """
        self.interval = interval
        self.clock = clock
        super().__init__(s=s)

    def at(self, for_time: Union[int, float, datetime.datetime], counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time) + counter_offset)

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(self.clock())

    def verify(
        self,
        otp: str,
        for_time: Optional[Union[int, float, datetime.datetime]] = None,
        valid_window: int = 1,
    ) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        Each step in the window is derived independently; a step whose
        derivation fails counts as a mismatch.

        :param otp: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :param valid_window: extends the validity to this many counter ticks before and after the current one
        :returns: True if verification succeeded, False otherwise
        """
        if for_time is None:
            for_time = self.clock()

        for i in range(-valid_window, valid_window + 1):
            try:
                expected = self.at(for_time, i)
            except ValueError as exc:
                logger.debug("No OTP for step offset %d: %s", i, exc)
                continue
            if utils.strings_equal(str(otp), expected):
                return True
        return False

    def timecode(self, for_time: Union[int, float, datetime.datetime]) -> int:
        """
        Accepts either a timezone naive (`for_time.tzinfo is None`) or
        a timezone aware datetime as argument and returns the
        corresponding counter value (timecode).

        """
        if isinstance(self.interval, bool) or not isinstance(self.interval, int):
            raise InvalidDurationError("interval must be an integer, got {!r}".format(self.interval))
        if self.interval <= 0:
            raise InvalidDurationError("interval must be positive, got {}".format(self.interval))
        if isinstance(for_time, datetime.datetime):
            if for_time.tzinfo:
                for_time = calendar.timegm(for_time.utctimetuple())
            else:
                for_time = time.mktime(for_time.timetuple())
        return int(for_time // self.interval)


def derive_code(secret: str, at_time: Union[int, float, datetime.datetime], step_seconds: int) -> str:
    """
    Returns the 6-digit code for `secret` at `at_time`.

    :raises InvalidSecretError: if the secret is not valid base32
    :raises InvalidDurationError: if step_seconds is not a positive integer
    """
    return TOTP(secret, interval=step_seconds).at(at_time)


def totp(secret: str, step_seconds: int = DEFAULT_INTERVAL, clock: Clock = time.time) -> str:
    """
    Returns the 6-digit code for `secret` at the time read from `clock`.

    :raises InvalidSecretError: if the secret is not valid base32
    :raises InvalidDurationError: if step_seconds is not a positive integer
    """
    return derive_code(secret, clock(), step_seconds)


def validate(secret: str, step_seconds: int, code: str, clock: Clock = time.time) -> bool:
    """
    Checks `code` against the steps just before, at and just after the
    current time. Never raises for a bad secret or duration; those simply
    fail to validate.

    A non-positive integer step_seconds is replaced by DEFAULT_INTERVAL;
    any other non-integer value fails to validate.
    """
    if isinstance(step_seconds, int) and not isinstance(step_seconds, bool) and step_seconds <= 0:
        step_seconds = DEFAULT_INTERVAL
    return TOTP(secret, interval=step_seconds, clock=clock).verify(code)
