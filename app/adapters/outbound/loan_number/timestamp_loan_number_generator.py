"""Timestamp-based loan number generator adapter."""

import random
import time
from collections.abc import Callable
from typing import Optional

from app.application.ports.loan_number_generator import LoanNumberGenerator


class TimestampLoanNumberGenerator(LoanNumberGenerator):
    """Generates numbers as prefix + 10-digit unix timestamp + 4 random digits."""

    def __init__(
        self,
        prefix: str = "DOC",
        clock: Callable[[], float] = time.time,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize generator.

        Args:
            prefix: Leading letters of every number
            clock: Source of the current unix time
            rng: Random source (defaults to the OS CSPRNG)
        """
        self._prefix = prefix
        self._clock = clock
        self._rng = rng or random.SystemRandom()

    def generate(self) -> str:
        """
        Generate a loan number.

        Returns:
            Loan number such as DOC17298432001234
        """
        timestamp = int(self._clock())
        suffix = self._rng.randint(1000, 9999)
        return f"{self._prefix}{timestamp:010d}{suffix:04d}"
