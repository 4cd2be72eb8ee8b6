"""
Identifier generation for todo items.

Ids are random 10-digit numbers rendered as strings. They are not
sequential, so uniqueness is enforced by checking each candidate against
the ids already present in the collection and drawing again on a clash.
"""

import logging
import random
from typing import Iterable, Optional

from todokeeper.core.errors import IdGenerationError

logger = logging.getLogger(__name__)

ID_MIN = 1_000_000_000
ID_MAX = 9_999_999_999


class RandomIdGenerator:
    """Draws 10-digit numeric string ids from a random source."""

    def __init__(self, rng: Optional[random.Random] = None, max_attempts: int = 100):
        self.rng = rng or random.SystemRandom()
        self.max_attempts = max_attempts

    def generate(self) -> str:
        """Return a single candidate id."""
        return str(self.rng.randint(ID_MIN, ID_MAX))

    def generate_unique(self, existing_ids: Iterable[str]) -> str:
        """Return an id not contained in ``existing_ids``.

        Raises:
            IdGenerationError: if every attempt collided.
        """
        taken = set(existing_ids)
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.generate()
            if candidate not in taken:
                return candidate
            logger.warning(f"Generated id {candidate} already exists (attempt {attempt})")
        raise IdGenerationError(f"Could not generate a unique id after {self.max_attempts} attempts")
