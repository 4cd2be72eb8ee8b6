import random

import pytest

from todokeeper.core.errors import IdGenerationError
from todokeeper.core.ids import ID_MAX, ID_MIN, RandomIdGenerator


def test_generated_ids_are_ten_digit_strings():
    """Test that ids are numeric strings of exactly ten digits."""
    generator = RandomIdGenerator(rng=random.Random(42))
    for _ in range(1000):
        todo_id = generator.generate()
        assert isinstance(todo_id, str)
        assert len(todo_id) == 10
        assert todo_id.isdigit()


def test_range_bounds_stay_ten_digits():
    assert len(str(ID_MIN)) == 10
    assert len(str(ID_MAX)) == 10


def test_generate_unique_skips_taken_ids():
    """Test that a candidate already in use is drawn again."""
    rng = random.Random(7)
    taken = str(rng.randint(ID_MIN, ID_MAX))

    generator = RandomIdGenerator(rng=random.Random(7))
    todo_id = generator.generate_unique([taken])
    assert todo_id != taken


def test_generate_unique_gives_up():
    class ConstantRandom(random.Random):
        def randint(self, a, b):
            return ID_MIN

    generator = RandomIdGenerator(rng=ConstantRandom(), max_attempts=5)
    with pytest.raises(IdGenerationError):
        generator.generate_unique([str(ID_MIN)])
