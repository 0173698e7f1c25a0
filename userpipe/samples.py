from userpipe.schemas import InvalidAge, RawRecord, ValidAge


def generate_sample_records(valid: bool) -> list[RawRecord]:
    """Fixed demo batch; the invalid variant carries a non-numeric age for id 2."""
    bob_age = ValidAge(30) if valid else InvalidAge("thirty")
    return [
        (1, "Alice", ValidAge(25)),
        (2, "Bob", bob_age),
        (3, "Charlie", ValidAge(35)),
    ]
