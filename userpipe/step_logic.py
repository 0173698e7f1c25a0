from decimal import ROUND_HALF_UP, Decimal, localcontext
import re

from userpipe.errors import ValidationError
from userpipe.schemas import AgeField, ClassifiedUser, InvalidAge, RawRecord, User, ValidAge


ADULT_AGE = 18

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Ids and ages are signed 32-bit values.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _parse_int(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and _INT_PATTERN.fullmatch(value):
        parsed = int(value)
    else:
        return None
    return parsed if INT_MIN <= parsed <= INT_MAX else None


def _parse_age(age: AgeField) -> int:
    if isinstance(age, InvalidAge):
        raise ValidationError(f"Invalid age value: {age.text}")
    if isinstance(age, ValidAge):
        age = age.value

    parsed = _parse_int(age)
    if parsed is None:
        raise ValidationError(f"Invalid age value: {age}")
    return parsed


def validate_records(records: list[RawRecord]) -> list[User]:
    users: list[User] = []

    for raw_id, raw_name, raw_age in records:
        # Age is checked first, then id, then name.
        age = _parse_age(raw_age)

        user_id = _parse_int(raw_id)
        if user_id is None or user_id <= 0:
            raise ValidationError("Invalid id value")

        if not isinstance(raw_name, str) or not raw_name:
            raise ValidationError("Invalid name value")

        users.append(User(id=user_id, name=raw_name, age=age))

    return users


def classify_users(users: list[User]) -> list[ClassifiedUser]:
    return [ClassifiedUser(user=user, is_adult=user.age >= ADULT_AGE) for user in users]


def average_age(classified: list[ClassifiedUser]) -> Decimal:
    # Ties round half-up (25.25 -> 25.3), unlike float formatting which rounds them to even.
    total = sum(entry.user.age for entry in classified)
    count = len(classified)
    with localcontext() as ctx:
        # Enough digits that the division never rounds across a .x5 boundary.
        ctx.prec = len(str(abs(total))) + len(str(count)) + 4
        average = (Decimal(total) / Decimal(count)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    # Drop the sign of a negative zero such as -0.0.
    return average.copy_abs() if average == 0 else average


def summarize_users(classified: list[ClassifiedUser]) -> str:
    if not classified:
        raise ValidationError("No records to summarize")

    # max() keeps the first of several equal maxima.
    oldest = max(classified, key=lambda entry: entry.user.age).user
    adult_count = sum(1 for entry in classified if entry.is_adult)

    return "\n".join(
        [
            f"Average age: {average_age(classified)}",
            f"Oldest user: {oldest.name} (id {oldest.id}, age {oldest.age})",
            f"Adult count: {adult_count}",
        ]
    )
