from dataclasses import dataclass


@dataclass(frozen=True)
class ValidAge:
    value: int


@dataclass(frozen=True)
class InvalidAge:
    # Text that could not be typed as an age upstream.
    text: str


AgeField = int | str | ValidAge | InvalidAge
RawRecord = tuple[int | str, str, AgeField]


@dataclass(frozen=True)
class User:
    id: int
    name: str
    age: int


@dataclass(frozen=True)
class ClassifiedUser:
    user: User
    is_adult: bool


@dataclass(frozen=True)
class StepOutcome:
    step_name: str
    status: str
    duration_ms: float
    error: str | None = None


@dataclass(frozen=True)
class PipelineResult:
    status: str
    total_records: int
    summary: str | None
    error: str | None
    steps: tuple[StepOutcome, ...] = ()

    @property
    def succeeded(self) -> bool:
        return self.status == "succeeded"
