import logging

from userpipe.config import get_settings
from userpipe.pipeline import PipelineRunner
from userpipe.samples import generate_sample_records
from userpipe.schemas import PipelineResult


def format_result(result: PipelineResult) -> str:
    if result.succeeded:
        return f"Success:\n{result.summary}"
    return f"Error: {result.error}"


def main() -> None:
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    runner = PipelineRunner(settings)
    # Failures are reported on stdout; the process still exits 0.
    for valid in (True, False):
        result = runner.run(generate_sample_records(valid))
        print(format_result(result))


if __name__ == "__main__":
    main()
