class ValidationError(Exception):
    """A record in the batch broke one of the field rules.

    ``message`` holds the bare detail ("Invalid id value"); ``str()`` adds the
    "Validation error: " prefix used in console output.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Validation error: {self.message}"
