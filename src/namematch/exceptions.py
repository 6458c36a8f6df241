"""Custom exception hierarchy for namematch."""


class NameMatchError(Exception):
    """Base exception for all namematch errors."""


class InvalidConfiguration(NameMatchError, ValueError):
    """A matcher setting is outside its allowed range."""

    def __init__(self, name: str, value: object, detail: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name} {value!r}: {detail}")


class EmptyCandidateList(NameMatchError, ValueError):
    """A multi-candidate lookup was given no candidates."""

    def __init__(self, input_name: str):
        self.input = input_name
        super().__init__(f"No candidates to compare '{input_name}' against")


class NoMatchFound(NameMatchError):
    """No candidate scored at or above the requested threshold."""

    def __init__(self, input_name: str, threshold: float):
        self.input = input_name
        self.threshold = threshold
        super().__init__(
            f"No candidate for '{input_name}' reached threshold {threshold:.3f}"
        )
