"""Error types raised while decoding and fetching catalog data."""


class DecodeError(Exception):
    """Response body could not be turned into domain records."""


class MissingFieldError(DecodeError):
    """A required field is absent or has the wrong type."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Missing or invalid field: {field_name}")
        self.field_name = field_name


class EmptyResponseError(DecodeError):
    """A detail lookup returned no matches."""

    def __init__(self) -> None:
        super().__init__("Lookup returned no meals")


class MalformedPayloadError(DecodeError):
    """The body is not JSON, or not a JSON object."""


class FetchError(Exception):
    """Base class for failures surfaced by the catalog service."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class NetworkError(FetchError):
    """Transport-level failure talking to the catalog API."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Network request failed: {cause}", cause)


class FetchDecodeError(FetchError):
    """The catalog API answered with a body that failed to decode."""

    def __init__(self, cause: DecodeError) -> None:
        super().__init__(f"Failed to decode response: {cause}", cause)


class NotFoundError(FetchError):
    """No meal matches the requested id."""

    def __init__(self, meal_id: str, cause: Exception | None = None) -> None:
        super().__init__(f"Meal not found: {meal_id}", cause)
        self.meal_id = meal_id
