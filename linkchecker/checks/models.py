"""
Data structures for a single link check.

- CheckRequest: validated input for one invocation
- Success / HttpError / NetworkFailure / InvalidInput: the possible outcomes
- CheckResult: discriminated union of the outcomes

Nothing here outlives one tool invocation.
"""

from typing import Annotated, Literal

from pydantic import AnyUrl, BaseModel, Field, model_validator


class CheckRequest(BaseModel):
    """Input for one check: an absolute URL with a scheme and a host."""

    url: AnyUrl = Field(description="The URL to check")

    @model_validator(mode="after")
    def _require_host(self) -> "CheckRequest":
        if not self.url.host:
            raise ValueError("URL must include a host")
        return self


class Success(BaseModel):
    """The probe completed with a 2xx status."""

    kind: Literal["success"] = "success"
    status_code: int
    status_text: str = ""

    @property
    def is_error(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"The link is valid! Status: {self.status_code} ({self.status_text})"


class HttpError(BaseModel):
    """The probe completed with a status outside 2xx."""

    kind: Literal["http_error"] = "http_error"
    status_code: int
    status_text: str = ""

    @property
    def is_error(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"The link returned an error. Status: {self.status_code} ({self.status_text})"


class NetworkFailure(BaseModel):
    """The probe could not complete (timeout, DNS, refused connection, TLS, ...)."""

    kind: Literal["network_failure"] = "network_failure"
    error: str = Field(min_length=1, description="Human-readable description of the fault")

    @property
    def is_error(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return f"Failed to reach the URL. Error: {self.error}"


class InvalidInput(BaseModel):
    """The input was rejected before any network call."""

    kind: Literal["invalid_input"] = "invalid_input"
    reason: str = Field(min_length=1, description="Why the input was rejected")

    @property
    def is_error(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return f"Invalid input: {self.reason}"


CheckResult = Annotated[
    Success | HttpError | NetworkFailure | InvalidInput,
    Field(discriminator="kind"),
]


def classify_status(status_code: int, status_text: str) -> Success | HttpError:
    """Map a completed response to Success (2xx) or HttpError (anything else)."""
    if 200 <= status_code < 300:
        return Success(status_code=status_code, status_text=status_text)
    return HttpError(status_code=status_code, status_text=status_text)
