"""Pydantic models for the hotel sandbox."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ConversationMessage(BaseModel):
    """A single turn of the conversation supplied by the caller."""

    role: str = Field(default="user", description="Either 'user' or 'assistant'")
    content: str = Field(default="", description="Message text")


class ChatRequest(BaseModel):
    """Conversation history sent to the reservation agent."""

    messages: list[ConversationMessage] = Field(
        default_factory=list, description="Ordered conversation history"
    )


class ReservationDraft(BaseModel):
    """Tentative reservation proposed by the language model.

    Values are stored as the model wrote them, without coercion, and keys
    beyond the documented ones are kept, so that the draft is echoed back as
    it was produced. Only the required fields decide completeness.
    """

    model_config = ConfigDict(extra="allow")

    hotelCode: Any = Field(default=None, description="Property code")
    hotelName: Any = Field(default=None, description="Property name")
    arrivalDate: Any = Field(default=None, description="Check-in date (YYYY-MM-DD)")
    departureDate: Any = Field(default=None, description="Check-out date (YYYY-MM-DD)")
    adults: Any = Field(default=None, description="Number of adults")
    children: Any = Field(default=None, description="Number of children")
    roomType: Any = Field(default=None, description="Room type code")
    roomName: Any = Field(default=None, description="Room type name")
    ratePlanCode: Any = Field(default=None, description="Rate plan code")
    ratePlanName: Any = Field(default=None, description="Rate plan name")
    estimatedTotal: Any = Field(default=None, description="Total price for the stay")
    currencyCode: Any = Field(default=None, description="ISO currency code")
    cancellationPolicy: Any = Field(default=None, description="Cancellation terms")

    def get_missing_fields(self) -> list[str]:
        """Return the required fields that are absent, blank or of the wrong kind."""
        missing = [
            name
            for name in REQUIRED_DRAFT_STRINGS
            if not isinstance(getattr(self, name), str) or not getattr(self, name).strip()
        ]
        if not is_positive_count(self.adults):
            missing.append("adults")
        return missing

    def is_complete(self) -> bool:
        """Check whether the draft carries everything needed to book."""
        return not self.get_missing_fields()

    def to_dict(self) -> dict[str, Any]:
        """Serialize the fields the model supplied or enrichment filled in.

        Explicit nulls are kept; fields that were never set are left out.
        """
        supplied = self.model_fields_set | set(self.model_extra or {})
        return {key: value for key, value in self.model_dump().items() if key in supplied}


REQUIRED_DRAFT_STRINGS = ("hotelCode", "arrivalDate", "departureDate", "roomType", "ratePlanCode")


def is_positive_count(value: Any) -> bool:
    """Check for a whole number above zero, also when written as a digit string."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, float):
        return value.is_integer() and value > 0
    if isinstance(value, str):
        text = value.strip()
        return text.isascii() and text.isdigit() and text.lstrip("0") != ""
    return False


class AgentResponse(BaseModel):
    """Reply of the reservation agent: a chat message or a reservation draft."""

    type: Literal["message", "reservation_draft"] = Field(..., description="Response variant")
    message: str | None = Field(default=None, description="Text shown to the guest")
    reservation_draft: ReservationDraft | None = Field(
        default=None, description="Validated draft, only for the reservation_draft variant"
    )

    @classmethod
    def plain(cls, text: str) -> "AgentResponse":
        """Build a message response."""
        return cls(type="message", message=text)

    @classmethod
    def draft(cls, draft: ReservationDraft, message: str | None = None) -> "AgentResponse":
        """Build a reservation_draft response."""
        return cls(type="reservation_draft", message=message, reservation_draft=draft)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the HTTP response body."""
        body: dict[str, Any] = {"type": self.type}
        if self.message is not None:
            body["message"] = self.message
        if self.reservation_draft is not None:
            body["reservation_draft"] = self.reservation_draft.to_dict()
        return body


class RequestHeaders(BaseModel):
    """Distribution API headers every shop and book request must carry."""

    authorization: str
    app_key: str
    channel_code: str
    request_id: str


class ErrorDocument(BaseModel):
    """Error body returned to HTTP callers."""

    model_config = ConfigDict(populate_by_name=True)

    status: int = Field(..., description="HTTP status code")
    title: str = Field(..., description="Short error title")
    detail: str | None = Field(default=None, description="Error detail")
    error_path: str | None = Field(
        default=None, alias="o:errorPath", description="Request path that failed"
    )
    timestamp: str = Field(..., description="ISO-8601 UTC timestamp")
