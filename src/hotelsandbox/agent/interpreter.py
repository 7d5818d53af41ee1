"""Classification of raw model output into agent responses."""

import json
from typing import Any

from loguru import logger

from hotelsandbox.agent.prompts import MISSING_DETAILS_MESSAGE
from hotelsandbox.core.models import AgentResponse, ReservationDraft
from hotelsandbox.services.shop import ShopService

DRAFT_TYPE = "reservation_draft"
JSON_FENCE = "```json"
FENCE = "```"


class ResponseInterpreter:
    """Turns a model completion into a message or a validated reservation draft."""

    def __init__(self, shop: ShopService):
        """Initialize the interpreter.

        Args:
            shop: Shop service used to price complete drafts
        """
        self.shop = shop

    def interpret(self, content: str) -> AgentResponse:
        """Classify a raw completion.

        Args:
            content: Text returned by the language model

        Returns:
            AgentResponse of type ``message`` or ``reservation_draft``
        """
        trimmed = content.strip()

        if not (trimmed.startswith("{") or DRAFT_TYPE in trimmed):
            return AgentResponse.plain(trimmed)

        parsed = self._parse_json(trimmed)
        if parsed is None:
            logger.debug("Response is not JSON, treating as plain message")
            return AgentResponse.plain(content)

        if parsed.get("type") != DRAFT_TYPE:
            return AgentResponse.plain(content)

        draft = self._validate_draft(parsed.get(DRAFT_TYPE))
        if draft is None:
            message = parsed.get("message")
            if not isinstance(message, str) or not message.strip():
                message = MISSING_DETAILS_MESSAGE
            return AgentResponse.plain(message)

        logger.info("Agent produced reservation_draft for hotel: {}", draft.hotelCode)
        self.enrich(draft)

        message = parsed.get("message")
        return AgentResponse.draft(draft, message if isinstance(message, str) else None)

    def enrich(self, draft: ReservationDraft) -> None:
        """Overwrite model estimates with the matching live offer, in place.

        Failures are logged and leave the draft unchanged.
        """
        try:
            offers = self.shop.get_property_offers(draft.hotelCode)
            plan = find_rate_plan(offers, draft.roomType, draft.ratePlanCode)
            if plan is None:
                logger.debug(
                    "No live offer for roomType={} ratePlanCode={}",
                    draft.roomType,
                    draft.ratePlanCode,
                )
                return

            total = plan.get("total") or {}
            amount = float(total.get("amountAfterTax") or 0)
            currency = total.get("currencyCode") or ""
            cancel_description = (plan.get("cancelPenalty") or {}).get("penaltyDescription") or ""

            if amount > 0:
                draft.estimatedTotal = amount
            if isinstance(currency, str) and currency.strip():
                draft.currencyCode = currency
            if isinstance(cancel_description, str) and cancel_description.strip():
                draft.cancellationPolicy = cancel_description

            logger.info("Enriched draft with live offer: total={} {}", amount, currency)
        except Exception:
            logger.opt(exception=True).warning(
                "Could not enrich draft with live offers, using agent estimates"
            )

    def _parse_json(self, trimmed: str) -> dict[str, Any] | None:
        """Extract and parse the JSON object, or None if there isn't one."""
        candidate = strip_code_fence(trimmed)
        if candidate is None:
            return None

        try:
            parsed = json.loads(candidate)
        except (ValueError, RecursionError) as e:
            logger.debug("Could not parse model output as JSON: {}", type(e).__name__)
            return None

        return parsed if isinstance(parsed, dict) else None

    def _validate_draft(self, raw_draft: Any) -> ReservationDraft | None:
        """Return the draft if it is an object with every required field."""
        if not isinstance(raw_draft, dict):
            logger.info("reservation_draft is missing, asking for more details")
            return None

        draft = ReservationDraft.model_validate(raw_draft)

        missing = draft.get_missing_fields()
        if missing:
            logger.info("Incomplete reservation_draft, missing: {}", missing)
            return None

        return draft


def strip_code_fence(text: str) -> str | None:
    """Return the content of a Markdown code fence, or the text itself.

    Returns None when a fence is opened but never closed.
    """
    if JSON_FENCE in text:
        remainder = text[text.index(JSON_FENCE) + len(JSON_FENCE):]
    elif FENCE in text:
        remainder = text[text.index(FENCE) + len(FENCE):]
    else:
        return text

    end = remainder.rfind(FENCE)
    if end == -1:
        return None
    return remainder[:end].strip()


def find_rate_plan(
    offers: Any, room_type: str | None, rate_plan_code: str | None
) -> dict[str, Any] | None:
    """Find the first rate plan matching a room type and rate plan code.

    Walks ``roomStays -> roomTypes -> ratePlans`` in document order.
    """
    if not isinstance(offers, dict):
        return None

    for stay in offers.get("roomStays") or []:
        if not isinstance(stay, dict):
            continue
        for room in stay.get("roomTypes") or []:
            if not isinstance(room, dict) or room.get("roomType") != room_type:
                continue
            for plan in room.get("ratePlans") or []:
                if isinstance(plan, dict) and plan.get("ratePlanCode") == rate_plan_code:
                    return plan

    return None
