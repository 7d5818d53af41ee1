"""Unit tests for ResponseInterpreter."""

from unittest.mock import MagicMock

import pytest

from hotelsandbox.agent.interpreter import ResponseInterpreter, find_rate_plan, strip_code_fence
from hotelsandbox.agent.prompts import MISSING_DETAILS_MESSAGE


@pytest.fixture
def interpreter(shop):
    """Create an interpreter over the bundled shop fixtures."""
    return ResponseInterpreter(shop)


class TestInterpretMessages:
    """Tests for replies that are not reservation drafts."""

    def test_plain_text(self, interpreter):
        """Test that conversational text becomes a trimmed message."""
        response = interpreter.interpret("  Which city would you like to visit?\n")
        assert response.type == "message"
        assert response.message == "Which city would you like to visit?"
        assert response.reservation_draft is None

    def test_invalid_json_returns_raw_content(self, interpreter):
        """Test that unparseable JSON is passed through untrimmed."""
        content = ' {"type": "reservation_draft", "message": '
        response = interpreter.interpret(content)
        assert response.type == "message"
        assert response.message == content

    def test_other_json_type(self, interpreter):
        """Test that JSON of another type is returned verbatim."""
        content = '{"type": "greeting", "message": "Hi"}'
        response = interpreter.interpret(content)
        assert response.type == "message"
        assert response.message == content

    def test_json_array_is_message(self, interpreter):
        """Test that a non-object JSON payload is returned verbatim."""
        content = '["reservation_draft"]'
        assert interpreter.interpret(content).message == content

    def test_unclosed_fence(self, interpreter):
        """Test that an unterminated code fence is returned verbatim."""
        content = '```json\n{"type": "reservation_draft"}'
        response = interpreter.interpret(content)
        assert response.type == "message"
        assert response.message == content

    def test_deeply_nested_json(self, interpreter):
        """Test that JSON nested past the recursion limit is returned verbatim."""
        content = '{"type": "reservation_draft", "x": ' + "[" * 100000
        response = interpreter.interpret(content)
        assert response.type == "message"
        assert response.message == content

    def test_oversized_integer(self, interpreter):
        """Test that an integer too long to convert does not raise."""
        content = '{"type": "reservation_draft", "n": ' + "1" * 5000 + "}"
        response = interpreter.interpret(content)
        assert response.type == "message"


class TestInterpretDrafts:
    """Tests for reservation draft replies."""

    def test_missing_rate_plan_uses_model_message(self, interpreter, complete_draft, draft_reply):
        """Test that an incomplete draft is downgraded to the model's message."""
        del complete_draft["ratePlanCode"]
        response = interpreter.interpret(draft_reply(complete_draft, "Which rate plan?"))
        assert response.type == "message"
        assert response.message == "Which rate plan?"
        assert response.reservation_draft is None

    def test_incomplete_without_message(self, interpreter, complete_draft, draft_reply):
        """Test that an incomplete draft without a message asks for details."""
        complete_draft["adults"] = 0
        response = interpreter.interpret(draft_reply(complete_draft, message=None))
        assert response.type == "message"
        assert response.message == MISSING_DETAILS_MESSAGE

    def test_draft_with_wrong_types(self, interpreter, complete_draft, draft_reply):
        """Test that a non-numeric adult count asks for details."""
        complete_draft["adults"] = "two"
        response = interpreter.interpret(draft_reply(complete_draft, message=""))
        assert response.type == "message"
        assert response.message == MISSING_DETAILS_MESSAGE

    def test_missing_draft_object(self, interpreter):
        """Test that a draft type without a draft asks for details."""
        response = interpreter.interpret('{"type": "reservation_draft"}')
        assert response.type == "message"
        assert response.message == MISSING_DETAILS_MESSAGE

    def test_complete_draft_enriched(self, interpreter, complete_draft, draft_reply):
        """Test that live offer data replaces the model's estimates."""
        response = interpreter.interpret(draft_reply(complete_draft))

        assert response.type == "reservation_draft"
        assert response.message == "Please review and confirm."
        draft = response.reservation_draft
        assert draft.estimatedTotal == 452.48
        assert draft.currencyCode == "USD"
        assert draft.cancellationPolicy == "Free cancellation until 6PM on arrival date"
        assert draft.hotelName == "Sandbox New York Hotel"

    def test_early_rate_enriched(self, interpreter, complete_draft, draft_reply):
        """Test that the rate plan code selects the matching plan."""
        complete_draft.update(roomType="C2Q", ratePlanCode="EARLY")
        draft = interpreter.interpret(draft_reply(complete_draft)).reservation_draft
        assert draft.estimatedTotal == 553.68
        assert draft.cancellationPolicy == "Free cancellation until 3 days before arrival"

    def test_unmatched_offer_keeps_estimates(self, interpreter, complete_draft, draft_reply):
        """Test that a draft with no matching offer is returned as produced."""
        complete_draft.update(roomType="B1K", ratePlanCode="EARLY")
        response = interpreter.interpret(draft_reply(complete_draft))

        assert response.type == "reservation_draft"
        assert response.to_dict()["reservation_draft"] == complete_draft

    def test_unmatched_offer_keeps_nulls_and_integers(
        self, interpreter, complete_draft, draft_reply
    ):
        """Test that explicit nulls and integer totals come back unchanged."""
        complete_draft.update(
            roomType="B1K", ratePlanCode="EARLY", children=None, estimatedTotal=420
        )
        response = interpreter.interpret(draft_reply(complete_draft))

        body = response.to_dict()["reservation_draft"]
        assert body == complete_draft
        assert body["children"] is None
        assert isinstance(body["estimatedTotal"], int)

    def test_free_form_optional_fields(self, interpreter, complete_draft, draft_reply):
        """Test that odd values in descriptive fields do not reject a complete draft."""
        complete_draft.update(
            roomType="B1K",
            ratePlanCode="EARLY",
            estimatedTotal="approx. 420 USD",
            children="none",
        )
        response = interpreter.interpret(draft_reply(complete_draft))

        assert response.type == "reservation_draft"
        assert response.to_dict()["reservation_draft"] == complete_draft

    def test_free_form_total_replaced_by_offer(self, interpreter, complete_draft, draft_reply):
        """Test that a textual estimate is still overwritten by the live offer."""
        complete_draft["estimatedTotal"] = "about 400 dollars"
        draft = interpreter.interpret(draft_reply(complete_draft)).reservation_draft
        assert draft.estimatedTotal == 452.48

    def test_non_string_required_field(self, interpreter, complete_draft, draft_reply):
        """Test that a required field of the wrong kind makes the draft incomplete."""
        complete_draft["hotelCode"] = 12345
        response = interpreter.interpret(draft_reply(complete_draft, message=None))
        assert response.type == "message"
        assert response.message == MISSING_DETAILS_MESSAGE

    def test_json_fence(self, interpreter, complete_draft, draft_reply):
        """Test that a draft inside a json code fence is recognised."""
        content = f"Here you go:\n```json\n{draft_reply(complete_draft)}\n```"
        response = interpreter.interpret(content)
        assert response.type == "reservation_draft"
        assert response.reservation_draft.estimatedTotal == 452.48

    def test_plain_fence(self, interpreter, complete_draft, draft_reply):
        """Test that a draft inside an unlabelled code fence is recognised."""
        content = f"```\n{draft_reply(complete_draft)}\n```"
        assert interpreter.interpret(content).type == "reservation_draft"

    def test_draft_without_message(self, interpreter, complete_draft, draft_reply):
        """Test that a complete draft may come without a message."""
        response = interpreter.interpret(draft_reply(complete_draft, message=None))
        assert response.type == "reservation_draft"
        assert "message" not in response.to_dict()

    def test_enrichment_failure_keeps_estimates(self, complete_draft, draft_reply):
        """Test that a failing offer lookup leaves the draft unchanged."""
        shop = MagicMock()
        shop.get_property_offers.side_effect = RuntimeError("offers unavailable")
        interpreter = ResponseInterpreter(shop)

        response = interpreter.interpret(draft_reply(complete_draft))

        assert response.type == "reservation_draft"
        assert response.reservation_draft.estimatedTotal == 420.22
        assert response.reservation_draft.currencyCode == "EUR"
        shop.get_property_offers.assert_called_once_with("XSBOXD1")

    def test_zero_amount_not_applied(self, complete_draft, draft_reply):
        """Test that a zero offer total keeps the model estimate."""
        shop = MagicMock()
        shop.get_property_offers.return_value = {
            "roomStays": [
                {
                    "roomTypes": [
                        {
                            "roomType": "A1K",
                            "ratePlans": [
                                {
                                    "ratePlanCode": "FLEX",
                                    "total": {"amountAfterTax": 0, "currencyCode": ""},
                                    "cancelPenalty": {"penaltyDescription": "  "},
                                }
                            ],
                        }
                    ]
                }
            ]
        }
        draft = ResponseInterpreter(shop).interpret(draft_reply(complete_draft)).reservation_draft

        assert draft.estimatedTotal == 420.22
        assert draft.currencyCode == "EUR"
        assert draft.cancellationPolicy == "Cancel any time"


class TestStripCodeFence:
    """Tests for strip_code_fence."""

    def test_no_fence(self):
        """Test that unfenced text is returned as is."""
        assert strip_code_fence('{"a": 1}') == '{"a": 1}'

    def test_json_fence(self):
        """Test extraction from a json fence."""
        assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_text_around_fence(self):
        """Test that prose around the fence is dropped."""
        assert strip_code_fence('Sure!\n```\n{"a": 1}\n```\nAnything else?') == '{"a": 1}'

    def test_unclosed(self):
        """Test that an unterminated fence yields None."""
        assert strip_code_fence('```json\n{"a": 1}') is None


class TestFindRatePlan:
    """Tests for find_rate_plan."""

    def test_first_match_wins(self):
        """Test that the first matching plan in document order is returned."""
        offers = {
            "roomStays": [
                {"roomTypes": [{"roomType": "A1K", "ratePlans": [{"ratePlanCode": "FLEX", "n": 1}]}]},
                {"roomTypes": [{"roomType": "A1K", "ratePlans": [{"ratePlanCode": "FLEX", "n": 2}]}]},
            ]
        }
        assert find_rate_plan(offers, "A1K", "FLEX")["n"] == 1

    def test_no_match(self, shop):
        """Test that unknown combinations return None."""
        offers = shop.get_property_offers("XSBOXD1")
        assert find_rate_plan(offers, "Z9Z", "FLEX") is None
        assert find_rate_plan(offers, "A1K", None) is None

    def test_malformed_offers(self):
        """Test that unexpected shapes return None."""
        assert find_rate_plan(None, "A1K", "FLEX") is None
        assert find_rate_plan({"roomStays": "oops"}, "A1K", "FLEX") is None
