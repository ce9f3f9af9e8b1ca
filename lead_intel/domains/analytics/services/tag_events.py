"""
Lead-generation tag events

Named analytics events for real-estate lead funnels. Each helper records one
flat event through the analytics engine; the contact, inquiry and valuation
helpers also record a ``lead_conversion`` event. Lead conversions are not
purchase conversions and do not count in the funnel's purchase stage.
"""

from typing import Any, Mapping, Optional

from lead_intel.shared.constants.attribution import DEFAULT_CURRENCY

from ..models import AttributionEvent
from .analytics_engine import EnhancedAnalyticsEngine


class TagEventTracker:
    def __init__(self, engine: EnhancedAnalyticsEngine):
        self.engine = engine

    def _record(self, name: str, params: Mapping[str, Any]) -> AttributionEvent:
        return self.engine.track_event(name, params)

    def track_property_view(
        self,
        property_id: str,
        address: str,
        price: float,
        property_type: str,
        city: str,
    ) -> AttributionEvent:
        return self._record(
            "view_item",
            {
                "currency": DEFAULT_CURRENCY,
                "value": price,
                "item_id": property_id,
                "item_name": address,
                "item_category": property_type,
                "item_category2": city,
            },
        )

    def track_form_submission(
        self, form_name: str, form_data: Optional[Mapping[str, Any]] = None
    ) -> AttributionEvent:
        params = {"form_name": form_name}
        for key, value in (form_data or {}).items():
            params.setdefault(str(key), value)
        return self._record("generate_lead", params)

    def track_cta_click(
        self, cta_name: str, cta_location: str, destination: Optional[str] = None
    ) -> AttributionEvent:
        return self._record(
            "cta_click",
            {
                "cta_name": cta_name,
                "cta_location": cta_location,
                "destination": destination,
            },
        )

    def track_lead_conversion(
        self, lead_type: str, lead_value: Optional[float] = None
    ) -> AttributionEvent:
        return self._record(
            "lead_conversion",
            {"event_category": "Lead", "event_label": lead_type, "value": lead_value},
        )

    def track_home_valuation(
        self, address: str, city: str, bedrooms: int, bathrooms: float
    ) -> AttributionEvent:
        event = self._record(
            "home_valuation_request",
            {
                "property_address": address,
                "property_city": city,
                "bedrooms": bedrooms,
                "bathrooms": bathrooms,
            },
        )
        self.track_lead_conversion("home_valuation")
        return event

    def track_contact_form(self, source: str) -> AttributionEvent:
        event = self._record("contact_form_submission", {"form_source": source})
        self.track_lead_conversion("contact_inquiry")
        return event

    def track_property_inquiry(
        self, property_id: str, property_address: str
    ) -> AttributionEvent:
        event = self._record(
            "property_inquiry",
            {"property_id": property_id, "property_address": property_address},
        )
        self.track_lead_conversion("property_inquiry")
        return event

    def track_phone_click(self, location: str) -> AttributionEvent:
        return self._record("phone_call_click", {"click_location": location})

    def track_email_click(self, location: str) -> AttributionEvent:
        return self._record("email_click", {"click_location": location})

    def track_virtual_tour(self, property_id: str, tour_type: str) -> AttributionEvent:
        return self._record(
            "virtual_tour_engagement",
            {"property_id": property_id, "tour_type": tour_type},
        )

    def track_mortgage_calculator(
        self, property_price: float, down_payment: float, loan_term: int
    ) -> AttributionEvent:
        return self._record(
            "mortgage_calculator_used",
            {
                "property_price": property_price,
                "down_payment_percent": down_payment,
                "loan_term_years": loan_term,
            },
        )
