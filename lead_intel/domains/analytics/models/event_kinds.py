"""
Typed analytics event kinds

Each kind carries its own typed fields plus a bounded ``extra`` map, and
renders the flat ``event_data`` stored on an AttributionEvent. Missing page
URLs default to the current navigation context.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from lead_intel.shared.constants.attribution import DEFAULT_CURRENCY

from .navigation import NavigationContext


class TrackedEventBase(BaseModel):
    """Common behavior of typed event kinds"""

    model_config = ConfigDict(frozen=True)

    extra: Dict[str, Any] = Field(
        default_factory=dict, description="Caller-supplied primitive extras"
    )

    def core_data(self, navigation: NavigationContext) -> Dict[str, Any]:
        raise NotImplementedError

    def to_event_data(self, navigation: NavigationContext) -> Dict[str, Any]:
        """
        Typed fields first, then extras that do not collide with them.

        Key-bounded storage keeps a prefix of this map, so extras are the
        first to be dropped and typed fields always survive.
        """
        data = self.core_data(navigation)
        for key, value in self.extra.items():
            data.setdefault(str(key), value)
        return data


class PageView(TrackedEventBase):
    event_type: Literal["page_view"] = "page_view"
    url: Optional[str] = None
    title: Optional[str] = None
    referrer: Optional[str] = None

    def core_data(self, navigation: NavigationContext) -> Dict[str, Any]:
        return {
            "url": self.url or navigation.url,
            "title": self.title if self.title is not None else navigation.title,
            "referrer": self.referrer if self.referrer is not None else navigation.referrer,
        }


class ScrollMilestone(TrackedEventBase):
    event_type: Literal["scroll_milestone"] = "scroll_milestone"
    scroll_depth: int = Field(..., ge=0, le=100)
    page_url: Optional[str] = None

    def core_data(self, navigation: NavigationContext) -> Dict[str, Any]:
        return {
            "scrollDepth": self.scroll_depth,
            "pageUrl": self.page_url or navigation.url,
        }


class ButtonClick(TrackedEventBase):
    event_type: Literal["button_click"] = "button_click"
    button_text: str = "Unknown"
    button_id: str = "no-id"
    element_type: str = "button"
    page_url: Optional[str] = None

    def core_data(self, navigation: NavigationContext) -> Dict[str, Any]:
        return {
            "buttonText": self.button_text,
            "buttonId": self.button_id,
            "elementType": self.element_type,
            "pageUrl": self.page_url or navigation.url,
        }


class FormFieldFocus(TrackedEventBase):
    event_type: Literal["form_field_focus"] = "form_field_focus"
    field_name: str = "unnamed"
    field_type: str = "text"
    page_url: Optional[str] = None

    def core_data(self, navigation: NavigationContext) -> Dict[str, Any]:
        return {
            "fieldName": self.field_name,
            "fieldType": self.field_type,
            "pageUrl": self.page_url or navigation.url,
        }


class FormSubmit(TrackedEventBase):
    event_type: Literal["form_submit"] = "form_submit"
    form_id: str = "unnamed-form"
    form_fields: List[str] = Field(default_factory=list)
    page_url: Optional[str] = None

    def core_data(self, navigation: NavigationContext) -> Dict[str, Any]:
        return {
            "formId": self.form_id,
            "formFields": list(self.form_fields),
            "pageUrl": self.page_url or navigation.url,
        }


class OutboundLinkClick(TrackedEventBase):
    event_type: Literal["outbound_link_click"] = "outbound_link_click"
    link_url: str
    link_text: str = "Unknown"
    page_url: Optional[str] = None

    def core_data(self, navigation: NavigationContext) -> Dict[str, Any]:
        return {
            "linkUrl": self.link_url,
            "linkText": self.link_text,
            "pageUrl": self.page_url or navigation.url,
        }


class Conversion(TrackedEventBase):
    event_type: Literal["conversion"] = "conversion"
    value: Optional[float] = None
    currency: str = DEFAULT_CURRENCY

    def core_data(self, navigation: NavigationContext) -> Dict[str, Any]:
        return {"conversion": True, "value": self.value, "currency": self.currency}


class UserLogin(TrackedEventBase):
    event_type: Literal["user_login"] = "user_login"
    method: Optional[str] = None

    def core_data(self, navigation: NavigationContext) -> Dict[str, Any]:
        return {"method": self.method}


TrackedEvent = Annotated[
    Union[
        PageView,
        ScrollMilestone,
        ButtonClick,
        FormFieldFocus,
        FormSubmit,
        OutboundLinkClick,
        Conversion,
        UserLogin,
    ],
    Field(discriminator="event_type"),
]
