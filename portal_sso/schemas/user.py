"""
Pydantic models describing the user attributes understood by the portal.
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SSOUser(BaseModel):
    """Attributes embedded in a single sign-on token.

    Only ``guid`` is required. Attributes the portal adds later can be passed
    as extra keyword arguments and are forwarded untouched.
    """

    model_config = ConfigDict(extra="allow")

    guid: str = Field(
        ...,
        min_length=1,
        description="Unique identifier for the user, e.g. the user id in your system.",
    )
    expires: Optional[Union[datetime, str]] = Field(
        None,
        description="Expiry of the token in GMT. Never expires when omitted.",
    )
    email: Optional[str] = Field(
        None,
        description="Without an email the user receives no activity or update emails.",
    )
    display_name: Optional[str] = Field(
        None, description="Shown as 'anonymous' when omitted."
    )
    locale: Optional[str] = Field(
        None, description="Portal locale code such as 'en', 'fr-CA' or 'pt_BR'."
    )
    trusted: Optional[bool] = Field(
        None,
        description="Whether the email is trusted, allowing SSO into admin accounts.",
    )
    owner: Optional[Literal["accept", "deny"]] = None
    admin: Optional[Literal["accept", "deny"]] = Field(
        None, description="'deny' requires trusted=True."
    )
    allow_forums: Optional[List[int]] = Field(
        None, description="Exclusive list of forum ids the user may access."
    )
    deny_forums: Optional[List[int]] = Field(
        None, description="Forum ids the user may not access."
    )
    url: Optional[str] = Field(
        None, description="Overrides every profile link for this user."
    )
    avatar_url: Optional[str] = None
    updates: Optional[bool] = None
    comment_updates: Optional[bool] = None

    def to_attributes(self) -> Dict[str, Any]:
        """Return the attributes as a plain dict, dropping unset fields."""
        return self.model_dump(exclude_none=True)


__all__ = ["SSOUser"]
