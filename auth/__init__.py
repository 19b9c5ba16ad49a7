"""Auth tokens for integrating an application with Cord."""

from auth.clock import Clock, FixedClock, SystemClock
from auth.errors import MissingRequiredField, SigningFailure
from auth.jwt import (
    TokenIssuer,
    issue_application_management_token,
    issue_client_token,
    issue_server_token,
)
from auth.schemas import ClientTokenRequest, OrganizationDetails, Status, UserDetails

__all__ = [
    "Clock",
    "ClientTokenRequest",
    "FixedClock",
    "MissingRequiredField",
    "OrganizationDetails",
    "SigningFailure",
    "Status",
    "SystemClock",
    "TokenIssuer",
    "UserDetails",
    "issue_application_management_token",
    "issue_client_token",
    "issue_server_token",
]
