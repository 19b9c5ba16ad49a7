"""JWT creation for Cord client and server auth tokens."""

import json
import logging
import re
from decimal import Decimal
from typing import Any

from jose import jws
from jose.constants import ALGORITHMS
from pydantic import BaseModel

import config
from auth.clock import Clock, SystemClock
from auth.errors import MissingRequiredField
from auth.schemas import ClientTokenRequest

logger = logging.getLogger(__name__)

TOKEN_ALGORITHM = ALGORITHMS.HS512
TOKEN_TTL_SECONDS = 60

# Claim keys for the organization id and details, per naming scheme
CLAIM_KEYS = {
    "organization": ("organization_id", "organization_details"),
    "group": ("group_id", "group_details"),
}

# Escapes applied to JSON strings by the existing token issuers
_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

# JSON strings, or numbers written with an exponent
_JSON_TOKEN = re.compile(r'"(?:[^"\\]|\\.)*"|-?\d+(?:\.\d+)?[eE][+-]?\d+')

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _normalize_json(value: Any) -> Any:
    """Sort mapping keys at every level and write integral floats as integers."""
    if isinstance(value, dict):
        return {key: _normalize_json(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [_normalize_json(item) for item in value]
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def _format_exponent(match: re.Match) -> str:
    """Write an exponent-form number the way the existing issuers do."""
    token = match.group()
    if token.startswith('"'):
        return token
    if 1e-6 <= abs(float(token)) < 1e21:
        return format(Decimal(token), "f")
    return token.replace("e-0", "e-")


def _encode_claims(claims: dict[str, Any]) -> bytes:
    """
    Serialize a claim set to the exact payload bytes that get signed.

    Top-level keys are sorted; nested details objects keep their field order.
    Lone surrogates are written as U+FFFD.
    """
    payload = json.dumps(
        {key: claims[key] for key in sorted(claims)},
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )
    payload = _JSON_TOKEN.sub(_format_exponent, payload)
    payload = _LONE_SURROGATE.sub("\ufffd", payload)
    for char, escaped in _JSON_ESCAPES.items():
        payload = payload.replace(char, escaped)
    return payload.encode("utf-8")


def _details_claim(details: BaseModel, exclude: set[str] | None = None) -> dict[str, Any]:
    """Dump a details model in field order, dropping empty values."""
    values = details.model_dump(mode="json", exclude=exclude)
    return {key: _normalize_json(value) for key, value in values.items() if value}


class TokenIssuer:
    """
    Issues signed auth tokens for Cord.

    Holds only a clock and the claim naming scheme for client tokens.
    """

    def __init__(self, clock: Clock | None = None, claim_naming: str | None = None) -> None:
        claim_naming = claim_naming or config.settings.CLAIM_NAMING
        if claim_naming not in CLAIM_KEYS:
            raise ValueError(f"Unknown claim naming: {claim_naming!r}")
        self.clock = clock or SystemClock()
        self.claim_naming = claim_naming

    def _timestamps(self) -> dict[str, int]:
        issued_at = int(self.clock.now().timestamp())
        return {"iat": issued_at, "exp": issued_at + TOKEN_TTL_SECONDS}

    def _sign(self, claims: dict[str, Any], secret: bytes | str) -> str:
        return jws.sign(_encode_claims(claims), secret, algorithm=TOKEN_ALGORITHM)

    def issue_server_token(self, app_id: str, secret: bytes | str) -> str:
        """
        Create a server auth token for requests to Cord's REST API.

        Args:
            app_id: Application ID
            secret: Application secret

        Returns:
            Encoded JWT token string

        Raises:
            SigningFailure: If the secret cannot be used for signing
        """
        logger.debug("Issuing server token for app %s", app_id)
        return self._sign({"app_id": app_id, **self._timestamps()}, secret)

    def issue_application_management_token(self, customer_id: str, secret: bytes | str) -> str:
        """
        Create a server auth token for requests to Cord's Applications REST API.

        Args:
            customer_id: Customer ID
            secret: Customer secret

        Returns:
            Encoded JWT token string

        Raises:
            SigningFailure: If the secret cannot be used for signing
        """
        logger.debug("Issuing application management token for customer %s", customer_id)
        return self._sign({"customer_id": customer_id, **self._timestamps()}, secret)

    def issue_client_token(
        self,
        app_id: str,
        secret: bytes | str,
        data: ClientTokenRequest,
    ) -> str:
        """
        Create a client auth token that authenticates a user to Cord.

        Required fields are checked before anything is signed, in the order
        user ID, organization ID, user email, organization name.

        Args:
            app_id: Application ID
            secret: Application secret
            data: User and organization identity, with optional details to sync

        Returns:
            Encoded JWT token string

        Raises:
            MissingRequiredField: If a required field is empty
            SigningFailure: If the secret cannot be used for signing
        """
        id_key, details_key = CLAIM_KEYS[self.claim_naming]

        if not data.user_id:
            raise self._rejected(MissingRequiredField("UserID"))
        if not data.organization_id:
            raise self._rejected(MissingRequiredField("OrganizationID"))

        claims: dict[str, Any] = {
            "app_id": app_id,
            **self._timestamps(),
            "user_id": data.user_id,
            id_key: data.organization_id,
        }
        if data.user_details is not None:
            if not data.user_details.email:
                raise self._rejected(
                    MissingRequiredField("Email", "missing required user field: Email")
                )
            claims["user_details"] = _details_claim(
                data.user_details, exclude={"first_name", "last_name"}
            )
        if data.organization_details is not None:
            if not data.organization_details.name:
                raise self._rejected(
                    MissingRequiredField("Name", "missing required organization field: Name")
                )
            claims[details_key] = _details_claim(data.organization_details)

        logger.debug(
            "Issuing client token for app %s, user %s, %s %s",
            app_id,
            data.user_id,
            self.claim_naming,
            data.organization_id,
        )
        return self._sign(claims, secret)

    @staticmethod
    def _rejected(error: MissingRequiredField) -> MissingRequiredField:
        logger.debug("Rejected client token request: %s", error)
        return error


def issue_server_token(
    app_id: str,
    secret: bytes | str,
    *,
    clock: Clock | None = None,
) -> str:
    """Create a server auth token."""
    return TokenIssuer(clock=clock).issue_server_token(app_id, secret)


def issue_application_management_token(
    customer_id: str,
    secret: bytes | str,
    *,
    clock: Clock | None = None,
) -> str:
    """Create an application management auth token."""
    return TokenIssuer(clock=clock).issue_application_management_token(customer_id, secret)


def issue_client_token(
    app_id: str,
    secret: bytes | str,
    data: ClientTokenRequest,
    *,
    clock: Clock | None = None,
) -> str:
    """Create a client auth token using the configured claim naming."""
    return TokenIssuer(clock=clock).issue_client_token(app_id, secret, data)
