"""
CodeAuth shared data models.

These models define the wire format spoken with the CodeAuth service and
the result objects handed back to SDK callers.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional

from pydantic import BaseModel, Field

# Enums


class ApiPath(str, Enum):
    """Sub-paths of the CodeAuth project endpoint."""

    SIGNIN_EMAIL = "/signin/email"
    SIGNIN_EMAIL_VERIFY = "/signin/emailverify"
    SIGNIN_SOCIAL = "/signin/social"
    SIGNIN_SOCIAL_VERIFY = "/signin/socialverify"
    SESSION_INFO = "/session/info"
    SESSION_REFRESH = "/session/refresh"
    SESSION_INVALIDATE = "/session/invalidate"


class ErrorCode(str, Enum):
    """Error codes returned inline in every result."""

    NO_ERROR = "no_error"
    BAD_JSON = "bad_json"
    PROJECT_NOT_FOUND = "project_not_found"
    BAD_IP_ADDRESS = "bad_ip_address"
    RATE_LIMIT_REACHED = "rate_limit_reached"
    BAD_EMAIL = "bad_email"
    CODE_REQUEST_INTERVAL_REACHED = "code_request_interval_reached"
    CODE_HOURLY_LIMIT_REACHED = "code_hourly_limit_reached"
    BAD_CODE = "bad_code"
    BAD_SOCIAL_TYPE = "bad_social_type"
    BAD_AUTHORIZATION_CODE = "bad_authorization_code"
    BAD_SESSION_TOKEN = "bad_session_token"
    OUT_OF_REFRESH = "out_of_refresh"
    BAD_INVALIDATE_TYPE = "bad_invalidate_type"
    INTERNAL_ERROR = "internal_error"
    # Synthetic: added by the SDK for any transport or parse failure
    CONNECTION_ERROR = "connection_error"


class SocialType(str, Enum):
    """Social OAuth2 providers."""

    GOOGLE = "google"
    MICROSOFT = "microsoft"
    APPLE = "apple"


class InvalidateType(str, Enum):
    """Scope of a session invalidation."""

    ONLY_THIS = "only_this"
    ALL = "all"
    ALL_BUT_THIS = "all_but_this"


# Error vocabulary per operation

COMMON_ERRORS: FrozenSet[ErrorCode] = frozenset(
    {
        ErrorCode.BAD_JSON,
        ErrorCode.PROJECT_NOT_FOUND,
        ErrorCode.BAD_IP_ADDRESS,
        ErrorCode.RATE_LIMIT_REACHED,
        ErrorCode.INTERNAL_ERROR,
        ErrorCode.CONNECTION_ERROR,
    }
)

OPERATION_ERRORS: Dict[ApiPath, FrozenSet[ErrorCode]] = {
    ApiPath.SIGNIN_EMAIL: COMMON_ERRORS
    | {
        ErrorCode.BAD_EMAIL,
        ErrorCode.CODE_REQUEST_INTERVAL_REACHED,
        ErrorCode.CODE_HOURLY_LIMIT_REACHED,
    },
    ApiPath.SIGNIN_EMAIL_VERIFY: COMMON_ERRORS | {ErrorCode.BAD_EMAIL, ErrorCode.BAD_CODE},
    ApiPath.SIGNIN_SOCIAL: COMMON_ERRORS | {ErrorCode.BAD_SOCIAL_TYPE},
    ApiPath.SIGNIN_SOCIAL_VERIFY: COMMON_ERRORS
    | {ErrorCode.BAD_SOCIAL_TYPE, ErrorCode.BAD_AUTHORIZATION_CODE},
    ApiPath.SESSION_INFO: COMMON_ERRORS | {ErrorCode.BAD_SESSION_TOKEN},
    ApiPath.SESSION_REFRESH: COMMON_ERRORS
    | {ErrorCode.BAD_SESSION_TOKEN, ErrorCode.OUT_OF_REFRESH},
    ApiPath.SESSION_INVALIDATE: COMMON_ERRORS
    | {ErrorCode.BAD_SESSION_TOKEN, ErrorCode.BAD_INVALIDATE_TYPE},
}


# Request Models (wire input)


class ProjectRequest(BaseModel):
    """Base for every request; the project is always sent."""

    project_id: str = Field(..., description="Project ID from the project settings")


class SignInEmailRequest(ProjectRequest):
    """Request a one time code by email."""

    email: str


class SignInEmailVerifyRequest(ProjectRequest):
    """Exchange a one time code for a session token."""

    email: str
    code: str


class SignInSocialRequest(ProjectRequest):
    """Request a social OAuth2 sign-in url."""

    social_type: str


class SignInSocialVerifyRequest(ProjectRequest):
    """Exchange a social authorization code for a session token."""

    social_type: str
    authorization_code: str


class SessionTokenRequest(ProjectRequest):
    """Request addressing an existing session token (info, refresh)."""

    session_token: str


class SessionInvalidateRequest(SessionTokenRequest):
    """Invalidate one or more session tokens."""

    invalidate_type: str


# Response Models (wire output)


class ErrorPayload(BaseModel):
    """Body of a 400 response."""

    error: str


class SignInSocialPayload(BaseModel):
    """Body of a successful /signin/social response."""

    signin_url: str


class SessionInfoPayload(BaseModel):
    """Session attributes returned by /session/info."""

    email: str
    expiration: int = Field(..., description="Unix timestamp when the session token expires")
    refresh_left: int = Field(..., description="Remaining refreshes for the session token", ge=0)


class SessionTokenPayload(SessionInfoPayload):
    """Session attributes plus the token they belong to."""

    session_token: str


# Result Models (SDK output)


class OperationResult(BaseModel):
    """Common shape of every operation result."""

    error: ErrorCode = Field(default=ErrorCode.NO_ERROR, description="NO_ERROR on success")

    @property
    def ok(self) -> bool:
        """Check if the operation succeeded."""
        return self.error == ErrorCode.NO_ERROR


class SignInEmailResult(OperationResult):
    """Result of signin email."""


class SignInSocialResult(OperationResult):
    """Result of signin social."""

    signin_url: Optional[str] = Field(None, description="Social sign-in url for the user")


class SessionInfoResult(OperationResult):
    """Result of session info."""

    email: Optional[str] = None
    expiration: int = 0
    refresh_left: int = 0


class SessionTokenResult(SessionInfoResult):
    """Result carrying a (new) session token."""

    session_token: Optional[str] = None


class SignInEmailVerifyResult(SessionTokenResult):
    """Result of signin email verify."""


class SignInSocialVerifyResult(SessionTokenResult):
    """
    Result of signin social verify.

    Apple's 'hide my email' feature may return an alias in place of the
    real address.
    """


class SessionRefreshResult(SessionTokenResult):
    """Result of session refresh; session_token is the new token."""


class SessionInvalidateResult(OperationResult):
    """Result of session invalidate."""


def wire_value(value) -> str:
    """Return the wire string for an enum member or plain string."""
    return value.value if isinstance(value, Enum) else value
