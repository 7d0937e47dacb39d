"""
API Module - Black Box Interface

Purpose: Wire format of the CodeAuth service
Interface: Request/response models, result models, error vocabulary
Hidden: Field validation, JSON shape

Other modules only exchange these models, never raw dictionaries.
"""

from .models import (
    OPERATION_ERRORS,
    ApiPath,
    ErrorCode,
    InvalidateType,
    OperationResult,
    SessionInfoResult,
    SessionInvalidateResult,
    SessionRefreshResult,
    SignInEmailResult,
    SignInEmailVerifyResult,
    SignInSocialResult,
    SignInSocialVerifyResult,
    SocialType,
)

__all__ = [
    "ApiPath",
    "ErrorCode",
    "InvalidateType",
    "SocialType",
    "OPERATION_ERRORS",
    "OperationResult",
    "SignInEmailResult",
    "SignInEmailVerifyResult",
    "SignInSocialResult",
    "SignInSocialVerifyResult",
    "SessionInfoResult",
    "SessionRefreshResult",
    "SessionInvalidateResult",
]
