"""
Request Module - Black Box Interface

Purpose: Talk to the CodeAuth HTTP API
Interface: RequestExecutor.call() -> ApiOutcome
Hidden: httpx client handling, status classification, JSON parsing

Any transport failure surfaces as ErrorCode.CONNECTION_ERROR, never as an exception.
"""

from .executor import ApiOutcome, RequestExecutor

__all__ = ["ApiOutcome", "RequestExecutor"]
