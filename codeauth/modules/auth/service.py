"""
CodeAuth Service Facade following Black Box Design principles.

This module provides:
- One coroutine per CodeAuth flow (email, social, session management)
- One-shot initialization of endpoint, project and cache policy
- The cache consistency rules applied around every API call
"""

import logging
import threading
from typing import Optional, Type, TypeVar, Union

import httpx

from ...config.provider import CodeAuthConfig, validate_cache_duration
from ...logging_config import mask_token
from ..api.models import (
    ApiPath,
    InvalidateType,
    SessionInfoPayload,
    SessionInfoResult,
    SessionInvalidateRequest,
    SessionInvalidateResult,
    SessionRefreshResult,
    SessionTokenPayload,
    SessionTokenRequest,
    SessionTokenResult,
    SignInEmailRequest,
    SignInEmailResult,
    SignInEmailVerifyRequest,
    SignInEmailVerifyResult,
    SignInSocialPayload,
    SignInSocialRequest,
    SignInSocialResult,
    SignInSocialVerifyRequest,
    SignInSocialVerifyResult,
    SocialType,
    wire_value,
)
from ..cache.session_cache import CacheEntry, SessionCache
from ..cache.sweeper import CacheSweeper
from ..request.executor import RequestExecutor
from .errors import AlreadyInitializedError, NotInitializedError
from .interfaces import RequestSender, SessionStore

logger = logging.getLogger(__name__)

TokenResultT = TypeVar("TokenResultT", bound=SessionTokenResult)


class CodeAuth:
    """
    CodeAuth SDK client.

    Every operation returns a result whose `error` field is either
    ErrorCode.NO_ERROR or a code from that operation's vocabulary.
    Only two misuse paths raise: calling an operation before
    initialize(), and calling initialize() twice.
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        cache: Optional[SessionStore] = None
    ):
        """
        Create an uninitialized client.

        Args:
            http_client: Optional shared httpx client for all requests
            cache: Optional session store (defaults to an in-memory SessionCache)
        """
        self._http_client = http_client
        self._cache: SessionStore = cache if cache is not None else SessionCache()
        self._init_lock = threading.Lock()

        self._initialized = False
        self._endpoint: Optional[str] = None
        self._project_id: Optional[str] = None
        self._use_cache = False
        self._executor: Optional[RequestSender] = None
        self._sweeper: Optional[CacheSweeper] = None

    # -------
    # Lifecycle
    # -------

    def initialize(
        self,
        project_endpoint: str,
        project_id: str,
        use_cache: bool = True,
        cache_duration: int = 30,
        request_timeout: float = 5.0
    ) -> None:
        """
        Initialize the client. Can only be called once.

        Args:
            project_endpoint: Endpoint of your project, found in the project settings
            project_id: Your project ID, found in the project settings
            use_cache: Cache session tokens issued or looked up through this
                client and drop them when refreshed or invalidated
            cache_duration: Seconds between full cache clears. At least 15
                seconds are needed to mitigate most rate limits
            request_timeout: Timeout of each HTTP request in seconds

        Raises:
            AlreadyInitializedError: If the client was already initialized
            ValueError: If cache_duration is not positive
        """
        with self._init_lock:
            if self._initialized:
                raise AlreadyInitializedError()
            if use_cache:
                validate_cache_duration(cache_duration)

            self._endpoint = project_endpoint
            self._project_id = project_id
            self._use_cache = use_cache
            self._executor = RequestExecutor(
                project_endpoint, timeout=request_timeout, http_client=self._http_client
            )

            if use_cache:
                self._sweeper = CacheSweeper(self._cache, cache_duration)
                self._sweeper.start()

            self._initialized = True

        logger.info(f"CodeAuth initialized for project {project_id} (cache {'on' if use_cache else 'off'})")

    def initialize_from_config(self, config: CodeAuthConfig) -> None:
        """Initialize from a CodeAuthConfig."""
        if not config.is_configured:
            raise ValueError("CodeAuth config requires both an endpoint and a project ID")

        self.initialize(
            config.endpoint,
            config.project_id,
            use_cache=config.use_cache,
            cache_duration=config.cache_duration,
            request_timeout=config.request_timeout,
        )

    def shutdown(self) -> None:
        """Stop the cache sweeper. The client stays usable without periodic clears."""
        if self._sweeper is not None:
            self._sweeper.stop()

    async def __aenter__(self) -> "CodeAuth":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def endpoint(self) -> Optional[str]:
        return self._endpoint

    @property
    def project_id(self) -> Optional[str]:
        return self._project_id

    @property
    def use_cache(self) -> bool:
        return self._use_cache

    @property
    def cache(self) -> SessionStore:
        return self._cache

    def _ensure_initialized(self) -> RequestSender:
        if not self._initialized:
            raise NotInitializedError()
        return self._executor

    # -------
    # Sign in
    # -------

    async def sign_in_email(self, email: str) -> SignInEmailResult:
        """
        Begin the sign in or register flow by emailing the user a one time code.

        Args:
            email: Email of the user. Must be 1 to 64 characters of letters,
                digits, dots, underscores and hyphens

        Returns:
            SignInEmailResult
        """
        executor = self._ensure_initialized()

        outcome = await executor.call(
            ApiPath.SIGNIN_EMAIL,
            SignInEmailRequest(project_id=self._project_id, email=email),
        )
        return SignInEmailResult(error=outcome.error)

    async def sign_in_email_verify(self, email: str, code: str) -> SignInEmailVerifyResult:
        """
        Check the one time code sent by email and create a session token.

        Args:
            email: Email the code was sent to
            code: The one time code

        Returns:
            SignInEmailVerifyResult with the new session token on success
        """
        executor = self._ensure_initialized()

        outcome = await executor.call(
            ApiPath.SIGNIN_EMAIL_VERIFY,
            SignInEmailVerifyRequest(project_id=self._project_id, email=email, code=code),
            SessionTokenPayload,
        )
        if not outcome.ok:
            return SignInEmailVerifyResult(error=outcome.error)

        return self._issue_token(outcome.payload, SignInEmailVerifyResult)

    async def sign_in_social(self, social_type: Union[SocialType, str]) -> SignInSocialResult:
        """
        Begin the sign in or register flow through a social OAuth2 link.

        Args:
            social_type: "google", "microsoft" or "apple"

        Returns:
            SignInSocialResult with the sign-in url on success
        """
        executor = self._ensure_initialized()

        outcome = await executor.call(
            ApiPath.SIGNIN_SOCIAL,
            SignInSocialRequest(project_id=self._project_id, social_type=wire_value(social_type)),
            SignInSocialPayload,
        )
        if not outcome.ok:
            return SignInSocialResult(error=outcome.error)

        return SignInSocialResult(signin_url=outcome.payload.signin_url)

    async def sign_in_social_verify(
        self,
        social_type: Union[SocialType, str],
        authorization_code: str
    ) -> SignInSocialVerifyResult:
        """
        Check the authorization code returned by the social provider and
        create a session token.

        Args:
            social_type: Provider the user signed in with
            authorization_code: Authorization code given by the provider

        Returns:
            SignInSocialVerifyResult with the new session token on success
        """
        executor = self._ensure_initialized()

        outcome = await executor.call(
            ApiPath.SIGNIN_SOCIAL_VERIFY,
            SignInSocialVerifyRequest(
                project_id=self._project_id,
                social_type=wire_value(social_type),
                authorization_code=authorization_code,
            ),
            SessionTokenPayload,
        )
        if not outcome.ok:
            return SignInSocialVerifyResult(error=outcome.error)

        return self._issue_token(outcome.payload, SignInSocialVerifyResult)

    # -------
    # Session
    # -------

    async def session_info(self, session_token: str) -> SessionInfoResult:
        """
        Get the information associated with a session token.

        Served from the cache when enabled and the token is cached.

        Args:
            session_token: Session token to look up

        Returns:
            SessionInfoResult
        """
        executor = self._ensure_initialized()

        if self._use_cache:
            entry = self._cache.try_get(session_token)
            if entry is not None:
                logger.debug(f"Session info for {mask_token(session_token)} served from cache")
                return SessionInfoResult(
                    email=entry.email,
                    expiration=entry.expiration,
                    refresh_left=entry.refresh_left,
                )

        outcome = await executor.call(
            ApiPath.SESSION_INFO,
            SessionTokenRequest(project_id=self._project_id, session_token=session_token),
            SessionInfoPayload,
        )
        if not outcome.ok:
            return SessionInfoResult(error=outcome.error)

        payload: SessionInfoPayload = outcome.payload
        if self._use_cache:
            self._cache.put(session_token, _entry_from(payload))

        return SessionInfoResult(
            email=payload.email,
            expiration=payload.expiration,
            refresh_left=payload.refresh_left,
        )

    async def session_refresh(self, session_token: str) -> SessionRefreshResult:
        """
        Create a new session token from an existing one.

        Args:
            session_token: Token to refresh

        Returns:
            SessionRefreshResult carrying the new token on success
        """
        executor = self._ensure_initialized()

        outcome = await executor.call(
            ApiPath.SESSION_REFRESH,
            SessionTokenRequest(project_id=self._project_id, session_token=session_token),
            SessionTokenPayload,
        )
        if not outcome.ok:
            return SessionRefreshResult(error=outcome.error)

        # The old token is replaced: drop it before caching the new one
        if self._use_cache:
            self._cache.remove(session_token)

        return self._issue_token(outcome.payload, SessionRefreshResult)

    async def session_invalidate(
        self,
        session_token: str,
        invalidate_type: Union[InvalidateType, str]
    ) -> SessionInvalidateResult:
        """
        Invalidate a session token so it can no longer be used.

        Args:
            session_token: Token used to invalidate
            invalidate_type: "only_this", "all" or "all_but_this"

        Returns:
            SessionInvalidateResult
        """
        executor = self._ensure_initialized()

        outcome = await executor.call(
            ApiPath.SESSION_INVALIDATE,
            SessionInvalidateRequest(
                project_id=self._project_id,
                session_token=session_token,
                invalidate_type=wire_value(invalidate_type),
            ),
        )
        if not outcome.ok:
            return SessionInvalidateResult(error=outcome.error)

        if self._use_cache:
            self._cache.remove(session_token)

        return SessionInvalidateResult()

    def _issue_token(self, payload: SessionTokenPayload, result_type: Type[TokenResultT]) -> TokenResultT:
        """Cache a freshly issued token and build its result."""
        if self._use_cache:
            self._cache.put(payload.session_token, _entry_from(payload))

        return result_type(
            session_token=payload.session_token,
            email=payload.email,
            expiration=payload.expiration,
            refresh_left=payload.refresh_left,
        )


def _entry_from(payload: SessionInfoPayload) -> CacheEntry:
    return CacheEntry(
        email=payload.email,
        expiration=payload.expiration,
        refresh_left=payload.refresh_left,
    )
