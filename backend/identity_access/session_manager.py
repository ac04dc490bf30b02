"""
Session Manager: single source of truth for "who is signed in".

Why:
    The dashboard must only load school data for an authenticated user, and it
    must never get stuck in a signed-in state after the user asked to sign out.
    This class owns the authentication state machine and is the only place
    that talks to the auth provider boundary.

States:
    INITIALIZING -> UNAUTHENTICATED | AUTHENTICATED  (initial provider check, once)
    UNAUTHENTICATED -> AUTHENTICATED                  (sign_in, sign_up, provider session)
    AUTHENTICATED -> UNAUTHENTICATED                  (sign_out, close, provider expiry)

Subscribers receive a `SessionTransition` for every state change and are
awaited in registration order. While AUTHENTICATED the profile is resolved
concurrently with the subscribers; until then `profile` is None.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional

from .domain import ALLOWED_ROLES, AuthError, AuthUser, Profile, SessionState, SessionTransition
from .supabase_auth import AuthProvider, ProfileDirectory

logger = logging.getLogger("edumanage.identity_access")

TransitionListener = Callable[[SessionTransition], Awaitable[None]]


class SessionManager:
    def __init__(self, provider: AuthProvider, profiles: ProfileDirectory) -> None:
        self._provider = provider
        self._profiles = profiles
        self._state = SessionState.INITIALIZING
        self._user: Optional[AuthUser] = None
        self._profile: Optional[Profile] = None
        self._listeners: List[TransitionListener] = []
        # Bumped whenever the identity changes; late profile lookups compare against it.
        self._generation = 0
        self._pending: Optional[str] = None
        self._init_lock = asyncio.Lock()

    # --- Read-only state ---------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state is SessionState.INITIALIZING

    @property
    def user(self) -> Optional[AuthUser]:
        return self._user

    @property
    def profile(self) -> Optional[Profile]:
        return self._profile

    @property
    def is_authenticated(self) -> bool:
        return self._state is SessionState.AUTHENTICATED

    @property
    def pending_operation(self) -> Optional[str]:
        return self._pending

    def subscribe(self, listener: TransitionListener) -> Callable[[], None]:
        """Register a transition listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # --- Provider-driven transitions ------------------------------------------------

    async def initialize(self) -> None:
        """Resolve the initial provider session check exactly once."""
        async with self._init_lock:
            if self._state is not SessionState.INITIALIZING:
                return
            try:
                user = await self._provider.check_session()
            except Exception as exc:
                logger.warning("Initial session check failed: %s", exc.__class__.__name__)
                user = None
            if self._state is not SessionState.INITIALIZING:
                # A sign-in completed while the check was in flight.
                return
            if user is None:
                await self._set_unauthenticated()
            else:
                await self._set_authenticated(user)

    async def refresh(self) -> None:
        """Reconcile local state with the provider (page load / focus).

        Picks up stored sessions, expiry, and identity switches. A failing
        check keeps the current state.
        """
        if self._state is SessionState.INITIALIZING:
            await self.initialize()
            return
        try:
            user = await self._provider.check_session()
        except Exception as exc:
            logger.warning("Session check failed: %s", exc.__class__.__name__)
            return
        if user is None:
            if self._state is SessionState.AUTHENTICATED:
                logger.info("Provider reported session expiry")
                await self._set_unauthenticated()
            return
        await self._set_authenticated(user)

    # --- User-initiated operations -------------------------------------------------

    async def sign_in(self, email: str, password: str) -> AuthUser:
        email = (email or "").strip()
        if not email or not password:
            raise AuthError("missing_fields", "Email and password are required.")
        if self._state is SessionState.AUTHENTICATED:
            raise AuthError("already_signed_in", "You are already signed in.")
        self._begin("sign_in")
        generation = self._generation
        try:
            user = await self._provider.sign_in(email, password)
        finally:
            self._pending = None
        await self._commit(user, generation)
        return user

    async def sign_up(self, email: str, password: str, full_name: str, role: str) -> AuthUser:
        email = (email or "").strip()
        full_name = (full_name or "").strip()
        role = (role or "").strip().lower()
        if not email or not password or not full_name:
            raise AuthError("missing_fields", "Email, password and full name are required.")
        if role not in ALLOWED_ROLES:
            raise AuthError("invalid_role", "Please choose a valid role.")
        if self._state is SessionState.AUTHENTICATED:
            raise AuthError("already_signed_in", "You are already signed in.")
        self._begin("sign_up")
        generation = self._generation
        try:
            user = await self._provider.sign_up(email, password, {"full_name": full_name, "role": role})
            try:
                await self._profiles.create_profile(user, full_name=full_name, role=role)
            except Exception as exc:
                # Account exists; a database trigger may still provision the profile.
                logger.warning("Profile creation failed: %s", exc.__class__.__name__)
        finally:
            self._pending = None
        await self._commit(user, generation)
        return user

    async def sign_out(self) -> None:
        """Idempotent. Local state is cleared even if the provider call fails.

        A sign-out issued while a sign-in or sign-up is still waiting on the
        provider cancels it: the late result is discarded instead of committed.
        """
        if self._pending is not None:
            logger.info("Sign-out while %s is pending; its result will be discarded", self._pending)
            self._generation += 1
        if self._state is not SessionState.AUTHENTICATED:
            return
        await self._provider_sign_out("global")
        await self._set_unauthenticated()

    async def close(self) -> None:
        """Drop the provider session when this manager is discarded (expiry, shutdown).

        Only the local provider session is ended so the user's other devices
        stay signed in. Also stops the provider's token refresh for it.
        """
        if self._pending is not None:
            self._generation += 1
        if self._state is not SessionState.AUTHENTICATED:
            return
        await self._provider_sign_out("local")
        await self._set_unauthenticated()

    # --- Internals -----------------------------------------------------------------

    def _begin(self, operation: str) -> None:
        if self._pending is not None:
            raise AuthError("auth_in_progress", "Another sign-in is already in progress.")
        self._pending = operation

    async def _commit(self, user: AuthUser, generation: int) -> None:
        if generation != self._generation:
            # The provider now holds a session nobody asked to keep.
            await self._provider_sign_out("local")
            raise AuthError("sign_in_cancelled", "Sign-in was cancelled by a sign-out.")
        await self._set_authenticated(user)

    async def _provider_sign_out(self, scope: str) -> None:
        try:
            await self._provider.sign_out(scope=scope)
        except Exception as exc:
            logger.warning("Provider sign-out failed, clearing local session anyway: %s", exc.__class__.__name__)

    async def _set_authenticated(self, user: AuthUser) -> None:
        if self._state is SessionState.AUTHENTICATED and self._user is not None:
            if self._user.id == user.id:
                return
            await self._set_unauthenticated()
        previous = self._state
        self._generation += 1
        generation = self._generation
        self._user = user
        self._profile = None
        self._state = SessionState.AUTHENTICATED
        logger.debug("Session %s -> %s", previous.value, self._state.value)
        transition = SessionTransition(previous=previous, current=self._state, user=user)
        await asyncio.gather(self._resolve_profile(user, generation), self._emit(transition))

    async def _set_unauthenticated(self) -> None:
        previous = self._state
        if previous is SessionState.UNAUTHENTICATED:
            return
        self._generation += 1
        self._user = None
        self._profile = None
        self._state = SessionState.UNAUTHENTICATED
        logger.debug("Session %s -> %s", previous.value, self._state.value)
        await self._emit(SessionTransition(previous=previous, current=self._state, user=None))

    async def _resolve_profile(self, user: AuthUser, generation: int) -> None:
        try:
            profile = await self._profiles.get_profile(user.id)
        except Exception as exc:
            logger.warning("Profile lookup failed: %s", exc.__class__.__name__)
            return
        if generation != self._generation:
            logger.debug("Discarding profile for superseded session")
            return
        self._profile = profile

    async def _emit(self, transition: SessionTransition) -> None:
        for listener in list(self._listeners):
            await listener(transition)


__all__ = ["SessionManager", "TransitionListener"]
