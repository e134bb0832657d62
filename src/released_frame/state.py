"""Signed navigation state tokens.

Frame state travels with the client between button presses, so it is
carried as an HS256 JWT and verified before use.
"""

import logging

import jwt
from pydantic import ValidationError as PydanticValidationError

from schemas.state import NavState

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class StateError(Exception):
    """Raised when a state token is malformed or its signature is wrong."""


class StateCodec:
    """Encode and verify NavState tokens with a shared secret."""

    def __init__(self, secret: str):
        if not secret:
            raise ValueError("state secret must not be empty")
        self._secret = secret

    def encode(self, state: NavState) -> str:
        return jwt.encode(state.model_dump(), self._secret, algorithm=ALGORITHM)

    def decode(self, token: str | None) -> NavState:
        """Verify a token and return the state it carries.

        A missing or empty token is the start of a session and yields the
        initial state.

        Raises:
            StateError: If the token is malformed, tampered with, or does not
                hold a valid NavState
        """
        if not token:
            return NavState()

        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except jwt.InvalidTokenError as e:
            raise StateError(f"Invalid state token: {e}") from e

        try:
            return NavState.model_validate(payload)
        except PydanticValidationError as e:
            raise StateError(f"Invalid state payload: {e}") from e
