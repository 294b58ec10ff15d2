from .base import DomainException


class TokenError(DomainException):
    """Base exception for token-related errors."""

    pass


class TokenNotFoundError(TokenError):
    """Raised when the token registry has no entry for a token id."""

    def __init__(self, token_id: str):
        self.token_id = token_id

        super().__init__(f"Token {token_id} is not registered")
