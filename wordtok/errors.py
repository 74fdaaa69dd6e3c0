"""
Exceptions raised by the vocabulary engine.
"""


class TokenizerError(Exception):
    """Base class for tokenizer failures. Carries a client-facing message."""

    def __init__(self, message: str):
        super(TokenizerError, self).__init__(message)
        self.message = message


class InvalidInput(TokenizerError):
    """Raised for empty or malformed text / token arrays."""
    pass


class NotTrained(TokenizerError):
    """Raised when decoding before any word has been learned."""

    def __init__(self, message: str = "Tokenizer has not been trained yet. Please encode some text first."):
        super(NotTrained, self).__init__(message)


__all__ = ['TokenizerError', 'InvalidInput', 'NotTrained']
