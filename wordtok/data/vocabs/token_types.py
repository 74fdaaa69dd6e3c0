# wordtok/data/vocabs/token_types.py
"""
Token classification and vocabulary snapshot models used by presentation layers.
"""

from enum import Enum
from typing import List, Sequence

from pydantic import BaseModel, Field

from ..constants import UNK_ID, FIRST_WORD_ID
from .utils import split_words


class TokenKind(str, Enum):
    SPECIAL = "special"
    UNKNOWN = "unknown"
    WORD = "word"


def classify(token_id: int) -> TokenKind:
    """
    Classify a token id.

    Args:
        token_id (int): Token identifier

    Returns:
        TokenKind: UNKNOWN for the <UNK> id (and negative ids, which can never be bound),
            SPECIAL for the remaining reserved ids, WORD otherwise.
    """
    if token_id == UNK_ID or token_id < 0:
        return TokenKind.UNKNOWN
    if token_id < FIRST_WORD_ID:
        return TokenKind.SPECIAL
    return TokenKind.WORD


class VocabEntry(BaseModel):
    word: str
    id: int


class VocabSnapshot(BaseModel):
    """Point-in-time copy of an engine's vocabulary."""
    size: int = Field(..., description="Number of bindings, special tokens included")
    trained: bool = Field(..., description="Whether any word has been learned")
    entries: List[VocabEntry] = Field(default_factory=list, description="Bindings sorted ascending by id")


class TokenDetail(BaseModel):
    id: int
    text: str
    kind: TokenKind


def token_details(text: str, token_ids: Sequence[int]) -> List[TokenDetail]:
    """Pair each id with the word at the same position of the source text."""
    words = split_words(text or "")
    details = []
    for index, token_id in enumerate(token_ids):
        word = words[index] if index < len(words) else f"<ID:{token_id}>"
        details.append(TokenDetail(id=token_id, text=word, kind=classify(token_id)))
    return details
