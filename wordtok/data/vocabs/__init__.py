# Vocabulary engine and token classification

from .vocab_engine import VocabEngine
from .token_types import TokenKind, TokenDetail, VocabEntry, VocabSnapshot, classify, token_details
from .utils import split_words, training_order

__all__ = [
    'VocabEngine',
    'TokenKind',
    'TokenDetail',
    'VocabEntry',
    'VocabSnapshot',
    'classify',
    'token_details',
    'split_words',
    'training_order'
]
