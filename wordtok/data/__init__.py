# Data processing utilities

from .constants import (
    PAD_TOKEN, UNK_TOKEN, START_TOKEN, END_TOKEN,
    PAD_ID, UNK_ID, START_ID, END_ID,
    SPECIAL_TOKENS, FIRST_WORD_ID
)

__all__ = [
    'PAD_TOKEN', 'UNK_TOKEN', 'START_TOKEN', 'END_TOKEN',
    'PAD_ID', 'UNK_ID', 'START_ID', 'END_ID',
    'SPECIAL_TOKENS', 'FIRST_WORD_ID'
]
