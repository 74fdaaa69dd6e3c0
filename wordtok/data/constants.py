# wordtok/data/constants.py
"""
Special tokens and their IDs for vocabulary consistency.
"""

# Define Special Tokens and IDs for consistency
PAD_TOKEN, UNK_TOKEN, START_TOKEN, END_TOKEN = '<PAD>', '<UNK>', '<START>', '<END>'
PAD_ID = 0
UNK_ID = 1
START_ID = 2
END_ID = 3

SPECIAL_TOKENS = [PAD_TOKEN, UNK_TOKEN, START_TOKEN, END_TOKEN]

# First id handed out to a learned word
FIRST_WORD_ID = len(SPECIAL_TOKENS)

__all__ = [
    'PAD_TOKEN', 'UNK_TOKEN', 'START_TOKEN', 'END_TOKEN',
    'PAD_ID', 'UNK_ID', 'START_ID', 'END_ID',
    'SPECIAL_TOKENS', 'FIRST_WORD_ID'
]
