# wordtok/data/vocabs/vocab_engine.py
"""
Word-level vocabulary engine: learns words incrementally and maps text to ids and back.
"""

import logging
import threading
from typing import Dict, List, Optional, Sequence

from ..constants import SPECIAL_TOKENS, UNK_ID, UNK_TOKEN, FIRST_WORD_ID
from ...errors import InvalidInput, NotTrained
from ...utils.logger import setup_logger
from .token_types import VocabEntry, VocabSnapshot
from .utils import split_words, training_order


class VocabEngine:
    """
    Owns the word <-> id bijection, the next-id counter and the trained flag.

    Every public method runs under one re-entrant lock, so a single instance can be
    shared between concurrent request handlers.

    Usage:
        engine = VocabEngine()
        engine.encode("hello world")   # [4, 5]
        engine.decode([4, 5])          # "hello world"
    """

    def __init__(self, extend_on_encode: bool = True, logger: Optional[logging.Logger] = None):
        self.extend_on_encode = extend_on_encode
        self.logger = logger or setup_logger(name="WordTok")
        self._lock = threading.RLock()
        self.word2index: Dict[str, int] = {}
        self.index2word: Dict[int, str] = {}
        self.next_id = FIRST_WORD_ID
        self.trained = False
        self.initialize_special_tokens()

    def initialize_special_tokens(self) -> None:
        """Assign fixed IDs to special tokens."""
        for i, token in enumerate(SPECIAL_TOKENS):
            self.word2index[token] = i
            self.index2word[i] = token

    def _add_word(self, word: str) -> bool:
        if word in self.word2index:
            return False
        self.word2index[word] = self.next_id
        self.index2word[self.next_id] = word
        self.next_id += 1
        return True

    def train(self, words: Sequence[str]) -> List[str]:
        """
        Admit unseen words, most frequent first, alphabetical among equal counts.

        Args:
            words (Sequence[str]): Ordered word sequence

        Returns:
            List[str]: Words newly added to the vocabulary, in id order

        Raises:
            InvalidInput: If words is not a sequence of strings
        """
        if isinstance(words, (str, bytes)) or words is None:
            raise InvalidInput("Words must be a sequence of strings")
        words = list(words)
        if not all(isinstance(word, str) for word in words):
            raise InvalidInput("Words must be a sequence of strings")

        with self._lock:
            added = [word for word in training_order(words) if self._add_word(word)]
            if added:
                self.trained = True
                self.logger.info(f"Tokenizer trained. Vocabulary size: {len(self.word2index)}")
            return added

    def _words_of(self, text: str) -> List[str]:
        words = split_words(text) if isinstance(text, str) else []
        if not words:
            raise InvalidInput("Text cannot be empty")
        return words

    def train_text(self, text: str) -> List[str]:
        """
        Learn the words of a text without encoding it.

        Raises:
            InvalidInput: If text is not a string or has no words
        """
        return self.train(self._words_of(text))

    def encode(self, text: str, extend: Optional[bool] = None) -> List[int]:
        """
        Convert text to token ids, learning any new words first.

        Args:
            text (str): Whitespace-delimited text
            extend (bool, optional): Train on the text before lookup. Defaults to
                the engine's extend_on_encode setting.

        Returns:
            List[int]: One id per word, unseen words mapped to <UNK>

        Raises:
            InvalidInput: If text is not a string or has no words
        """
        words = self._words_of(text)
        if extend is None:
            extend = self.extend_on_encode

        with self._lock:
            if extend:
                self.train(words)
            return [self.word2index.get(word, UNK_ID) for word in words]

    def decode(self, token_ids: Sequence[int]) -> str:
        """
        Convert token ids back to space-joined text.

        Raises:
            InvalidInput: If token_ids is empty or holds non-integers
            NotTrained: If no word has been learned yet
        """
        if not isinstance(token_ids, (list, tuple)) or len(token_ids) == 0:
            raise InvalidInput("Tokens array cannot be empty")
        if not all(isinstance(i, int) and not isinstance(i, bool) for i in token_ids):
            raise InvalidInput("Tokens must be integers")

        with self._lock:
            if not self.trained:
                self.logger.warning("Decode requested before training")
                raise NotTrained()
            return " ".join(self.index2word.get(i, UNK_TOKEN) for i in token_ids)

    def reset(self) -> None:
        """Drop every learned word and return to the untrained state."""
        with self._lock:
            self.word2index = {}
            self.index2word = {}
            self.next_id = FIRST_WORD_ID
            self.trained = False
            self.initialize_special_tokens()
            self.logger.debug("Tokenizer reset.")

    def token_to_id(self, word: str) -> Optional[int]:
        with self._lock:
            return self.word2index.get(word)

    def id_to_token(self, token_id: int) -> Optional[str]:
        with self._lock:
            return self.index2word.get(token_id)

    def vocabulary(self) -> Dict[str, int]:
        with self._lock:
            return dict(self.word2index)

    def reverse_vocabulary(self) -> Dict[int, str]:
        with self._lock:
            return dict(self.index2word)

    def snapshot(self) -> VocabSnapshot:
        """Return size, trained flag and the {word, id} list sorted by id."""
        with self._lock:
            entries = [VocabEntry(word=word, id=i) for i, word in sorted(self.index2word.items())]
            return VocabSnapshot(size=len(self.word2index), trained=self.trained, entries=entries)

    @property
    def is_trained(self) -> bool:
        return self.trained

    @property
    def size(self) -> int:
        return len(self)

    def __len__(self) -> int:
        with self._lock:
            return len(self.word2index)
