"""Keyword-matching chat responder.

Maps trigger phrases found in the user's text to canned replies. The rule
table is built once when the matcher is created and never changes afterwards.

Matching pipeline (highest to lowest priority):
  1. Empty input after normalization -> fixed prompt
  2. Phrase scan: longest trigger contained in the text
  3. Token scan: first word that equals a trigger
  4. Farewell words ("bye", "exit", "quit") -> random farewell
  5. Random fallback reply
"""

import random
import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple, Union

import config
from utils.logger import get_logger
from utils.error_handler import ConfigError

logger = get_logger()

# A reply is either one fixed string or a tuple of equally likely variants
Reply = Union[str, Tuple[str, ...]]

EMPTY_INPUT_REPLY = "Please type something so we can chat!"

GREETING_RESPONSES: Tuple[str, ...] = (
    "Hello! How can I assist you today?",
    "Hi there! What's on your mind?",
    "Welcome! Ask me anything.",
)

FAREWELL_RESPONSES: Tuple[str, ...] = (
    "Goodbye! Have a great day.",
    "It was nice chatting with you. Farewell!",
    "See you later!",
)

FALLBACK_RESPONSES: Tuple[str, ...] = (
    "That's interesting. Tell me more about that.",
    "I see. Can you elaborate on that topic?",
    "I'm not sure I understand. Could you rephrase your question?",
    "That's outside my current knowledge base. Try asking about my capabilities or the weather.",
)

FAREWELL_WORDS: Tuple[str, ...] = ("bye", "exit", "quit")

# Match stages, in pipeline order
STAGE_EMPTY = "empty"
STAGE_PHRASE = "phrase"
STAGE_TOKEN = "token"
STAGE_FAREWELL = "farewell"
STAGE_FALLBACK = "fallback"

_NON_TEXT_CHARS = re.compile(r"[^a-z0-9\s]", re.ASCII)


def default_rules(bot_name: str = config.BOT_NAME) -> Dict[str, Reply]:
    """Returns the built-in knowledge base (FAQ answers and small talk)."""
    return {
        # FAQ
        "capabilities": "I am a simple rule-based AI created in Python. I can answer questions based on my keyword patterns.",
        "creator": "I was coded in Python using basic pattern matching logic.",
        "java": "Java is a high-level, class-based, object-oriented programming language designed to have as few implementation dependencies as possible.",
        "time": "I don't keep track of real-world time, but I am always here for you.",
        # Small talk
        "hello": GREETING_RESPONSES,
        "hi": GREETING_RESPONSES,
        "how are you": "I am an AI, so I don't have feelings, but I'm operating perfectly!",
        "weather": "I cannot check the live weather, but I hope it's sunny where you are!",
        "name": f"You can call me {bot_name}.",
        "help": "I can discuss Java, my basic functions, or just chat. Try 'What are your capabilities?'",
        "thank you": "You're welcome! Do you have any other questions?",
    }


def normalize(text: Optional[str]) -> str:
    """Lowercases text, drops everything but [a-z0-9] and whitespace, trims the ends."""
    return _NON_TEXT_CHARS.sub("", (text or "").lower()).strip()


@dataclass(frozen=True)
class Match:
    """Outcome of running one message through the pipeline."""
    reply: str
    stage: str
    trigger: Optional[str] = None


class ResponseMatcher:
    """Selects a canned reply for a line of user text."""

    def __init__(
        self,
        rules: Optional[Mapping[str, Reply]] = None,
        rng: Optional[random.Random] = None,
    ):
        """Builds the rule table.

        Args:
            rules: Trigger phrase to reply mapping. Defaults to the built-in knowledge base.
                Triggers are normalized the same way user text is.
            rng: Random source used for variant, farewell and fallback replies. Anything
                with a `choice(sequence)` method works; defaults to an entropy-seeded Random.

        Raises:
            ConfigError: If a trigger is empty after normalization, duplicates another
                trigger, or maps to an empty reply.
        """
        self._rng = rng if rng is not None else random.Random()
        self._rules: Dict[str, Reply] = {}
        for trigger, reply in (default_rules() if rules is None else rules).items():
            self._register(trigger, reply)

        # Longest trigger first so "thank you" wins over anything it contains;
        # sorted() is stable, so equal lengths keep registration order.
        self._scan_order: Tuple[str, ...] = tuple(sorted(self._rules, key=len, reverse=True))
        logger.info(f"ResponseMatcher initialized with {len(self._rules)} rules.")

    def _register(self, trigger: str, reply: Reply) -> None:
        key = normalize(trigger)
        if not key:
            raise ConfigError(f"Trigger '{trigger}' is empty after normalization.")
        if key in self._rules:
            raise ConfigError(f"Duplicate trigger '{key}'.")
        if isinstance(reply, str):
            if not reply:
                raise ConfigError(f"Trigger '{key}' has an empty reply.")
            self._rules[key] = reply
        else:
            variants = tuple(reply)
            if not variants or not all(isinstance(v, str) and v for v in variants):
                raise ConfigError(f"Trigger '{key}' needs at least one non-empty reply variant.")
            self._rules[key] = variants

    @property
    def triggers(self) -> Tuple[str, ...]:
        """Registered triggers in the order the phrase scan tries them."""
        return self._scan_order

    def _pick(self, reply: Reply) -> str:
        if isinstance(reply, str):
            return reply
        return self._rng.choice(reply)

    def match(self, text: Optional[str]) -> Match:
        """Runs `text` through the matching pipeline."""
        clean = normalize(text)
        result = self._match_normalized(clean)
        logger.debug(f"Matched '{clean}' at stage '{result.stage}' (trigger: {result.trigger}).")
        return result

    def _match_normalized(self, clean: str) -> Match:
        if not clean:
            return Match(EMPTY_INPUT_REPLY, STAGE_EMPTY)

        for trigger in self._scan_order:
            if trigger in clean:
                return Match(self._pick(self._rules[trigger]), STAGE_PHRASE, trigger)

        for token in clean.split():
            if token in self._rules:
                return Match(self._pick(self._rules[token]), STAGE_TOKEN, token)

        for word in FAREWELL_WORDS:
            if word in clean:
                return Match(self._rng.choice(FAREWELL_RESPONSES), STAGE_FAREWELL, word)

        return Match(self._rng.choice(FALLBACK_RESPONSES), STAGE_FALLBACK)

    def respond(self, text: Optional[str]) -> str:
        """Returns the reply for a line of user text."""
        return self.match(text).reply

    @staticmethod
    def is_farewell(reply: str) -> bool:
        """True if `reply` ends the conversation."""
        return reply in FAREWELL_RESPONSES
