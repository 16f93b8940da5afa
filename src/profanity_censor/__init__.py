"""Profanity Censor: evasion-resistant profanity detection and censoring."""

from .types import (
    Analysis, DictionaryError, InvalidOptionError, Match, Token, Type, parse_type,
)
from .dictionary import Dictionary, build_dictionary, default_dictionary
from .censor import (
    Censor, CensorConfig, analyze, censor, is_, is_inappropriate, isnt,
)
from .streaming import StreamingCensor
from .config import create_censor, load_config, load_from_yaml

__all__ = [
    "Censor", "CensorConfig",
    "StreamingCensor",
    "censor", "analyze", "is_inappropriate", "is_", "isnt",
    "Type", "Analysis", "Match", "Token", "parse_type",
    "Dictionary", "build_dictionary", "default_dictionary",
    "create_censor", "load_config", "load_from_yaml",
    "InvalidOptionError", "DictionaryError",
]
__version__ = "0.1.0"
