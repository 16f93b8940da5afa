"""Compiled-in English word pack.

Weights are (profane, offensive, sexual, mean, evasive), each 0-3:
0 none, 1 mild, 2 moderate, 3 severe.
"""

from __future__ import annotations
from typing import Iterator

from .types import Type

# word, profane, offensive, sexual, mean, evasive
PROFANITY: list[tuple[str, int, int, int, int, int]] = [
    # Profanity
    ("fuck", 3, 0, 2, 0, 0),
    ("fucker", 3, 0, 2, 1, 0),
    ("fucking", 3, 0, 2, 0, 0),
    ("motherfucker", 3, 0, 2, 2, 0),
    ("shit", 3, 0, 0, 0, 0),
    ("shitty", 3, 0, 0, 1, 0),
    ("bullshit", 3, 0, 0, 0, 0),
    ("crap", 2, 0, 0, 0, 0),
    ("damn", 1, 0, 0, 0, 0),
    ("dammit", 1, 0, 0, 0, 0),
    ("goddamn", 2, 0, 0, 0, 0),
    ("hell", 1, 0, 0, 0, 0),
    ("ass", 2, 0, 1, 1, 0),
    ("asshole", 3, 0, 0, 2, 0),
    ("jackass", 2, 0, 0, 2, 0),
    ("dumbass", 2, 0, 0, 2, 0),
    ("bitch", 3, 0, 0, 2, 0),
    ("bastard", 2, 0, 0, 2, 0),
    ("piss", 2, 0, 0, 0, 0),
    ("bollocks", 2, 0, 0, 0, 0),
    ("wanker", 3, 0, 2, 1, 0),
    ("twat", 3, 0, 2, 1, 0),
    ("prick", 2, 0, 1, 2, 0),
    ("douche", 1, 0, 0, 2, 0),
    ("stfu", 2, 0, 0, 1, 0),
    ("wtf", 2, 0, 0, 0, 0),
    # Evasive spellings
    ("fuk", 3, 0, 1, 0, 2),
    ("phuck", 3, 0, 1, 0, 2),
    ("biatch", 3, 0, 0, 2, 2),
    # Sexual
    ("cunt", 3, 1, 3, 2, 0),
    ("dick", 2, 0, 2, 1, 0),
    ("cock", 2, 0, 3, 0, 0),
    ("pussy", 2, 0, 3, 0, 0),
    ("slut", 2, 0, 3, 2, 0),
    ("whore", 2, 0, 3, 2, 0),
    ("porn", 0, 0, 3, 0, 0),
    ("dildo", 0, 0, 3, 0, 0),
    ("blowjob", 0, 0, 3, 0, 0),
    ("handjob", 0, 0, 3, 0, 0),
    ("cum", 0, 0, 3, 0, 0),
    ("jizz", 0, 0, 3, 0, 0),
    ("orgasm", 0, 0, 3, 0, 0),
    ("boobs", 0, 0, 2, 0, 0),
    ("tits", 0, 0, 2, 0, 0),
    ("penis", 0, 0, 2, 0, 0),
    ("vagina", 0, 0, 2, 0, 0),
    ("horny", 0, 0, 2, 0, 0),
    ("sex", 0, 0, 2, 0, 0),
    ("sexy", 0, 0, 1, 0, 0),
    ("rape", 0, 2, 3, 3, 0),
    # Offensive
    ("nigger", 0, 3, 0, 3, 0),
    ("nigga", 0, 3, 0, 2, 0),
    ("faggot", 0, 3, 1, 3, 0),
    ("fag", 0, 3, 0, 2, 0),
    ("retard", 0, 3, 0, 3, 0),
    ("spic", 0, 3, 0, 2, 0),
    ("kike", 0, 3, 0, 3, 0),
    ("tranny", 0, 2, 0, 2, 0),
    ("nazi", 0, 3, 0, 2, 0),
    # Mean
    ("idiot", 0, 0, 0, 1, 0),
    ("moron", 0, 0, 0, 2, 0),
    ("stupid", 0, 0, 0, 1, 0),
    ("loser", 0, 0, 0, 1, 0),
    ("coward", 0, 0, 0, 1, 0),
    ("kys", 0, 0, 0, 3, 0),
    ("kill yourself", 0, 0, 0, 3, 0),
]

# Whole messages that are certainly harmless.
SAFE: list[str] = [
    "hi", "hey", "hello", "thanks", "thank you", "ok", "okay", "yes", "no",
    "bye", "goodbye", "good morning", "good night", "good game", "gg", "lol",
    "sorry", "please", "welcome", "nice", "cool", "how are you",
    "see you later",
]

# Benign words containing a flagged word.
FALSE_POSITIVES: list[str] = [
    # ass
    "assassin", "assassinate", "class", "classic", "pass", "passage",
    "passenger", "passion", "passive", "passport", "password", "mass",
    "massive", "massage", "bass", "brass", "grass", "glass", "assist",
    "assistant", "assign", "assignment", "assume", "assumption", "assure",
    "assurance", "asset", "assess", "assessment", "assemble", "assembly",
    "assert", "associate", "association", "embassy", "harass", "compass",
    "cassette", "lasso", "sass", "sassy", "amass", "ambassador", "bypass",
    "canvass", "crass", "molasses", "morass", "hassle", "tassel",
    "carcass", "surpass", "trespass", "bassoon", "cassava", "potassium",
    # hell
    "hello", "shell", "shellfish", "seashell", "eggshell", "michelle",
    "hellenic", "othello",
    # crap / rape
    "scrap", "scrappy", "scrape", "scraper", "skyscraper", "scrapbook",
    "crappie", "grape", "grapes", "grapefruit", "drape", "drapes", "drapery",
    "trapeze", "parapet", "therapeutic", "rapeseed",
    # shit
    "shiitake", "shitake",
    # cock / dick / cunt / prick
    "cockpit", "cocktail", "cockatoo", "peacock", "hancock", "hitchcock",
    "cockroach", "shuttlecock", "woodcock", "dickens", "dickinson",
    "dickson", "scunthorpe", "prickly", "prickle",
    # cum
    "document", "documentary", "cucumber", "circumstance", "accumulate",
    "cumulative", "succumb", "cumbersome", "incumbent", "vacuum", "cumin",
    "talcum", "modicum", "capsicum",
    # sex
    "sussex", "essex", "middlesex", "wessex", "sextant", "sexton", "sextet",
    # spic / retard / horny / loser / moron
    "spice", "spicy", "conspicuous", "auspicious", "suspicion", "suspicious",
    "despicable", "retardant", "retardation", "thorny", "closer", "oxymoron",
]


def default_entries() -> Iterator[tuple[str, Type]]:
    """Every (spelling, type) pair of the built-in pack."""
    for word, *weights in PROFANITY:
        yield word, Type.from_weights(weights)
    for phrase in SAFE:
        yield phrase, Type.SAFE
    for word in FALSE_POSITIVES:
        yield word, Type.NONE
