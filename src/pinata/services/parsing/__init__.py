"""Parsing services - model reply to domain records."""

from pinata.services.parsing.vocabulary_parser import VocabularyParser, parse_vocabulary

__all__ = [
    "VocabularyParser",
    "parse_vocabulary",
]
