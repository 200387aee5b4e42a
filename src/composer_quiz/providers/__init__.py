"""
Module: providers

Purpose:
    Collaborators of the selection engine: the candidate provider
    (composers and works), the daily answer oracle and the keyed
    background query runner.

Key Classes:
    - CandidateProvider / AnswerOracle: Abstract interfaces
    - JsonCatalogProvider: Bundled JSON catalog
    - DailyPuzzleOracle: Deterministic daily answer
    - QueryRunner: Keyed QThread-backed requests
    - CatalogConfig: Catalog paths and puzzle date
"""

from .base import AnswerOracle, CandidateProvider
from .catalog import JsonCatalogProvider, parse_catalog, parse_prefixes
from .config import CatalogConfig
from .puzzle import DailyPuzzleOracle, draw_answer
from .queries import COMPOSERS_KEY, FetchWorker, QueryRunner, works_key

__all__ = [
    "AnswerOracle",
    "CandidateProvider",
    "JsonCatalogProvider",
    "parse_catalog",
    "parse_prefixes",
    "CatalogConfig",
    "DailyPuzzleOracle",
    "draw_answer",
    "COMPOSERS_KEY",
    "FetchWorker",
    "QueryRunner",
    "works_key",
]
