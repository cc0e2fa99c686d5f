"""
Search input objects for the advanced spectrum search page.

A search input maps spectrum info fields to the criteria the user entered,
together with the engine settings the search runs with. It lives for a
single submission: built from the form, stored on the session, and passed
to the search task as a plain dict.
"""
import hashlib
import json
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from .models import SearchFilter, SpectrumInfoType
from .utils import DEFAULT_MAX_HITS

ENGINE_SETTINGS_SESSION_KEY = "spectrum_search.engine_settings"


@dataclass(frozen=True)
class SearchItem:
    value: str
    filter: SearchFilter = SearchFilter.CONTAINS

    def to_dict(self):
        return {"value": self.value, "filter": self.filter.value}

    @classmethod
    def from_dict(cls, data):
        return cls(data["value"], SearchFilter(data.get("filter", SearchFilter.CONTAINS)))


@dataclass
class SpectrumSearchInput:
    inputs: Dict[SpectrumInfoType, SearchItem] = field(default_factory=dict)
    match_all: bool = True
    case_sensitive: bool = False
    order_by: SpectrumInfoType = SpectrumInfoType.NAME
    ascending: bool = True
    max_hits: int = DEFAULT_MAX_HITS

    def add_input(self, info_type: SpectrumInfoType, item: SearchItem):
        self.inputs[info_type] = item

    def is_empty(self) -> bool:
        return not self.inputs

    def items(self) -> Iterator[Tuple[SpectrumInfoType, SearchItem]]:
        """Yield criteria in search page order."""
        for info_type in SpectrumInfoType:
            if info_type in self.inputs:
                yield info_type, self.inputs[info_type]

    def to_dict(self):
        return {
            "inputs": {info_type.value: item.to_dict() for info_type, item in self.items()},
            "match_all": self.match_all,
            "case_sensitive": self.case_sensitive,
            "order_by": self.order_by.value,
            "ascending": self.ascending,
            "max_hits": self.max_hits,
        }

    @classmethod
    def from_dict(cls, data):
        search_input = cls(
            match_all=bool(data.get("match_all", True)),
            case_sensitive=bool(data.get("case_sensitive", False)),
            order_by=SpectrumInfoType(data.get("order_by", SpectrumInfoType.NAME)),
            ascending=bool(data.get("ascending", True)),
            max_hits=int(data.get("max_hits", DEFAULT_MAX_HITS)),
        )
        for key, item in data.get("inputs", {}).items():
            search_input.add_input(SpectrumInfoType(key), SearchItem.from_dict(item))
        return search_input

    def cache_key(self) -> str:
        """SHA-256 signature of the criteria and engine settings."""
        payload = json.dumps(self.to_dict(), sort_keys=True)
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()


@dataclass
class SearchEngineSettings:
    """Per-user engine settings kept on the session and applied to every search."""
    match_all: bool = True
    case_sensitive: bool = False
    order_by: SpectrumInfoType = SpectrumInfoType.NAME
    ascending: bool = True
    max_hits: int = DEFAULT_MAX_HITS

    @classmethod
    def from_session(cls, session):
        data = session.get(ENGINE_SETTINGS_SESSION_KEY)
        if not data:
            return cls()
        return cls(
            match_all=data["match_all"],
            case_sensitive=data["case_sensitive"],
            order_by=SpectrumInfoType(data["order_by"]),
            ascending=data["ascending"],
            max_hits=data["max_hits"],
        )

    def to_dict(self):
        return {
            "match_all": self.match_all,
            "case_sensitive": self.case_sensitive,
            "order_by": self.order_by.value,
            "ascending": self.ascending,
            "max_hits": self.max_hits,
        }

    def save(self, session):
        session[ENGINE_SETTINGS_SESSION_KEY] = self.to_dict()

    def set_engine_settings(self, search_input: SpectrumSearchInput):
        search_input.match_all = self.match_all
        search_input.case_sensitive = self.case_sensitive
        search_input.order_by = self.order_by
        search_input.ascending = self.ascending
        search_input.max_hits = self.max_hits
