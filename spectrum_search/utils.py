import logging
import operator
import re
from functools import reduce

from django.db.models import Q
from django.utils import timezone

from .models import SearchCache, SearchFilter, Spectrum, SpectrumInfoType

logger = logging.getLogger(__name__)

# ---------- Config ----------
DEFAULT_MAX_HITS = 100
MAX_HITS_LIMIT = 1000
FILTER_LOOKUPS = {
    SearchFilter.CONTAINS: "contains",
    SearchFilter.EQUALS: "exact",
    SearchFilter.STARTS_WITH: "startswith",
    SearchFilter.ENDS_WITH: "endswith",
}
# case sensitive patterns; LIKE ignores ASCII case on SQLite
FILTER_PATTERNS = {
    SearchFilter.CONTAINS: "{}",
    SearchFilter.STARTS_WITH: "^{}",
    SearchFilter.ENDS_WITH: "{}$",
}
RESULT_FIELDS = ("id",) + tuple(SpectrumInfoType.values)
# ----------------------------


def build_item_query(info_type, item, case_sensitive=False):
    """Return the Q object matching one search item against its spectrum column."""
    if case_sensitive and item.filter in FILTER_PATTERNS:
        pattern = FILTER_PATTERNS[item.filter].format(re.escape(item.value))
        return Q(**{f"{info_type.value}__regex": pattern})
    lookup = FILTER_LOOKUPS[item.filter]
    if not case_sensitive:
        lookup = "i" + lookup
    return Q(**{f"{info_type.value}__{lookup}": item.value})


def build_query(search_input):
    queries = [
        build_item_query(info_type, item, search_input.case_sensitive)
        for info_type, item in search_input.items()
    ]
    combine = operator.and_ if search_input.match_all else operator.or_
    return reduce(combine, queries)


def search_spectra(search_input):
    """Run the search input against the spectrum table and return plain dict rows."""
    order_field = search_input.order_by.value
    if not search_input.ascending:
        order_field = "-" + order_field
    queryset = (
        Spectrum.objects.filter(build_query(search_input))
        .order_by(order_field, "id")
        .values(*RESULT_FIELDS)
    )
    return list(queryset[: search_input.max_hits])


def cache_search_results(search_input, results):
    entry, created = SearchCache.objects.update_or_create(
        key=search_input.cache_key(),
        defaults={
            "search_json": search_input.to_dict(),
            "results_json": results,
            "created_at": timezone.now(),
        },
    )
    logger.debug("%s search cache entry %s", "Created" if created else "Refreshed", entry.key)
    return entry


def run_search_for_input(search_input, cache_result_fn=None):
    """
    Full pipeline: validate -> query spectra -> store hits -> return list of dicts.
    Optional: pass in a cache writer (callable) to keep the hits for the results page.
    """
    if search_input.is_empty():
        raise ValueError("Search input has no search items.")

    results = search_spectra(search_input)
    logger.info(
        "Advanced spectrum search on %s returned %d hits",
        ", ".join(info_type.value for info_type, _ in search_input.items()),
        len(results),
    )

    if cache_result_fn:
        cache_result_fn(search_input, results)

    return results
