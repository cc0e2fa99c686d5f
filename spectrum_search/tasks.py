import logging

from celery import shared_task

from . import utils
from .inputs import SpectrumSearchInput

logger = logging.getLogger(__name__)


@shared_task
def run_advanced_spectrum_search(payload):
    """A Celery task to run an advanced spectrum search and cache its hits."""
    try:
        search_input = SpectrumSearchInput.from_dict(payload)
        return utils.run_search_for_input(search_input, cache_result_fn=utils.cache_search_results)
    except Exception:
        logger.exception("Advanced spectrum search failed for payload %r", payload)
        raise
