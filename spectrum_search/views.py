import logging

from celery.result import AsyncResult
from django.contrib import messages
from django.shortcuts import redirect, render
from django.utils import timezone
from django.utils.dateparse import parse_datetime
from django.views.decorators.http import require_GET, require_http_methods

from . import tasks
from .forms import AdvancedSpectrumSearchForm, SearchEngineSettingsForm
from .inputs import SearchEngineSettings, SpectrumSearchInput
from .models import SearchCache, SpectrumInfoType

logger = logging.getLogger(__name__)

LAST_SEARCH_SESSION_KEY = "spectrum_search.last_search"
NO_CRITERIA_MESSAGE = "No search criteria entered. Please enter at least 1 search item to proceed."
RESULTS_REFRESH_SECONDS = 3


def get_last_search(request):
    return request.session.get(LAST_SEARCH_SESSION_KEY)


def render_search_page(request, form):
    return render(request, "spectrum_search/advanced_search.html", {"form": form})


@require_http_methods(["GET", "POST"])
def advanced_search(request):
    if request.method == "GET":
        last_search = get_last_search(request)
        initial = {}
        if last_search and "reset" not in request.GET:
            initial = AdvancedSpectrumSearchForm.initial_from_input(
                SpectrumSearchInput.from_dict(last_search["input"])
            )
        return render_search_page(request, AdvancedSpectrumSearchForm(initial=initial))

    # Enter in any field and the Search button both land here
    form = AdvancedSpectrumSearchForm(request.POST)
    if not form.is_valid():
        return render_search_page(request, form)

    search_input = form.build_search_input()
    if search_input.is_empty():
        logger.info("Rejected advanced spectrum search without criteria")
        messages.warning(request, NO_CRITERIA_MESSAGE)
        return render_search_page(request, form)

    SearchEngineSettings.from_session(request.session).set_engine_settings(search_input)
    submitted_at = timezone.now().isoformat()
    result = tasks.run_advanced_spectrum_search.delay(search_input.to_dict())
    request.session[LAST_SEARCH_SESSION_KEY] = {
        "input": search_input.to_dict(),
        "key": search_input.cache_key(),
        "submitted_at": submitted_at,
        "task_id": result.id,
    }
    logger.info("Submitted advanced spectrum search task %s", result.id)

    messages.info(request, "Search submitted. Results will appear below once the search completes.")
    return redirect("spectrum_search:results")


@require_GET
def results(request):
    last_search = get_last_search(request)
    if not last_search:
        messages.info(request, "No search has been submitted yet.")
        return redirect("spectrum_search:advanced_search")

    search_input = SpectrumSearchInput.from_dict(last_search["input"])
    entry = SearchCache.objects.filter(
        key=last_search["key"],
        created_at__gte=parse_datetime(last_search["submitted_at"]),
    ).first()
    task_id = last_search.get("task_id")
    failed = entry is None and bool(task_id) and AsyncResult(task_id).failed()
    if failed:
        logger.warning("Advanced spectrum search task %s failed", task_id)
    columns = list(SpectrumInfoType)
    spectra = entry.results_json if entry else []

    return render(request, "spectrum_search/results.html", {
        "search_input": search_input,
        "criteria": list(search_input.items()),
        "columns": columns,
        "rows": [[spectrum.get(column.value, "") for column in columns] for spectrum in spectra],
        "hit_count": len(spectra),
        "pending": entry is None and not failed,
        "failed": failed,
        "task_id": task_id,
        "refresh_seconds": RESULTS_REFRESH_SECONDS,
    })


@require_http_methods(["GET", "POST"])
def engine_settings(request):
    if request.method == "POST":
        form = SearchEngineSettingsForm(request.POST)
        if form.is_valid():
            form.to_settings().save(request.session)
            messages.success(request, "Search engine settings saved.")
            return redirect("spectrum_search:advanced_search")
    else:
        current = SearchEngineSettings.from_session(request.session)
        form = SearchEngineSettingsForm(initial=SearchEngineSettingsForm.initial_from_settings(current))

    return render(request, "spectrum_search/engine_settings.html", {"form": form})
