"""
Pytest fixtures for the spectrum search app.
"""

import pytest
from unittest.mock import MagicMock

from spectrum_search.models import Spectrum, SpectrumInfoType


@pytest.fixture
def mock_delay(mocker):
    """Replace task submission so views never reach the Celery broker."""
    return mocker.patch(
        "spectrum_search.tasks.run_advanced_spectrum_search.delay",
        return_value=MagicMock(id="task-123"),
    )


@pytest.fixture
def task_result(mocker):
    """Replace result backend lookups with a task that has not finished yet."""
    result = MagicMock()
    result.failed.return_value = False
    mocker.patch("spectrum_search.views.AsyncResult", return_value=result)
    return result


@pytest.fixture
def blank_post_data():
    """Search form data with every field empty and every filter left at 'contains'."""
    data = {}
    for info_type in SpectrumInfoType:
        data[info_type.value] = ""
        data[f"{info_type.value}_filter"] = "contains"
    return data


@pytest.fixture
def spectra(db):
    """A small spectrum table covering two programs and sections."""
    rows = [
        dict(name="A320-WING-M01", ac_program="A320", ac_section="Wing", fat_mission="M01",
             fat_mission_issue="2", flp_issue="1", iflp_issue="3", cdf_issue="1",
             delivery_ref="DR-100", description="Short range wing mission"),
        dict(name="A320-FUS-M02", ac_program="A320", ac_section="Fuselage", fat_mission="M02",
             fat_mission_issue="1", flp_issue="2", iflp_issue="1", cdf_issue="4",
             delivery_ref="DR-101", description="Fuselage pressurisation"),
        dict(name="A350-WING-M01", ac_program="A350", ac_section="Wing", fat_mission="M01",
             fat_mission_issue="5", flp_issue="1", iflp_issue="2", cdf_issue="2",
             delivery_ref="DR-200", description="Long range wing mission"),
    ]
    return [Spectrum.objects.create(**row) for row in rows]
