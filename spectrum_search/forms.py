from django import forms

from .inputs import SearchEngineSettings, SearchItem, SpectrumSearchInput
from .models import SearchFilter, SpectrumInfoType
from .utils import DEFAULT_MAX_HITS, MAX_HITS_LIMIT

FILTER_SUFFIX = "_filter"

# fields shown in the left column; the rest go to the right
LEFT_COLUMN_SIZE = 5


def filter_field_name(info_type):
    return info_type.value + FILTER_SUFFIX


class AdvancedSpectrumSearchForm(forms.Form):
    """Ten optional search fields, each paired with a filter mode selector."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for info_type in SpectrumInfoType:
            self.fields[info_type.value] = forms.CharField(
                label=info_type.label,
                max_length=200,
                required=False,
                widget=forms.TextInput(attrs={"class": "form-control"}),
            )
            self.fields[filter_field_name(info_type)] = forms.ChoiceField(
                label=f"{info_type.label} filter",
                choices=SearchFilter.choices,
                initial=SearchFilter.CONTAINS,
                required=False,
                widget=forms.Select(attrs={"class": "form-select"}),
            )

    def field_pairs(self):
        return [(self[info_type.value], self[filter_field_name(info_type)]) for info_type in SpectrumInfoType]

    def rows(self):
        pairs = self.field_pairs()
        left, right = pairs[:LEFT_COLUMN_SIZE], pairs[LEFT_COLUMN_SIZE:]
        return list(zip(left, right))

    def build_search_input(self):
        """Collect the non-empty fields of a validated form into a search input."""
        search_input = SpectrumSearchInput()
        for info_type in SpectrumInfoType:
            value = self.cleaned_data.get(info_type.value)
            if not value:
                continue
            selected = self.cleaned_data.get(filter_field_name(info_type)) or SearchFilter.CONTAINS
            search_input.add_input(info_type, SearchItem(value, SearchFilter(selected)))
        return search_input

    @classmethod
    def initial_from_input(cls, search_input):
        initial = {}
        for info_type, item in search_input.items():
            initial[info_type.value] = item.value
            initial[filter_field_name(info_type)] = item.filter.value
        return initial


class SearchEngineSettingsForm(forms.Form):
    operator = forms.ChoiceField(
        choices=[("and", "Match all criteria"), ("or", "Match any criterion")],
        initial="and",
        widget=forms.Select(attrs={"class": "form-select"}),
    )
    case_sensitive = forms.BooleanField(
        label="Case sensitive",
        required=False,
        widget=forms.CheckboxInput(attrs={"class": "form-check-input"}),
    )
    order_by = forms.ChoiceField(
        label="Order by",
        choices=SpectrumInfoType.choices,
        initial=SpectrumInfoType.NAME,
        widget=forms.Select(attrs={"class": "form-select"}),
    )
    order = forms.ChoiceField(
        choices=[("asc", "Ascending"), ("desc", "Descending")],
        initial="asc",
        widget=forms.Select(attrs={"class": "form-select"}),
    )
    max_hits = forms.IntegerField(
        label="Maximum hits",
        min_value=1,
        max_value=MAX_HITS_LIMIT,
        initial=DEFAULT_MAX_HITS,
        widget=forms.NumberInput(attrs={"class": "form-control"}),
    )

    @classmethod
    def initial_from_settings(cls, settings):
        return {
            "operator": "and" if settings.match_all else "or",
            "case_sensitive": settings.case_sensitive,
            "order_by": settings.order_by.value,
            "order": "asc" if settings.ascending else "desc",
            "max_hits": settings.max_hits,
        }

    def to_settings(self):
        data = self.cleaned_data
        return SearchEngineSettings(
            match_all=data["operator"] == "and",
            case_sensitive=data["case_sensitive"],
            order_by=SpectrumInfoType(data["order_by"]),
            ascending=data["order"] == "asc",
            max_hits=data["max_hits"],
        )
