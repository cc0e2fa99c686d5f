from django.db import models
from django.utils import timezone


class SpectrumInfoType(models.TextChoices):
    """Searchable spectrum fields, in the order they appear on the search page."""
    NAME = "name", "Spectrum name"
    AC_PROGRAM = "ac_program", "A/C program"
    AC_SECTION = "ac_section", "A/C section"
    FAT_MISSION = "fat_mission", "Fatigue mission"
    FAT_MISSION_ISSUE = "fat_mission_issue", "Fatigue mission issue"
    FLP_ISSUE = "flp_issue", "FLP issue"
    IFLP_ISSUE = "iflp_issue", "IFLP issue"
    CDF_ISSUE = "cdf_issue", "CDF issue"
    DELIVERY_REF = "delivery_ref", "Delivery reference"
    DESCRIPTION = "description", "Description"


class SearchFilter(models.TextChoices):
    CONTAINS = "contains", "Contains"
    EQUALS = "equals", "Equals"
    STARTS_WITH = "startswith", "Starts with"
    ENDS_WITH = "endswith", "Ends with"


class Spectrum(models.Model):
    name = models.CharField(max_length=255)
    ac_program = models.CharField(max_length=100, blank=True)
    ac_section = models.CharField(max_length=100, blank=True)
    fat_mission = models.CharField(max_length=100, blank=True)
    fat_mission_issue = models.CharField(max_length=20, blank=True)
    flp_issue = models.CharField(max_length=20, blank=True)
    iflp_issue = models.CharField(max_length=20, blank=True)
    cdf_issue = models.CharField(max_length=20, blank=True)
    delivery_ref = models.CharField(max_length=100, blank=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "spectra"

    def __str__(self):
        return f"{self.name} ({self.ac_program} / {self.ac_section})"


class SearchCache(models.Model):
    key = models.CharField(max_length=64, unique=True)
    search_json = models.JSONField()
    results_json = models.JSONField()
    created_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"{self.key[:12]} ({len(self.results_json)} hits) @ {self.created_at}"
