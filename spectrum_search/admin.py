from django.contrib import admin

from .models import SearchCache, Spectrum


@admin.register(Spectrum)
class SpectrumAdmin(admin.ModelAdmin):
    list_display = ("name", "ac_program", "ac_section", "fat_mission", "fat_mission_issue", "delivery_ref")
    list_filter = ("ac_program", "ac_section")
    search_fields = ("name", "fat_mission", "delivery_ref", "description")


@admin.register(SearchCache)
class SearchCacheAdmin(admin.ModelAdmin):
    list_display = ("key", "created_at")
    readonly_fields = ("key", "search_json", "results_json", "created_at")
