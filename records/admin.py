"""
Django admin registration for the stored snapshot.

Superusers can inspect the JSON the record store last wrote.  Editing it
by hand takes effect the next time a process loads the store.
"""
from django.contrib import admin

from .models import StoreSnapshot


@admin.register(StoreSnapshot)
class StoreSnapshotAdmin(admin.ModelAdmin):
    list_display = ('key', 'updated_at')
    search_fields = ('key',)
    readonly_fields = ('updated_at',)
