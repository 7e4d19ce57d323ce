from django.contrib import admin

from .registry import COLLECTIONS


class RecordAdmin(admin.ModelAdmin):
    """
    Shared admin for every record collection: list by human-readable ID,
    newest first, searchable by ID.
    """

    id_field: str = ""

    def get_list_display(self, request):
        return ("id", self.id_field, "__str__", "created_at")

    def get_search_fields(self, request):
        return (self.id_field,)

    ordering = ("-created_at",)


for _collection in COLLECTIONS.values():
    admin.site.register(
        _collection.model,
        type(
            f"{_collection.model.__name__}Admin",
            (RecordAdmin,),
            {"id_field": _collection.id_field},
        ),
    )
