"""
Management command: clear_records
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Deletes every document from the sample-data collections so a demo
database can be reseeded from scratch.  All deletions run in one
transaction: either every listed collection is emptied or none is.

Usage::

    python manage.py clear_records                       # sample collections
    python manage.py clear_records --collections arrests charges
    python manage.py clear_records --all
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from records.registry import COLLECTIONS, get_collection

#: Collections populated by the sample-data loader.
SAMPLE_COLLECTIONS = ("incidents", "arrests", "cases", "people", "officers")


class Command(BaseCommand):
    help = (
        "Deletes all documents from the sample-data collections "
        f"({', '.join(SAMPLE_COLLECTIONS)}) or from the given collections."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--collections",
            nargs="+",
            metavar="NAME",
            help="Collections to clear instead of the sample set.",
        )
        parser.add_argument(
            "--all",
            action="store_true",
            help="Clear every record collection.",
        )

    def handle(self, *args, **options):
        if options["all"]:
            names = list(COLLECTIONS)
        else:
            names = options["collections"] or list(SAMPLE_COLLECTIONS)

        collections = []
        for name in names:
            collection = get_collection(name)
            if collection is None:
                raise CommandError(f"Unknown collection '{name}'.")
            collections.append(collection)

        with transaction.atomic():
            removed = {
                collection.name: collection.model.objects.all().delete()[0]
                for collection in collections
            }

        for name, count in removed.items():
            self.stdout.write(f"  {name:<12s} {count} document(s) removed")
        self.stdout.write(self.style.SUCCESS("Sample data removed successfully."))
