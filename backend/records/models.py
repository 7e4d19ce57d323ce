"""
Records app models.

One model per record collection.  Each table is named after its
collection (``people``, ``cases``, ``arrests`` …) and carries a unique,
human-readable string ID (``PER-001``, ``CASE-001``, ``ARR-001``) next
to the integer primary key.

Cross-collection references are plain string ID columns rather than
foreign keys: a record may point at an ID that has not been entered yet,
and deleting a record never cascades.  The arrest registration workflow
(``arrests.services``) is what checks references where it matters.
"""

from django.db import models

from core.models import TimeStampedModel


def _ref(verbose_name: str, **kwargs) -> models.CharField:
    """Optional string reference to another collection's ID."""
    kwargs.setdefault("blank", True)
    kwargs.setdefault("default", "")
    return models.CharField(max_length=50, verbose_name=verbose_name, **kwargs)


class Incident(TimeStampedModel):
    """A reported crime event."""

    incident_id = models.CharField(max_length=50, unique=True, verbose_name="Incident ID")
    title = models.CharField(max_length=255, verbose_name="Title")
    crime_type = models.CharField(max_length=100, verbose_name="Crime Type", db_index=True)
    date = models.DateTimeField(verbose_name="Date")
    location_id = _ref("Location ID")

    class Meta:
        db_table = "incidents"
        verbose_name = "Incident"
        verbose_name_plural = "Incidents"

    def __str__(self):
        return f"{self.incident_id} — {self.title}"


class Person(TimeStampedModel):
    """
    Anyone on record: suspects, witnesses, victims, officers.

    ``roles`` is an ordered list of role labels (``"suspect"``,
    ``"witness"`` …) used as a set: a label appears at most once.
    """

    person_id = models.CharField(max_length=50, unique=True, verbose_name="Person ID")
    first_name = models.CharField(max_length=100, verbose_name="First Name")
    last_name = models.CharField(max_length=100, verbose_name="Last Name")
    date_of_birth = models.DateField(null=True, blank=True, verbose_name="Date of Birth")
    gender = models.CharField(max_length=20, blank=True, default="", verbose_name="Gender")
    contact_info = models.CharField(max_length=255, blank=True, default="", verbose_name="Contact Info")
    address = models.CharField(max_length=255, blank=True, default="", verbose_name="Address")
    roles = models.JSONField(default=list, blank=True, verbose_name="Roles")

    class Meta:
        db_table = "people"
        verbose_name = "Person"
        verbose_name_plural = "People"

    def __str__(self):
        return f"{self.person_id} — {self.first_name} {self.last_name}"


class Arrest(TimeStampedModel):
    """
    An arrest of a person in connection with a case.

    ``date`` is a calendar-date string, normally ``YYYY-MM-DD``, with the
    time of day removed on registration.  It is not a timestamp.
    Lookup indexes on ``person_id``, ``case_id`` and ``location_id`` are
    built lazily after the first registration (see
    ``arrests.services.ensure_lookup_indexes``).
    """

    arrest_id = models.CharField(max_length=50, unique=True, verbose_name="Arrest ID")
    person_id = models.CharField(max_length=50, verbose_name="Person ID")
    case_id = _ref("Case ID")
    incident_id = _ref("Incident ID")
    location_id = _ref("Location ID")
    date = models.CharField(max_length=255, verbose_name="Date")
    charges = models.TextField(blank=True, default="", verbose_name="Charges")
    officer_id = models.CharField(max_length=50, null=True, blank=True, verbose_name="Officer ID")

    class Meta:
        db_table = "arrests"
        verbose_name = "Arrest"
        verbose_name_plural = "Arrests"

    def __str__(self):
        return f"{self.arrest_id} ({self.person_id}, {self.date})"


class Charge(TimeStampedModel):
    """A charge filed against an arrest."""

    charge_id = models.CharField(max_length=50, unique=True, verbose_name="Charge ID")
    arrest_id = models.CharField(max_length=50, verbose_name="Arrest ID")
    crime_type = models.CharField(max_length=100, blank=True, default="", verbose_name="Crime Type")
    description = models.TextField(blank=True, default="", verbose_name="Description")
    severity = models.CharField(max_length=50, blank=True, default="", verbose_name="Severity")
    statute_code = models.CharField(max_length=50, blank=True, default="", verbose_name="Statute Code")
    is_convicted = models.BooleanField(default=False, verbose_name="Convicted")

    class Meta:
        db_table = "charges"
        verbose_name = "Charge"
        verbose_name_plural = "Charges"

    def __str__(self):
        return f"{self.charge_id} → {self.arrest_id}"


class Case(TimeStampedModel):
    """
    A court case.  ``status`` is free text; ``open`` / ``closed`` are
    compared case-insensitively everywhere.
    """

    case_id = models.CharField(max_length=50, unique=True, verbose_name="Case ID")
    incident_id = _ref("Incident ID")
    status = models.CharField(max_length=50, blank=True, default="", verbose_name="Status", db_index=True)
    start_date = models.DateField(null=True, blank=True, verbose_name="Start Date")
    end_date = models.DateField(null=True, blank=True, verbose_name="End Date")
    court = models.CharField(max_length=255, blank=True, default="", verbose_name="Court")
    judge = models.CharField(max_length=255, blank=True, default="", verbose_name="Judge")

    class Meta:
        db_table = "cases"
        verbose_name = "Case"
        verbose_name_plural = "Cases"

    def __str__(self):
        return f"{self.case_id} [{self.status}]"


class Department(TimeStampedModel):
    department_id = models.CharField(max_length=50, unique=True, verbose_name="Department ID")
    name = models.CharField(max_length=255, verbose_name="Name")
    location_id = _ref("Location ID")
    head_officer_id = _ref("Head Officer ID")

    class Meta:
        db_table = "departments"
        verbose_name = "Department"
        verbose_name_plural = "Departments"

    def __str__(self):
        return f"{self.department_id} — {self.name}"


class Officer(TimeStampedModel):
    officer_id = models.CharField(max_length=50, unique=True, verbose_name="Officer ID")
    person_id = models.CharField(max_length=50, verbose_name="Person ID")
    badge_number = models.CharField(max_length=50, verbose_name="Badge Number")
    department_id = _ref("Department ID")
    rank = models.CharField(max_length=100, blank=True, default="", verbose_name="Rank")
    start_date = models.DateField(null=True, blank=True, verbose_name="Start Date")

    class Meta:
        db_table = "officers"
        verbose_name = "Officer"
        verbose_name_plural = "Officers"

    def __str__(self):
        return f"{self.officer_id} (badge {self.badge_number})"


class Location(TimeStampedModel):
    location_id = models.CharField(max_length=50, unique=True, verbose_name="Location ID")
    address = models.CharField(max_length=255, blank=True, default="", verbose_name="Address")
    city = models.CharField(max_length=100, blank=True, default="", verbose_name="City")
    state = models.CharField(max_length=100, blank=True, default="", verbose_name="State")
    zip_code = models.CharField(max_length=20, blank=True, default="", verbose_name="Zip Code")

    class Meta:
        db_table = "locations"
        verbose_name = "Location"
        verbose_name_plural = "Locations"

    def __str__(self):
        return f"{self.location_id} — {self.address}, {self.city}"


class Evidence(TimeStampedModel):
    evidence_id = models.CharField(max_length=50, unique=True, verbose_name="Evidence ID")
    incident_id = _ref("Incident ID")
    description = models.TextField(blank=True, default="", verbose_name="Description")
    collection_date = models.DateTimeField(null=True, blank=True, verbose_name="Collection Date")
    collected_by_officer_id = _ref("Collected By Officer ID")
    location_id = _ref("Location ID")
    type = models.CharField(max_length=100, blank=True, default="", verbose_name="Type")

    class Meta:
        db_table = "evidence"
        verbose_name = "Evidence"
        verbose_name_plural = "Evidence"

    def __str__(self):
        return self.evidence_id


class Forensic(TimeStampedModel):
    forensic_id = models.CharField(max_length=50, unique=True, verbose_name="Forensic ID")
    evidence_id = models.CharField(max_length=50, verbose_name="Evidence ID")
    analysis_date = models.DateTimeField(null=True, blank=True, verbose_name="Analysis Date")
    analyst_name = models.CharField(max_length=255, blank=True, default="", verbose_name="Analyst Name")
    results = models.TextField(blank=True, default="", verbose_name="Results")
    lab_report_id = _ref("Lab Report ID")

    class Meta:
        db_table = "forensics"
        verbose_name = "Forensic Analysis"
        verbose_name_plural = "Forensic Analyses"

    def __str__(self):
        return f"{self.forensic_id} ({self.evidence_id})"


class Report(TimeStampedModel):
    report_id = models.CharField(max_length=50, unique=True, verbose_name="Report ID")
    incident_id = _ref("Incident ID")
    reporting_officer_id = _ref("Reporting Officer ID")
    date_created = models.DateTimeField(null=True, blank=True, verbose_name="Date Created")
    content = models.TextField(blank=True, default="", verbose_name="Content")
    type = models.CharField(max_length=100, blank=True, default="", verbose_name="Type")

    class Meta:
        db_table = "reports"
        verbose_name = "Report"
        verbose_name_plural = "Reports"

    def __str__(self):
        return self.report_id


class Prison(TimeStampedModel):
    prison_id = models.CharField(max_length=50, unique=True, verbose_name="Prison ID")
    name = models.CharField(max_length=255, verbose_name="Name")
    location_id = _ref("Location ID")
    capacity = models.PositiveIntegerField(null=True, blank=True, verbose_name="Capacity")
    warden = models.CharField(max_length=255, blank=True, default="", verbose_name="Warden")

    class Meta:
        db_table = "prisons"
        verbose_name = "Prison"
        verbose_name_plural = "Prisons"

    def __str__(self):
        return f"{self.prison_id} — {self.name}"


class Sentence(TimeStampedModel):
    sentence_id = models.CharField(max_length=50, unique=True, verbose_name="Sentence ID")
    case_id = models.CharField(max_length=50, verbose_name="Case ID")
    person_id = models.CharField(max_length=50, verbose_name="Person ID")
    prison_id = _ref("Prison ID")
    start_date = models.DateField(null=True, blank=True, verbose_name="Start Date")
    end_date = models.DateField(null=True, blank=True, verbose_name="End Date")
    terms = models.TextField(blank=True, default="", verbose_name="Terms")

    class Meta:
        db_table = "sentences"
        verbose_name = "Sentence"
        verbose_name_plural = "Sentences"

    def __str__(self):
        return f"{self.sentence_id} ({self.person_id})"


class Vehicle(TimeStampedModel):
    vehicle_id = models.CharField(max_length=50, unique=True, verbose_name="Vehicle ID")
    make = models.CharField(max_length=100, blank=True, default="", verbose_name="Make")
    model = models.CharField(max_length=100, blank=True, default="", verbose_name="Model")
    year = models.PositiveSmallIntegerField(null=True, blank=True, verbose_name="Year")
    color = models.CharField(max_length=50, blank=True, default="", verbose_name="Color")
    license_plate = models.CharField(max_length=20, blank=True, default="", verbose_name="License Plate")
    owner_person_id = _ref("Owner Person ID")

    class Meta:
        db_table = "vehicles"
        verbose_name = "Vehicle"
        verbose_name_plural = "Vehicles"

    def __str__(self):
        return f"{self.vehicle_id} — {self.license_plate}"


class Weapon(TimeStampedModel):
    weapon_id = models.CharField(max_length=50, unique=True, verbose_name="Weapon ID")
    type = models.CharField(max_length=100, blank=True, default="", verbose_name="Type")
    make = models.CharField(max_length=100, blank=True, default="", verbose_name="Make")
    model = models.CharField(max_length=100, blank=True, default="", verbose_name="Model")
    serial_number = models.CharField(max_length=100, blank=True, default="", verbose_name="Serial Number")
    associated_evidence_id = _ref("Associated Evidence ID")

    class Meta:
        db_table = "weapons"
        verbose_name = "Weapon"
        verbose_name_plural = "Weapons"

    def __str__(self):
        return self.weapon_id
