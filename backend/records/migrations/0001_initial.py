from django.db import migrations, models


def _pk():
    return ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID"))


def _timestamps():
    return [
        ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created At")),
        ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated At")),
    ]


def _ref(name, verbose_name):
    return (name, models.CharField(blank=True, default="", max_length=50, verbose_name=verbose_name))


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Incident",
            fields=[
                _pk(),
                *_timestamps(),
                ("incident_id", models.CharField(max_length=50, unique=True, verbose_name="Incident ID")),
                ("title", models.CharField(max_length=255, verbose_name="Title")),
                ("crime_type", models.CharField(db_index=True, max_length=100, verbose_name="Crime Type")),
                ("date", models.DateTimeField(verbose_name="Date")),
                _ref("location_id", "Location ID"),
            ],
            options={
                "verbose_name": "Incident",
                "verbose_name_plural": "Incidents",
                "db_table": "incidents",
            },
        ),
        migrations.CreateModel(
            name="Person",
            fields=[
                _pk(),
                *_timestamps(),
                ("person_id", models.CharField(max_length=50, unique=True, verbose_name="Person ID")),
                ("first_name", models.CharField(max_length=100, verbose_name="First Name")),
                ("last_name", models.CharField(max_length=100, verbose_name="Last Name")),
                ("date_of_birth", models.DateField(blank=True, null=True, verbose_name="Date of Birth")),
                ("gender", models.CharField(blank=True, default="", max_length=20, verbose_name="Gender")),
                ("contact_info", models.CharField(blank=True, default="", max_length=255, verbose_name="Contact Info")),
                ("address", models.CharField(blank=True, default="", max_length=255, verbose_name="Address")),
                ("roles", models.JSONField(blank=True, default=list, verbose_name="Roles")),
            ],
            options={
                "verbose_name": "Person",
                "verbose_name_plural": "People",
                "db_table": "people",
            },
        ),
        migrations.CreateModel(
            name="Arrest",
            fields=[
                _pk(),
                *_timestamps(),
                ("arrest_id", models.CharField(max_length=50, unique=True, verbose_name="Arrest ID")),
                ("person_id", models.CharField(max_length=50, verbose_name="Person ID")),
                _ref("case_id", "Case ID"),
                _ref("incident_id", "Incident ID"),
                _ref("location_id", "Location ID"),
                ("date", models.CharField(max_length=10, verbose_name="Date")),
                ("charges", models.TextField(blank=True, default="", verbose_name="Charges")),
                ("officer_id", models.CharField(blank=True, max_length=50, null=True, verbose_name="Officer ID")),
            ],
            options={
                "verbose_name": "Arrest",
                "verbose_name_plural": "Arrests",
                "db_table": "arrests",
            },
        ),
        migrations.CreateModel(
            name="Charge",
            fields=[
                _pk(),
                *_timestamps(),
                ("charge_id", models.CharField(max_length=50, unique=True, verbose_name="Charge ID")),
                ("arrest_id", models.CharField(max_length=50, verbose_name="Arrest ID")),
                ("crime_type", models.CharField(blank=True, default="", max_length=100, verbose_name="Crime Type")),
                ("description", models.TextField(blank=True, default="", verbose_name="Description")),
                ("severity", models.CharField(blank=True, default="", max_length=50, verbose_name="Severity")),
                ("statute_code", models.CharField(blank=True, default="", max_length=50, verbose_name="Statute Code")),
                ("is_convicted", models.BooleanField(default=False, verbose_name="Convicted")),
            ],
            options={
                "verbose_name": "Charge",
                "verbose_name_plural": "Charges",
                "db_table": "charges",
            },
        ),
        migrations.CreateModel(
            name="Case",
            fields=[
                _pk(),
                *_timestamps(),
                ("case_id", models.CharField(max_length=50, unique=True, verbose_name="Case ID")),
                _ref("incident_id", "Incident ID"),
                ("status", models.CharField(blank=True, db_index=True, default="", max_length=50, verbose_name="Status")),
                ("start_date", models.DateField(blank=True, null=True, verbose_name="Start Date")),
                ("end_date", models.DateField(blank=True, null=True, verbose_name="End Date")),
                ("court", models.CharField(blank=True, default="", max_length=255, verbose_name="Court")),
                ("judge", models.CharField(blank=True, default="", max_length=255, verbose_name="Judge")),
            ],
            options={
                "verbose_name": "Case",
                "verbose_name_plural": "Cases",
                "db_table": "cases",
            },
        ),
        migrations.CreateModel(
            name="Department",
            fields=[
                _pk(),
                *_timestamps(),
                ("department_id", models.CharField(max_length=50, unique=True, verbose_name="Department ID")),
                ("name", models.CharField(max_length=255, verbose_name="Name")),
                _ref("location_id", "Location ID"),
                _ref("head_officer_id", "Head Officer ID"),
            ],
            options={
                "verbose_name": "Department",
                "verbose_name_plural": "Departments",
                "db_table": "departments",
            },
        ),
        migrations.CreateModel(
            name="Officer",
            fields=[
                _pk(),
                *_timestamps(),
                ("officer_id", models.CharField(max_length=50, unique=True, verbose_name="Officer ID")),
                ("person_id", models.CharField(max_length=50, verbose_name="Person ID")),
                ("badge_number", models.CharField(max_length=50, verbose_name="Badge Number")),
                _ref("department_id", "Department ID"),
                ("rank", models.CharField(blank=True, default="", max_length=100, verbose_name="Rank")),
                ("start_date", models.DateField(blank=True, null=True, verbose_name="Start Date")),
            ],
            options={
                "verbose_name": "Officer",
                "verbose_name_plural": "Officers",
                "db_table": "officers",
            },
        ),
        migrations.CreateModel(
            name="Location",
            fields=[
                _pk(),
                *_timestamps(),
                ("location_id", models.CharField(max_length=50, unique=True, verbose_name="Location ID")),
                ("address", models.CharField(blank=True, default="", max_length=255, verbose_name="Address")),
                ("city", models.CharField(blank=True, default="", max_length=100, verbose_name="City")),
                ("state", models.CharField(blank=True, default="", max_length=100, verbose_name="State")),
                ("zip_code", models.CharField(blank=True, default="", max_length=20, verbose_name="Zip Code")),
            ],
            options={
                "verbose_name": "Location",
                "verbose_name_plural": "Locations",
                "db_table": "locations",
            },
        ),
        migrations.CreateModel(
            name="Evidence",
            fields=[
                _pk(),
                *_timestamps(),
                ("evidence_id", models.CharField(max_length=50, unique=True, verbose_name="Evidence ID")),
                _ref("incident_id", "Incident ID"),
                ("description", models.TextField(blank=True, default="", verbose_name="Description")),
                ("collection_date", models.DateTimeField(blank=True, null=True, verbose_name="Collection Date")),
                _ref("collected_by_officer_id", "Collected By Officer ID"),
                _ref("location_id", "Location ID"),
                ("type", models.CharField(blank=True, default="", max_length=100, verbose_name="Type")),
            ],
            options={
                "verbose_name": "Evidence",
                "verbose_name_plural": "Evidence",
                "db_table": "evidence",
            },
        ),
        migrations.CreateModel(
            name="Forensic",
            fields=[
                _pk(),
                *_timestamps(),
                ("forensic_id", models.CharField(max_length=50, unique=True, verbose_name="Forensic ID")),
                ("evidence_id", models.CharField(max_length=50, verbose_name="Evidence ID")),
                ("analysis_date", models.DateTimeField(blank=True, null=True, verbose_name="Analysis Date")),
                ("analyst_name", models.CharField(blank=True, default="", max_length=255, verbose_name="Analyst Name")),
                ("results", models.TextField(blank=True, default="", verbose_name="Results")),
                _ref("lab_report_id", "Lab Report ID"),
            ],
            options={
                "verbose_name": "Forensic Analysis",
                "verbose_name_plural": "Forensic Analyses",
                "db_table": "forensics",
            },
        ),
        migrations.CreateModel(
            name="Report",
            fields=[
                _pk(),
                *_timestamps(),
                ("report_id", models.CharField(max_length=50, unique=True, verbose_name="Report ID")),
                _ref("incident_id", "Incident ID"),
                _ref("reporting_officer_id", "Reporting Officer ID"),
                ("date_created", models.DateTimeField(blank=True, null=True, verbose_name="Date Created")),
                ("content", models.TextField(blank=True, default="", verbose_name="Content")),
                ("type", models.CharField(blank=True, default="", max_length=100, verbose_name="Type")),
            ],
            options={
                "verbose_name": "Report",
                "verbose_name_plural": "Reports",
                "db_table": "reports",
            },
        ),
        migrations.CreateModel(
            name="Prison",
            fields=[
                _pk(),
                *_timestamps(),
                ("prison_id", models.CharField(max_length=50, unique=True, verbose_name="Prison ID")),
                ("name", models.CharField(max_length=255, verbose_name="Name")),
                _ref("location_id", "Location ID"),
                ("capacity", models.PositiveIntegerField(blank=True, null=True, verbose_name="Capacity")),
                ("warden", models.CharField(blank=True, default="", max_length=255, verbose_name="Warden")),
            ],
            options={
                "verbose_name": "Prison",
                "verbose_name_plural": "Prisons",
                "db_table": "prisons",
            },
        ),
        migrations.CreateModel(
            name="Sentence",
            fields=[
                _pk(),
                *_timestamps(),
                ("sentence_id", models.CharField(max_length=50, unique=True, verbose_name="Sentence ID")),
                ("case_id", models.CharField(max_length=50, verbose_name="Case ID")),
                ("person_id", models.CharField(max_length=50, verbose_name="Person ID")),
                _ref("prison_id", "Prison ID"),
                ("start_date", models.DateField(blank=True, null=True, verbose_name="Start Date")),
                ("end_date", models.DateField(blank=True, null=True, verbose_name="End Date")),
                ("terms", models.TextField(blank=True, default="", verbose_name="Terms")),
            ],
            options={
                "verbose_name": "Sentence",
                "verbose_name_plural": "Sentences",
                "db_table": "sentences",
            },
        ),
        migrations.CreateModel(
            name="Vehicle",
            fields=[
                _pk(),
                *_timestamps(),
                ("vehicle_id", models.CharField(max_length=50, unique=True, verbose_name="Vehicle ID")),
                ("make", models.CharField(blank=True, default="", max_length=100, verbose_name="Make")),
                ("model", models.CharField(blank=True, default="", max_length=100, verbose_name="Model")),
                ("year", models.PositiveSmallIntegerField(blank=True, null=True, verbose_name="Year")),
                ("color", models.CharField(blank=True, default="", max_length=50, verbose_name="Color")),
                ("license_plate", models.CharField(blank=True, default="", max_length=20, verbose_name="License Plate")),
                _ref("owner_person_id", "Owner Person ID"),
            ],
            options={
                "verbose_name": "Vehicle",
                "verbose_name_plural": "Vehicles",
                "db_table": "vehicles",
            },
        ),
        migrations.CreateModel(
            name="Weapon",
            fields=[
                _pk(),
                *_timestamps(),
                ("weapon_id", models.CharField(max_length=50, unique=True, verbose_name="Weapon ID")),
                ("type", models.CharField(blank=True, default="", max_length=100, verbose_name="Type")),
                ("make", models.CharField(blank=True, default="", max_length=100, verbose_name="Make")),
                ("model", models.CharField(blank=True, default="", max_length=100, verbose_name="Model")),
                ("serial_number", models.CharField(blank=True, default="", max_length=100, verbose_name="Serial Number")),
                _ref("associated_evidence_id", "Associated Evidence ID"),
            ],
            options={
                "verbose_name": "Weapon",
                "verbose_name_plural": "Weapons",
                "db_table": "weapons",
            },
        ),
    ]
