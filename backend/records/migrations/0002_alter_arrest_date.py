from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("records", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="arrest",
            name="date",
            field=models.CharField(max_length=255, verbose_name="Date"),
        ),
    ]
