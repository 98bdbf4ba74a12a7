import django.db.models
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Client",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("document_type", models.CharField(max_length=5)),
                ("document_number", models.BigIntegerField()),
                ("first_name", models.CharField(max_length=100)),
                ("middle_name", models.CharField(blank=True, default="", max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                (
                    "second_last_name",
                    models.CharField(blank=True, default="", max_length=100),
                ),
                ("phone", models.CharField(blank=True, default="", max_length=20)),
                ("address", models.CharField(blank=True, default="", max_length=255)),
                ("city", models.CharField(blank=True, default="", max_length=100)),
            ],
            options={
                "db_table": "clients",
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("document_type", "document_number"),
                        name="clients_document_uniq",
                    ),
                    models.CheckConstraint(
                        condition=django.db.models.Q(document_number__gt=0),
                        name="clients_document_number_positive",
                    ),
                ],
            },
        ),
    ]
