from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("nome", models.CharField(max_length=255)),
                ("sobrenome", models.CharField(blank=True, default="", max_length=255)),
                ("cpf", models.CharField(max_length=14, unique=True)),
            ],
            options={
                "db_table": "clientes",
                "ordering": ["id"],
            },
        ),
    ]
