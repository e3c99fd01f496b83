from django.db import migrations

# Portuguese districts, north to south, then the islands
DISTRICTS = [
    ("porto", "Porto"),
    ("braga", "Braga"),
    ("viana_do_castelo", "Viana do Castelo"),
    ("vila_real", "Vila Real"),
    ("braganca", "Bragança"),
    ("aveiro", "Aveiro"),
    ("viseu", "Viseu"),
    ("guarda", "Guarda"),
    ("coimbra", "Coimbra"),
    ("castelo_branco", "Castelo Branco"),
    ("leiria", "Leiria"),
    ("santarem", "Santarém"),
    ("lisboa", "Lisboa"),
    ("setubal", "Setúbal"),
    ("portalegre", "Portalegre"),
    ("evora", "Évora"),
    ("beja", "Beja"),
    ("faro", "Faro (Algarve)"),
    ("madeira", "Madeira"),
    ("acores", "Açores"),
]


def seed_districts(apps, schema_editor):
    District = apps.get_model("clubs", "District")
    for order, (district_id, name) in enumerate(DISTRICTS, start=1):
        District.objects.update_or_create(
            id=district_id,
            defaults={"name": name, "display_order": order},
        )


def unseed_districts(apps, schema_editor):
    District = apps.get_model("clubs", "District")
    District.objects.filter(id__in=[d[0] for d in DISTRICTS]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("clubs", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_districts, unseed_districts),
    ]
