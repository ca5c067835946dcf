from django.contrib.postgres.indexes import GinIndex
from django.db import migrations

# jsonb containment lookups (licensed_states__contains, specializations__contains)
# need GIN indexes; other backends keep only the btree indexes from 0001.
GIN_INDEXES = {
    "therapistprofile": [
        ("licensed_states", "ther_us_states_gin"),
        ("specializations", "ther_us_spec_gin"),
    ],
    "autherapistprofile": [
        ("licensed_states", "ther_au_states_gin"),
        ("specializations", "ther_au_spec_gin"),
    ],
}


def add_gin_indexes(apps, schema_editor):
    if schema_editor.connection.vendor != "postgresql":
        return
    for model_name, indexes in GIN_INDEXES.items():
        model = apps.get_model("therapist", model_name)
        for field, name in indexes:
            schema_editor.add_index(model, GinIndex(fields=[field], name=name))


def remove_gin_indexes(apps, schema_editor):
    if schema_editor.connection.vendor != "postgresql":
        return
    for model_name, indexes in GIN_INDEXES.items():
        model = apps.get_model("therapist", model_name)
        for field, name in indexes:
            schema_editor.remove_index(model, GinIndex(fields=[field], name=name))


class Migration(migrations.Migration):
    dependencies = [
        ("therapist", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(add_gin_indexes, remove_gin_indexes),
    ]
