from importlib import import_module
from unittest import mock

import pytest
from django.apps import apps
from django.contrib.postgres.indexes import GinIndex

gin_migration = import_module("therapist.migrations.0002_json_gin_indexes")


def schema_editor_for(vendor):
    editor = mock.Mock()
    editor.connection.vendor = vendor
    return editor


class TestJsonGinIndexes:
    def test_postgres_gets_gin_indexes_on_json_lists(self):
        editor = schema_editor_for("postgresql")

        gin_migration.add_gin_indexes(apps, editor)

        created = {
            (call.args[0]._meta.model_name, call.args[1].name, tuple(call.args[1].fields))
            for call in editor.add_index.call_args_list
        }
        assert all(isinstance(call.args[1], GinIndex) for call in editor.add_index.call_args_list)
        assert created == {
            ("therapistprofile", "ther_us_states_gin", ("licensed_states",)),
            ("therapistprofile", "ther_us_spec_gin", ("specializations",)),
            ("autherapistprofile", "ther_au_states_gin", ("licensed_states",)),
            ("autherapistprofile", "ther_au_spec_gin", ("specializations",)),
        }

    def test_reverse_drops_the_same_indexes(self):
        editor = schema_editor_for("postgresql")

        gin_migration.remove_gin_indexes(apps, editor)

        assert sorted(call.args[1].name for call in editor.remove_index.call_args_list) == [
            "ther_au_spec_gin",
            "ther_au_states_gin",
            "ther_us_spec_gin",
            "ther_us_states_gin",
        ]

    @pytest.mark.parametrize("vendor", ["sqlite", "mysql"])
    def test_other_backends_are_left_alone(self, vendor):
        editor = schema_editor_for(vendor)

        gin_migration.add_gin_indexes(apps, editor)
        gin_migration.remove_gin_indexes(apps, editor)

        editor.add_index.assert_not_called()
        editor.remove_index.assert_not_called()
