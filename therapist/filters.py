# therapist/filters.py
import django_filters
from django.db import connection
from django.db.models import Q

from .choices import AUState, Language, Specialization
from .models import AUTherapistProfile


def json_list_contains(queryset, field_name, value):
    """Filter rows whose JSON list column ``field_name`` includes ``value``."""
    if connection.features.supports_json_field_contains:
        return Q(**{f"{field_name}__contains": [value]})
    ids = [
        pk
        for pk, values in queryset.values_list("pk", field_name)
        if value in (values or [])
    ]
    return Q(pk__in=ids)


class TherapistFilter(django_filters.FilterSet):
    state = django_filters.ChoiceFilter(choices=AUState.choices, method="filter_state")
    specialization = django_filters.ChoiceFilter(
        choices=Specialization.choices, method="filter_specialization"
    )
    min_rate = django_filters.NumberFilter(field_name="hourly_rate", lookup_expr="gte")
    max_rate = django_filters.NumberFilter(field_name="hourly_rate", lookup_expr="lte")
    min_rating = django_filters.NumberFilter(field_name="rating", lookup_expr="gte")
    is_verified = django_filters.BooleanFilter(field_name="is_verified")
    language = django_filters.ChoiceFilter(
        choices=Language.choices, method="filter_language"
    )
    bilingual = django_filters.BooleanFilter(method="filter_bilingual")

    class Meta:
        model = AUTherapistProfile
        fields = [
            "state",
            "specialization",
            "min_rate",
            "max_rate",
            "min_rating",
            "is_verified",
            "language",
            "bilingual",
        ]

    def filter_state(self, queryset, name, value):
        return queryset.filter(json_list_contains(queryset, "licensed_states", value))

    def filter_specialization(self, queryset, name, value):
        return queryset.filter(json_list_contains(queryset, "specializations", value))

    def filter_language(self, queryset, name, value):
        # Bilingual therapists are offered for every language.
        return queryset.filter(
            json_list_contains(queryset, "spoken_languages", value)
            | Q(bilingual_therapy=True)
        )

    def filter_bilingual(self, queryset, name, value):
        # Only an explicit "true" narrows the list.
        if value:
            return queryset.filter(bilingual_therapy=True)
        return queryset
