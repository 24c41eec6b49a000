"""Tests for cascading facet option lists."""
import pytest

from query.facets import all_facets, facet_options
from query.filters import search
from query.records import FACET_FIELDS


def test_options_are_sorted_in_turkish_order(sample_records):
    assert facet_options(sample_records, {}, "region") == ["Ankara", "Iğdır", "İstanbul", "İzmir", "Uşak"]


def test_options_have_no_duplicates(sample_records):
    options = facet_options(sample_records, {}, "subregion")
    assert len(options) == len(set(options))
    assert options.count("Çeşme") == 1


def test_own_filter_does_not_narrow_own_options(sample_records):
    with_filter = facet_options(sample_records, {"region": "İzmir"}, "region")
    assert with_filter == facet_options(sample_records, {}, "region")


def test_other_filters_narrow_options(sample_records):
    assert facet_options(sample_records, {"region": "İzmir"}, "subregion") == ["Çeşme", "Konak"]
    assert facet_options(sample_records, {"status": "Kırsal Alan"}, "region") == [
        "Ankara", "Iğdır", "İstanbul", "İzmir",
    ]


def test_mismatched_selection_is_not_offered(sample_records):
    # Konak only has non-rural rows, so with status=Kırsal Alan it drops out
    options = facet_options(sample_records, {"subregion": "Konak", "status": "Kırsal Alan"}, "subregion")
    assert "Konak" not in options


def test_locality_constraint_narrows_other_facets(sample_records):
    assert facet_options(sample_records, {"locality": "mahallesi", "region": "İstanbul"}, "subregion") == [
        "Kadıköy", "Şile",
    ]
    assert facet_options(sample_records, {"locality": "ağva"}, "region") == ["İstanbul"]


def test_empty_values_are_dropped(sample_records):
    assert "" not in facet_options(sample_records, {}, "status")
    assert facet_options(sample_records, {}, "status") == ["Kırsal Alan", "Kırsal Alan Değil"]


def test_search_output_is_the_base(sample_records):
    base = search(sample_records, "kirsal alan degil")
    assert facet_options(base, {}, "region") == ["İstanbul", "İzmir"]


def test_locality_is_not_a_facet(sample_records):
    with pytest.raises(ValueError):
        facet_options(sample_records, {}, "locality")


def test_all_facets_covers_dropdown_columns(sample_records):
    facets = all_facets(sample_records, {"region": "İzmir"})
    assert tuple(facets) == FACET_FIELDS
    assert facets["authority"] == ["Çeşme Belediyesi", "Konak Belediyesi"]
