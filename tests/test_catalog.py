import math

import pytest

from feedback_designer.domain.catalog import LCSC_0402_CATALOG, RESISTOR_TO_0402_LCSC, ResistorCatalog
from feedback_designer.domain.errors import ConfigurationError


def test_lcsc_catalog_values_ascending():
    values = LCSC_0402_CATALOG.values()
    assert len(values) == 29
    assert list(values) == sorted(values)
    assert values[0] == 10000
    assert values[-1] == 150000


def test_lcsc_catalog_part_ids():
    assert LCSC_0402_CATALOG.part_id(10000) == "C25744"
    assert LCSC_0402_CATALOG.part_id(43000) == "C8329"
    assert LCSC_0402_CATALOG.part_id(150000) == "C25755"
    assert dict(LCSC_0402_CATALOG.items()) == RESISTOR_TO_0402_LCSC


def test_part_id_unknown_value():
    with pytest.raises(LookupError, match="not a catalog value"):
        LCSC_0402_CATALOG.part_id(4700)


def test_catalog_sorts_unordered_input():
    catalog = ResistorCatalog({30000: "C", 10000: "A", 20000: "B"})
    assert catalog.values() == (10000, 20000, 30000)
    assert list(catalog) == [10000, 20000, 30000]


def test_catalog_membership_and_len(small_catalog):
    assert 20000 in small_catalog
    assert 20000.0 in small_catalog
    assert 25000 not in small_catalog
    assert len(small_catalog) == 3


def test_empty_catalog_rejected():
    with pytest.raises(ConfigurationError, match="at least one value"):
        ResistorCatalog({})


@pytest.mark.parametrize("value", [0, -10000, math.nan, math.inf])
def test_invalid_values_rejected(value):
    with pytest.raises(ConfigurationError):
        ResistorCatalog({10000: "A", value: "B"})


def test_non_numeric_value_rejected():
    with pytest.raises(ConfigurationError, match="numeric"):
        ResistorCatalog({"10k": "A"})


def test_blank_part_id_rejected():
    with pytest.raises(ConfigurationError, match="no part identifier"):
        ResistorCatalog({10000: "  "})


def test_from_pairs_rejects_duplicates():
    with pytest.raises(ConfigurationError, match="Duplicate"):
        ResistorCatalog.from_pairs([(10000, "A"), (10000.0, "B")])


def test_from_pairs_builds_catalog():
    catalog = ResistorCatalog.from_pairs([(2200, "X"), (1000, "Y")])
    assert catalog.values() == (1000, 2200)
    assert catalog.part_id(2200) == "X"


def test_catalog_is_read_only(small_catalog):
    with pytest.raises(TypeError):
        small_catalog.items()[10000] = "Z"
    with pytest.raises(AttributeError):
        small_catalog.extra = 1
