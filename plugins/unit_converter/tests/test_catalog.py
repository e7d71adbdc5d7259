import dataclasses
import logging

import pytest

from plugins.unit_converter.core import (
    CatalogInitError,
    DescriptorKind,
    UnknownCategoryError,
    UnknownUnitError,
    build_catalog,
    get_catalog,
    list_categories,
    list_unit_names,
    list_units,
)
from plugins.unit_converter.core.definitions import (
    CATEGORY_DEFINITIONS,
    CategoryDefinition,
    UnitDefinition,
    affine,
    linear,
)


def test_categories_follow_definition_order():
    names = list_categories()
    assert names == [definition.name for definition in CATEGORY_DEFINITIONS]
    assert names[:3] == ["length", "mass", "temperature"]
    assert list_categories() == names


@pytest.mark.parametrize("category", [d.name for d in CATEGORY_DEFINITIONS])
def test_every_category_has_unique_units(category):
    names = [unit["name"] for unit in list_units(category)]
    assert names
    assert len(names) == len(set(names))
    assert list_unit_names(category) == names


def test_list_units_exposes_name_and_abbreviation():
    units = list_units("length")
    assert units[0] == {"name": "meter", "abbreviation": "m"}
    assert {"name": "kilometer", "abbreviation": "km"} in units


def test_unknown_category_raises():
    with pytest.raises(UnknownCategoryError) as excinfo:
        list_units("colour")
    assert excinfo.value.category == "colour"


def test_resolve_unit_is_scoped_to_its_category():
    catalog = get_catalog()
    assert catalog.resolve_unit("mass", "kilogram").abbreviation == "kg"
    with pytest.raises(UnknownUnitError):
        catalog.resolve_unit("length", "kilogram")


def test_lookup_is_case_sensitive():
    with pytest.raises(UnknownUnitError):
        get_catalog().resolve_unit("length", "Meter")
    with pytest.raises(UnknownCategoryError):
        get_catalog().resolve_unit("Length", "meter")


def test_base_units_have_identity_descriptors():
    catalog = get_catalog()
    for name in catalog.list_categories():
        assert catalog.category(name).base.descriptor.is_identity


def test_temperature_uses_affine_descriptors():
    fahrenheit = get_catalog().resolve_unit("temperature", "Fahrenheit")
    assert fahrenheit.descriptor.kind is DescriptorKind.AFFINE
    assert get_catalog().resolve_unit("length", "mile").descriptor.kind is DescriptorKind.LINEAR


def test_catalog_is_read_only():
    category = get_catalog().category("length")
    with pytest.raises(TypeError):
        category.units["parsec"] = category.base
    with pytest.raises(dataclasses.FrozenInstanceError):
        category.base.name = "metre"


def test_get_catalog_is_built_once():
    assert get_catalog() is get_catalog()


def test_build_catalog_from_custom_table(caplog):
    caplog.set_level(logging.INFO, logger="unit_converter_service")
    catalog = build_catalog(
        [
            CategoryDefinition(
                "length",
                base="meter",
                units=(linear("meter", "m", "1"), linear("kilometer", "km", "1000")),
            )
        ],
        version="test",
    )
    assert catalog.version == "test"
    assert catalog.list_categories() == ["length"]
    assert len(catalog) == 1
    assert "unit catalog test built: 1 categories, 2 units" in caplog.text


def _length(*units, base="meter"):
    return CategoryDefinition("length", base=base, units=tuple(units))


@pytest.mark.parametrize(
    "definitions",
    [
        pytest.param([], id="empty-table"),
        pytest.param([_length(linear("foot", "ft", "0.3048"))], id="missing-base"),
        pytest.param(
            [_length(linear("foot", "ft", "0.3048"), base="foot")], id="base-not-identity"
        ),
        pytest.param(
            [_length(linear("meter", "m", "1"), linear("meter", "m", "1"))],
            id="duplicate-unit",
        ),
        pytest.param(
            [_length(linear("meter", "m", "1"), linear("nothing", "n", "0"))],
            id="zero-factor",
        ),
        pytest.param(
            [
                CategoryDefinition(
                    "temperature",
                    base="Celsius",
                    units=(affine("Celsius", "°C", "1", "0"), affine("flat", "x", "0", "5")),
                )
            ],
            id="zero-scale",
        ),
        pytest.param([_length(linear("meter", "m", "one"))], id="unparseable-factor"),
        pytest.param([_length(linear("meter", "m", "1/0"))], id="division-by-zero"),
        pytest.param(
            [_length(linear("meter", "m", "1"), UnitDefinition("shifted", "s", "linear", "1", "2"))],
            id="linear-with-offset",
        ),
        pytest.param(
            [_length(UnitDefinition("meter", "m", "logarithmic", "1"))], id="unknown-kind"
        ),
        pytest.param([_length()], id="no-units"),
        pytest.param(
            [_length(linear("meter", "m", "1")), _length(linear("meter", "m", "1"))],
            id="duplicate-category",
        ),
    ],
)
def test_malformed_tables_fail_fast(definitions):
    with pytest.raises(CatalogInitError):
        build_catalog(definitions)
