import pytest
from pydantic import ValidationError

from case_rates.rates.errors import RegionNotFound
from case_rates.rates.populations import REGIONS, lookup, regions
from case_rates.rates.schemas import Region


def test_lookup_known_region():
    assert lookup("New York") == 19453561
    assert lookup("District of Columbia") == 705749


@pytest.mark.parametrize("name", ["new york", "NEW YORK", "New York ", "Washington DC", ""])
def test_lookup_is_exact(name):
    with pytest.raises(RegionNotFound) as exc:
        lookup(name)
    assert exc.value.region == name


def test_not_found_is_lookup_error():
    with pytest.raises(LookupError):
        lookup("Atlantis")


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        REGIONS["Atlantis"] = Region(name="Atlantis", population=1)  # type: ignore[index]


def test_regions_sorted_and_complete():
    names = regions()
    assert names == sorted(names)
    assert len(names) == 56
    assert {"Texas", "Puerto Rico", "Guam"} <= set(names)


def test_all_populations_positive():
    assert all(r.population > 0 for r in REGIONS.values())
    assert all(name == r.name for name, r in REGIONS.items())


def test_region_rejects_non_positive_population():
    with pytest.raises(ValidationError):
        Region(name="Nowhere", population=0)


def test_schemas_module_docstring():
    from case_rates.rates import schemas

    assert schemas.__doc__ is not None
    assert "Typed data models" in schemas.__doc__
