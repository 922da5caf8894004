"""Contract tests for the curated public surface of the package."""

import inspect

import pytest

import fallible
from fallible import result


class TestPublicSurfaceCompliance:
    """The package exposes a small, intentional API."""

    @pytest.mark.unit
    @pytest.mark.contract
    def test_package_exports_are_curated(self):
        expected = {
            "Config",
            "ConfigurationError",
            "Failure",
            "FallibleError",
            "InvalidArgumentError",
            "NoSuchElementError",
            "NoValuePresentError",
            "Result",
            "Success",
            "failure",
            "of",
            "of_nullable",
            "of_optional",
            "success",
        }
        actual = set(fallible.__all__)
        assert actual == expected, (
            f"Public surface mismatch. Extra: {sorted(actual - expected)}; "
            f"Missing: {sorted(expected - actual)}"
        )
        for name in actual:
            assert hasattr(fallible, name), name

    @pytest.mark.unit
    @pytest.mark.contract
    def test_version_is_a_string(self):
        assert isinstance(fallible.__version__, str)

    @pytest.mark.unit
    @pytest.mark.contract
    def test_result_is_abstract(self):
        with pytest.raises(TypeError):
            result.Result()  # type: ignore[abstract]

    @pytest.mark.unit
    @pytest.mark.contract
    def test_variants_implement_every_combinator(self):
        abstract = set(result.Result.__abstractmethods__)
        for cls in (result.Success, result.Failure):
            assert not cls.__abstractmethods__
            assert abstract <= set(vars(cls))

    @pytest.mark.unit
    @pytest.mark.contract
    def test_variants_have_single_field_constructors(self):
        for cls in (result.Success, result.Failure):
            assert len(inspect.signature(cls).parameters) == 1

    @pytest.mark.unit
    @pytest.mark.contract
    def test_variants_do_not_carry_instance_dicts(self):
        assert not hasattr(result.success(1), "__dict__")
        assert not hasattr(result.failure("e"), "__dict__")
