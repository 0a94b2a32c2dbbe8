"""Tests for user data shape validation."""

import pytest

from sr2map.errors import FormatError
from sr2map.userdata import (
    FOUND_KEYS,
    DataSet,
    is_valid_found_export,
    is_valid_pins_export,
    is_valid_plot_export,
    matching_datasets,
    validate_dataset,
)


class TestPlotValidation:
    """Test plot plan export validation."""

    def test_accepts_plot_list(self) -> None:
        """Test well-formed plot plans and the empty list pass."""
        assert is_valid_plot_export([{"site": "a", "plotPlans": [{"plot": "corral"}]}])
        assert is_valid_plot_export([])

    @pytest.mark.parametrize(
        "obj",
        [
            {"site": "a", "plotPlans": []},
            [{"plotPlans": []}],
            [{"site": 3, "plotPlans": []}],
            [{"site": "a", "plotPlans": {}}],
            [{"site": "a"}],
            ["site"],
            None,
        ],
    )
    def test_rejects_malformed(self, obj: object) -> None:
        """Test malformed plot documents fail."""
        assert not is_valid_plot_export(obj)


class TestPinValidation:
    """Test user pin export validation."""

    def test_accepts_pins(self) -> None:
        """Test int and float coordinates pass, dimension is optional."""
        assert is_valid_pins_export(
            [
                {"icon": "a", "pos": {"x": 1, "y": 2}, "dimension": "sr2"},
                {"icon": "b", "pos": {"x": -1.5, "y": 0.25}},
            ]
        )

    def test_accepts_empty_list(self) -> None:
        """Test an empty pin list is a valid (clearing) import."""
        assert is_valid_pins_export([])

    @pytest.mark.parametrize(
        "pin",
        [
            {"icon": "a", "pos": {"y": 2}},
            {"icon": "a", "pos": {"x": 1}},
            {"icon": "a", "pos": {"x": "1", "y": 2}},
            {"icon": "a", "pos": {"x": True, "y": 2}},
            {"icon": "a", "pos": [1, 2]},
            {"icon": "a"},
            {"icon": 5, "pos": {"x": 1, "y": 2}},
            {"pos": {"x": 1, "y": 2}},
            "a",
        ],
    )
    def test_rejects_malformed_pin(self, pin: object) -> None:
        """Test one malformed pin rejects the whole list."""
        good = {"icon": "a", "pos": {"x": 1, "y": 2}}
        assert not is_valid_pins_export([good, pin])

    def test_rejects_non_list(self) -> None:
        """Test a single pin object is not a pin list."""
        assert not is_valid_pins_export({"icon": "a", "pos": {"x": 1, "y": 2}})


class TestFoundValidation:
    """Test found collectables export validation."""

    def test_accepts_partial_map(self) -> None:
        """Test a single known key is enough."""
        assert is_valid_found_export({"found_gordos": ["g1"]})

    def test_accepts_full_map(self) -> None:
        """Test every known key with empty lists passes."""
        assert is_valid_found_export({key: [] for key in FOUND_KEYS})

    def test_tolerates_unknown_extra_keys(self) -> None:
        """Test unrelated keys next to a known key are allowed."""
        assert is_valid_found_export({"found_gordos": [], "show_found": True})

    def test_rejects_unknown_keys_only(self) -> None:
        """Test an object with none of the known keys is not found data."""
        bogus = {f"found_other_{i}": [] for i in range(7)}
        assert not is_valid_found_export(bogus)
        assert not is_valid_found_export({})

    def test_rejects_non_list_value(self) -> None:
        """Test a known key holding something other than a list fails."""
        assert not is_valid_found_export({"found_gordos": ["g1"], "found_map_nodes": {}})
        assert not is_valid_found_export({"found_gordos": None})

    def test_rejects_non_object(self) -> None:
        """Test lists and scalars fail."""
        assert not is_valid_found_export([["found_gordos"]])
        assert not is_valid_found_export("found_gordos")


class TestValidateDataset:
    """Test the raising wrapper."""

    def test_raises_format_error(self) -> None:
        """Test the error names the rejected dataset."""
        with pytest.raises(FormatError, match="Invalid user pins format.") as exc_info:
            validate_dataset(DataSet.PINS, [{"icon": "a"}])
        assert exc_info.value.datasets == (DataSet.PINS,)
        assert exc_info.value.applied == ()

    def test_valid_document_passes(self) -> None:
        """Test a valid document raises nothing."""
        validate_dataset(DataSet.PLOTS, [])
        validate_dataset(DataSet.FOUND, {"found_treasure_pods": ["p"]})


class TestMatchingDatasets:
    """Test picking the datasets a document fits."""

    def test_empty_list_fits_both_lists(self) -> None:
        """Test the empty list is accepted by plots and pins alike."""
        candidates = [DataSet.PLOTS, DataSet.PINS, DataSet.FOUND]
        assert matching_datasets([], candidates) == [DataSet.PLOTS, DataSet.PINS]

    def test_pin_list_fits_pins_only(self) -> None:
        """Test a populated pin list only matches pins."""
        pins = [{"icon": "a", "pos": {"x": 1, "y": 2}}]
        assert matching_datasets(pins, [DataSet.PLOTS, DataSet.PINS]) == [DataSet.PINS]

    def test_no_candidates(self) -> None:
        """Test nothing matches when nothing is offered."""
        assert matching_datasets({"found_gordos": []}, []) == []
