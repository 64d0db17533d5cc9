"""Tests for unwrapping wrapper nodes and extracting constraints."""

from __future__ import annotations

from typing import Any

import pytest

from formsmith.introspection import (
    FieldConstraints,
    StructuralError,
    extract_constraints,
    unwrap_schema,
)
from formsmith.schema import z


class _BrokenOptional:
    type = "optional"


class _UnwrapsToJunk:
    type = "nullable"

    def unwrap(self) -> Any:
        return 42


class TestUnwrapSchema:
    """Tests for unwrap_schema."""

    def test_plain_node(self) -> None:
        """Test a non-wrapper node comes back unchanged."""
        node = z.string()
        result = unwrap_schema(node)

        assert result.inner is node
        assert not result.is_optional
        assert not result.is_nullable

    @pytest.mark.parametrize(
        "node",
        [
            z.string().optional().nullable(),
            z.string().nullable().optional(),
            z.string().optional().nullable().optional(),
        ],
    )
    def test_any_order_and_depth(self, node: Any) -> None:
        """Test wrappers are removed whatever their order."""
        result = unwrap_schema(node)

        assert result.inner.type == "string"
        assert result.is_optional
        assert result.is_nullable

    def test_not_a_node(self) -> None:
        """Test values without a type tag are rejected."""
        with pytest.raises(StructuralError):
            unwrap_schema("string")

    def test_missing_unwrap(self) -> None:
        """Test a wrapper without unwrap is rejected."""
        with pytest.raises(StructuralError) as exc_info:
            unwrap_schema(_BrokenOptional())
        assert exc_info.value.message == "optional schema missing unwrap method"

    def test_unwraps_to_non_node(self) -> None:
        """Test a wrapper that unwraps to something else is rejected."""
        with pytest.raises(StructuralError):
            unwrap_schema(_UnwrapsToJunk())


class TestExtractConstraints:
    """Tests for extract_constraints."""

    def test_string(self) -> None:
        """Test string length, pattern and format."""
        node = z.string().min(3).max(20).regex(r"^\w+$").email()

        assert extract_constraints(node) == FieldConstraints(
            min_length=3, max_length=20, pattern=r"^\w+$", format="email"
        )

    def test_format_shorthand(self) -> None:
        """Test top-level format constructors."""
        assert extract_constraints(z.url()).format == "url"
        assert extract_constraints(z.iso.datetime()).format == "datetime"

    def test_number(self) -> None:
        """Test numeric bounds, integer flag and step."""
        constraints = extract_constraints(z.number().int().min(1).max(9).multiple_of(0.5))

        assert constraints.min == 1
        assert constraints.max == 9
        assert constraints.is_int is True
        assert constraints.step == 0.5

    def test_exclusive_bounds_recorded(self) -> None:
        """Test gt/lt bounds fill min/max."""
        constraints = extract_constraints(z.number().gt(0).lt(1))

        assert (constraints.min, constraints.max) == (0, 1)

    def test_collection_lengths_go_to_items(self) -> None:
        """Test array lengths land in min_items/max_items."""
        constraints = extract_constraints(z.array(z.string()).min(1).max(5))

        assert constraints.min_items == 1
        assert constraints.max_items == 5
        assert constraints.min_length is None

    def test_later_check_wins(self) -> None:
        """Test a repeated check overrides the earlier one."""
        assert extract_constraints(z.string().max(10).max(4)).max_length == 4

    def test_unknown_checks_reported(self) -> None:
        """Test unrecognised checks go to the sink and nowhere else."""
        unknown: list[str] = []
        constraints = extract_constraints(z.string().trim().refine(bool), unknown)

        assert unknown == ["overwrite", "custom"]
        assert constraints == FieldConstraints()

    def test_no_checks(self) -> None:
        """Test a node without checks yields empty constraints."""
        assert extract_constraints(z.boolean()) == FieldConstraints()
