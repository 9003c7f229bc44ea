"""
Tests for the helical strand generator.

Pure math, no build123d - all tests are fast.
"""

import math

import pytest

from braidpreflight.core.helix import (
    SEGMENTS_PER_STRAND,
    BraidPoint,
    generate_braid_geometry,
    geometry_to_lists,
    helix_phase_advance,
    helix_turns,
    strand_phase,
)


class TestStrandLayout:
    """Strand and point counts."""

    @pytest.mark.parametrize("strand_count", [6, 7, 24, 72])
    def test_one_strand_per_count(self, make_params, strand_count):
        strands = generate_braid_geometry(make_params(strand_count=strand_count))
        assert len(strands) == strand_count

    @pytest.mark.parametrize("length,angle", [(20, 10), (120, 55), (300, 85)])
    def test_201_points_per_strand(self, make_params, length, angle):
        strands = generate_braid_geometry(make_params(length=length, angle_deg=angle))
        assert SEGMENTS_PER_STRAND == 200
        for strand in strands:
            assert len(strand) == 201

    def test_points_are_braid_points(self, default_params):
        point = generate_braid_geometry(default_params)[0][0]
        assert isinstance(point, BraidPoint)


class TestHelixShape:
    """Geometric invariants of the helix."""

    @pytest.mark.parametrize("radius", [2.0, 12.0, 40.0])
    def test_points_on_cylinder(self, make_params, radius):
        strands = generate_braid_geometry(make_params(radius=radius))
        for strand in strands:
            for p in strand:
                assert p.x ** 2 + p.y ** 2 == pytest.approx(radius ** 2, rel=1e-9)

    def test_axial_span(self, default_params):
        for strand in generate_braid_geometry(default_params):
            assert strand[0].z == 0.0
            assert strand[-1].z == pytest.approx(default_params.length)

    def test_z_increases_monotonically(self, default_params):
        strand = generate_braid_geometry(default_params)[3]
        zs = [p.z for p in strand]
        assert all(b > a for a, b in zip(zs, zs[1:]))

    def test_start_phase_evenly_distributed(self, default_params):
        """Strand s starts at theta = 2π·s/strand_count exactly."""
        n = default_params.strand_count
        r = default_params.radius
        for s, strand in enumerate(generate_braid_geometry(default_params)):
            offset = (2 * math.pi * s) / n
            assert strand[0].x == r * math.cos(offset)
            assert strand[0].y == r * math.sin(offset)

    def test_end_phase_includes_full_advance(self, make_params):
        params = make_params(angle_deg=30, length=50)
        turns = math.tan(math.radians(30)) * 50
        end = generate_braid_geometry(params)[0][-1]
        assert end.x == pytest.approx(params.radius * math.cos(turns))
        assert end.y == pytest.approx(params.radius * math.sin(turns))

    def test_deterministic(self, dense_params):
        assert generate_braid_geometry(dense_params) == generate_braid_geometry(dense_params)


class TestPhaseHelpers:

    def test_phase_advance_formula(self, default_params):
        expected = math.tan(55 * math.pi / 180) * 120
        assert helix_phase_advance(default_params) == pytest.approx(expected)

    def test_turns_is_advance_over_two_pi(self, default_params):
        assert helix_turns(default_params) == pytest.approx(
            helix_phase_advance(default_params) / (2 * math.pi)
        )

    def test_more_angle_more_turns(self, make_params):
        assert helix_turns(make_params(angle_deg=70)) > helix_turns(make_params(angle_deg=20))

    def test_strand_phase_at_start(self, default_params):
        assert strand_phase(default_params, 6, 0.0) == (2 * math.pi * 6) / 24

    def test_strand_phase_at_end(self, default_params):
        assert strand_phase(default_params, 0, 1.0) == pytest.approx(
            helix_phase_advance(default_params)
        )


class TestDegenerateInput:
    """Explicit guards for values the caller should have clamped."""

    def test_zero_strands_rejected(self, make_params):
        with pytest.raises(ValueError, match="strand_count"):
            generate_braid_geometry(make_params(strand_count=0))

    def test_negative_strands_rejected(self, make_params):
        with pytest.raises(ValueError, match="strand_count"):
            generate_braid_geometry(make_params(strand_count=-3))

    @pytest.mark.parametrize("angle", [90.0, -90.0, 135.0])
    def test_angle_at_singularity_rejected(self, make_params, angle):
        with pytest.raises(ValueError, match="angle_deg"):
            generate_braid_geometry(make_params(angle_deg=angle))

    @pytest.mark.parametrize("field", ["radius", "length", "angle_deg"])
    def test_non_finite_rejected(self, make_params, field):
        with pytest.raises(ValueError, match=field):
            generate_braid_geometry(make_params(**{field: float("nan")}))

    def test_out_of_range_but_finite_is_computed(self, make_params):
        strands = generate_braid_geometry(make_params(radius=1.0, strand_count=2))
        assert len(strands) == 2


class TestGeometryToLists:

    def test_shape(self, make_params):
        data = geometry_to_lists(generate_braid_geometry(make_params(strand_count=6)))
        assert len(data) == 6
        assert len(data[0]) == 201
        assert data[0][0] == [12.0, 0.0, 0.0]
