"""Parameter models: defaults, no plausibility checks, immutability.

Physical plausibility is the simulator's concern; the models accept any
float, including negative masses.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from velox_params.config import (
    DEFAULT_PARAM_ROOT,
    LongitudinalParameters,
    ResolverConfig,
    SteeringParameters,
    TireParameters,
    TrailerParameters,
    VehicleParameters,
)
from velox_params.models import ParameterResolution


# ═══════════════════════════════════════════════════════════════════════════
# Groups
# ═══════════════════════════════════════════════════════════════════════════

class TestGroups:

    @pytest.mark.parametrize(
        "model",
        [SteeringParameters, LongitudinalParameters, TrailerParameters, TireParameters],
    )
    def test_defaults_are_zero(self, model):
        assert all(v == 0.0 for v in model().model_dump().values())

    def test_unknown_field_ignored(self):
        s = SteeringParameters(max=0.9, ratio=16.0)
        assert s.max == 0.9
        assert not hasattr(s, "ratio")

    def test_frozen(self):
        t = TrailerParameters(l=13.6)
        with pytest.raises(ValidationError):
            t.l = 1.0

    @pytest.mark.parametrize("flag", [True, False])
    def test_boolean_rejected(self, flag):
        with pytest.raises(ValidationError):
            TireParameters(p_cx1=flag)

    def test_equal_groups_hash_equal(self):
        assert hash(TireParameters(p_cx1=1.6)) == hash(TireParameters(p_cx1=1.6))


# ═══════════════════════════════════════════════════════════════════════════
# VehicleParameters
# ═══════════════════════════════════════════════════════════════════════════

class TestVehicleParameters:

    def test_defaults(self):
        p = VehicleParameters()
        assert p.m == 0.0
        assert p.steering == SteeringParameters()
        assert p.tire == TireParameters()
        assert p.trailer == TrailerParameters()

    def test_no_range_checks(self):
        p = VehicleParameters(m=-1.0, I_z=-5.0, T_sb=3.0)
        assert p.m == -1.0
        assert p.T_sb == 3.0

    def test_nested_dict_input(self):
        p = VehicleParameters.model_validate({"longitudinal": {"a_max": 11.5}})
        assert p.longitudinal.a_max == 11.5

    def test_json_round_trip(self):
        original = VehicleParameters(m=1225.887, steering=SteeringParameters(min=-0.91, max=0.91))
        assert VehicleParameters.model_validate_json(original.model_dump_json()) == original

    def test_wire_names_preserved(self):
        dumped = VehicleParameters().model_dump()
        for key in ("I_Phi_s", "K_sdf", "h_raf", "T_se", "E_r"):
            assert key in dumped


# ═══════════════════════════════════════════════════════════════════════════
# ResolverConfig & ParameterResolution
# ═══════════════════════════════════════════════════════════════════════════

class TestResolverConfig:

    def test_defaults(self):
        c = ResolverConfig()
        assert c.default_root == DEFAULT_PARAM_ROOT == Path("parameters")
        assert c.vehicle_template.format(id=1) == "parameters_vehicle1.yaml"
        assert c.tire_filename == "parameters_tire.yaml"

    def test_string_root_coerced(self):
        assert ResolverConfig(default_root="/srv/params").default_root == Path("/srv/params")

    def test_frozen(self):
        c = ResolverConfig()
        with pytest.raises(ValidationError):
            c.default_root = Path("elsewhere")


class TestParameterResolution:

    def test_is_overridden(self):
        r = ParameterResolution(
            vehicle_id=1,
            vehicle_path=Path("p/vehicle/parameters_vehicle1.yaml"),
            tire_path=Path("p/tire/parameters_tire.yaml"),
            parameters=VehicleParameters(m=1.0),
            overridden=["m"],
            defaulted=["a"],
        )
        assert r.is_overridden("m")
        assert not r.is_overridden("a")
