"""Shipped parameter tree and the per-vehicle factories."""

from __future__ import annotations

from pathlib import Path

import pytest

from velox_params import (
    TrailerParameters,
    VehicleId,
    parameters_vehicle1,
    parameters_vehicle2,
    parameters_vehicle3,
    parameters_vehicle4,
    resolve_vehicle_parameters,
    setup_vehicle_parameters,
)

SHIPPED_ROOT = Path(__file__).parent.parent / "parameters"

FACTORIES = {
    VehicleId.FORD_ESCORT: parameters_vehicle1,
    VehicleId.BMW_320I: parameters_vehicle2,
    VehicleId.VW_VANAGON: parameters_vehicle3,
    VehicleId.SEMI_TRAILER_TRUCK: parameters_vehicle4,
}


class TestShippedParameters:

    @pytest.mark.parametrize("vehicle_id", list(VehicleId))
    def test_every_vehicle_loads(self, vehicle_id):
        params = setup_vehicle_parameters(vehicle_id, SHIPPED_ROOT)
        assert params.l > 0
        assert params.steering.max > 0
        assert params.longitudinal.v_max > 0

    @pytest.mark.parametrize("vehicle_id", list(VehicleId))
    def test_factory_matches_engine(self, vehicle_id):
        assert FACTORIES[vehicle_id](SHIPPED_ROOT) == setup_vehicle_parameters(int(vehicle_id), SHIPPED_ROOT)

    def test_tire_shared_by_all_vehicles(self):
        tires = {setup_vehicle_parameters(v, SHIPPED_ROOT).tire for v in VehicleId}
        assert len(tires) == 1

    def test_ford_escort(self):
        params = parameters_vehicle1(SHIPPED_ROOT)
        assert params.m == 1225.887
        assert params.I_z == 1538.853371
        assert params.steering.min == -0.910
        assert params.longitudinal.v_switch == 4.755
        assert params.tire.p_cx1 == 1.6411
        assert params.tire.r_vy6 == -10.704
        assert params.trailer == TrailerParameters()

    def test_truck_has_trailer(self):
        params = parameters_vehicle4(SHIPPED_ROOT)
        assert params.trailer.l_hitch == 12.0
        assert params.trailer.l_wb == 8.1
        # suspension fields are not tuned for the kinematic truck model
        assert params.K_sf == 0.0

    def test_ford_escort_document_is_complete(self):
        report = resolve_vehicle_parameters(VehicleId.FORD_ESCORT, SHIPPED_ROOT)
        assert all(name.startswith("trailer.") for name in report.defaulted)


class TestVehicleId:

    def test_values(self):
        assert [int(v) for v in VehicleId] == [1, 2, 3, 4]

    def test_interchangeable_with_int(self):
        assert setup_vehicle_parameters(VehicleId.BMW_320I, SHIPPED_ROOT) == setup_vehicle_parameters(2, SHIPPED_ROOT)
