"""Vehicle parameters: the root record handed to vehicle-dynamics models.

Field names follow Althoff & Würsching, "CommonRoad: Vehicle Models" (2020);
they are also the keys authors write in the vehicle YAML documents, so they
must not be renamed.
"""

from pydantic import Field

from velox_params.config.base import ParameterGroup
from velox_params.config.longitudinal import LongitudinalParameters
from velox_params.config.steering import SteeringParameters
from velox_params.config.tire import TireParameters
from velox_params.config.trailer import TrailerParameters


class VehicleParameters(ParameterGroup):
    """All parameters used by the vehicle models, one instance per vehicle type."""

    # --- Body dimensions ---
    l: float = Field(default=0.0, description="Vehicle length (m)")  # noqa: E741
    w: float = Field(default=0.0, description="Vehicle width (m)")

    # --- Envelopes ---
    steering: SteeringParameters = Field(default_factory=SteeringParameters)
    longitudinal: LongitudinalParameters = Field(default_factory=LongitudinalParameters)

    # --- Masses ---
    m: float = Field(default=0.0, description="Total mass (kg)")
    m_s: float = Field(default=0.0, description="Sprung mass (kg)")
    m_uf: float = Field(default=0.0, description="Unsprung mass front (kg)")
    m_ur: float = Field(default=0.0, description="Unsprung mass rear (kg)")

    # --- Axle distances ---
    a: float = Field(default=0.0, description="Sprung-mass CoG to front axle (m)")
    b: float = Field(default=0.0, description="Sprung-mass CoG to rear axle (m)")

    # --- Sprung-mass inertias ---
    I_Phi_s: float = Field(default=0.0, description="Roll inertia (kg m^2)")
    I_y_s: float = Field(default=0.0, description="Pitch inertia (kg m^2)")
    I_z: float = Field(default=0.0, description="Yaw inertia (kg m^2)")
    I_xz_s: float = Field(default=0.0, description="Roll-yaw product of inertia (kg m^2)")

    # --- Suspension ---
    K_sf: float = Field(default=0.0, description="Spring rate front (N/m)")
    K_sdf: float = Field(default=0.0, description="Damping rate front (N s/m)")
    K_sr: float = Field(default=0.0, description="Spring rate rear (N/m)")
    K_sdr: float = Field(default=0.0, description="Damping rate rear (N s/m)")

    # --- Geometry ---
    T_f: float = Field(default=0.0, description="Track width front (m)")
    T_r: float = Field(default=0.0, description="Track width rear (m)")
    K_ras: float = Field(
        default=0.0,
        description="Lateral spring rate at compliant pin joint between M_s and M_u (N/m)",
    )
    K_tsf: float = Field(default=0.0, description="Auxiliary torsion roll stiffness front (N m/rad)")
    K_tsr: float = Field(default=0.0, description="Auxiliary torsion roll stiffness rear (N m/rad)")
    K_rad: float = Field(
        default=0.0,
        description="Damping rate at compliant pin joint between M_s and M_u (N s/m)",
    )
    K_zt: float = Field(default=0.0, description="Vertical spring rate of tire (N/m)")
    h_cg: float = Field(default=0.0, description="CoG height of total mass (m)")
    h_raf: float = Field(default=0.0, description="Roll axis height front (m)")
    h_rar: float = Field(default=0.0, description="Roll axis height rear (m)")
    h_s: float = Field(default=0.0, description="Sprung-mass CoG height (m)")
    I_uf: float = Field(default=0.0, description="Unsprung-mass inertia about x front (kg m^2)")
    I_ur: float = Field(default=0.0, description="Unsprung-mass inertia about x rear (kg m^2)")
    I_y_w: float = Field(default=0.0, description="Wheel inertia (kg m^2)")
    K_lt: float = Field(default=0.0, description="Lateral compliance of tire/wheel/suspension (m/N)")
    R_w: float = Field(default=0.0, description="Effective wheel/tire radius (m)")

    # --- Brake / engine torque split ---
    T_sb: float = Field(default=0.0, description="Front axle share of brake torque (0-1)")
    T_se: float = Field(default=0.0, description="Front axle share of engine torque (0-1)")

    # --- Suspension camber ---
    D_f: float = Field(default=0.0, description="Camber gain front (rad/m)")
    D_r: float = Field(default=0.0, description="Camber gain rear (rad/m)")
    E_f: float = Field(default=0.0, description="Camber coefficient front")
    E_r: float = Field(default=0.0, description="Camber coefficient rear")

    # --- Tire and trailer ---
    tire: TireParameters = Field(default_factory=TireParameters)
    trailer: TrailerParameters = Field(default_factory=TrailerParameters)
