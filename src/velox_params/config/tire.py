"""Tire force-model coefficients (Pacejka Magic Formula, ADAMS notation).

Shared by every vehicle type; a vehicle document may still override
individual coefficients under its own ``tire`` key.
"""

from pydantic import Field

from velox_params.config.base import ParameterGroup


class TireParameters(ParameterGroup):
    """Dimensionless coefficients of the semi-empirical tire model."""

    # --- Longitudinal coefficients ---
    p_cx1: float = Field(default=0.0, description="Shape factor Cfx for longitudinal force")
    p_dx1: float = Field(default=0.0, description="Longitudinal friction Mux at Fznom")
    p_dx3: float = Field(default=0.0, description="Variation of friction Mux with camber")
    p_ex1: float = Field(default=0.0, description="Longitudinal curvature Efx at Fznom")
    p_kx1: float = Field(default=0.0, description="Longitudinal slip stiffness Kfx/Fz at Fznom")
    p_hx1: float = Field(default=0.0, description="Horizontal shift Shx at Fznom")
    p_vx1: float = Field(default=0.0, description="Vertical shift Svx/Fz at Fznom")
    r_bx1: float = Field(default=0.0, description="Slope factor for combined slip Fx reduction")
    r_bx2: float = Field(default=0.0, description="Variation of slope Fx reduction with kappa")
    r_cx1: float = Field(default=0.0, description="Shape factor for combined slip Fx reduction")
    r_ex1: float = Field(default=0.0, description="Curvature factor of combined Fx")
    r_hx1: float = Field(default=0.0, description="Shift factor for combined slip Fx reduction")

    # --- Lateral coefficients ---
    p_cy1: float = Field(default=0.0, description="Shape factor Cfy for lateral forces")
    p_dy1: float = Field(default=0.0, description="Lateral friction Muy")
    p_dy3: float = Field(default=0.0, description="Variation of friction Muy with squared camber")
    p_ey1: float = Field(default=0.0, description="Lateral curvature Efy at Fznom")
    p_ky1: float = Field(default=0.0, description="Maximum value of stiffness Kfy/Fznom")
    p_hy1: float = Field(default=0.0, description="Horizontal shift Shy at Fznom")
    p_hy3: float = Field(default=0.0, description="Variation of shift Shy with camber")
    p_vy1: float = Field(default=0.0, description="Vertical shift Svy/Fz at Fznom")
    p_vy3: float = Field(default=0.0, description="Variation of shift Svy/Fz with camber")
    r_by1: float = Field(default=0.0, description="Slope factor for combined Fy reduction")
    r_by2: float = Field(default=0.0, description="Variation of slope Fy reduction with alpha")
    r_by3: float = Field(default=0.0, description="Shift term for alpha in slope Fy reduction")
    r_cy1: float = Field(default=0.0, description="Shape factor for combined Fy reduction")
    r_ey1: float = Field(default=0.0, description="Curvature factor of combined Fy")
    r_hy1: float = Field(default=0.0, description="Shift factor for combined Fy reduction")
    r_vy1: float = Field(default=0.0, description="Kappa induced side force Svyk/Muy*Fz at Fznom")
    r_vy3: float = Field(default=0.0, description="Variation of Svyk/Muy*Fz with camber")
    r_vy4: float = Field(default=0.0, description="Variation of Svyk/Muy*Fz with alpha")
    r_vy5: float = Field(default=0.0, description="Variation of Svyk/Muy*Fz with kappa")
    r_vy6: float = Field(default=0.0, description="Variation of Svyk/Muy*Fz with atan(kappa)")
