"""Modelos Pydantic para configuración y validación de datos."""

from enum import Enum
from typing import Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hidronum.exceptions import ValidationError


class UnitSystem(str, Enum):
    """Sistema de unidades (si: pies/pulgadas/cfs, m: métrico)."""
    SI = "si"
    M = "m"


class SyntheticMethod(str, Enum):
    """Métodos de parámetros temporales sintéticos."""
    SCS = "scs"
    KERBY_KIRPICH = "kerby_kirpich"
    KERBY = "kerby"


class DimensionlessDistribution(str, Enum):
    """Familias de hidrograma adimensional."""
    GAMMA = "gamma"
    LP3 = "lp3"
    WEIBULL = "weibull"


class UnitHydrographType(str, Enum):
    """Origen del hidrograma unitario."""
    DIMENSIONLESS = "dim"
    OBSERVED = "obs"


class FloodHydrographType(str, Enum):
    """Métodos de generación del hidrograma de crecida."""
    SCS = "scs"
    OBSERVED = "obs"


class BoundaryType(str, Enum):
    """Tipo de condición de borde."""
    HEAD = "head"
    FLUX = "flux"


class AquiferType(str, Enum):
    """Tipo de acuífero."""
    CONFINED = "confined"
    UNCONFINED = "unconfined"


class AggregationType(str, Enum):
    """Agregación o desagregación de lluvia."""
    AGGREGATE = "aggr"
    DISAGGREGATE = "disagg"


E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value, label: str) -> E:
    """
    Convierte un valor (str o Enum) al miembro correspondiente.

    Acepta el valor sin distinguir mayúsculas y, para los métodos con guion
    ("kerby-kirpich"), la forma con guion bajo.

    Raises:
        ValidationError: si el valor no pertenece al enum
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower().replace("-", "_")
        for member in enum_cls:
            if member.value == key:
                return member
    valid = ", ".join(m.value for m in enum_cls)
    raise ValidationError(f"{label} desconocido: {value!r} (válidos: {valid})")


# ============================================================================
# Condiciones de borde y acuíferos
# ============================================================================

class BoundaryCondition(BaseModel):
    """Condición de borde en un extremo del dominio 1D."""
    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Carga (m) o caudal de Darcy (positivo en +x)")
    type: BoundaryType = Field(default=BoundaryType.HEAD, description="head o flux")

    @classmethod
    def head(cls, value: float) -> "BoundaryCondition":
        return cls(value=value, type=BoundaryType.HEAD)

    @classmethod
    def flux(cls, value: float) -> "BoundaryCondition":
        return cls(value=value, type=BoundaryType.FLUX)


class SteadyGroundwaterConfig(BaseModel):
    """Flujo subterráneo 1D estacionario."""
    length: float = Field(..., gt=0, description="Longitud del dominio (m)")
    k: float = Field(..., gt=0, description="Conductividad hidráulica (m/d)")
    nodes: int = Field(..., ge=3, description="Número de nodos")
    left: BoundaryCondition = Field(..., description="Borde x=0")
    right: BoundaryCondition = Field(..., description="Borde x=L")
    w0: float = Field(default=0.0, description="Extracción/recarga en x=0")
    w1: float = Field(default=0.0, description="Gradiente de extracción/recarga")


class TransientGroundwaterConfig(BaseModel):
    """Flujo subterráneo 1D transitorio (Crank-Nicolson)."""
    length: float = Field(..., gt=0, description="Longitud del dominio (m)")
    k: float = Field(..., gt=0, description="Conductividad hidráulica (m/d)")
    thickness: float = Field(default=1.0, gt=0, description="Espesor saturado (m)")
    nodes: int = Field(..., ge=3, description="Número de nodos")
    dt: float = Field(..., gt=0, description="Paso de tiempo (d)")
    total_time: float = Field(..., gt=0, description="Tiempo total de simulación (d)")
    initial_head: float | list[float] = Field(..., description="Carga inicial (escalar o por nodo)")
    left: BoundaryCondition = Field(..., description="Borde x=0")
    right: BoundaryCondition = Field(..., description="Borde x=L")
    recharge: float = Field(default=0.0, description="Recarga distribuida (m/d)")
    aquifer_type: AquiferType = Field(default=AquiferType.CONFINED, description="Tipo de acuífero")
    storativity: Optional[float] = Field(None, gt=0, description="Coeficiente de almacenamiento")
    specific_yield: Optional[float] = Field(None, gt=0, le=1, description="Rendimiento específico")

    @model_validator(mode="after")
    def check_storage(self) -> "TransientGroundwaterConfig":
        if self.aquifer_type == AquiferType.CONFINED and self.storativity is None:
            raise ValueError("Acuífero confinado requiere storativity")
        if self.aquifer_type == AquiferType.UNCONFINED and self.specific_yield is None:
            raise ValueError("Acuífero libre requiere specific_yield")
        if isinstance(self.initial_head, list) and len(self.initial_head) != self.nodes:
            raise ValueError(
                f"initial_head tiene {len(self.initial_head)} valores, se esperaban {self.nodes}"
            )
        return self

    @property
    def storage(self) -> float:
        """Almacenamiento efectivo según el tipo de acuífero."""
        if self.aquifer_type == AquiferType.CONFINED:
            return self.storativity
        return self.specific_yield

    @property
    def transmissivity(self) -> float:
        """T = k × b"""
        return self.k * self.thickness


# ============================================================================
# Hidrogramas unitarios
# ============================================================================

class SyntheticTimesConfig(BaseModel):
    """Parámetros temporales sintéticos (Tc, Tp, retardo)."""
    method: SyntheticMethod = Field(..., description="scs, kerby_kirpich o kerby")
    units: UnitSystem = Field(..., description="si o m")
    length: float = Field(..., gt=0, description="Longitud del cauce (ft o m)")
    slope: float = Field(..., gt=0, description="Pendiente (%)")
    cn: Optional[float] = Field(None, gt=0, le=100, description="Número de curva (SCS)")
    roughness: Optional[float] = Field(None, gt=0, description="Rugosidad N de Kerby")
    manning: Optional[float] = Field(None, gt=0, description="Coeficiente de Manning")

    @model_validator(mode="after")
    def check_method_inputs(self) -> "SyntheticTimesConfig":
        if self.method == SyntheticMethod.SCS and self.cn is None:
            raise ValueError("SCS requiere cn")
        if self.method == SyntheticMethod.KERBY_KIRPICH and self.roughness is None:
            raise ValueError("Kerby-Kirpich requiere roughness")
        if self.method == SyntheticMethod.KERBY and self.manning is None:
            raise ValueError("Kerby requiere manning")
        return self


class DimensionlessHydrographConfig(BaseModel):
    """Hidrograma adimensional (t/tp, q/qp)."""
    distribution: DimensionlessDistribution = Field(
        default=DimensionlessDistribution.GAMMA, description="gamma, lp3 o weibull"
    )
    timestep: float = Field(..., gt=0, description="Paso en t/tp")
    duration: float = Field(..., gt=0, description="Duración total en t/tp")
    prf: Optional[int] = Field(None, description="Peak Rate Factor (gamma)")
    shape: Optional[float] = Field(None, gt=0, description="Forma λ (lp3)")
    peak_time: Optional[float] = Field(None, gt=0, description="Tiempo al pico (lp3)")
    alpha: Optional[float] = Field(None, gt=1, description="Forma α (weibull)")
    beta: Optional[float] = Field(None, gt=0, description="Escala β (weibull)")
    location: float = Field(default=0.0, ge=0, description="Ubicación t0 (weibull)")


class UnitHydrographConfig(BaseModel):
    """Construcción de hidrograma unitario."""
    type: UnitHydrographType = Field(..., description="dim u obs")
    units: UnitSystem = Field(..., description="si o m")
    drainage_area: float = Field(..., gt=0, description="Área (mi² o km²; ft² o m² para obs)")
    peak: Optional[float] = Field(None, gt=0, description="Peak Rate Factor (dim)")
    tconcentration: Optional[float] = Field(None, gt=0, description="Tc en horas (dim)")
    baseflow: float = Field(default=0.0, ge=0, description="Caudal base (obs)")
    reverse: bool = Field(default=True, description="Invertir orden temporal (obs)")

    @model_validator(mode="after")
    def check_type_inputs(self) -> "UnitHydrographConfig":
        if self.type == UnitHydrographType.DIMENSIONLESS:
            if self.peak is None or self.tconcentration is None:
                raise ValueError("Hidrograma adimensional requiere peak y tconcentration")
        return self


class FloodHydrographConfig(BaseModel):
    """Generación de hidrograma de crecida por convolución."""
    type: FloodHydrographType = Field(..., description="scs u obs")
    units: Optional[UnitSystem] = Field(None, description="si o m (scs)")
    cn: Optional[float] = Field(None, gt=0, le=100, description="Número de curva (scs)")
    storm_duration: Optional[float] = Field(None, gt=0, description="Duración de la tormenta (hr)")
    timestep: Optional[float] = Field(None, gt=0, description="Paso de tiempo (hr)")
    baseflow: float = Field(default=0.0, ge=0, description="Caudal base")
    reverse: bool = Field(default=True, description="Invertir orden temporal (scs)")

    @model_validator(mode="after")
    def check_type_inputs(self) -> "FloodHydrographConfig":
        if self.type == FloodHydrographType.SCS:
            missing = [
                name for name in ("units", "cn", "storm_duration", "timestep")
                if getattr(self, name) is None
            ]
            if missing:
                raise ValueError(f"Hidrograma SCS requiere {', '.join(missing)}")
        return self


# ============================================================================
# Tránsito en cauces
# ============================================================================

class MuskingumCungeParams(BaseModel):
    """Parámetros de un tramo Muskingum-Cunge."""
    model_config = ConfigDict(frozen=True)

    k: float = Field(..., gt=0, description="Tiempo de tránsito K")
    x: float = Field(..., ge=0, le=0.5, description="Factor de ponderación X")
    dt: float = Field(..., gt=0, description="Paso de tiempo Δt")
    initial_storage: float = Field(default=0.0, ge=0, description="Almacenamiento inicial")


class LagAndRouteParams(BaseModel):
    """Parámetros de Lag-and-Route."""
    model_config = ConfigDict(frozen=True)

    lag_time: float = Field(..., ge=0, description="Tiempo de retardo")
    coefficients: tuple[float, ...] = Field(..., min_length=1, description="Coeficientes de tránsito")

    @field_validator("coefficients")
    @classmethod
    def validate_coefficients(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        if any(c < 0 for c in v):
            raise ValueError("Los coeficientes de tránsito no pueden ser negativos")
        return v


# ============================================================================
# Modelos complementarios
# ============================================================================

class BucketModelConfig(BaseModel):
    """Modelo de baldes por uso de suelo (todo en mm)."""
    baseflow: float = Field(default=0.0, ge=0, description="Caudal base diario (mm)")
    infiltration: float = Field(..., ge=0, le=1, description="Fracción de infiltración")
    agriculture: float = Field(default=0.0, ge=0, le=1)
    barerock: float = Field(default=0.0, ge=0, le=1)
    grassland: float = Field(default=0.0, ge=0, le=1)
    forest: float = Field(default=0.0, ge=0, le=1)
    urban: float = Field(default=0.0, ge=0, le=1)

    @model_validator(mode="after")
    def check_fractions(self) -> "BucketModelConfig":
        total = sum(self.landuse)
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Las fracciones de uso de suelo deben sumar 1 (suma: {total:.4f})")
        return self

    @property
    def landuse(self) -> tuple[float, float, float, float, float]:
        return (self.agriculture, self.barerock, self.grassland, self.forest, self.urban)


class RainAggregationConfig(BaseModel):
    """Agregación temporal de lluvia."""
    type: AggregationType = Field(default=AggregationType.AGGREGATE, description="aggr o disagg")
    interval: float = Field(..., gt=0, description="Intervalo de agregación (min)")
