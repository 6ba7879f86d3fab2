from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


# ----------------- METRICS ---------------------


class MetricEuclideanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["euclidean"] = "euclidean"


class MetricHaversineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["haversine"] = "haversine"
    radius_km: float = 6371.0

    @field_validator("radius_km")
    def _gt_zero(cls, v: float, info: ValidationInfo) -> float:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


MetricUnion = Annotated[
    MetricEuclideanModel | MetricHaversineModel,
    Field(discriminator="kind"),
]

# ----------------- COSTS ---------------------


class CostModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    strict: bool = False  # raise on cost lookups toward non-adjacent nodes


# ------------------------------------------------------------------


class GraphConfigModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "roadgraph"
    run_id: str = "local"
    metric: MetricUnion = Field(default_factory=MetricEuclideanModel)
    cost: CostModel = CostModel()
    log: LogModel = LogModel()
