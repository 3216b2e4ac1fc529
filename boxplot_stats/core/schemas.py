from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from boxplot_stats.core.config import settings


class OutlierFormat(str, Enum):
    values = "values"
    delimited = "delimited"


class SortOrder(str, Enum):
    ascending = "ascending"
    descending = "descending"


class BoxplotStats(BaseModel):
    """Summary statistics for one sample; the raw values are not kept."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float
    q1: float
    q3: float
    iqr: float
    median: float
    outlier_low_threshold: float
    outlier_high_threshold: float
    outliers: list[float] = Field(default_factory=list)
    id: str | None = None


class BoxplotStatsRequest(BaseModel):
    values: list[float | None] = Field(min_length=1)
    ids: list[str] | None = None
    outliers_as_strings: bool = False
    delimiter: str = Field(default_factory=lambda: settings.outlier_delimiter, min_length=1)

    @field_validator("delimiter")
    @classmethod
    def delimiter_validate(cls, value: str) -> str:
        if value.strip() == "":
            raise ValueError("delimiter must not be blank")
        return value


class BoxplotPlotRequest(BoxplotStatsRequest):
    xlab: str = "ID"
    ylab: str = "Value"
    sort: SortOrder | None = None
    interactive: bool = True


class BoxplotStatsPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    min: float
    max: float
    q1: float
    q3: float
    iqr: float
    median: float
    outlier_low_threshold: float
    outlier_high_threshold: float
    outliers: list[float] | str
    id: str | None = None


class BoxplotStatsList(BaseModel):
    stats: list[BoxplotStatsPublic]
