"""
Core data models for the film development calculator.

All models use Pydantic for validation and serialization. Reference data
models are frozen: they are populated once at load time and never mutated
during a calculation.
"""

from typing import Annotated, Any, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from filmdev.core.types import ProcessFamily

# Push/pull multipliers applied to black-and-white baseline times
DEFAULT_PUSH_PULL_MULTIPLIERS: dict[int, float] = {
    -2: 0.5,
    -1: 0.7,
    0: 1.0,
    1: 1.4,
    2: 2.0,
    3: 2.8,
}

# Loose spellings of process families found in hand-written data files
_FAMILY_ALIASES = {
    "b&w": ProcessFamily.BLACK_WHITE,
    "bw": ProcessFamily.BLACK_WHITE,
    "b&w negative": ProcessFamily.BLACK_WHITE,
    "black_and_white": ProcessFamily.BLACK_WHITE,
    "c41": ProcessFamily.COLOR_NEGATIVE,
    "c-41": ProcessFamily.COLOR_NEGATIVE,
    "color negative": ProcessFamily.COLOR_NEGATIVE,
    "e6": ProcessFamily.SLIDE,
    "e-6": ProcessFamily.SLIDE,
    "reversal": ProcessFamily.SLIDE,
}


def coerce_process_family(value: Any) -> ProcessFamily:
    """Convert a family value or one of its common spellings to ProcessFamily."""
    if isinstance(value, ProcessFamily):
        return value
    text = str(value).strip().lower()
    if text in _FAMILY_ALIASES:
        return _FAMILY_ALIASES[text]
    return ProcessFamily(text)


class DeveloperProfile(BaseModel):
    """A developer as shown to the user. Metadata is display-only."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    manufacturer: Optional[str] = Field(default=None)
    developer_type: Optional[str] = Field(
        default=None, alias="type", description="Powder, liquid concentrate, kit"
    )
    description: Optional[str] = Field(default=None)
    characteristics: Optional[str] = Field(default=None)
    dilutions: tuple[str, ...] = Field(default=())
    shelf_life: Optional[str] = Field(default=None)
    capacity: Optional[str] = Field(default=None)
    safety_notes: Optional[str] = Field(default=None)


class DeveloperOption(BaseModel):
    """A selectable developer for a film: the raw process-map key and its profile."""

    model_config = ConfigDict(frozen=True)

    key: str
    developer: DeveloperProfile

    @property
    def name(self) -> str:
        return self.developer.name


class _ProcessEntryBase(BaseModel):
    """Fields shared by every process family."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    DEFAULT_BASE_TIME: ClassVar[float]
    OVERRIDE_FIELDS: ClassVar[dict[int, str]]

    dilution: Optional[str] = Field(default=None, description="Ratio such as 1:31 or 'stock'")
    temperature_c: float = Field(default=20.0, description="Reference temperature of the data")
    agitation_initial_seconds: Optional[int] = Field(default=None, ge=0)
    agitation_interval_seconds: Optional[int] = Field(default=None, ge=0)
    agitation_frequency_minutes: Optional[float] = Field(default=None, gt=0)

    @property
    def base_time(self) -> float:
        raise NotImplementedError

    def override_for(self, stops: int) -> Optional[float]:
        """Explicit push/pull time for ``stops``, if the data provides one."""
        field = self.OVERRIDE_FIELDS.get(stops)
        if field is None:
            return None
        return getattr(self, field)


class BlackAndWhiteEntry(_ProcessEntryBase):
    """Black-and-white development data for one film/developer pair."""

    DEFAULT_BASE_TIME: ClassVar[float] = 8.0
    OVERRIDE_FIELDS: ClassVar[dict[int, str]] = {
        1: "push_1_stop_minutes",
        2: "push_2_stop_minutes",
        3: "push_3_stop_minutes",
        -1: "pull_1_stop_minutes",
        -2: "pull_2_stop_minutes",
    }

    family: Literal["black_white"] = "black_white"
    time_minutes: Optional[float] = Field(default=None, gt=0)
    time: Optional[float] = Field(default=None, gt=0, description="Older name for time_minutes")

    push_1_stop_minutes: Optional[float] = Field(default=None, gt=0)
    push_2_stop_minutes: Optional[float] = Field(default=None, gt=0)
    push_3_stop_minutes: Optional[float] = Field(default=None, gt=0)
    pull_1_stop_minutes: Optional[float] = Field(default=None, gt=0)
    pull_2_stop_minutes: Optional[float] = Field(default=None, gt=0)

    @property
    def base_time(self) -> float:
        if self.time_minutes is not None:
            return self.time_minutes
        if self.time is not None:
            return self.time
        return self.DEFAULT_BASE_TIME


class ColorNegativeEntry(_ProcessEntryBase):
    """C-41 developer step data for one film/kit pair."""

    DEFAULT_BASE_TIME: ClassVar[float] = 3.25
    OVERRIDE_FIELDS: ClassVar[dict[int, str]] = {
        1: "push_1_stop_dev_time",
        2: "push_2_stop_dev_time",
        -1: "pull_1_stop_dev_time",
    }

    family: Literal["color_negative"] = "color_negative"
    developer_time_minutes: Optional[float] = Field(default=None, gt=0)
    push_1_stop_dev_time: Optional[float] = Field(default=None, gt=0)
    push_2_stop_dev_time: Optional[float] = Field(default=None, gt=0)
    pull_1_stop_dev_time: Optional[float] = Field(default=None, gt=0)

    @property
    def base_time(self) -> float:
        if self.developer_time_minutes is not None:
            return self.developer_time_minutes
        return self.DEFAULT_BASE_TIME


class SlideEntry(_ProcessEntryBase):
    """E-6 first developer data for one film/kit pair."""

    DEFAULT_BASE_TIME: ClassVar[float] = 6.0
    OVERRIDE_FIELDS: ClassVar[dict[int, str]] = {
        1: "push_1_stop_first_dev_time",
        2: "push_2_stop_first_dev_time",
        -1: "pull_1_stop_first_dev_time",
    }

    family: Literal["slide"] = "slide"
    first_dev_time_minutes: Optional[float] = Field(default=None, gt=0)
    push_1_stop_first_dev_time: Optional[float] = Field(default=None, gt=0)
    push_2_stop_first_dev_time: Optional[float] = Field(default=None, gt=0)
    pull_1_stop_first_dev_time: Optional[float] = Field(default=None, gt=0)

    @property
    def base_time(self) -> float:
        if self.first_dev_time_minutes is not None:
            return self.first_dev_time_minutes
        return self.DEFAULT_BASE_TIME


ProcessEntry = Annotated[
    Union[BlackAndWhiteEntry, ColorNegativeEntry, SlideEntry],
    Field(discriminator="family"),
]


class FilmStock(BaseModel):
    """A film stock and its process map (raw developer key -> entry)."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    manufacturer: Optional[str] = Field(default=None)
    iso: int = Field(..., gt=0)
    film_type: ProcessFamily = Field(..., alias="type")
    process: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    characteristics: Optional[str] = Field(default=None)
    grain: Optional[str] = Field(default=None)
    contrast: Optional[str] = Field(default=None)
    alternative_names: tuple[str, ...] = Field(default=())
    best_uses: tuple[str, ...] = Field(default=())
    current_production: bool = Field(default=True)
    developers: dict[str, ProcessEntry] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def tag_process_entries(cls, data: Any) -> Any:
        """Select the process entry variant from the film's own type."""
        if not isinstance(data, dict):
            return data
        family = data.get("type", data.get("film_type"))
        entries = data.get("developers")
        if family is None or not isinstance(entries, dict):
            return data
        family_value = coerce_process_family(family).value
        tagged = {
            key: {**entry, "family": family_value} if isinstance(entry, dict) else entry
            for key, entry in entries.items()
        }
        return {**data, "developers": tagged}

    @field_validator("film_type", mode="before")
    @classmethod
    def normalize_film_type(cls, v: Any) -> ProcessFamily:
        return coerce_process_family(v)

    def process_entry(self, developer_key: str) -> Optional[
        Union[BlackAndWhiteEntry, ColorNegativeEntry, SlideEntry]
    ]:
        """Process entry stored under the exact raw key, if any."""
        return self.developers.get(developer_key)


class CompensationTable(BaseModel):
    """Temperature and push/pull multipliers."""

    model_config = ConfigDict(frozen=True)

    temperature: dict[float, float] = Field(..., min_length=1)
    push_pull: dict[int, float] = Field(
        default_factory=lambda: dict(DEFAULT_PUSH_PULL_MULTIPLIERS)
    )

    @field_validator("temperature")
    @classmethod
    def validate_temperature_keys(cls, v: dict[float, float]) -> dict[float, float]:
        """Keys must sit on the half-degree grid and multipliers must be positive."""
        for temp, multiplier in v.items():
            if not float(temp * 2).is_integer():
                raise ValueError(f"Temperature key {temp} is not on a 0.5°C grid")
            if multiplier <= 0:
                raise ValueError(f"Multiplier for {temp}°C must be positive")
        return dict(sorted(v.items()))

    @field_validator("push_pull")
    @classmethod
    def validate_push_pull(cls, v: dict[int, float]) -> dict[int, float]:
        """Validate multipliers; stop counts left out keep their default."""
        for stops, multiplier in v.items():
            if not -2 <= stops <= 3:
                raise ValueError(f"Push/pull stop count {stops} outside -2..+3")
            if multiplier <= 0:
                raise ValueError(f"Multiplier for {stops} stops must be positive")
        return dict(sorted({**DEFAULT_PUSH_PULL_MULTIPLIERS, **v}.items()))

    @property
    def temperature_range(self) -> tuple[float, float]:
        """Lowest and highest tabulated temperature."""
        temps = list(self.temperature)
        return temps[0], temps[-1]


class DatabaseMetadata(BaseModel):
    """Descriptive metadata of a reference document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    version: str = Field(default="1.0.0")
    last_updated: Optional[str] = Field(default=None)
    film_count: Optional[int] = Field(default=None, ge=0)
    developer_count: Optional[int] = Field(default=None, ge=0)
    total_combinations: Optional[int] = Field(default=None, ge=0)


class DatabaseStats(BaseModel):
    """Counts computed from a loaded reference database."""

    model_config = ConfigDict(frozen=True)

    film_count: int = Field(ge=0)
    developer_count: int = Field(ge=0)
    total_combinations: int = Field(ge=0)
    version: str
    last_updated: Optional[str] = None


class CalculationRequest(BaseModel):
    """Inputs for one development calculation."""

    model_config = ConfigDict(frozen=True)

    film_id: str = Field(default="")
    developer_id: str = Field(default="", description="Raw process-map key")
    temperature: float = Field(default=20.0, allow_inf_nan=False, description="°C")
    push_pull: int = Field(default=0, ge=-2, le=3, description="Stops")
    volume: int = Field(default=500, gt=0, description="Total working solution, ml")


class DilutionResult(BaseModel):
    """Chemistry and water volumes for a working solution."""

    model_config = ConfigDict(frozen=True)

    label: str
    chemistry_ml: int = Field(ge=0)
    water_ml: int = Field(ge=0)
    ratio: Optional[tuple[int, int]] = Field(default=None, description="(developer, water) parts")

    @property
    def total_ml(self) -> int:
        return self.chemistry_ml + self.water_ml


class CalculationResult(BaseModel):
    """Complete development parameters for one request."""

    model_config = ConfigDict(frozen=True)

    # Time
    time_minutes: float = Field(gt=0)
    time_formatted: str
    base_time_minutes: float = Field(gt=0, description="Baseline before push/pull")
    temperature_multiplier: float = Field(gt=0)

    # Chemistry
    dilution: str
    chemistry_ml: int = Field(ge=0)
    water_ml: int = Field(ge=0)

    # Echoed request
    film_id: str
    developer_id: str
    temperature: float
    push_pull: int
    volume: int = Field(gt=0)

    # Display
    film_name: str
    developer_name: str
    process_family: ProcessFamily

    notes: tuple[str, ...] = Field(default=())

    @model_validator(mode="after")
    def validate_volumes(self) -> "CalculationResult":
        """Chemistry and water always add up to the requested volume."""
        if self.chemistry_ml + self.water_ml != self.volume:
            raise ValueError(
                f"chemistry ({self.chemistry_ml} ml) + water ({self.water_ml} ml) "
                f"!= volume ({self.volume} ml)"
            )
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.model_dump(mode="json")
