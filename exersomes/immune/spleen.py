"""Splenic factors, spleen contraction and leukocyte redistribution during exercise."""

from __future__ import annotations

from dataclasses import dataclass

from exersomes.immune.cytokines import ValueRange


@dataclass(frozen=True)
class SplenicFactor:
    """A signaling molecule tied to splenic function that responds to exercise."""

    name: str
    type: str  # "Cytokine", "Chemokine", "Growth factor", ...
    source_cells: tuple[str, ...]
    target_cells: tuple[str, ...]
    exercise_regulation: str  # "Up", "Down", "Biphasic"
    primary_effects: tuple[str, ...]
    splenic_function: str
    systemic_effect: str
    baseline_concentration: ValueRange
    post_exercise_concentration: ValueRange

    def __post_init__(self) -> None:
        for name in ("source_cells", "target_cells", "primary_effects"):
            object.__setattr__(self, name, tuple(getattr(self, name)))


CCL19 = SplenicFactor(
    name="CCL19 (C-C motif chemokine ligand 19)",
    type="Chemokine",
    source_cells=("T-zone fibroblastic reticular cells", "Dendritic cells"),
    target_cells=("T cells", "Dendritic cells", "B cells"),
    exercise_regulation="Up",
    primary_effects=("T cell homing", "Dendritic cell migration", "White pulp organization"),
    splenic_function="Organizes T cell zones and facilitates T cell-DC interactions",
    systemic_effect="Regulates redistribution of lymphocytes during and after exercise",
    baseline_concentration=ValueRange(50.0, 150.0, "pg/mL"),
    post_exercise_concentration=ValueRange(70.0, 200.0, "pg/mL"),
)

TNF_SPLENIC = SplenicFactor(
    name="Tumor Necrosis Factor-α (Splenic)",
    type="Cytokine",
    source_cells=("Macrophages", "Dendritic cells", "T cells"),
    target_cells=("Widespread immune cells", "Stromal cells"),
    exercise_regulation="Biphasic",
    primary_effects=("Inflammation regulation", "Cellular activation", "Marginal zone organization"),
    splenic_function="Activates macrophages and facilitates germinal center formation",
    systemic_effect="Contributes to post-exercise inflammatory response",
    baseline_concentration=ValueRange(2.0, 10.0, "pg/mg tissue"),
    post_exercise_concentration=ValueRange(3.0, 20.0, "pg/mg tissue"),
)

BAFF = SplenicFactor(
    name="B-cell Activating Factor (BAFF)",
    type="Cytokine",
    source_cells=("Dendritic cells", "Macrophages", "Neutrophils"),
    target_cells=("B cells", "Plasma cells"),
    exercise_regulation="Up",
    primary_effects=("B cell survival", "B cell maturation", "Antibody production enhancement"),
    splenic_function="Maintains B cell follicles and promotes antibody responses",
    systemic_effect="Enhances humoral immunity with regular exercise",
    baseline_concentration=ValueRange(0.5, 1.5, "ng/mL"),
    post_exercise_concentration=ValueRange(0.7, 2.0, "ng/mL"),
)

# Fraction of intensity by which the spleen stays contracted at each time point
_CONTRACTION_BY_TIME_POINT = {
    "During exercise": 0.3,
    "Immediate post": 0.2,
    "30min post": 0.1,
    "60min post": 0.05,
}

# Mobilization rate of each cell population per unit of splenic contraction
_MOBILIZATION_RATES = {
    "NK cells": 4.0,
    "Monocytes": 2.0,
    "B cells": 1.0,
    "T cells": 1.5,
    "Neutrophils": 1.0,
}


def calculate_contractile_response(
    exercise_intensity_percent: int, duration_minutes: int, time_point: str
) -> float:
    """Spleen volume relative to rest (1.0) at a point around an exercise session."""
    rate = _CONTRACTION_BY_TIME_POINT.get(time_point)
    if rate is None:
        return 1.0
    contraction = rate * exercise_intensity_percent / 100.0
    if time_point == "During exercise" and duration_minutes > 30:
        contraction += 0.1
    return 1.0 - contraction


def calculate_leukocyte_redistribution(spleen_volume_factor: float) -> dict[str, float]:
    """Circulating cell levels relative to baseline caused by splenic contraction."""
    contraction = 1.0 - spleen_volume_factor
    return {cell: 1.0 + rate * contraction for cell, rate in _MOBILIZATION_RATES.items()}


def predict_splenic_factor_response(
    factor: SplenicFactor, exercise_intensity_percent: int, chronic_training_weeks: int
) -> float:
    """Fold change of a splenic factor for an exercise intensity and training history."""
    intensity = exercise_intensity_percent / 100.0
    trained = chronic_training_weeks > 0

    adaptation = 0.0
    if trained:
        adaptation = chronic_training_weeks / 12.0
        if adaptation > 1.0:
            adaptation = 1.0 + 0.2 * (adaptation - 1.0)

    if factor.name == CCL19.name:
        response = 1.0 + 0.3 * intensity
        if trained:
            response *= 1.0 + 0.2 * adaptation
        return response
    if factor.name == TNF_SPLENIC.name:
        chronic = max(1.0 - 0.3 * adaptation, 0.7) if trained else 1.0
        return (1.0 + 0.5 * intensity) * chronic
    if factor.name == BAFF.name:
        chronic = 1.0 + 0.3 * adaptation if trained else 1.0
        return (1.0 + 0.2 * intensity) * chronic
    return 1.0