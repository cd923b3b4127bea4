"""Thymic factors, thymic size and T cell diversity under exercise training."""

from __future__ import annotations

from dataclasses import dataclass

from exersomes.immune.cytokines import ValueRange


@dataclass(frozen=True)
class ThymicFactor:
    """A signaling molecule tied to thymus function that responds to exercise."""

    name: str
    type: str  # "Hormone", "Cytokine", "Chemokine", ...
    source_cells: tuple[str, ...]
    target_cells: tuple[str, ...]
    exercise_regulation: str  # "Up", "Down", "Biphasic"
    primary_effects: tuple[str, ...]
    thymic_function: str
    aging_effect: str
    baseline_concentration: ValueRange
    post_exercise_concentration: ValueRange

    def __post_init__(self) -> None:
        for name in ("source_cells", "target_cells", "primary_effects"):
            object.__setattr__(self, name, tuple(getattr(self, name)))


THYMULIN = ThymicFactor(
    name="Thymulin",
    type="Hormone",
    source_cells=("Thymic epithelial cells",),
    target_cells=("T cell precursors", "Mature T cells"),
    exercise_regulation="Up",
    primary_effects=("T cell differentiation", "T cell function enhancement", "Anti-inflammatory"),
    thymic_function="Promotes thymocyte maturation and T cell function",
    aging_effect="Declines with age; exercise may partially preserve levels",
    baseline_concentration=ValueRange(10.0, 50.0, "fg/mL"),
    post_exercise_concentration=ValueRange(15.0, 70.0, "fg/mL"),
)

IL7_THYMIC = ThymicFactor(
    name="Interleukin-7 (Thymic)",
    type="Cytokine",
    source_cells=("Thymic epithelial cells", "Bone marrow stromal cells"),
    target_cells=("Thymocytes", "Naive T cells", "B cell progenitors"),
    exercise_regulation="Up",
    primary_effects=("T cell development", "Thymic cellularity maintenance", "Lymphocyte survival"),
    thymic_function="Essential for thymocyte development and survival",
    aging_effect="Reduced with age; contributes to thymic involution",
    baseline_concentration=ValueRange(2.0, 8.0, "pg/mL"),
    post_exercise_concentration=ValueRange(3.0, 12.0, "pg/mL"),
)

KGF = ThymicFactor(
    name="Keratinocyte Growth Factor (FGF-7)",
    type="Growth factor",
    source_cells=("Mesenchymal cells", "Fibroblasts"),
    target_cells=("Thymic epithelial cells",),
    exercise_regulation="Up",
    primary_effects=("Thymic epithelial cell proliferation", "Thymic architecture maintenance"),
    thymic_function="Supports thymic epithelial cell health and function",
    aging_effect="Reduced with age; exercise may slow decline",
    baseline_concentration=ValueRange(5.0, 20.0, "pg/mL"),
    post_exercise_concentration=ValueRange(8.0, 25.0, "pg/mL"),
)

THYMIC_FACTORS: tuple[ThymicFactor, ...] = (THYMULIN, IL7_THYMIC, KGF)


def _optimality(intensity: float) -> float:
    # Moderate intensity is best for the thymus
    if intensity > 0.8:
        return 1.0 - 0.5 * (intensity - 0.8) / 0.2
    if intensity < 0.5:
        return 0.8 + 0.2 * intensity / 0.5
    return 1.0


def _age_factor(age_years: int) -> float:
    if age_years <= 20:
        return 1.0
    return max(1.0 - 0.5 * (age_years - 20) / 60.0, 0.3)


def calculate_thymic_response(
    factor: ThymicFactor,
    exercise_intensity_percent: int,
    age_years: int,
    chronic_training_weeks: int,
) -> float:
    """Fold change of a thymic factor for intensity, age and training history."""
    intensity = exercise_intensity_percent / 100.0
    optimality = _optimality(intensity)
    age_factor = _age_factor(age_years)
    trained = chronic_training_weeks > 0

    adaptation = 1.0
    if trained:
        weeks = chronic_training_weeks / 12.0
        if weeks > 1.0:
            weeks = 1.0 + 0.2 * (weeks - 1.0)
        adaptation = 1.0 + 0.2 * weeks

    if factor.name == THYMULIN.name:
        return age_factor * (1.0 + 0.3 * optimality * adaptation)
    if factor.name == IL7_THYMIC.name:
        acute = 0.1 * intensity * optimality
        chronic = 0.2 * adaptation if trained else 0.0
        return age_factor * (1.0 + acute + chronic)
    if factor.name == KGF.name:
        acute = 0.05 * intensity * optimality
        chronic = 0.15 * adaptation if trained else 0.0
        return age_factor * (1.0 + acute + chronic)
    return 1.0


def predict_thymic_size(
    age_years: int,
    chronic_training_weeks: int,
    intensity_percent: int,
    consistency_percent: int,
) -> float:
    """Thymus size relative to a young adult's, after age and exercise training."""
    if age_years <= 20:
        size = 1.0
    elif age_years <= 40:
        size = 1.0 - 0.3 * (age_years - 20) / 20.0
    elif age_years <= 60:
        size = 0.7 - 0.2 * (age_years - 40) / 20.0
    else:
        size = max(0.5 - 0.2 * (age_years - 60) / 20.0, 0.2)

    if chronic_training_weeks > 0:
        weeks = float(chronic_training_weeks)
        intensity = intensity_percent / 70.0
        consistency = consistency_percent / 100.0
        if intensity > 1.2:
            intensity = 1.2 - 0.5 * (intensity - 1.2)

        if weeks <= 12:
            benefit = 0.05 * (weeks / 12.0) * intensity * consistency
            size *= 1.0 + benefit
        else:
            benefit = min(0.05 + 0.05 * (weeks - 12.0) / 48.0, 0.15)
            size *= 1.0 + benefit * intensity * consistency

    return size


def predict_t_cell_diversity(age_years: int, exercise_years: int, days_per_week: int) -> float:
    """T cell receptor diversity relative to a young adult's."""
    if age_years <= 30:
        diversity = 1.0
    elif age_years <= 60:
        diversity = 1.0 - 0.3 * (age_years - 30) / 30.0
    else:
        diversity = max(0.7 - 0.3 * (age_years - 60) / 30.0, 0.3)

    if exercise_years > 0:
        frequency = min(days_per_week / 3.0, 1.5)
        duration = float(exercise_years)
        if duration > 10:
            duration = 10.0 + 0.2 * (duration - 10.0)
        preservation = 0.25 * (duration / 10.0) * frequency
        diversity *= 1.0 + preservation
        if age_years > 60 and diversity > 0.9:
            diversity = 0.9

    return diversity