"""Immune cytokines that respond to exercise, with acute and chronic response models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValueRange:
    """A concentration range with its unit."""

    minimum: float
    maximum: float
    unit: str


@dataclass(frozen=True)
class TimedValueRange:
    """A concentration range measured a given number of hours after exercise."""

    minimum: float
    maximum: float
    unit: str
    time_hour: float


@dataclass(frozen=True)
class CytokineConcentrations:
    """Reference concentrations at rest, after exercise and in trained people."""

    baseline: ValueRange
    post_exercise_acute: TimedValueRange
    trained_baseline: ValueRange


@dataclass(frozen=True)
class Cytokine:
    """An immune signaling molecule affected by exercise."""

    name: str
    family: str
    molecular_weight: float  # kDa
    source_cells: tuple[str, ...]
    target_cells: tuple[str, ...]
    acute_regulation: str  # "Up", "Down", "Biphasic", "No change"
    chronic_regulation: str
    half_life_minutes: float
    systemic_effects: tuple[str, ...]
    local_effects: tuple[str, ...]
    exercise_threshold: str
    recovery_timeframe: str
    primary_functions: tuple[str, ...]
    concentration_range: CytokineConcentrations

    def __post_init__(self) -> None:
        for name in (
            "source_cells",
            "target_cells",
            "systemic_effects",
            "local_effects",
            "primary_functions",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))


IL6 = Cytokine(
    name="Interleukin-6",
    family="Interleukin",
    molecular_weight=21.0,
    source_cells=("Myocytes", "Macrophages", "T cells", "Endothelial cells", "Fibroblasts"),
    target_cells=("Hepatocytes", "Immune cells", "Adipocytes", "Brain cells", "Muscle cells"),
    acute_regulation="Up",
    chronic_regulation="Down",
    half_life_minutes=45.0,
    systemic_effects=("Acute phase response", "Glucose metabolism", "Lipolysis", "HPA axis stimulation"),
    local_effects=(
        "Satellite cell proliferation",
        "Muscle hypertrophy",
        "Fat oxidation",
        "Insulin sensitization",
    ),
    exercise_threshold="Moderate-to-high intensity, >30min duration",
    recovery_timeframe="Returns to baseline within 6-24 hours",
    primary_functions=(
        "Metabolic signaling",
        "Pro- and anti-inflammatory effects",
        "Muscle repair",
        "Exercise adaptation",
    ),
    concentration_range=CytokineConcentrations(
        baseline=ValueRange(1.0, 5.0, "pg/mL"),
        post_exercise_acute=TimedValueRange(10.0, 120.0, "pg/mL", 1.0),
        trained_baseline=ValueRange(0.8, 3.0, "pg/mL"),
    ),
)

TNF = Cytokine(
    name="Tumor Necrosis Factor-α",
    family="TNF family",
    molecular_weight=17.0,
    source_cells=("Macrophages", "NK cells", "T cells", "Adipocytes"),
    target_cells=("Widespread", "Immune cells", "Adipocytes", "Endothelial cells", "Muscle cells"),
    acute_regulation="Up",
    chronic_regulation="Down",
    half_life_minutes=20.0,
    systemic_effects=("Pro-inflammatory signaling", "Insulin resistance", "Endothelial activation"),
    local_effects=("Macrophage activation", "Cell death regulation", "Muscle catabolism"),
    exercise_threshold="High intensity or prolonged exercise",
    recovery_timeframe="Returns to baseline within 1-3 hours",
    primary_functions=(
        "Inflammatory response",
        "Host defense",
        "Tissue remodeling",
        "Metabolic regulation",
    ),
    concentration_range=CytokineConcentrations(
        baseline=ValueRange(1.0, 10.0, "pg/mL"),
        post_exercise_acute=TimedValueRange(5.0, 25.0, "pg/mL", 0.5),
        trained_baseline=ValueRange(0.8, 7.0, "pg/mL"),
    ),
)

IL10 = Cytokine(
    name="Interleukin-10",
    family="Interleukin",
    molecular_weight=18.5,
    source_cells=("Macrophages", "Regulatory T cells", "B cells", "Monocytes"),
    target_cells=("Macrophages", "Dendritic cells", "T cells", "B cells", "NK cells"),
    acute_regulation="Up",
    chronic_regulation="Up",
    half_life_minutes=120.0,
    systemic_effects=("Anti-inflammatory signaling", "Immune tolerance", "Macrophage deactivation"),
    local_effects=("Tissue repair promotion", "Inflammation resolution", "T cell regulation"),
    exercise_threshold="Moderate-to-high intensity, >45min duration",
    recovery_timeframe="Peaks 6-24 hours post-exercise",
    primary_functions=(
        "Anti-inflammatory response",
        "Immune regulation",
        "Tissue homeostasis",
        "Recovery promotion",
    ),
    concentration_range=CytokineConcentrations(
        baseline=ValueRange(3.0, 8.0, "pg/mL"),
        post_exercise_acute=TimedValueRange(8.0, 30.0, "pg/mL", 6.0),
        trained_baseline=ValueRange(4.0, 10.0, "pg/mL"),
    ),
)

IL1RA = Cytokine(
    name="Interleukin-1 Receptor Antagonist",
    family="Interleukin-1 family",
    molecular_weight=17.0,
    source_cells=("Macrophages", "Monocytes", "Hepatocytes", "Neutrophils", "Myocytes"),
    target_cells=("Cells expressing IL-1 receptor", "Immune cells", "Brain cells"),
    acute_regulation="Up",
    chronic_regulation="Up",
    half_life_minutes=180.0,
    systemic_effects=("IL-1 signaling inhibition", "Anti-inflammatory action", "Fever reduction"),
    local_effects=("Tissue repair facilitation", "Inflammatory response limitation"),
    exercise_threshold="Moderate intensity, >30min duration",
    recovery_timeframe="Elevated for 24+ hours post-exercise",
    primary_functions=(
        "IL-1 antagonism",
        "Inflammatory regulation",
        "Exercise recovery",
        "Fever control",
    ),
    concentration_range=CytokineConcentrations(
        baseline=ValueRange(200.0, 500.0, "pg/mL"),
        post_exercise_acute=TimedValueRange(500.0, 2000.0, "pg/mL", 2.0),
        trained_baseline=ValueRange(250.0, 600.0, "pg/mL"),
    ),
)

TGF_BETA = Cytokine(
    name="Transforming Growth Factor-β",
    family="TGF-β superfamily",
    molecular_weight=25.0,
    source_cells=("Platelets", "Macrophages", "T cells", "Fibroblasts", "Endothelial cells"),
    target_cells=("Fibroblasts", "Immune cells", "Epithelial cells", "Endothelial cells"),
    acute_regulation="Up",
    chronic_regulation="Complex",
    half_life_minutes=60.0,
    systemic_effects=("Immune regulation", "Anti-inflammatory actions", "Tissue remodeling signals"),
    local_effects=(
        "ECM production",
        "Fibrosis regulation",
        "Wound healing",
        "Epithelial-mesenchymal transition",
    ),
    exercise_threshold="Moderate intensity, longer durations favored",
    recovery_timeframe="Sustained elevation for 24-48 hours post-exercise",
    primary_functions=(
        "Tissue repair",
        "Immune tolerance",
        "Inflammation resolution",
        "Fibrosis regulation",
    ),
    concentration_range=CytokineConcentrations(
        baseline=ValueRange(2.0, 5.0, "ng/mL"),
        post_exercise_acute=TimedValueRange(3.0, 10.0, "ng/mL", 24.0),
        trained_baseline=ValueRange(2.0, 6.0, "ng/mL"),
    ),
)

_TRAINED_STATUSES = frozenset({"Trained", "Athlete"})


def get_acutely_upregulated_cytokines() -> list[Cytokine]:
    """Cytokines that rise acutely with exercise."""
    return [IL6, TNF, IL10, IL1RA, TGF_BETA]


def get_chronically_downregulated_cytokines() -> list[Cytokine]:
    """Inflammatory cytokines reduced by regular training."""
    return [IL6, TNF]


def get_anti_inflammatory_cytokines() -> list[Cytokine]:
    """Anti-inflammatory cytokines affected by exercise."""
    return [IL10, IL1RA, TGF_BETA]


def calculate_acute_response(
    cytokine: Cytokine,
    exercise_intensity_percent: int,
    duration_minutes: int,
    training_status: str,
) -> float:
    """Fold change of a cytokine immediately after one exercise session."""
    intensity = exercise_intensity_percent / 100.0
    duration = duration_minutes / 60.0
    # Trained individuals show a blunted acute inflammatory response
    training = 0.7 if training_status in _TRAINED_STATUSES else 1.0

    if cytokine.name == IL6.name:
        gain = 5.0 if intensity > 0.7 else 3.0
        return 1.0 + gain * intensity * duration * training
    if cytokine.name == TNF.name:
        gain = 1.5 if intensity > 0.8 or duration > 1.5 else 0.5
        return 1.0 + gain * intensity * training
    if cytokine.name == IL10.name:
        return 1.0 + 2.0 * intensity * duration * training
    if cytokine.name == IL1RA.name:
        return 1.0 + 3.0 * intensity * duration * training
    if cytokine.name == TGF_BETA.name:
        return 1.0 + 0.5 * intensity * duration
    return 1.0


def calculate_chronic_adaptation(
    cytokine: Cytokine,
    weeks_duration: int,
    weekly_frequency: int,
    intensity_percent: int,
) -> float:
    """Long-term change factor of a cytokine after weeks of regular training."""
    duration = min(weeks_duration / 12.0, 1.5)
    frequency = weekly_frequency / 3.0
    intensity = intensity_percent / 70.0
    stimulus = duration * frequency * intensity

    if cytokine.name == IL6.name:
        return max(1.0 - 0.2 * stimulus, 0.6)
    if cytokine.name == TNF.name:
        return max(1.0 - 0.25 * stimulus, 0.7)
    if cytokine.name == IL10.name:
        return 1.0 + 0.3 * stimulus
    if cytokine.name == IL1RA.name:
        return 1.0 + 0.25 * stimulus
    if cytokine.name == TGF_BETA.name:
        return 1.0 + 0.1 * stimulus
    return 1.0