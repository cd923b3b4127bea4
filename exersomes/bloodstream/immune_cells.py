"""Circulating immune cells and their response to an exercise session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CellCount:
    """Resting count of a cell type in blood."""

    mean: float
    reference_range: tuple[float, float]
    unit: str


@dataclass(frozen=True)
class CellExerciseResponse:
    """How a cell type changes with acute exercise and with training."""

    acute_change: str
    acute_magnitude: float  # fold change during exercise
    recovery_time: float  # hours to return to baseline
    chronic_adaptation: str


@dataclass(frozen=True)
class ImmuneCell:
    """A circulating immune cell type affected by exercise."""

    name: str
    baseline_count: CellCount
    exercise_response: CellExerciseResponse
    primary_functions: tuple[str, ...]
    exercise_mediated: tuple[str, ...]
    receptors: tuple[str, ...]
    secreted: tuple[str, ...]

    def __post_init__(self) -> None:
        for name in ("primary_functions", "exercise_mediated", "receptors", "secreted"):
            object.__setattr__(self, name, tuple(getattr(self, name)))


NEUTROPHILS = ImmuneCell(
    name="Neutrophils",
    baseline_count=CellCount(4000.0, (1500.0, 7000.0), "cells/μL"),
    exercise_response=CellExerciseResponse("Increase", 2.5, 6.0, "Attenuated response"),
    primary_functions=(
        "Phagocytosis", "Degranulation", "NETosis",
        "Pathogen killing", "Inflammatory response",
    ),
    exercise_mediated=(
        "Enhanced phagocytosis", "Delayed apoptosis",
        "ROS production", "Tissue repair signals",
    ),
    receptors=("CXCR1", "CXCR2", "Fc receptors", "TLRs", "Complement receptors"),
    secreted=("Myeloperoxidase", "Elastase", "ROS", "NETs", "Cytokines"),
)

MONOCYTES = ImmuneCell(
    name="Monocytes",
    baseline_count=CellCount(500.0, (200.0, 800.0), "cells/μL"),
    exercise_response=CellExerciseResponse("Increase", 1.5, 4.0, "Anti-inflammatory phenotype"),
    primary_functions=(
        "Phagocytosis", "Antigen presentation",
        "Cytokine production", "Tissue macrophage precursor",
    ),
    exercise_mediated=(
        "Phenotype shift (M1→M2)", "Enhanced tissue infiltration",
        "Anti-inflammatory cytokine secretion",
    ),
    receptors=("CCR2", "CX3CR1", "CD14", "CD16", "TLRs"),
    secreted=("IL-10", "IL-1ra", "IL-6", "TNF-α", "TGF-β"),
)

NATURAL_KILLER_CELLS = ImmuneCell(
    name="Natural Killer Cells",
    baseline_count=CellCount(200.0, (100.0, 400.0), "cells/μL"),
    exercise_response=CellExerciseResponse("Increase", 3.0, 3.0, "Enhanced cytotoxicity"),
    primary_functions=(
        "Cytotoxicity against infected/tumor cells",
        "Cytokine production", "Immune surveillance",
    ),
    exercise_mediated=(
        "Enhanced cytotoxicity", "Increased mobilization",
        "Improved surveillance", "Anti-tumor activity",
    ),
    receptors=("CD16", "CD56", "KIRs", "NKG2D", "Interleukin receptors"),
    secreted=("IFN-γ", "TNF-α", "Perforin", "Granzymes", "GM-CSF"),
)

CD4_T_HELPER = ImmuneCell(
    name="CD4+ T Helper Cells",
    baseline_count=CellCount(800.0, (500.0, 1500.0), "cells/μL"),
    exercise_response=CellExerciseResponse("Increase", 1.5, 2.0, "Th1/Th2 balance shift"),
    primary_functions=(
        "Cytokine secretion", "B-cell help",
        "Macrophage activation", "Inflammatory regulation",
    ),
    exercise_mediated=(
        "Shift towards anti-inflammatory phenotype",
        "Reduced Th17/increased Treg", "Enhanced memory formation",
    ),
    receptors=("CD4", "CD28", "TCR", "IL receptors", "Chemokine receptors"),
    secreted=("IL-2", "IL-4", "IL-10", "IFN-γ", "TNF-α"),
)

CD8_T_CYTOTOXIC = ImmuneCell(
    name="CD8+ Cytotoxic T Cells",
    baseline_count=CellCount(600.0, (300.0, 1000.0), "cells/μL"),
    exercise_response=CellExerciseResponse("Increase", 2.0, 3.0, "Enhanced memory compartment"),
    primary_functions=(
        "Cytotoxicity against virus-infected cells",
        "Tumor cell killing", "Memory formation",
    ),
    exercise_mediated=(
        "Increased mobilization", "Enhanced cytotoxicity",
        "Improved viral clearance", "Expanded memory pool",
    ),
    receptors=("CD8", "CD28", "TCR", "IL receptors", "CXCR3"),
    secreted=("Perforin", "Granzymes", "IFN-γ", "TNF-α", "IL-2"),
)

B_LYMPHOCYTES = ImmuneCell(
    name="B Lymphocytes",
    baseline_count=CellCount(200.0, (100.0, 400.0), "cells/μL"),
    exercise_response=CellExerciseResponse("Increase", 1.3, 2.0, "Enhanced antibody response"),
    primary_functions=(
        "Antibody production", "Antigen presentation",
        "Cytokine secretion", "Memory formation",
    ),
    exercise_mediated=(
        "Increased mobilization", "Enhanced antibody production",
        "Improved vaccination response",
    ),
    receptors=("BCR", "CD19", "CD20", "CD40", "TLRs"),
    secreted=("Antibodies", "IL-6", "IL-10", "TNF-α", "Lymphotoxin"),
)

_EARLY_RECOVERY_MINUTES = 30.0


def calculate_immune_response(
    cell: ImmuneCell,
    exercise_intensity: float,
    exercise_duration: float,
    time_from_start: float,
) -> float:
    """Cell count at a time (minutes from exercise start) during or after exercise."""
    baseline = cell.baseline_count.mean
    intensity = exercise_intensity / 100.0

    response_factor = min(intensity * (1.0 + exercise_duration / 60.0), 2.0)
    magnitude = 1.0 + (cell.exercise_response.acute_magnitude - 1.0) * response_factor

    if time_from_start <= exercise_duration:
        progress = time_from_start / exercise_duration
        return baseline * (1.0 + (magnitude - 1.0) * progress)

    if time_from_start <= exercise_duration + _EARLY_RECOVERY_MINUTES:
        if cell.name == NEUTROPHILS.name:
            # Neutrophils keep rising shortly after exercise
            return baseline * (magnitude + 0.5)
        return baseline * magnitude

    recovery_minutes = cell.exercise_response.recovery_time * 60.0
    into_recovery = time_from_start - exercise_duration - _EARLY_RECOVERY_MINUTES
    ratio = into_recovery / recovery_minutes
    if ratio >= 1.0:
        return baseline
    return baseline + (baseline * magnitude - baseline) * (1.0 - ratio)


def get_immune_cells_affected_by_exercise() -> list[ImmuneCell]:
    """All immune cell types modulated by exercise."""
    return [
        NEUTROPHILS,
        MONOCYTES,
        NATURAL_KILLER_CELLS,
        CD4_T_HELPER,
        CD8_T_CYTOTOXIC,
        B_LYMPHOCYTES,
    ]


def predict_immune_cell_timeseries_for_exercise(
    exercise_intensity: float,
    exercise_duration: float,
    recovery_period: float,
    timepoints: int,
) -> dict[str, list[float]]:
    """Evenly spaced cell counts over exercise and recovery, keyed by cell name."""
    if timepoints < 2:
        raise ValueError("timepoints must be at least 2")
    interval = (exercise_duration + recovery_period) / (timepoints - 1)
    return {
        cell.name: [
            calculate_immune_response(cell, exercise_intensity, exercise_duration, i * interval)
            for i in range(timepoints)
        ]
        for cell in get_immune_cells_affected_by_exercise()
    }


_NLR_TRAINING_FACTORS = {"Untrained": 1.3, "Moderately trained": 1.0, "Highly trained": 0.7}
_VIGILANCE_TRAINING_FACTORS = {"Untrained": 0.8, "Highly trained": 1.2}
_RESOLUTION_TRAINING_FACTORS = {"Untrained": 0.8, "Moderately trained": 1.0, "Highly trained": 1.3}


def predict_immune_indexes(
    exercise_intensity: float, exercise_duration: float, training_status: str
) -> dict[str, float]:
    """Integrated measures of immune function after an exercise session."""
    baseline_nlr = NEUTROPHILS.baseline_count.mean / (
        CD4_T_HELPER.baseline_count.mean + CD8_T_CYTOTOXIC.baseline_count.mean
    )
    intensity = exercise_intensity / 100.0
    duration = exercise_duration / 60.0

    acute_nlr = baseline_nlr * (1.0 + intensity * duration)
    acute_nlr *= _NLR_TRAINING_FACTORS.get(training_status, 1.0)

    vigilance_boost = 20.0 * intensity
    if exercise_duration > 90.0:
        vigilance_boost -= (exercise_duration - 90.0) / 30.0 * 10.0
    vigilance_boost *= _VIGILANCE_TRAINING_FACTORS.get(training_status, 1.0)

    resolution = 100.0
    if exercise_intensity <= 75.0:
        resolution += 15.0 * (exercise_intensity / 75.0)
    elif exercise_duration <= 30.0:
        resolution += 20.0
    else:
        resolution -= (exercise_duration - 30.0) / 15.0 * 5.0
    resolution *= _RESOLUTION_TRAINING_FACTORS.get(training_status, 1.0)

    return {
        "Neutrophil:Lymphocyte Ratio": acute_nlr,
        "Immune Vigilance": 100.0 + vigilance_boost,
        "Inflammation Resolution": resolution,
    }