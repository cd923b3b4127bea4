"""Immune-targeting exercise prescriptions and immune response predictions."""

from __future__ import annotations

from dataclasses import dataclass, field

from exersomes.bone.prescriptions import TimeToEffect


@dataclass(frozen=True)
class ExercisePrescription:
    """Parameters for an immune-targeting exercise protocol."""

    name: str
    description: str
    primary_type: str  # "Aerobic", "HIIT", "Resistance", "Combined"
    intensity_percent: int  # % of max HR, VO2max or 1RM
    duration_minutes: int
    frequency_per_week: int
    interval_structure: str = ""
    target_immune_function: tuple[str, ...] = ()
    target_cytokines: tuple[str, ...] = ()
    beneficial_for: tuple[str, ...] = ()
    contraindications_for: tuple[str, ...] = ()
    time_to_effect: TimeToEffect = TimeToEffect(acute="", chronic="")
    recovery_needs: str = ""

    def __post_init__(self) -> None:
        for name in (
            "target_immune_function",
            "target_cytokines",
            "beneficial_for",
            "contraindications_for",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))


@dataclass
class ImmuneResponse:
    """Predicted changes in immune parameters, as fold changes or relative scores."""

    cytokine_changes: dict[str, float] = field(default_factory=dict)
    cell_count_changes: dict[str, float] = field(default_factory=dict)
    cell_function_changes: dict[str, float] = field(default_factory=dict)
    inflammatory_balance: float = 1.0  # 1.0 balanced, >1.0 pro-inflammatory
    mucosal_immunity: float = 1.0
    infection_risk: float = 1.0
    antibody_response: float = 1.0
    tissue_damage_risk: float = 1.0
    immunometabolism_changes: dict[str, float] = field(default_factory=dict)


ANTI_INFLAMMATORY_PROTOCOL = ExercisePrescription(
    name="Anti-inflammatory Protocol",
    description="Moderate-intensity continuous training to reduce chronic inflammation",
    primary_type="Aerobic",
    intensity_percent=65,
    duration_minutes=45,
    frequency_per_week=4,
    interval_structure="",
    target_immune_function=(
        "Reduce baseline inflammation",
        "Normalize cytokine balance",
        "Improve regulatory T cell function",
        "Shift macrophage phenotype to M2",
    ),
    target_cytokines=(
        "Decrease TNF-α",
        "Decrease IL-6 baseline",
        "Increase IL-10",
        "Increase IL-1RA",
    ),
    beneficial_for=(
        "Chronic low-grade inflammation",
        "Metabolic syndrome",
        "Rheumatic diseases (in stable phase)",
        "Cardiovascular disease prevention",
        "Obesity-related inflammation",
    ),
    contraindications_for=(
        "Acute infection",
        "Active autoimmune flare",
        "Post-surgical recovery (early phase)",
    ),
    time_to_effect=TimeToEffect(
        acute="Temporary elevation then reduction within 24-48 hours",
        chronic="Significant reduction in baseline inflammation in 8-12 weeks",
    ),
    recovery_needs="24 hours between sessions; avoid consecutive days if new to exercise",
)

IMMUNOENHANCEMENT_PROTOCOL = ExercisePrescription(
    name="Immune Enhancement Protocol",
    description="Mixed-intensity training to boost immunity and surveillance",
    primary_type="Combined",
    intensity_percent=70,
    duration_minutes=40,
    frequency_per_week=3,
    interval_structure=(
        "5-minute warm-up, 25 minutes moderate intensity, 5-minute HIIT, 5-minute cool-down"
    ),
    target_immune_function=(
        "Enhance natural killer cell activity",
        "Improve phagocytosis",
        "Increase immunosurveillance",
        "Boost mucosal immunity",
    ),
    target_cytokines=(
        "Optimize IL-6 response",
        "Increase IL-7",
        "Increase antimicrobial peptides",
    ),
    beneficial_for=(
        "Frequent respiratory infections",
        "Cancer prevention",
        "Aging immune system",
        "Recovery from illness",
        "Vaccine response",
    ),
    contraindications_for=(
        "Acute infection",
        "Severe immunodeficiency",
        "Uncontrolled autoimmunity",
    ),
    time_to_effect=TimeToEffect(
        acute="Enhanced immune cell mobilization within hours",
        chronic="Improved immune surveillance and function in 4-8 weeks",
    ),
    recovery_needs="48 hours between high-intensity components",
)

IMMUNOREGULATION_PROTOCOL = ExercisePrescription(
    name="Immunoregulation Protocol",
    description="Regular moderate exercise to improve immune tolerance and self-regulation",
    primary_type="Aerobic",
    intensity_percent=60,
    duration_minutes=35,
    frequency_per_week=5,
    interval_structure="",
    target_immune_function=(
        "Enhance regulatory T cell function",
        "Normalize self-tolerance",
        "Regulate dendritic cell phenotype",
        "Optimize immune signaling",
    ),
    target_cytokines=(
        "Increase IL-10",
        "Increase TGF-β",
        "Normalize IL-23/IL-17 axis",
    ),
    beneficial_for=(
        "Autoimmune conditions",
        "Allergic disorders",
        "Asthma",
        "Inflammatory bowel disease",
        "Systemic inflammation",
    ),
    contraindications_for=(
        "Acute disease flare",
        "Severe malnutrition",
        "Recent major surgery",
    ),
    time_to_effect=TimeToEffect(
        acute="Temporary stress reduction within 1-2 hours",
        chronic="Improved immunoregulatory balance in 8-12 weeks",
    ),
    recovery_needs="24 hours; consecutive days acceptable due to moderate intensity",
)

RECOVERY_IMMUNITY_PROTOCOL = ExercisePrescription(
    name="Recovery Immunity Protocol",
    description="Low-intensity exercise to maintain immunity during heavy training periods",
    primary_type="Aerobic",
    intensity_percent=50,
    duration_minutes=30,
    frequency_per_week=2,
    interval_structure="",
    target_immune_function=(
        "Prevent immunosuppression",
        "Maintain mucosal immunity",
        "Support lymphocyte function",
        "Avoid open window effect",
    ),
    target_cytokines=(
        "Limit stress hormone response",
        "Maintain sIgA levels",
        "Prevent excessive inflammatory signaling",
    ),
    beneficial_for=(
        "Athletes in intense training",
        "Recovery between competitions",
        "Prevention of upper respiratory tract infections",
        "Overtraining prevention",
    ),
    contraindications_for=("None for target population",),
    time_to_effect=TimeToEffect(
        acute="Minimal stress on immune system",
        chronic="Maintained immune function during high training loads",
    ),
    recovery_needs="Minimal; can be performed daily as active recovery",
)

_PRESCRIPTIONS_BY_CONDITION: dict[str, tuple[ExercisePrescription, ...]] = {
    "Chronic inflammation": (ANTI_INFLAMMATORY_PROTOCOL,),
    "Recurrent infections": (IMMUNOENHANCEMENT_PROTOCOL,),
    "Autoimmune disorder": (IMMUNOREGULATION_PROTOCOL,),
    "Athletic recovery": (RECOVERY_IMMUNITY_PROTOCOL,),
    "Obesity": (ANTI_INFLAMMATORY_PROTOCOL, IMMUNOENHANCEMENT_PROTOCOL),
    "Aging immune system": (IMMUNOENHANCEMENT_PROTOCOL, ANTI_INFLAMMATORY_PROTOCOL),
}

# (inflammation reduction, immunoenhancement, regulation) coefficients per protocol
_CHRONIC_COEFFICIENTS: dict[str, tuple[float, float, float]] = {
    "Anti-inflammatory Protocol": (0.4, 0.2, 0.3),
    "Immune Enhancement Protocol": (0.2, 0.5, 0.2),
    "Immunoregulation Protocol": (0.3, 0.1, 0.5),
    "Recovery Immunity Protocol": (0.15, 0.15, 0.15),
}

_TIMING_POINTS = ("during_exercise", "immediate_post", "2hr_post", "6hr_post", "24hr_post")

_CYTOKINE_TIMINGS: dict[str, tuple[float, ...]] = {
    "IL-6": (3.0, 8.0, 5.0, 2.0, 1.2),
    "TNF-α": (1.5, 2.0, 1.8, 1.3, 1.0),
    "IL-10": (1.0, 2.0, 3.0, 2.0, 1.2),
    "IL-1RA": (1.5, 3.0, 4.0, 2.5, 1.3),
    "TGF-β": (1.1, 1.2, 1.5, 1.5, 1.3),
}

_INTENSITY_LEVELS = ("Sedentary", "Low", "Moderate", "Vigorous", "Very High", "Extreme")

_INFLAMMATION_CURVE: dict[str, tuple[float, ...]] = {
    "IL-6_acute": (1.0, 2.0, 5.0, 10.0, 18.0, 25.0),
    "TNF_acute": (1.0, 1.2, 1.5, 2.0, 3.0, 4.0),
    "IL-10_acute": (1.0, 1.2, 1.8, 3.0, 4.5, 5.0),
    # Chronic baselines follow a U-shaped curve at extreme loads
    "IL-6_chronic": (1.0, 0.95, 0.8, 0.7, 0.7, 0.9),
    "TNF_chronic": (1.0, 0.9, 0.8, 0.7, 0.75, 0.9),
    "IL-10_chronic": (1.0, 1.1, 1.2, 1.3, 1.25, 1.1),
    "Anti_pro_ratio": (1.0, 1.2, 1.5, 1.8, 1.7, 1.2),
}


def get_prescription_by_condition(condition: str) -> list[ExercisePrescription]:
    """Return the immune-targeting prescriptions suited to a condition."""
    return list(_PRESCRIPTIONS_BY_CONDITION.get(condition, (IMMUNOENHANCEMENT_PROTOCOL,)))


def _chronic_duration_factor(chronic_weeks: int) -> float:
    if chronic_weeks <= 0:
        return 0.0
    if chronic_weeks <= 12:
        return chronic_weeks / 12.0
    return min(1.0 + 0.2 * (chronic_weeks - 12) / 12.0, 1.5)


def _apply_acute(response: ImmuneResponse, intensity: float) -> None:
    response.cytokine_changes.update(
        {
            "IL-6": 3.0 + 10.0 * intensity,
            "TNF-α": 1.0 + 1.5 * intensity,
            "IL-10": 1.0 + 2.0 * intensity,
            "IL-1RA": 1.0 + 3.0 * intensity,
            "TGF-β": 1.0 + 0.5 * intensity,
        }
    )
    response.cell_count_changes.update(
        {
            "Neutrophils": 2.0 + 3.0 * intensity,
            "NK cells": 1.5 + 2.5 * intensity,
            "CD8+ T cells": 1.3 + 1.7 * intensity,
            "Monocytes": 1.2 + 1.3 * intensity,
        }
    )
    response.cell_function_changes.update(
        {
            "NK cell cytotoxicity": 1.3 + 0.7 * intensity,
            "Neutrophil ROS production": 1.2 + 0.8 * intensity,
            "T cell proliferation": 0.9 - 0.1 * intensity,
        }
    )
    # Open window effect with very high intensity
    if intensity > 0.8:
        open_window = (intensity - 0.8) * 5.0
        response.infection_risk = 1.0 + 0.5 * open_window
        response.mucosal_immunity = 1.0 - 0.3 * open_window
    response.immunometabolism_changes.update(
        {
            "Glycolysis": 1.5 + 1.5 * intensity,
            "Mitochondrial respiration": 1.2 + 0.8 * intensity,
        }
    )


def _apply_chronic(
    response: ImmuneResponse,
    prescription: ExercisePrescription,
    duration: float,
    has_inflammation: bool,
    is_immunocompromised: bool,
) -> None:
    coefficients = _CHRONIC_COEFFICIENTS.get(prescription.name, (0.0, 0.0, 0.0))
    reduction, enhancement, regulation = (c * duration for c in coefficients)

    response.cytokine_changes.update(
        {
            "IL-6 baseline": 1.0 - 0.2 * reduction,
            "TNF-α baseline": 1.0 - 0.25 * reduction,
            "IL-10 baseline": 1.0 + 0.15 * regulation,
            "IL-1RA baseline": 1.0 + 0.2 * reduction,
            "TGF-β baseline": 1.0 + 0.1 * regulation,
        }
    )
    response.cell_count_changes.update(
        {
            "NK cells baseline": 1.0 + 0.2 * enhancement,
            "T regulatory cells": 1.0 + 0.3 * regulation,
            "Senescent T cells": 1.0 - 0.15 * enhancement,
        }
    )
    response.cell_function_changes.update(
        {
            "NK cell cytotoxicity": 1.0 + 0.3 * enhancement,
            "Neutrophil chemotaxis": 1.0 + 0.25 * enhancement,
            "Macrophage phagocytosis": 1.0 + 0.2 * enhancement,
            "T cell differentiation balance": 1.0 + 0.3 * regulation,
        }
    )

    if has_inflammation:
        response.inflammatory_balance = max(1.4 - 0.5 * reduction, 1.0)
    else:
        response.inflammatory_balance = 1.0 - 0.2 * reduction

    base_mucosal = 0.8 if is_immunocompromised else 1.0
    response.mucosal_immunity = base_mucosal + 0.3 * enhancement

    if is_immunocompromised:
        response.infection_risk = max(1.5 - 0.5 * enhancement, 1.0)
    else:
        response.infection_risk = 1.0 - 0.25 * enhancement

    response.antibody_response = 1.0 + 0.2 * enhancement

    response.immunometabolism_changes.update(
        {
            "Mitochondrial biogenesis": 1.0 + 0.3 * duration,
            "Metabolic flexibility": 1.0 + 0.25 * duration,
            "ROS management": 1.0 + 0.2 * reduction,
        }
    )


def predict_immune_response(
    prescription: ExercisePrescription,
    time_point: str,
    chronic_weeks: int,
    has_inflammation: bool,
    is_immunocompromised: bool,
) -> ImmuneResponse:
    """Estimate immune changes for a prescription, acutely ("Acute") or after chronic training."""
    response = ImmuneResponse()
    if has_inflammation:
        response.inflammatory_balance = 1.4
        response.mucosal_immunity = 0.8
    if is_immunocompromised:
        response.infection_risk = 1.5
        response.antibody_response = 0.7

    intensity = prescription.intensity_percent / 100.0
    if time_point == "Acute":
        _apply_acute(response, intensity)
    else:
        _apply_chronic(
            response,
            prescription,
            _chronic_duration_factor(chronic_weeks),
            has_inflammation,
            is_immunocompromised,
        )

    if prescription.intensity_percent > 80:
        response.tissue_damage_risk = 1.0 + 0.3 * (prescription.intensity_percent - 80.0) / 20.0
    else:
        # Moderate exercise is slightly protective
        response.tissue_damage_risk = 0.9
    return response


def get_cytokine_timing(cytokine: str) -> dict[str, float]:
    """Fold change of a cytokine at points during and after exercise; empty if unknown."""
    values = _CYTOKINE_TIMINGS.get(cytokine, ())
    return dict(zip(_TIMING_POINTS, values))


def tissue_effects(tissue: str, exercise_type: str, chronic_weeks: int) -> dict[str, str]:
    """Primary effects of exercise on an immune tissue; empty if the tissue is unknown."""
    if tissue == "Thymus":
        if chronic_weeks > 8:
            chronic = (
                "Potential slowing of thymic involution, preserved T cell output, "
                "and maintained T cell repertoire diversity"
            )
        else:
            chronic = "Beginning adaptations toward preserving thymic function"
        return {
            "Acute": (
                "Temporary stress response with potential cortisol-induced apoptosis "
                "of immature thymocytes"
            ),
            "Chronic": chronic,
            "Key Factors": "IL-7, IGF-1, GH, Thymulin, lower cortisol sensitivity",
        }
    if tissue == "Bone Marrow":
        return {
            "Acute": "Mobilization of leukocytes, increased hematopoiesis",
            "Chronic": (
                "Enhanced hematopoietic stem cell maintenance, improved myeloid/lymphoid balance"
            ),
            "Key Factors": "G-CSF, IL-7, reduced oxidative stress, enhanced blood flow",
        }
    if tissue == "Lymph Nodes":
        return {
            "Acute": "Increased lymphatic flow, cell trafficking, and antigen presentation",
            "Chronic": (
                "Enhanced germinal center function, improved B and T cell interactions, "
                "better antibody affinity maturation"
            ),
            "Key Factors": "Increased lymph flow, DC migration, follicular T cell function",
        }
    if tissue == "Spleen":
        acute = "Splenic contraction, leukocyte mobilization, especially NK and CD8+ T cells"
        if exercise_type in ("HIIT", "Resistance"):
            acute += ", pronounced catecholamine-driven cell release"
        return {
            "Acute": acute,
            "Chronic": (
                "Improved splenic reserve, enhanced filtering capacity, better pathogen clearance"
            ),
            "Key Factors": "Catecholamines, improved blood flow, enhanced macrophage function",
        }
    if tissue == "MALT (Mucosal-Associated Lymphoid Tissue)":
        acute = "Temporary stress on mucosal barriers, fluctuations in sIgA"
        if exercise_type == "HIIT" and chronic_weeks < 4:
            acute += ", potential temporary decrease in mucosal protection"
        return {
            "Acute": acute,
            "Chronic": (
                "Enhanced sIgA production, improved epithelial barrier function, "
                "balanced mucosal immunity"
            ),
            "Key Factors": (
                "sIgA, antimicrobial peptides, regulatory T cells, microbiome stability"
            ),
        }
    return {}


def calculate_exercise_inflammation_curve() -> dict[str, dict[str, float]]:
    """Inflammatory markers by exercise intensity level, acute and chronic."""
    return {
        level: {marker: values[index] for marker, values in _INFLAMMATION_CURVE.items()}
        for index, level in enumerate(_INTENSITY_LEVELS)
    }