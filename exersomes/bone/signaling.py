"""Bone-related signaling molecules: ligands, receptors and osteokines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Ligand:
    """A signaling molecule that binds to a receptor."""

    name: str
    receptor: str
    signaling_pathway: str
    biological_function: str


@dataclass(frozen=True)
class Receptor:
    """A protein that binds to a ligand."""

    name: str
    ligand: str
    signaling_pathway: str
    biological_function: str


@dataclass(frozen=True)
class BoneOsteokine:
    """A bone-derived signaling molecule."""

    name: str
    target_organs: tuple[str, ...]
    response_to_exercise: str
    signaling_pathway: str
    peak_time_minutes: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "target_organs", tuple(self.target_organs))


# Exerkine ligands
VEGF = Ligand(
    name="Vascular Endothelial Growth Factor",
    receptor="VEGFR",
    signaling_pathway="PI3K-Akt",
    biological_function="Promotes angiogenesis",
)

SPARC = Ligand(
    name="Secreted Protein Acidic and Cysteine Rich",
    receptor="Multiple ECM proteins",
    signaling_pathway="Integrin-mediated",
    biological_function="Bone mineralization and collagen binding",
)

SOST = Ligand(
    name="Sclerostin",
    receptor="LRP5/6",
    signaling_pathway="Wnt/β-catenin (inhibitor)",
    biological_function="Inhibits bone formation",
)

BMP2 = Ligand(
    name="Bone Morphogenetic Protein 2",
    receptor="BMP2R, BMPR1A",
    signaling_pathway="SMAD",
    biological_function="Induces bone and cartilage formation",
)

BMP4 = Ligand(
    name="Bone Morphogenetic Protein 4",
    receptor="BMP2R, BMPR1A",
    signaling_pathway="SMAD",
    biological_function="Regulates bone and cartilage development",
)

SPP1 = Ligand(
    name="Secreted Phosphoprotein 1",
    receptor="Integrins, CD44",
    signaling_pathway="Integrin-mediated",
    biological_function="Bone remodeling and immune regulation",
)

LIGANDS: tuple[Ligand, ...] = (VEGF, SPARC, SOST, BMP2, BMP4, SPP1)

# Receptors
VEGFR = Receptor(
    name="Vascular Endothelial Growth Factor Receptor",
    ligand="VEGF",
    signaling_pathway="PI3K-Akt",
    biological_function="Mediates angiogenesis",
)

TNFRSF11B = Receptor(
    name="TNF Receptor Superfamily Member 11B",
    ligand="RANKL",
    signaling_pathway="RANK/RANKL/OPG",
    biological_function="Inhibits osteoclastogenesis",
)

BMP2R = Receptor(
    name="Bone Morphogenetic Protein Receptor Type 2",
    ligand="BMP2, BMP4",
    signaling_pathway="SMAD",
    biological_function="Regulates bone development and repair",
)

RECEPTORS: tuple[Receptor, ...] = (VEGFR, TNFRSF11B, BMP2R)

# Bone osteokines
OSTN = BoneOsteokine(
    name="Osteocrin",
    target_organs=("Muscle", "Brain"),
    response_to_exercise="Increases with mechanical loading",
    signaling_pathway="cGMP-PKG",
    peak_time_minutes=60,
)

BGLAP = BoneOsteokine(
    name="Osteocalcin",
    target_organs=("Pancreas", "Adipose", "Brain", "Muscle"),
    response_to_exercise="Increases with bone remodeling",
    signaling_pathway="GPRC6A",
    peak_time_minutes=120,
)

OSTEOKINES: tuple[BoneOsteokine, ...] = (OSTN, BGLAP)