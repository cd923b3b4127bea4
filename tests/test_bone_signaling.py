import dataclasses

import pytest

from exersomes.bone.signaling import (
    BGLAP,
    BMP2,
    BMP2R,
    BMP4,
    LIGANDS,
    OSTEOKINES,
    OSTN,
    RECEPTORS,
    VEGF,
    VEGFR,
    BoneOsteokine,
    Ligand,
    Receptor,
)


def _make_osteokine(**overrides):
    values = dict(
        name="Test",
        target_organs=["Muscle", "Brain"],
        response_to_exercise="Up",
        signaling_pathway="X",
        peak_time_minutes=10,
    )
    values.update(overrides)
    return BoneOsteokine(**values)


def test_ligand_is_immutable():
    ligand = Ligand(name="L", receptor="R", signaling_pathway="P", biological_function="F")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ligand.receptor = "Other"  # type: ignore[misc]
    assert ligand.receptor == "R"


def test_receptor_is_immutable():
    receptor = Receptor(name="R", ligand="L", signaling_pathway="P", biological_function="F")
    with pytest.raises(dataclasses.FrozenInstanceError):
        receptor.ligand = "Other"  # type: ignore[misc]
    assert receptor.ligand == "L"


def test_osteokine_target_organs_coerced_to_tuple():
    kine = _make_osteokine()
    assert kine.target_organs == ("Muscle", "Brain")
    assert hash(kine) == hash(dataclasses.replace(kine))


def test_replace_leaves_original_unchanged():
    original = _make_osteokine(peak_time_minutes=60)
    changed = _make_osteokine(peak_time_minutes=90)
    assert changed.peak_time_minutes == 90
    assert original.peak_time_minutes == 60
    assert changed != original


def test_equal_values_compare_equal():
    copy = Ligand(
        name=VEGF.name,
        receptor=VEGF.receptor,
        signaling_pathway=VEGF.signaling_pathway,
        biological_function=VEGF.biological_function,
    )
    assert copy == VEGF
    assert len({copy, VEGF}) == 1


def test_vegf_and_vegfr_rebuilt_match_collections():
    ligand = Ligand(**dataclasses.asdict(VEGF))
    receptor = Receptor(**dataclasses.asdict(VEGFR))
    assert ligand in LIGANDS
    assert receptor in RECEPTORS
    assert ligand.receptor == "VEGFR"
    assert receptor.ligand == "VEGF"
    assert ligand.signaling_pathway == receptor.signaling_pathway


def test_bmp_ligands_share_receptor_listed_by_bmp2r():
    assert BMP2.receptor == BMP4.receptor
    assert "BMP2R" in BMP2.receptor
    assert {part.strip() for part in BMP2R.ligand.split(",")} == {"BMP2", "BMP4"}


def test_collections_rebuild_to_distinct_entries():
    ligands = [Ligand(**dataclasses.asdict(item)) for item in LIGANDS]
    receptors = [Receptor(**dataclasses.asdict(item)) for item in RECEPTORS]
    osteokines = tuple(BoneOsteokine(**dataclasses.asdict(item)) for item in OSTEOKINES)
    assert ligands == list(LIGANDS)
    assert len(set(ligands)) == 6
    assert receptors == list(RECEPTORS)
    assert len(set(receptors)) == 3
    assert osteokines == (OSTN, BGLAP)


def test_osteocalcin_peaks_after_osteocrin():
    osteocrin = BoneOsteokine(**dataclasses.asdict(OSTN))
    osteocalcin = BoneOsteokine(**dataclasses.asdict(BGLAP))
    assert osteocalcin.peak_time_minutes > osteocrin.peak_time_minutes
    assert set(osteocrin.target_organs) <= set(osteocalcin.target_organs)


def test_receptor_construction_by_keyword():
    receptor = Receptor(name="R", ligand="L", signaling_pathway="P", biological_function="F")
    assert dataclasses.astuple(receptor) == ("R", "L", "P", "F")