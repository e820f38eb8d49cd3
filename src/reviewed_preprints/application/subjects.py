"""
Subject area (MSA) lookup.

Maps the canonical subject names sent by the upstream service to their
public slug identifiers.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from reviewed_preprints.domain.entities import Subject

SUBJECT_SLUGS = MappingProxyType({
    "Biochemistry and Chemical Biology": "biochemistry-chemical-biology",
    "Cancer Biology": "cancer-biology",
    "Cell Biology": "cell-biology",
    "Chromosomes and Gene Expression": "chromosomes-gene-expression",
    "Computational and Systems Biology": "computational-systems-biology",
    "Developmental Biology": "developmental-biology",
    "Ecology": "ecology",
    "Epidemiology and Global Health": "epidemiology-global-health",
    "Evolutionary Biology": "evolutionary-biology",
    "Genetics and Genomics": "genetics-genomics",
    "Immunology and Inflammation": "immunology-inflammation",
    "Medicine": "medicine",
    "Microbiology and Infectious Disease": "microbiology-infectious-disease",
    "Neuroscience": "neuroscience",
    "Physics of Living Systems": "physics-living-systems",
    "Plant Biology": "plant-biology",
    "Stem Cells and Regenerative Medicine": "stem-cells-regenerative-medicine",
    "Structural Biology and Molecular Biophysics": "structural-biology-molecular-biophysics",
})


def map_subjects(names: Iterable[str]) -> list[Subject]:
    """Map subject names to subjects. Unknown names keep a None id."""
    return [Subject(id=SUBJECT_SLUGS.get(name), name=name) for name in names]
