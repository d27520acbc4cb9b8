"""
Calculator registry: maps (project type, scope id) to calculator classes.

The same scope id can mean different work per project type: "gras" is
laying a new lawn for aanleg and mowing/edging for onderhoud.
"""

from ..schemas import ProjectType
from .base import BaseCalculator
from .bemesting import BemestingCalculator
from .bestrating import BestratingCalculator
from .bomen_onderhoud import BomenOnderhoudCalculator, BomenOnderhoudExtendedCalculator
from .borders import BordersCalculator
from .borders_onderhoud import BordersOnderhoudCalculator
from .gazonanalyse import GazonanalyseCalculator
from .gras import GrasCalculator
from .gras_onderhoud import GrasOnderhoudCalculator
from .grondwerk import GrondwerkCalculator
from .heggen_onderhoud import HeggenOnderhoudCalculator, HeggenOnderhoudExtendedCalculator
from .houtwerk import HoutwerkCalculator
from .mollenbestrijding import MollenbestrijdingCalculator
from .overig_onderhoud import OverigOnderhoudCalculator
from .reiniging import ReinigingCalculator
from .specials import SpecialsCalculator
from .water_elektra import WaterElektraCalculator

CALCULATOR_REGISTRY: dict[ProjectType, dict[str, type]] = {
    ProjectType.AANLEG: {
        "grondwerk": GrondwerkCalculator,
        "bestrating": BestratingCalculator,
        "borders": BordersCalculator,
        "gras": GrasCalculator,
        "houtwerk": HoutwerkCalculator,
        "water_elektra": WaterElektraCalculator,
        "specials": SpecialsCalculator,
    },
    ProjectType.ONDERHOUD: {
        "gras": GrasOnderhoudCalculator,
        "borders": BordersOnderhoudCalculator,
        "heggen": HeggenOnderhoudCalculator,
        "heggen_extended": HeggenOnderhoudExtendedCalculator,
        "bomen": BomenOnderhoudCalculator,
        "bomen_extended": BomenOnderhoudExtendedCalculator,
        "overig": OverigOnderhoudCalculator,
        "reiniging": ReinigingCalculator,
        "bemesting": BemestingCalculator,
        "gazonanalyse": GazonanalyseCalculator,
        "mollenbestrijding": MollenbestrijdingCalculator,
    },
}


def get_calculator(project_type, scope: str) -> BaseCalculator:
    """Returns an instance of the calculator for a scope, or raises ValueError."""
    calculators = CALCULATOR_REGISTRY[ProjectType(project_type)]
    if scope not in calculators:
        raise ValueError(
            f"No calculator registered for {ProjectType(project_type).value} scope: {scope}. "
            f"Available: {list(calculators.keys())}"
        )
    return calculators[scope]()


def has_calculator(project_type, scope: str) -> bool:
    """Check if a calculator exists for a scope."""
    try:
        return scope in CALCULATOR_REGISTRY[ProjectType(project_type)]
    except ValueError:
        return False


def list_calculators(project_type) -> list[str]:
    """List all registered scope ids for a project type."""
    return list(CALCULATOR_REGISTRY[ProjectType(project_type)].keys())
