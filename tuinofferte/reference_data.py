"""
Bundled default reference data:
1. Norm hours, correction factors and products from data/reference_data.json
2. Instellingen (hourly rate, margin, VAT) from settings

Used when a request carries no reference collections of its own. A missing
or unreadable file leaves the collections empty; the calculators then
simply produce fewer lines.
"""

import json
import logging
import os
from typing import Optional

from .config import settings
from .schemas import CalculationContext, Correctiefactor, Instellingen, Normuur, Product

logger = logging.getLogger(__name__)

_DEFAULT_PATH = os.path.join(os.path.dirname(__file__), "data", "reference_data.json")
_reference_path = settings.REFERENCE_DATA_PATH or _DEFAULT_PATH

# --- Seeded reference data (loaded at import) ---
_RAW_REFERENCE_DATA = {}
try:
    with open(_reference_path, encoding="utf-8") as _f:
        _RAW_REFERENCE_DATA = json.load(_f)
    logger.info("Loaded reference data from %s", _reference_path)
except (FileNotFoundError, json.JSONDecodeError) as e:
    logger.warning("No reference data loaded from %s: %s", _reference_path, e)

NORMUREN = [Normuur.model_validate(n) for n in _RAW_REFERENCE_DATA.get("normuren", [])]
CORRECTIEFACTOREN = [
    Correctiefactor.model_validate(c) for c in _RAW_REFERENCE_DATA.get("correctiefactoren", [])
]
PRODUCTEN = [Product.model_validate(p) for p in _RAW_REFERENCE_DATA.get("producten", [])]


def default_instellingen() -> Instellingen:
    return Instellingen(
        uurtarief=settings.UURTARIEF_DEFAULT,
        standaard_marge_percentage=settings.MARGE_DEFAULT,
        btw_percentage=settings.BTW_DEFAULT,
    )


def default_context(bereikbaarheid: str = "goed",
                    achterstalligheid: Optional[str] = None) -> CalculationContext:
    """CalculationContext over the bundled collections and the configured instellingen."""
    return CalculationContext(
        normuren=NORMUREN,
        correctiefactoren=CORRECTIEFACTOREN,
        producten=PRODUCTEN,
        instellingen=default_instellingen(),
        bereikbaarheid=bereikbaarheid,
        achterstalligheid=achterstalligheid,
    )
