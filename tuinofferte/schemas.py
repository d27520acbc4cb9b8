"""
Data contracts for the quote calculation engine.

Wire names are the Dutch camelCase identifiers the form layer, the quote
store and the document export key off (`prijsPerEenheid`, `margePercentage`,
`scopeData`, ...). Python code uses snake_case attributes; every model
accepts either spelling on input and serializes by alias.
"""

import enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class ProjectType(str, enum.Enum):
    AANLEG = "aanleg"
    ONDERHOUD = "onderhoud"


class RegelType(str, enum.Enum):
    ARBEID = "arbeid"
    MATERIAAL = "materiaal"
    MACHINE = "machine"


# --- Reference data ---

class Normuur(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default="", alias="_id")
    activiteit: str
    scope: str
    normuur_per_eenheid: float = Field(ge=0)
    eenheid: str
    omschrijving: Optional[str] = None


class Correctiefactor(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default="", alias="_id")
    type: str
    waarde: str
    factor: float
    omschrijving: Optional[str] = None


class Product(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default="", alias="_id")
    productnaam: str
    categorie: str = ""
    inkoopprijs: float = 0.0
    verkoopprijs: float
    eenheid: str
    verliespercentage: float = 0.0


class Instellingen(CamelModel):
    model_config = ConfigDict(frozen=True)

    uurtarief: float
    standaard_marge_percentage: float
    btw_percentage: float


class CalculationContext(CamelModel):
    """Read-only reference collections plus the site conditions of one quote."""

    model_config = ConfigDict(frozen=True)

    normuren: List[Normuur] = []
    correctiefactoren: List[Correctiefactor] = []
    producten: List[Product] = []
    instellingen: Instellingen
    bereikbaarheid: str = "goed"
    achterstalligheid: Optional[str] = None


# --- Calculation input / output ---

class OfferteCalculationInput(CamelModel):
    type: ProjectType
    scopes: List[str] = []
    # Raw per-scope bags; each calculator validates its own shape
    scope_data: Dict[str, Any] = {}
    bereikbaarheid: str = "goed"
    achterstalligheid: Optional[str] = None


class OfferteRegel(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str = ""
    scope: str
    omschrijving: str
    eenheid: str
    hoeveelheid: float
    prijs_per_eenheid: float
    totaal: float
    type: RegelType
    marge_percentage: Optional[float] = None


class OfferteTotalen(CamelModel):
    materiaalkosten: float = 0.0
    arbeidskosten: float = 0.0
    totaal_uren: float = 0.0
    subtotaal: float = 0.0
    marge: float = 0.0
    marge_percentage: float = 0.0
    totaal_ex_btw: float = 0.0
    btw: float = 0.0
    totaal_incl_btw: float = 0.0


ScopeMarges = Dict[str, Optional[float]]


# --- Aanleg scope data ---

class GrondwerkData(CamelModel):
    oppervlakte: Optional[float] = None
    diepte: Optional[str] = None
    afvoer_grond: bool = False


class Onderbouw(CamelModel):
    type: Optional[str] = None
    dikte_onderlaag: Optional[float] = None
    opsluitbanden: bool = False


class BestratingZone(CamelModel):
    type: str
    oppervlakte: Optional[float] = None


class BestratingData(CamelModel):
    oppervlakte: Optional[float] = None
    type_bestrating: Optional[str] = None
    snijwerk: Optional[str] = None
    onderbouw: Optional[Onderbouw] = None
    bestratingtype: Optional[str] = None
    zones: List[BestratingZone] = []


class BordersData(CamelModel):
    oppervlakte: Optional[float] = None
    beplantingsintensiteit: Optional[str] = None
    afwerking: Optional[str] = None
    bodemverbetering: bool = False
    bodem_mix: Optional[Dict[str, float]] = None


class GrasData(CamelModel):
    oppervlakte: Optional[float] = None
    type: Optional[str] = None
    kunstgras: bool = False
    drainage: bool = False
    drainage_meters: Optional[float] = None
    opsluitbanden: bool = False
    opsluitbanden_meters: Optional[float] = None


class HoutwerkData(CamelModel):
    type_houtwerk: Optional[str] = None
    afmeting: Optional[float] = None
    fundering: Optional[str] = None


class WaterElektraData(CamelModel):
    verlichting: Optional[str] = None
    aantal_punten: Optional[float] = None
    sleuven_nodig: bool = False


class SpecialItem(CamelModel):
    type: str
    omschrijving: Optional[str] = None


class SpecialsData(CamelModel):
    items: List[SpecialItem] = []


# --- Onderhoud scope data ---

class GrasOnderhoudData(CamelModel):
    gras_aanwezig: bool = False
    gras_oppervlakte: Optional[float] = None
    maaien: bool = False
    kanten_steken: bool = False
    verticuteren: bool = False


class BordersOnderhoudData(CamelModel):
    border_oppervlakte: Optional[float] = None
    onderhoudsintensiteit: Optional[str] = None
    onkruid_verwijderen: bool = False
    snoei_in_borders: Optional[str] = None


class HeggenOnderhoudData(CamelModel):
    lengte: Optional[float] = None
    hoogte: Optional[float] = None
    breedte: Optional[float] = None
    afvoer_snoeisel: bool = False


class HeggenOnderhoudExtendedData(HeggenOnderhoudData):
    haagsoort: Optional[str] = None
    hoogwerker_nodig: bool = False
    snoeifrequentie: Optional[int] = Field(default=None, ge=1, le=3)
    ondergrond: Optional[str] = None


class BomenOnderhoudData(CamelModel):
    aantal_bomen: Optional[float] = None
    snoei: Optional[str] = None
    hoogteklasse: Optional[str] = None
    afvoer: bool = False


class BomenOnderhoudExtendedData(BomenOnderhoudData):
    hoogte_meter: Optional[float] = None
    kroondiameter: Optional[float] = None
    inspectie: Optional[str] = None
    nabij_straat: bool = False
    nabij_gebouw: bool = False
    nabij_kabels: bool = False


class OverigeOnderhoudData(CamelModel):
    bladruimen: bool = False
    terras_reinigen: bool = False
    terras_oppervlakte: Optional[float] = None
    onkruid_bestrating: bool = False
    bestrating_oppervlakte: Optional[float] = None
    afwatering_controleren: bool = False
    aantal_afwateringspunten: Optional[float] = None
    overig_notities: Optional[str] = None
    overig_uren: Optional[float] = None


class ReinigingOnderhoudData(CamelModel):
    terras_reinigen: bool = False
    terras_oppervlakte: Optional[float] = None
    terras_type: Optional[str] = None
    bladruimen: bool = False
    bladruimen_oppervlakte: Optional[float] = None
    bladruimen_type: Optional[str] = None
    onkruid_bestrating: bool = False
    onkruid_oppervlakte: Optional[float] = None
    onkruid_methode: Optional[str] = None
    algereiniging: bool = False
    alge_oppervlakte: Optional[float] = None


class BemestingOnderhoudData(CamelModel):
    oppervlakte: Optional[float] = None
    bemestingstype: Optional[str] = None
    frequentie: Optional[int] = None
    kalkbehandeling: bool = False
    grondanalyse: bool = False


class Herstelacties(CamelModel):
    verticuteren: bool = False
    doorzaaien: bool = False
    nieuwe_grasmat: bool = False
    plaggen: bool = False
    bijzaaien_kale_plekken: bool = False
    kale_plekk_oppervlakte: Optional[float] = None


class GazonanalyseOnderhoudData(CamelModel):
    oppervlakte: Optional[float] = None
    herstelacties: Optional[Herstelacties] = None
    bekalken: bool = False
    drainage: bool = False


class MollenAanvullend(CamelModel):
    gazonherstel: bool = False
    geschatte_m2: Optional[float] = None
    preventief_gaas: bool = False
    gaas_oppervlakte: Optional[float] = None
    terugkeer_check: bool = False


class MollenbestrijdingOnderhoudData(CamelModel):
    pakket: Optional[str] = None
    aanvullend: Optional[MollenAanvullend] = None
