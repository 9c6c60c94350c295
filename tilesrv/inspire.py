"""INSPIRE compliance checks for published layers."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)

INSPIRE_DEFAULT_STYLE = "inspire_common:DEFAULT"

# Harmonised layer names of the INSPIRE register, grouped by prefix.
_REGISTER: dict[str, str] = {
    "AD": "Address",
    "AF": "AgriculturalHolding AquacultureHolding Site",
    "AM": """
        _ZoneTypeCode_ AirQualityManagementZone AnimalHealthRestrictionZone
        AreaForDisposalOfWaste BathingWaters CoastalZoneManagementArea DesignatedWaters
        DrinkingWaterProtectionArea FloodUnitOfManagement ForestManagementArea MarineRegion
        NitrateVulnerableZone NoiseRestrictionZone PlantHealthProtectionZone
        ProspectingAndMiningPermitArea RegulatedFairwayAtSeaOrLargeInlandWater
        RestrictedZonesAroundContaminatedSites RiverBasinDistrict SensitiveArea WaterBodyForWFD
    """,
    "AU": """
        _MaritimeZoneTypeValue_ AdministrativeBoundary AdministrativeUnit Baseline
        Condominium ContiguousZone ContinentalShelf ExclusiveEconomicZone InternalWaters
        MaritimeBoundary TerritorialSea
    """,
    "BR": "Bio-geographicalRegion",
    "BU": "Building BuildingPart",
    "CP": "CadastralBoundary CadastralParcel CadastralZoning",
    "EF": """
        EnvironmentalMonitoringFacilities EnvironmentalMonitoringNetworks
        EnvironmentalMonitoringProgrammes
    """,
    "EL": "BreakLine ContourLine ElevationGridCoverage ElevationTIN IsolatedArea SpotElevation VoidArea",
    "ER": "FossilFuelResource RenewableAndWastePotentialCoverage RenewableAndWasteResource",
    "GE": """
        _ProfileTypeValue_ _StationTypeValue_ _SurveyTypeValue_ _ThematicClassificationValue_
        ActiveWell AirborneGeophysicalSurvey Aquiclude Aquifer AquiferSystems Aquitard
        Borehole BoreholeLogging BoreholeLoggingSurvey ConePenetrationTest CPTsurvey
        FlightLine FrequencyDomainEMSounding FrequencyDomainEMsurvey GeologicFault
        GeologicFold GeologicUnit GeomorphologicFeature Geophysics.3DSeismics
        GeoradarProfile GeoradarSurvey GravityStation GroundGravitySurvey
        GroundMagneticSurvey GroundWaterbody MagneticStation MagnetotelluricSounding
        MagnetotelluricSurvey MultielectrodeDCProfile RadiometricStation SeismicLine
        SeismologicalStation SeismologicalSurvey SonarSurvey TimeDomainEMSounding
        Time-domainEMsurvey VerticalElectricSounding VerticalSeismicProfile VspSurvey
        VspSurevey
    """,
    "GN": "GeographicalNames",
    "HB": "Habitat",
    "HH": "HealthDeterminantMeasure HealthStatisticalData",
    "HY": "Network",
    "HY.PhysicalWaters": """
        Catchments HydroPointOfInterest LandWaterBoundary ManMadeObject Shore
        Waterbodies Wetland
    """,
    "LC": "LandCoverPoints LandCoverRaster LandCoverSurfaces",
    "LU": "ExistingLandUse SpatialPlan SupplementaryRegulation ZoningElement",
    "MR": "Mine MineralOccurrence",
    "NZ": "ExposedElement",
    "OF": """
        GridObservation GridSeriesObservation MultiPointObservation PointObservation
        PointTimeSeriesObservation
    """,
    "OI": "MosaicElement OrthoimageCoverage",
    "PF": """
        _EconomicActivityValue_ ProductionBuilding ProductionInstallation
        ProductionInstallationPart ProductionPlot ProductionSite
    """,
    "PS": "ProtectedSite",
    "SD": "_ReferenceSpeciesCodeValue_",
    "SO": "_SoilDerivedObjectParameterNameValue_ ObservedSoilProfile SoilBody SoilSite",
    "SR": """
        Coastline InterTidalArea MarineCirculationZone MarineContour Sea SeaArea
        SeaBedArea SeaSurfaceArea Shoreline
    """,
    "SU": "StatisticalGridCell VectorStatisticalUnit",
    "TN.AirTransportNetwork": "AerodromeArea AirLink AirspaceArea ApronArea RunwayArea TaxiwayArea",
    "TN.CableTransportNetwork": "CablewayLink",
    "TN.CommonTransportElements": "TransportArea TransportLink TransportNode",
    "TN.RailTransportNetwork": "RailwayArea RailwayLink RailwayStationArea RailwayYardArea",
    "TN.RoadTransportNetwork": "RoadArea RoadLink RoadServiceArea VehicleTrafficArea",
    "TN.WaterTransportNetwork": "FairwayArea PortArea WaterwayLink",
    "US": """
        _ServiceTypeValue_ AdministrationForEducation AdministrationForEnvironmentalProtection
        AdministrationForHealth AdministrationForPublicOrderAndSafety
        AdministrationForSocialProtection AntiFireWaterProvision BachelorOrEquivalentEducation
        Barrack Camp CharityAndCounselling ChildCareService CivilProtectionSite Defence
        DoctoralOrEquivalentEducation EarlyChildhoodEducation Education
        EducationNotElsewhereClassified ElectricityNetwork EmergencyCallPoint
        EnvironmentalEducationCentre EnvironmentalManagementFacility EnvironmentalProtection
        FireDetectionAndObservationSite FireProtectionService FireStation
        GeneralAdministrationOffice GeneralHospital GeneralMedicalService Health
        HospitalService Housing Hydrant LowerSecondaryEducation MarineRescueStation
        MasterOrEquivalentEducation MedicalAndDiagnosticLaboratory
        MedicalProductsAppliancesAndEquipment NursingAndConvalescentHomeService
        OutpatientService ParamedicalService PoliceService PostSecondaryNonTertiaryEducation
        PrimaryEducation PublicAdministrationOffice PublicOrderAndSafety
        RescueHelicopterLandingSite RescueService RescueStation SewerNetwork
        ShortCycleTertiaryEducation Siren SocialService SpecializedAdministrationOffice
        SpecializedHospital SpecializedMedicalServices SpecializedServiceOfSocialProtection
        StandaloneFirstAidEquipment SubsidiaryServicesToEducation ThermalNetwork
        UpperSecondaryEducation UtilityNetwork WaterNetwork
    """,
}

# Soil parameters published both as features and as a coverage.
_SOIL_WITH_COVERAGE = """
    AvailableWaterCapacity BiologicalParameter CadmiumContent CarbonStock ChemicalParameter
    ChromiumContent CopperContent LeadContent MercuryContent NickelContent NitrogenContent
    OrganicCarbonContent PHValue PhysicalParameter PotentialRootDepth WaterDrainage ZincContent
"""

# The register spells this one with a space after the prefix.
_IRREGULAR_NAMES = ("US. OilGasChemicalsNetwork",)


def _build_layer_names() -> frozenset[str]:
    names = {
        f"{prefix}.{member}"
        for prefix, members in _REGISTER.items()
        for member in members.split()
    }
    for parameter in _SOIL_WITH_COVERAGE.split():
        names.add(f"SO.{parameter}")
        names.add(f"SO.{parameter}Coverage")
    names.update(_IRREGULAR_NAMES)
    return frozenset(names)


LAYER_NAMES: frozenset[str] = _build_layer_names()


class _Style(Protocol):
    identifier: str


class InspireLayer(Protocol):
    """What the compliance checks need to know about a layer."""

    id: str
    keywords: Sequence[Any]
    metadata: Sequence[Any]
    default_style: Optional[_Style]


def is_inspire_layer_name(name: str) -> bool:
    """Tell whether ``name`` is a harmonised INSPIRE layer name."""
    return name in LAYER_NAMES


def _has_inspire_default_style(layer: InspireLayer) -> bool:
    style = layer.default_style
    return style is not None and style.identifier == INSPIRE_DEFAULT_STYLE


def is_inspire_wmts(layer: InspireLayer) -> bool:
    """Tell whether the layer is INSPIRE compliant for WMTS."""
    if not is_inspire_layer_name(layer.id):
        logger.debug("Not INSPIRE WMTS compliant (%s): layer name not harmonised", layer.id)
        return False
    if not layer.keywords:
        logger.debug("Not INSPIRE WMTS compliant (%s): no keywords", layer.id)
        return False
    if not layer.metadata:
        logger.debug("Not INSPIRE WMTS compliant (%s): no metadata", layer.id)
        return False
    if not _has_inspire_default_style(layer):
        logger.debug(
            "Not INSPIRE WMTS compliant (%s): default style != %s", layer.id, INSPIRE_DEFAULT_STYLE
        )
        return False
    return True


def is_inspire_wms(layer: InspireLayer) -> bool:
    """Tell whether the layer is INSPIRE compliant for WMS."""
    if not is_inspire_layer_name(layer.id):
        logger.debug("Not INSPIRE WMS compliant (%s): layer name not harmonised", layer.id)
        return False
    if not layer.keywords:
        logger.debug("Not INSPIRE WMS compliant (%s): no keywords", layer.id)
        return False
    if not _has_inspire_default_style(layer):
        logger.debug(
            "Not INSPIRE WMS compliant (%s): default style != %s", layer.id, INSPIRE_DEFAULT_STYLE
        )
        return False
    return True