"""
Closed sets of tokens accepted by the coronavirus dashboard API.

Given by: https://coronavirus.data.gov.uk/developers-guide

Filters, area types and structure fields are fixed at definition time. Each
member carries a human-readable description used in error messages and docs.
"""

from enum import Enum
from typing import Dict, List, Type


class Filters(Enum):
    """Valid filter names"""
    areaType = "areaType"
    areaName = "areaName"
    areaCode = "areaCode"
    date = "date"


class AreaType(Enum):
    """Valid values for the areaType filter"""
    overview = "overview"
    nation = "nation"
    region = "region"
    nhsRegion = "nhsRegion"
    utla = "utla"
    ltla = "ltla"


class Structures(Enum):
    """Valid structure (metric) fields"""
    areaType = "areaType"
    areaName = "areaName"
    areaCode = "areaCode"
    date = "date"
    hash = "hash"
    # Cases
    newCasesByPublishDate = "newCasesByPublishDate"
    cumCasesByPublishDate = "cumCasesByPublishDate"
    cumCasesBySpecimenDateRate = "cumCasesBySpecimenDateRate"
    newCasesBySpecimenDate = "newCasesBySpecimenDate"
    maleCases = "maleCases"
    femaleCases = "femaleCases"
    # Testing pillars
    newPillarOneTestsByPublishDate = "newPillarOneTestsByPublishDate"
    cumPillarOneTestsByPublishDate = "cumPillarOneTestsByPublishDate"
    newPillarTwoTestsByPublishDate = "newPillarTwoTestsByPublishDate"
    cumPillarTwoTestsByPublishDate = "cumPillarTwoTestsByPublishDate"
    newPillarThreeTestsByPublishDate = "newPillarThreeTestsByPublishDate"
    cumPillarThreeTestsByPublishDate = "cumPillarThreeTestsByPublishDate"
    newPillarFourTestsByPublishDate = "newPillarFourTestsByPublishDate"
    cumPillarFourTestsByPublishDate = "cumPillarFourTestsByPublishDate"
    # Healthcare
    newAdmissions = "newAdmissions"
    cumAdmissions = "cumAdmissions"
    cumAdmissionsByAge = "cumAdmissionsByAge"
    newTestsByPublishDate = "newTestsByPublishDate"
    cumTestsByPublishDate = "cumTestsByPublishDate"
    covidOccupiedMVBeds = "covidOccupiedMVBeds"
    hospitalCases = "hospitalCases"
    plannedCapacityByPublishDate = "plannedCapacityByPublishDate"
    # Deaths
    newDeaths28DaysByPublishDate = "newDeaths28DaysByPublishDate"
    cumDeaths28DaysByPublishDate = "cumDeaths28DaysByPublishDate"
    cumDeaths28DaysByPublishDateRate = "cumDeaths28DaysByPublishDateRate"
    newDeaths28DaysByDeathDate = "newDeaths28DaysByDeathDate"
    cumDeaths28DaysByDeathDate = "cumDeaths28DaysByDeathDate"
    cumDeaths28DaysByDeathDateRate = "cumDeaths28DaysByDeathDateRate"


FILTER_DESCRIPTIONS: Dict[Filters, str] = {
    Filters.areaType: "Area type as string",
    Filters.areaName: "Area name as string",
    Filters.areaCode: "Area Code as string",
    Filters.date: "Date as string [YYYY-MM-DD]",
}

AREA_TYPE_DESCRIPTIONS: Dict[AreaType, str] = {
    AreaType.overview: "Overview data for the United Kingdom",
    AreaType.nation: "Nation data (England, Northern Ireland, Scotland, and Wales)",
    AreaType.region: "Region data",
    AreaType.nhsRegion: "NHS Region data",
    AreaType.utla: "Upper-tier local authority data",
    AreaType.ltla: "Lower-tier local authority data",
}

STRUCTURE_DESCRIPTIONS: Dict[Structures, str] = {
    Structures.areaType: "Area type as string",
    Structures.areaName: "Area name as string",
    Structures.areaCode: "Area Code as string",
    Structures.date: "Date as string [YYYY-MM-DD]",
    Structures.hash: "Unique ID as string",
    Structures.newCasesByPublishDate: "New cases by publish date",
    Structures.cumCasesByPublishDate: "Cumulative cases by publish date",
    Structures.cumCasesBySpecimenDateRate: "Rate of cumulative cases by specimen date per 100k resident population",
    Structures.newCasesBySpecimenDate: "New cases by specimen date",
    Structures.maleCases: "Male cases (by age)",
    Structures.femaleCases: "Female cases (by age)",
    Structures.newPillarOneTestsByPublishDate: "New pillar one tests by publish date",
    Structures.cumPillarOneTestsByPublishDate: "Cumulative pillar one tests by publish date",
    Structures.newPillarTwoTestsByPublishDate: "New pillar two tests by publish date",
    Structures.cumPillarTwoTestsByPublishDate: "Cumulative pillar two tests by publish date",
    Structures.newPillarThreeTestsByPublishDate: "New pillar three tests by publish date",
    Structures.cumPillarThreeTestsByPublishDate: "Cumulative pillar three tests by publish date",
    Structures.newPillarFourTestsByPublishDate: "New pillar four tests by publish date",
    Structures.cumPillarFourTestsByPublishDate: "Cumulative pillar four tests by publish date",
    Structures.newAdmissions: "New admissions",
    Structures.cumAdmissions: "Cumulative number of admissions",
    Structures.cumAdmissionsByAge: "Cumulative admissions by age",
    Structures.newTestsByPublishDate: "New tests by publish date",
    Structures.cumTestsByPublishDate: "Cumulative tests by publish date",
    Structures.covidOccupiedMVBeds: "COVID-19 occupied beds with mechanical ventilators",
    Structures.hospitalCases: "Hospital cases",
    Structures.plannedCapacityByPublishDate: "Planned capacity by publish date",
    Structures.newDeaths28DaysByPublishDate: "Deaths within 28 days of positive test",
    Structures.cumDeaths28DaysByPublishDate: "Cumulative deaths within 28 days of positive test",
    Structures.cumDeaths28DaysByPublishDateRate: (
        "Rate of cumulative deaths within 28 days of positive test per 100k resident population"
    ),
    Structures.newDeaths28DaysByDeathDate: "Deaths within 28 days of positive test by death date",
    Structures.cumDeaths28DaysByDeathDate: "Cumulative deaths within 28 days of positive test by death date",
    Structures.cumDeaths28DaysByDeathDateRate: (
        "Rate of cumulative deaths within 28 days of positive test by death date per 100k resident population"
    ),
}

_DESCRIPTIONS = {
    Filters: FILTER_DESCRIPTIONS,
    AreaType: AREA_TYPE_DESCRIPTIONS,
    Structures: STRUCTURE_DESCRIPTIONS,
}


def members(kind: Type[Enum]) -> List[str]:
    """All valid tokens for an enumeration, in declaration order"""
    return [member.value for member in kind]


def contains(kind: Type[Enum], token: str) -> bool:
    """Exact, case-sensitive membership test"""
    return isinstance(token, str) and token in kind.__members__


def describe(kind: Type[Enum]) -> str:
    """
    Describe every member of an enumeration, one line per member

    Returns:
        Lines of the form "<token> - <description>"
    """
    descriptions = _DESCRIPTIONS[kind]
    return "\n".join(f"{member.value} - {descriptions[member]}" for member in kind)
