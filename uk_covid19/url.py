"""
Query URL composition for the coronavirus dashboard API.
"""

from typing import Mapping

ENDPOINT = "https://api.coronavirus.data.gov.uk/v1/data"

FIXED_SUFFIX = "&format=json&page=1"


def build_url(
    filters: Mapping[str, str],
    structure: Mapping[str, str],
    base_url: str = ENDPOINT
) -> str:
    """
    Compose the query URL for already-validated filters and structure

    Args:
        filters: Filter name -> value
        structure: Structure field -> output alias
        base_url: Endpoint the parameters are appended to

    Returns:
        <base>[?filters=n=v;...][?|&structure={"f":"a",...}]&format=json&page=1
    """
    url = base_url

    if filters:
        url += "?filters=" + ";".join(f"{name}={value}" for name, value in filters.items())

    if structure:
        # Leading separator depends on whether a filters segment was emitted
        url += "&structure={" if filters else "?structure={"
        url += ",".join(f'"{field}":"{alias}"' for field, alias in structure.items())
        url += "}"

    return url + FIXED_SUFFIX
