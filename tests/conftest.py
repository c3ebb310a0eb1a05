"""Shared fixtures: a small massacre dataset in the source CSV layout."""

import pytest

from massacremap.data.parser import parse_incidents

HEADER = (
    "Massacre Name,Location (Google Maps),Latitude,Longitude,Date,"
    "State Governor at the Time,Minor Victims (Under 18),Enforced Dissapearances,"
    "Victims of State/Police Action,Victims of Faction/Militia Conflict,"
    "Police Officers Victims,Names,Notes,WikiFavelas Source Link"
)

ROWS = [
    'Chacina Alfa,"Vila Alfa, Rio de Janeiro",-22.90,-43.20,15/03/2005,Governor One,2,0,10,0,1,"Ana; Bruno",Raid at dawn,https://example.org/alfa',
    "Chacina Beta,Morro Beta,-22.85,-43.30,07/08/2010,Governor Two,0,1,4,3,0,,,",
    "Operacao Gama,Complexo Gama,abc,-43.25,2018-05-20,Governor One,,2,5,,0,,,",
    "Chacina Delta,Delta,,,unknown,Governor Three,1,0,0,2,0,,,",
]


@pytest.fixture
def sample_csv():
    return "\n".join([HEADER, *ROWS]) + "\n"


@pytest.fixture
def records(sample_csv):
    return parse_incidents(sample_csv)


@pytest.fixture
def csv_file(tmp_path, sample_csv):
    path = tmp_path / "massacres.csv"
    path.write_text(sample_csv, encoding="utf-8")
    return path
