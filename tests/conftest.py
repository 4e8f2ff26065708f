import sys
from pathlib import Path

import pandas as pd
import pytest
import yaml

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recordplots.config import load_config
from recordplots.data.preprocess import load_normalized

PERFORMANCES = [
    ("9.58", "Usain Bolt", "JAM", "Berlin", "2009-08-16", "Men", "100m", "0"),
    ("9.69", "Tyson Gay", "USA", "Shanghai", "2009-09-20", "Men", "100m", "0"),
    ("DNF", "Nobody Fast", "USA", "Eugene", "2010-06-01", "Men", "100m", "0"),
    ("10.49", "Florence Griffith-Joyner", "USA", "Indianapolis", "1988-07-16", "Women", "100m", "0"),
    ("10.81", "Marlies Gohr", "GDR", "Berlin", "1983-06-08", "Women", "100m", "1"),
    ("11.07", "Renate Stecher", "GDR", "Munich", "1972-09-02", "Women", "100m", "0"),
    ("1:53.28", "Jarmila Kratochvilova", "TCH", "Munich", "1983-07-26", "Women", "800m", "0"),
    ("1:55.60", "Anita Weiss", "GDR", "Montreal", "1976-07-26", "Women", "800m", "1"),
    ("1:56.19", "Mariya Savinova", "RUS", "London", "2012-08-11", "Women", "800m", "2"),
    ("2:02:57", "Dennis Kimetto", "KEN", "Berlin", "2014-09-28", "Men", "Marathon", "0"),
    ("2:03:03", "Kenenisa Bekele", "ETH", "Berlin", "2016-09-25", "Men", "Marathon", "0"),
    ("8.95", "Mike Powell", "USA", "Tokyo", "1991-08-30", "Men", "Long Jump", "0"),
    ("8.90", "Bob Beamon", "USA", "Mexico City", "1968-10-18", "Men", "Long Jump", "0"),
    ("9,045", "Ashton Eaton", "USA", "Beijing", "2015-08-29", "Men", "Decathlon", "0"),
    ("8,847", "Daley Thompson", "GBR", "Los Angeles", "1984-08-09", "Men", "Decathlon", "0"),
    ("12", "Team Rope", "GBR", "London", "1908-07-01", "Men", "Tug of War", "0"),
]

WORLD_RECORDS = [
    ("9.69", "2008-08-16", "100m", "Men"),
    ("9.58", "2009-08-16", "100m", "Men"),
    ("10.49", "1988-07-16", "100m", "Women"),
    ("1:53.28", "1983-07-26", "800m", "Women"),
    ("2:03:23", "2013-09-29", "Marathon", "Men"),
    ("2:02:57", "2014-09-28", "Marathon", "Men"),
    ("n/a", "1991-08-30", "Long Jump", "Men"),
]

CURRENT_RECORDS = [
    ("Men", "100m", "2009", "Athletics"),
    ("Women", "800m", "1983", "Athletics"),
    ("Men", "100m freestyle", "2009", "Swimming"),
    ("Women", "400m freestyle", "2016", "Swimming"),
]


def _write_csv(path: Path, rows, columns) -> None:
    pd.DataFrame(rows, columns=columns).to_csv(path, index=False)


@pytest.fixture(scope="session")
def workspace(tmp_path_factory) -> Path:
    root = tmp_path_factory.mktemp("recordplots")
    raw = root / "data" / "raw"
    raw.mkdir(parents=True)
    _write_csv(
        raw / "performances.csv",
        PERFORMANCES,
        ["Result", "Competitor", "Nat", "Venue", "Date", "Gender", "Event", "StateDope"],
    )
    _write_csv(raw / "world_records.csv", WORLD_RECORDS, ["Result", "Date", "Event", "Gender"])
    _write_csv(raw / "current_records.csv", CURRENT_RECORDS, ["Gender", "Event", "Year", "Sport"])
    return root


@pytest.fixture(scope="session")
def config_path(workspace) -> Path:
    cfg = {
        "paths": {
            "raw": str(workspace / "data" / "raw"),
            "processed": str(workspace / "data" / "processed"),
            "outputs": str(workspace / "outputs"),
        },
        "data": {
            "performances": "performances.csv",
            "world_records": "world_records.csv",
            "current_records": "current_records.csv",
        },
        "events": {"genders": ["men", "women"]},
        "charts": {
            "format": "png",
            "dpi": 40,
            "figsize": [4, 3],
            "summary_figsize": [5, 4],
            "reference_date": "2016-07-29",
        },
    }
    path = workspace / "config.yaml"
    path.write_text(yaml.safe_dump(cfg))
    return path


@pytest.fixture(scope="session")
def cfg(config_path):
    return load_config(config_path)


@pytest.fixture(scope="session")
def inputs(cfg):
    return load_normalized(cfg)
