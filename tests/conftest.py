import logging

import pytest

NMI = "1234567890"
NMI_2 = "9876543210"


@pytest.fixture
def simple_lines():
    return [
        "100,header",
        f"200,{NMI},KWH",
        "300,20161113,15.5,A",
        "900,trailer",
    ]


@pytest.fixture
def multi_meter_lines():
    # Two meters, second with an estimate; an unknown 400 record is passed through
    return [
        "100,NEM12,201801211010,MYENRGY,URENRGY",
        f"200,{NMI},KWH",
        "300,20161113,-50.8,A",
        "300,20161114,0,A",
        "300,20161115,0,A",
        f"200,{NMI_2},KWH",
        "300,20161113,25.1,E",
        "400,1,48,A,,",
        "300,20161114,1.25,A",
        "900",
    ]


@pytest.fixture
def write_nem12(tmp_path):
    def _write(lines, name="SimpleNem12.csv"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def test_logger():
    return logging.getLogger("tests.simplenem12")
