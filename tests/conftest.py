"""
Shared pytest fixtures for all tests.
Provides small hand-written settlement lists and a generated 120-row dataset.
"""
import sys
from pathlib import Path
from typing import List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from query.records import Record  # noqa: E402


@pytest.fixture
def sample_records() -> List[Record]:
    return [
        Record("İzmir", "Çeşme", "Çeşme Belediyesi", "Ovacık Mahallesi", "Kırsal Alan"),
        Record("İzmir", "Çeşme", "Çeşme Belediyesi", "Dalyan Mahallesi", "Kırsal Alan Değil"),
        Record("İzmir", "Konak", "Konak Belediyesi", "Alsancak Mahallesi", "Kırsal Alan Değil"),
        Record("İstanbul", "Şile", "Şile Belediyesi", "Ağva Mahallesi", "Kırsal Alan"),
        Record("İstanbul", "Kadıköy", "Kadıköy Belediyesi", "Moda Mahallesi", "Kırsal Alan Değil"),
        Record("Iğdır", "Aralık", "Aralık Belediyesi", "Gödekli Mahallesi", "Kırsal Alan"),
        Record("Ankara", "Çubuk", "Çubuk Belediyesi", "Esenboğa Mahallesi", "Kırsal Alan"),
        Record("Uşak", "Ulubey", "Ulubey Belediyesi", "Akbulak Mahallesi", ""),
    ]


@pytest.fixture
def abc_records() -> List[Record]:
    """120 rows: regions A/B/C with 40 each; every third row is rural."""
    return [
        Record(
            region="ABC"[i // 40],
            subregion=f"D{i % 4}",
            authority=f"Belediye {i % 5}",
            locality=f"Mahalle {i}",
            status="Kırsal Alan" if i % 3 == 0 else "Kentsel Alan",
        )
        for i in range(120)
    ]
