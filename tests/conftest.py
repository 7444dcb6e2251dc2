from __future__ import annotations

from pathlib import Path

import pytest

DATA = Path(__file__).resolve().parent / "data"


def parse_reports(text: str) -> list[list[tuple[int, int, int]]]:
    reports: list[list[tuple[int, int, int]]] = []
    for block in text.strip().split("\n\n"):
        lines = block.strip().splitlines()
        points = []
        for line in lines[1:]:
            x, y, z = (int(v) for v in line.split(","))
            points.append((x, y, z))
        reports.append(points)
    return reports


@pytest.fixture(scope="session")
def example_reports() -> list[list[tuple[int, int, int]]]:
    return parse_reports((DATA / "example_scanners.txt").read_text(encoding="utf-8"))
