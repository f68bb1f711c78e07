"""Pytest configuration and fixtures for data table tests"""
import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from common import Grid
from datatable import DataTable


@pytest.fixture
def fields():
    """Field names shared by most table tests"""
    return ["one", "two", "three"]


@pytest.fixture
def rows():
    """Three data rows matching the `fields` fixture"""
    return [
        ["1", "2", "3"],
        ["4", "5", "6"],
        ["7", "8", "9"],
    ]


@pytest.fixture
def table(fields, rows):
    """DataTable built from `fields` and `rows`"""
    return DataTable.new(fields, *rows)


@pytest.fixture
def grid_factory():
    """Factory to build an external cell grid from nested string lists"""
    def _create_grid(values):
        return Grid.from_values(values)
    return _create_grid
