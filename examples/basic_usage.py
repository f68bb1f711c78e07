#!/usr/bin/env python3
"""
Basic usage example for Fixtable.

Builds a data table from a step-table cell grid, validates its fields against
a schema, and works with its rows.

Run from the fixtable directory:
    python examples/basic_usage.py
"""
import logging
import sys
import os

# Add parent directory to path for local development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from common import Grid, MissingFieldError
from datatable import DataTable
from validation import Schema


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # A step parser would normally hand this grid over
    grid = Grid.from_values([
        ["sku", "name", "quantity"],
        ["WIDGET-A", "Blue Widget", "2"],
        ["GADGET-B", "Red Gadget", "1"],
    ])

    schema = Schema.from_config({
        "required_fields": ["sku", "quantity"],
        "optional_fields": ["name"],
    })

    table = DataTable.from_cells_with_schema(schema, grid)
    print(f"Loaded {table!r}")

    index = table.find_row(["GADGET-B", "Red Gadget", "1"])
    print(f"Red Gadget is row {index}")

    table.remove_row(index)
    table.append_row(["GIZMO-C", "Green Gizmo", "3"])

    print(table.to_pretty_json().decode("utf-8"))
    print(table.to_dataframe())

    try:
        DataTable.new_with_schema(schema, ["sku"], ["WIDGET-A"])
    except MissingFieldError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    main()
