"""
Export functionality for premium tables.
Renders the same mapping as JSON and as YAML.
"""

import json

import yaml

from .models import PremiumTable


def to_json(table: PremiumTable) -> str:
    """Serialize a premium table as a compact JSON document."""
    return json.dumps(table.to_dict(), ensure_ascii=False)


def to_yaml(table: PremiumTable) -> str:
    """Serialize a premium table as a YAML document, keys in table order."""
    return yaml.dump(
        table.to_dict(),
        allow_unicode=True,
        sort_keys=False,
        explicit_start=True,
        default_flow_style=False,
    )


def from_json(text: str) -> PremiumTable:
    """Load a premium table back from its JSON document."""
    return PremiumTable.from_dict(json.loads(text))


def from_yaml(text: str) -> PremiumTable:
    """Load a premium table back from its YAML document."""
    return PremiumTable.from_dict(yaml.safe_load(text))
