"""
Unit tests for JSON and YAML export
"""
import json

import pytest
import yaml

from kempo.export import from_json, from_yaml, to_json, to_yaml
from kempo.models import PremiumTable, RankEntry
from kempo.parsing import TableParser


@pytest.fixture
def parsed(table_csv):
    return TableParser(table_csv, "2024.4")


@pytest.mark.unit
class TestSerializer:
    """Test both documents mirror the same mapping."""

    def test_json_round_trip(self, parsed):
        assert json.loads(parsed.to_json()) == parsed.to_dict()

    def test_yaml_mirrors_json(self, parsed):
        assert yaml.safe_load(parsed.to_yaml()) == json.loads(parsed.to_json())

    def test_key_order(self, parsed):
        document = json.loads(parsed.to_json())
        assert list(document) == ["area", "effective_date", "fee"]
        assert list(document["fee"][0]) == [
            "rank", "pension_rank", "label", "rank_min", "rank_max",
            "insurance_younger_total", "insurance_younger_salary",
            "insurance_elder_total", "insurance_elder_salary",
            "pension_total", "pension_salary",
        ]

    def test_figures_stay_strings_in_yaml(self, parsed):
        fee = yaml.safe_load(parsed.to_yaml())["fee"]
        assert fee[0]["insurance_younger_total"] == "5788.4"
        assert fee[0]["pension_total"] == "16104.0"
        assert fee[0]["rank"] == 1

    def test_yaml_document_start(self, parsed):
        assert parsed.to_yaml().startswith("---")

    def test_missing_effective_date_is_null(self, table_csv):
        table = TableParser(table_csv)
        assert json.loads(table.to_json())["effective_date"] is None
        assert yaml.safe_load(table.to_yaml())["effective_date"] is None

    def test_japanese_text_kept_literal(self):
        table = PremiumTable(
            area="東京",
            effective_date="2024-04-01",
            fee=(RankEntry(rank=1, pension_rank=1, label="５８千円", rank_min=0, rank_max=63000),),
        )
        assert "東京" in to_json(table)
        assert "５８千円" in to_yaml(table)

    def test_load_back_into_models(self, parsed):
        table = parsed.premium_table
        assert from_json(to_json(table)) == table
        assert from_yaml(to_yaml(table)) == table


@pytest.mark.unit
class TestModels:
    """Test premium table models."""

    def test_rank_entry_dict_round_trip(self):
        entry = RankEntry(
            rank=4,
            pension_rank=1,
            label="88,000",
            rank_min=83000,
            rank_max=93000,
            insurance_younger_total="8782.4",
            insurance_younger_salary="4391.2",
            pension_total="16104.0",
            pension_salary="8052.0",
        )
        assert RankEntry.from_dict(entry.to_dict()) == entry

    def test_has_pension(self):
        entry = RankEntry(rank=1, pension_rank=None, label="58,000", rank_min=0, rank_max=63000)
        assert entry.has_pension is False

    def test_entries_are_immutable(self):
        entry = RankEntry(rank=1, pension_rank=1, label="58,000", rank_min=0, rank_max=63000)
        with pytest.raises(AttributeError):
            entry.rank = 2

    def test_empty_table(self):
        table = PremiumTable.from_dict({"area": "tokyo"})
        assert table.fee == ()
        assert table.effective_date is None
        assert table.to_dict() == {"area": "tokyo", "effective_date": None, "fee": []}
