"""Tests for the statistics aggregator."""

from services.material_service import MaterialService
from services.shelf_service import ShelfService
from services.stats_service import StatsService

from conftest import make_material


class TestStats:

    def test_empty_dataset(self, db):
        stats = StatsService.get_stats(db)
        assert stats == {
            "total_materials": 0,
            "good_materials": 0,
            "warning_materials": 0,
            "bad_materials": 0,
            "total_shelves": 0,
            "occupied_positions": 0,
            "category_stats": [],
            "condition_average": None,
        }

    def test_single_warning_material(self, db, shelf):
        make_material(db, shelf, condition=50)
        stats = StatsService.get_stats(db)

        assert stats["total_materials"] == 1
        assert stats["warning_materials"] == 1
        assert stats["good_materials"] == 0
        assert stats["bad_materials"] == 0
        assert stats["condition_average"] == 50.0

    def test_counts_and_distribution(self, db, shelf):
        other = ShelfService.create_shelf(db, name="B1", row="B", number=1)
        make_material(db, shelf, "A1-H1", condition=90, category="EPI")
        make_material(db, shelf, "A1-H2", condition=20, category="EPI")
        make_material(db, other, "B1-L1", condition=70, category="Incêndio")

        stats = StatsService.get_stats(db)

        assert stats["total_materials"] == 3
        assert (stats["good_materials"], stats["warning_materials"], stats["bad_materials"]) == (1, 1, 1)
        assert stats["total_shelves"] == 2
        assert stats["occupied_positions"] == 3
        assert stats["category_stats"] == [
            {"category": "EPI", "count": 2},
            {"category": "Incêndio", "count": 1},
        ]
        assert stats["condition_average"] == 60.0

    def test_occupied_positions_follow_deletes(self, db, shelf):
        material = make_material(db, shelf)
        assert StatsService.count_occupied_positions(db) == 1

        MaterialService.delete_material(db, material.id)
        assert StatsService.count_occupied_positions(db) == 0
