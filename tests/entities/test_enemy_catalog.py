"""
Tests for enemy templates and the catalog they are drawn from.
"""

import json

import pytest
from pydantic import ValidationError

from knights_quest.entities.enemy import (
    DEFAULT_CATALOG_PATH,
    EnemyCatalog,
    EnemyTemplate,
    load_catalog,
)


def test_default_catalog_contents():
    catalog = load_catalog()
    stats = {t.name: (t.max_health, t.attack_power) for t in catalog}
    assert stats == {
        "Goblin": (40, 10),
        "Ogre": (80, 20),
        "Slime": (30, 8),
        "Wolf": (50, 12),
        "Skeleton": (60, 15),
    }
    assert DEFAULT_CATALOG_PATH.is_file()


def test_spawn_is_fresh_and_at_full_health(catalog, ctx):
    template = catalog.get("Goblin")
    first = template.spawn()
    first.take_damage(30, ctx)
    second = template.spawn()
    assert first.health == 10
    assert second.health == second.max_health == 40
    assert second is not first


def test_template_is_immutable():
    template = EnemyTemplate(name="Wolf", max_health=50, attack_power=12)
    with pytest.raises(ValidationError):
        template.max_health = 1


def test_draw_is_uniform_over_catalog(catalog, rng):
    rng.push(1, 0)
    assert catalog.draw(rng).name == "Slime"
    assert catalog.draw(rng).name == "Goblin"
    assert rng.calls == [(0, 1), (0, 1)]


def test_get_unknown_enemy(catalog):
    assert catalog.get("Dragon") is None
    assert "Goblin" in catalog
    assert len(catalog) == 2


def test_empty_catalog_rejected():
    with pytest.raises(ValueError):
        EnemyCatalog([])


def test_duplicate_names_rejected():
    template = EnemyTemplate(name="Wolf", max_health=50, attack_power=12)
    with pytest.raises(ValueError, match="Duplicate"):
        EnemyCatalog([template, template])


def test_load_catalog_from_file(tmp_path):
    path = tmp_path / "enemies.json"
    path.write_text(
        json.dumps([{"name": "Bat", "max_health": 12, "attack_power": 3}]),
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert [t.name for t in catalog] == ["Bat"]
    assert catalog.get("Bat").description == ""


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "[]",
        '{"name": "Bat"}',
        '[{"name": "Bat", "max_health": 0, "attack_power": 3}]',
        '[{"name": "Bat", "max_health": 5, "attack_power": 3, "speed": 2}]',
    ],
)
def test_load_catalog_rejects_bad_files(tmp_path, content):
    path = tmp_path / "enemies.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError, match="raised an error"):
        load_catalog(path)


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(ValueError, match="File not found"):
        load_catalog(tmp_path / "missing.json")
