"""
Tests for the snapshot and facts adapters.
Run with: python -m pytest tests/ -v
"""

import json
import pytest
import sys
import os

import yaml

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hyperkb import (
    AtomSpace,
    Link,
    PatternMatcher,
    TruthValue,
    concept,
    inheritance,
)
from hyperkb.adapters import (
    AdapterError,
    FactsAdapter,
    FactsError,
    SnapshotAdapter,
    SnapshotError,
    get_adapter,
)


FACTS_YAML = """
facts:
  - [ConceptNode, Cat, [0.9, 0.6]]
  - Dog
  - Animal
  - type: InheritanceLink
    tv: [0.8, 0.5]
    outgoing: [Cat, Animal]
  - type: InheritanceLink
    tv: {strength: 0.7, confidence: 0.4}
    outgoing: [Dog, Animal]
"""


@pytest.fixture
def populated():
    space = AtomSpace()
    cat = space.insert(concept("Cat", 0.9, 0.6))
    animal = space.insert(concept("Animal"))
    inner = space.insert(inheritance(cat, animal, 0.8, 0.5))
    space.insert(concept("Pet"))
    space.insert(Link("AndLink", [inner, concept("Pet")], TruthValue(0.5, 0.5)))
    return space


class TestSnapshotAdapter:
    """Test snapshot dump and load."""

    def test_json_round_trip(self, populated, tmp_path):
        adapter = SnapshotAdapter()
        path = adapter.dump(populated, tmp_path / "kb.json")

        restored = SnapshotAdapter().load(path)

        assert restored.statistics() == populated.statistics()
        for atom in populated:
            copy = restored.find(atom)
            assert copy is not None
            assert copy.tv == atom.tv

    def test_yaml_round_trip(self, populated, tmp_path):
        path = SnapshotAdapter().dump(populated, tmp_path / "kb.yaml")
        assert "nodes" in yaml.safe_load(path.read_text())

        restored = SnapshotAdapter().load(str(path))
        assert len(restored) == len(populated)

    def test_id_map(self, populated):
        data = populated.export()
        adapter = SnapshotAdapter()
        restored = adapter.load(data)

        for record in data["nodes"] + data["links"]:
            new_id = adapter.id_map[record["id"]]
            assert restored.lookup_by_id(new_id) is not None

    def test_links_out_of_order(self, populated):
        data = populated.export()
        data["links"].reverse()

        restored = SnapshotAdapter().load(data)
        assert len(restored.links()) == 2

    def test_removed_child_round_trip(self):
        space = AtomSpace()
        cat = space.insert(concept("Cat", 0.9, 0.6))
        animal = space.insert(concept("Animal"))
        space.insert(inheritance(cat, animal, 0.8, 0.5))
        space.remove(cat)

        restored = SnapshotAdapter().load(SnapshotAdapter().dumps(space))

        assert len(restored) == 2
        assert restored.lookup_node("ConceptNode", "Cat") is None
        link = restored.find(inheritance(concept("Cat"), concept("Animal")))
        assert link.tv == TruthValue(0.8, 0.5)
        assert link[0].tv == TruthValue(0.9, 0.6)
        assert link[1] is restored.lookup_node("ConceptNode", "Animal")

    def test_unstored_children_round_trip(self):
        space = AtomSpace()
        space.insert(Link("AndLink", [inheritance(concept("Cat"), concept("Animal")), concept("Pet")]))

        data = space.export()
        assert len([r for r in data["nodes"] + data["links"] if r.get("detached")]) == 4

        adapter = SnapshotAdapter()
        restored = adapter.load(data)

        assert len(restored) == 1
        assert restored.nodes() == []
        outer = restored.links()[0]
        assert outer[0] == inheritance(concept("Cat"), concept("Animal"))
        for record in data["nodes"] + data["links"]:
            assert record["id"] in adapter.id_map

    def test_dangling_child(self):
        data = {
            "nodes": [{"type": "ConceptNode", "name": "Cat", "id": "a"}],
            "links": [{"type": "InheritanceLink", "id": "l", "outgoing": ["a", "missing"]}],
        }
        with pytest.raises(SnapshotError):
            SnapshotAdapter().load(data)

    def test_malformed_record(self):
        with pytest.raises(SnapshotError):
            SnapshotAdapter().parse({"nodes": [{"type": "ConceptNode"}], "links": []})

    def test_invalid_truth_value(self):
        data = {"nodes": [{"type": "ConceptNode", "name": "Cat", "id": "a",
                           "tv": {"strength": 2.0, "confidence": 0.5}}]}
        with pytest.raises(SnapshotError):
            SnapshotAdapter().parse(data)

    def test_dumps_json_string_loads(self, populated):
        text = SnapshotAdapter().dumps(populated)
        assert json.loads(text)["nodes"]

        restored = SnapshotAdapter().load(text)
        assert len(restored) == len(populated)

    def test_unknown_format(self, populated, tmp_path):
        with pytest.raises(SnapshotError):
            SnapshotAdapter().dumps(populated, "xml")
        with pytest.raises(SnapshotError):
            SnapshotAdapter().dump(populated, tmp_path / "kb.xml")

    def test_load_into_existing_space(self, populated):
        space = AtomSpace()
        space.insert(concept("Cat", 0.1, 0.4))

        SnapshotAdapter(space).load(populated.export())

        cat = space.lookup_node("ConceptNode", "Cat")
        assert cat.tv == TruthValue(0.1, 0.4).revise(TruthValue(0.9, 0.6))
        assert len(space) == len(populated)


class TestFactsAdapter:
    """Test the compact facts notation."""

    def test_parse_to_space(self):
        space = FactsAdapter().parse_to_space(FACTS_YAML)

        assert len(space.nodes()) == 3
        assert len(space.links()) == 2
        assert space.lookup_node("ConceptNode", "Cat").tv == TruthValue(0.9, 0.6)

        link = space.find(inheritance(concept("Dog"), concept("Animal")))
        assert link.tv == TruthValue(0.7, 0.4)

    def test_references_do_not_revise(self):
        space = FactsAdapter().parse_to_space(FACTS_YAML)
        # Cat appears again inside a link but keeps its declared tv
        assert space.lookup_node("ConceptNode", "Cat").tv == TruthValue(0.9, 0.6)

    def test_declared_tv_independent_of_order(self):
        space = FactsAdapter().parse_to_space([
            {"type": "InheritanceLink", "outgoing": ["Cat", "Animal"]},
            ["ConceptNode", "Cat", [0.9, 0.6]],
        ])
        assert space.lookup_node("ConceptNode", "Cat").tv == TruthValue(0.9, 0.6)
        assert len(space) == 3

    def test_missing_children_added(self):
        space = FactsAdapter().parse_to_space([
            {"type": "InheritanceLink", "outgoing": ["Whale", "Mammal"]}
        ])
        assert space.lookup_node("ConceptNode", "Whale") is not None
        assert len(space) == 3

    def test_file(self, tmp_path):
        path = tmp_path / "animals.yaml"
        path.write_text(FACTS_YAML)
        atoms = FactsAdapter().parse_file(path)
        assert len(atoms) == 5

    def test_json_file(self, tmp_path):
        path = tmp_path / "animals.json"
        path.write_text(json.dumps(["Cat", ["PredicateNode", "eats"]]))
        atoms = FactsAdapter().parse(path)
        assert [a.type.name for a in atoms] == ["ConceptNode", "PredicateNode"]

    def test_build_template(self):
        space = FactsAdapter().parse_to_space(FACTS_YAML)
        template = FactsAdapter().build({"type": "InheritanceLink", "outgoing": ["$x", "Animal"]})

        assert template.outgoing[0].is_variable
        results = PatternMatcher(space).match(template)
        assert [b["$x"].name for b in results] == ["Cat", "Dog"]

    def test_build_named_mapping(self):
        node = FactsAdapter().build({"name": "eats", "type": "PredicateNode", "tv": [0.5, 0.5]})
        assert node.type.name == "PredicateNode"
        assert node.tv == TruthValue(0.5, 0.5)

    @pytest.mark.parametrize("entry", [
        42,
        ["ConceptNode"],
        {"type": "InheritanceLink"},
        {"outgoing": ["Cat"]},
        {"type": "InheritanceLink", "outgoing": []},
        {"type": "InheritanceLink", "outgoing": "Cat"},
        ["NoSuchNode", "Cat"],
        ["ConceptNode", "Cat", [1.5, 0.5]],
        ["ConceptNode", "Cat", "high"],
    ])
    def test_bad_entries(self, entry):
        with pytest.raises(FactsError):
            FactsAdapter().build(entry)

    def test_bad_document(self):
        with pytest.raises(FactsError):
            FactsAdapter().parse({"rules": []})

    def test_parse_directory_skips_bad_files(self, tmp_path):
        (tmp_path / "good.yaml").write_text(FACTS_YAML)
        (tmp_path / "bad.yaml").write_text("facts: [[ConceptNode]]")
        atoms = FactsAdapter().parse_directory(tmp_path)
        assert len(atoms) == 5


class TestAdapterRegistry:
    """Test adapter lookup by name."""

    def test_get_adapter(self):
        assert get_adapter("facts") is FactsAdapter
        assert get_adapter("SNAPSHOT") is SnapshotAdapter

    def test_unknown_adapter(self):
        with pytest.raises(AdapterError):
            get_adapter("xml")


# Run with pytest
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
