import pytest

from lindenmayer import Action, Grammar, IncompleteGrammarError, from_preset, get_preset
from lindenmayer.presets import PRESETS, UnknownPresetError


def test_reachable_symbols_follow_rules():
    grammar, _ = from_preset("plant")
    assert grammar.reachable_symbols() == frozenset("XF+-[]")


def test_missing_action_for_reachable_symbol():
    with pytest.raises(IncompleteGrammarError) as exc:
        Grammar(
            axiom="F",
            rules={"F": "F+G", "+": "+", "G": "G"},
            actions={"F": Action.FORWARD, "G": Action.FORWARD},
            angle_delta=1.0,
        )
    assert exc.value.symbol == "+"
    assert exc.value.mapping == "actions"


def test_missing_rule_for_symbol_only_in_replacement():
    with pytest.raises(IncompleteGrammarError) as exc:
        Grammar(
            axiom="A",
            rules={"A": "AB"},
            actions={"A": Action.FORWARD, "B": Action.FORWARD},
            angle_delta=0.0,
        )
    assert exc.value.symbol == "B"
    assert exc.value.mapping == "rules"


def test_unreachable_symbols_are_not_checked():
    grammar = Grammar(
        axiom="A",
        rules={"A": "A", "Z": "Q"},
        actions={"A": Action.FORWARD},
        angle_delta=0.0,
    )
    assert grammar.reachable_symbols() == frozenset("A")


def test_grammar_is_read_only():
    rules = {"A": "AA"}
    grammar = Grammar(axiom="A", rules=rules, actions={"A": Action.NOOP}, angle_delta=0)
    rules["A"] = "B"
    assert grammar.rules["A"] == "AA"
    with pytest.raises(TypeError):
        grammar.rules["A"] = "B"
    with pytest.raises(AttributeError):
        grammar.axiom = "B"


@pytest.mark.parametrize(
    "identifier, name, generations",
    [
        ("h", "heighway_dragon", 16),
        ("heighway_dragon", "heighway_dragon", 16),
        ("p", "plant", 6),
        ("t", "tree", 7),
    ],
)
def test_preset_lookup(identifier, name, generations):
    preset = get_preset(identifier)
    assert preset.name == name
    assert preset.generations == generations
    assert from_preset(identifier) == (preset.grammar, generations)


def test_unknown_preset():
    with pytest.raises(UnknownPresetError):
        get_preset("x")


def test_every_preset_is_complete():
    for preset in PRESETS.values():
        symbols = preset.grammar.reachable_symbols()
        assert symbols <= set(preset.grammar.rules)
        assert symbols <= set(preset.grammar.actions)


def test_grammar_is_hashable():
    dragon, _ = from_preset("h")
    same = Grammar(
        axiom=dragon.axiom,
        rules=dict(dragon.rules),
        actions=dict(dragon.actions),
        angle_delta=dragon.angle_delta,
    )
    assert same == dragon
    assert hash(same) == hash(dragon)
    assert len({dragon, same, from_preset("plant")[0]}) == 2
