import pytest

from guide_engine.samples import (
    singleton, observer, factory, abstract_factory, adapter,
    decorator, facade, composite, strategy, state
)


# --- SINGLETON ---

def test_singleton_shares_one_instance():
    singleton.GameManager.reset_instance()
    a = singleton.GameManager()
    b = singleton.GameManager()
    assert a is b


def test_singleton_systems_accumulate_in_same_manager(capsys):
    singleton.main()
    out = capsys.readouterr().out

    assert out.count("création de l'unique instance") == 1
    assert "Score final : 700 | Niveau : 2" in out


# --- OBSERVER ---

def test_observer_detached_observer_is_not_notified(capsys):
    hero = observer.Player("Test")
    sound = observer.SoundManager()
    hero.attach(sound)
    hero.attach(sound)  # pas de double abonnement
    hero.take_damage(10)
    assert capsys.readouterr().out.count("Bruit d'impact") == 1

    hero.detach(sound)
    hero.take_damage(10)
    assert "Bruit d'impact" not in capsys.readouterr().out


def test_observer_death_unlocks_achievement_once():
    hero = observer.Player("Test", hp=10)
    achievements = observer.AchievementSystem()
    hero.attach(achievements)

    hero.take_damage(50)
    hero.take_damage(50)

    assert hero.hp == 0
    assert achievements.unlocked == ["Première chute"]


def test_observer_interface_is_abstract():
    with pytest.raises(TypeError):
        observer.Observer()


# --- FACTORY ---

@pytest.mark.parametrize("enemy_type, expected", [
    ("goblin", factory.Goblin),
    ("orc", factory.Orc),
    ("dragon", factory.Dragon),
])
def test_factory_creates_requested_enemy(enemy_type, expected):
    assert isinstance(factory.EnemyFactory.create_enemy(enemy_type), expected)


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError, match="non supporté : licorne"):
        factory.EnemyFactory.create_enemy("licorne")


def test_factory_main_reports_error(capsys):
    factory.main()
    assert "Erreur : Type d'ennemi non supporté : licorne" in capsys.readouterr().out


# --- ABSTRACT FACTORY ---

def test_abstract_factory_families_are_consistent():
    medieval = abstract_factory.MedievalFactory()
    scifi = abstract_factory.SciFiFactory()

    assert isinstance(medieval.create_weapon(), abstract_factory.Sword)
    assert isinstance(medieval.create_armor(), abstract_factory.PlateArmor)
    assert isinstance(scifi.create_weapon(), abstract_factory.LaserRifle)
    assert isinstance(scifi.create_armor(), abstract_factory.EnergyShield)


def test_abstract_factory_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        abstract_factory.EquipmentFactory()


# --- ADAPTER ---

def test_adapter_translates_axis_and_button():
    pad = adapter.GamepadAdapter(adapter.ThirdPartyGamepad(-0.8, [0]))
    assert isinstance(pad, adapter.InputDevice)
    assert pad.get_direction() == (-1, 0)
    assert pad.is_jump_pressed() is True


def test_adapter_dead_zone():
    pad = adapter.GamepadAdapter(adapter.ThirdPartyGamepad(0.1, []))
    assert pad.get_direction() == (0, 0)
    assert pad.is_jump_pressed() is False


# --- DECORATOR ---

def test_decorator_stacks_damage_and_description():
    weapon = decorator.PoisonEnchantment(decorator.FireEnchantment(decorator.BasicSword()))
    assert weapon.damage() == 18
    assert weapon.description() == "Épée enflammée empoisonnée"


def test_decorator_order_matters():
    sharpened_last = decorator.SharpenedBlade(decorator.FireEnchantment(decorator.BasicSword()))
    fire_last = decorator.FireEnchantment(decorator.SharpenedBlade(decorator.BasicSword()))
    assert sharpened_last.damage() == 22
    assert fire_last.damage() == 20


# --- FACADE ---

def test_facade_initialises_subsystems_in_order(capsys):
    engine = facade.GameEngineFacade()
    engine.start_game()
    lines = [l.strip() for l in capsys.readouterr().out.splitlines()]

    order = [next(i for i, l in enumerate(lines) if l.startswith(prefix))
             for prefix in ("Graphismes : fenêtre", "Audio : initialisation", "Physique",
                            "Sauvegarde : lecture", "Graphismes : textures", "Audio : lecture")]
    assert order == sorted(order)


def test_facade_quit_saves_before_shutdown(capsys):
    facade.GameEngineFacade().quit_game(slot=3)
    out = capsys.readouterr().out
    assert out.index("écriture de l'emplacement 3") < out.index("Audio : arrêt")


# --- COMPOSITE ---

def test_composite_totals_are_recursive():
    inner = composite.Bag("Sacoche", own_weight=0.2)
    inner.add(composite.Item("Potion", 0.3, 25)).add(composite.Item("Potion", 0.3, 30))
    outer = composite.Bag("Sac", own_weight=1.0)
    outer.add(composite.Item("Épée", 3.0, 150)).add(inner)

    assert outer.weight() == pytest.approx(4.8)
    assert outer.value() == 205

    outer.remove(inner)
    assert outer.value() == 150


def test_composite_main_totals(capsys):
    composite.main()
    out = capsys.readouterr().out
    assert "Poids total : 6.3 kg" in out
    assert "Valeur totale : 210 po" in out


# --- STRATEGY ---

def test_strategy_swap_changes_behaviour():
    enemy = strategy.Enemy("Orc", strategy.AggressiveStrategy())
    assert enemy.strategy.decide(enemy, 1) == "attaque au corps à corps"

    enemy.set_strategy(strategy.FleeStrategy())
    assert enemy.strategy.decide(enemy, 1) == "s'enfuit vers la sortie"


def test_strategy_defensive_depends_on_distance():
    defensive = strategy.DefensiveStrategy()
    assert defensive.decide(None, 2) == "lève son bouclier"
    assert defensive.decide(None, 10) == "garde sa position"


# --- STATE ---

def test_state_transitions_are_driven_by_states():
    hero = state.Character("Test")
    assert isinstance(hero.state, state.IdleState)

    hero.press("RIGHT")
    assert isinstance(hero.state, state.RunningState)

    hero.press("SPACE")
    assert isinstance(hero.state, state.JumpingState)

    # Pas de double saut
    hero.press("SPACE")
    assert isinstance(hero.state, state.JumpingState)

    hero.tick()
    hero.tick()
    assert isinstance(hero.state, state.IdleState)


def test_state_main_ends_idle(capsys):
    state.main()
    out = capsys.readouterr().out
    assert "double saut impossible" in out
    assert out.rstrip().endswith("État final : Immobile")


# --- TOUS ---

@pytest.mark.parametrize("module", [
    singleton, observer, factory, abstract_factory, adapter,
    decorator, facade, composite, strategy, state
])
def test_every_sample_prints_a_trace(module, capsys):
    module.main()
    assert capsys.readouterr().out.strip()
