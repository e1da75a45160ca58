from types import SimpleNamespace

from dungeonrun.status import StatusEffect, StatusEffectType, StatusSystem


def make_system(hp=100):
    owner = SimpleNamespace(hp=hp)
    return owner, StatusSystem(owner)


def test_is_expired_at_duration():
    effect = StatusEffect(StatusEffectType.STUNNED, 2.0)
    assert not effect.is_expired()
    effect.time_since_applied = 2.0
    assert effect.is_expired()


def test_apply_and_query():
    _, system = make_system()
    system.apply_effect(StatusEffectType.STUNNED, 1.0)
    assert system.is_stunned()
    assert system.has_effect(StatusEffectType.STUNNED)
    assert not system.is_burning()
    assert not system.is_frozen()
    assert not system.is_poisoned()


def test_reapply_restarts_instead_of_duplicating():
    _, system = make_system()
    system.apply_effect(StatusEffectType.FREEZING, 1.0, 1.0)
    system.update(0.5)
    system.apply_effect(StatusEffectType.FREEZING, 3.0, 2.0)
    effects = system.effects
    assert len(effects) == 1
    assert effects[0].duration == 3.0
    assert effects[0].intensity == 2.0
    assert effects[0].time_since_applied == 0.0


def test_burning_ticks_damage_after_one_second():
    owner, system = make_system(100)
    system.apply_effect(StatusEffectType.BURNING, 5.0, 3.0)
    system.update(0.5)
    assert owner.hp == 100
    system.update(0.5)
    assert owner.hp == 97
    assert system.effects[0].time_since_applied == 0.0


def test_poison_damage_truncates_to_int():
    owner, system = make_system(100)
    system.apply_effect(StatusEffectType.POISONED, 5.0, 2.5)
    system.update(1.0)
    assert isinstance(owner.hp, int)
    assert owner.hp == 97


def test_short_burn_expires_without_damage():
    owner, system = make_system(100)
    system.apply_effect(StatusEffectType.BURNING, 0.5)
    system.update(0.6)
    assert owner.hp == 100
    assert not system.is_burning()


def test_freezing_never_damages_and_expires():
    owner, system = make_system(50)
    system.apply_effect(StatusEffectType.FREEZING, 1.5, 10.0)
    system.update(1.0)
    assert system.is_frozen()
    system.update(1.0)
    assert owner.hp == 50
    assert not system.is_frozen()


def test_remove_effect_only_removes_that_type():
    _, system = make_system()
    system.apply_effect(StatusEffectType.STUNNED, 1.0)
    system.apply_effect(StatusEffectType.FREEZING, 1.0)
    system.remove_effect(StatusEffectType.STUNNED)
    assert not system.is_stunned()
    assert system.is_frozen()


def test_clear_all_effects():
    _, system = make_system()
    system.apply_effect(StatusEffectType.STUNNED, 1.0)
    system.apply_effect(StatusEffectType.POISONED, 1.0)
    system.clear_all_effects()
    assert system.effects == ()