from ellers.rng import PMRandom, ScriptedCoins, make_coin, pm_next, normalize_seed
import pytest

def test_pm_next_known_values():
    assert pm_next(1) == 16807
    assert pm_next(16807) == 282475249

def test_zero_seed_is_not_a_fixed_point():
    assert normalize_seed(0) == 1
    assert PMRandom(0).next32() == 16807

def test_same_seed_same_coins():
    a, b = make_coin(41), make_coin(41)
    assert [a() for _ in range(64)] == [b() for _ in range(64)]

def test_coin_is_roughly_fair():
    rng = PMRandom(12345)
    heads = sum(rng.coin() for _ in range(10000))
    assert 4500 < heads < 5500

def test_scripted_coins_replay_then_fill():
    coin = ScriptedCoins([True, False], fill=True)
    assert [coin(), coin(), coin()] == [True, False, True]
    assert coin.drawn == 3

def test_scripted_coins_exhaustion_raises():
    coin = ScriptedCoins([False])
    coin()
    with pytest.raises(RuntimeError):
        coin()
