from sampler.netflag import Flags, is_cast, is_up, main, set_broadcast, turn_down


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "10001 true",
        "10000 false",
        "10010 false",
        "10010 true",
    ]


def test_turn_down_clears_only_up():
    v = Flags.MULTICAST | Flags.UP
    down = turn_down(v)
    assert not is_up(down)
    assert down & Flags.MULTICAST
    assert turn_down(down) == down


def test_set_broadcast_is_idempotent():
    v = set_broadcast(Flags.UP)
    assert set_broadcast(v) == v
    assert is_up(v)
    assert is_cast(v)


def test_is_cast_without_cast_flags():
    assert not is_cast(Flags.UP | Flags.LOOPBACK)
    assert is_cast(Flags.MULTICAST)